"""Mirrors mapped upstream documents into the docs site."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping

from ..config import StewardConfig
from ..git.metadata import RepositoryMetadataReader
from ..logging import get_logger
from ..models import MappingEntry, MappingTarget, RepositoryMetadata, SyncOutcome
from ..reports.sync_report import SyncReportBuilder
from .mappings import iter_entries
from .transform import ContentTransformer, MalformedFrontMatterError, SyncNotice


class SourceRootNotFoundError(FileNotFoundError):
    """Raised when the upstream checkout is missing at startup."""


@dataclass(frozen=True)
class SyncRun:
    """Everything produced by one sync run."""

    outcomes: List[SyncOutcome]
    metadata: RepositoryMetadata
    report_path: Path

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.success)


class SyncEngine:
    """Reads each mapped source, transforms it and writes it under the target root."""

    def __init__(
        self,
        config: StewardConfig,
        *,
        transformer: ContentTransformer | None = None,
        metadata_reader: RepositoryMetadataReader | None = None,
        report_builder: SyncReportBuilder | None = None,
    ) -> None:
        self.config = config
        self.transformer = transformer or ContentTransformer(
            SyncNotice(config.upstream.name, config.upstream.url)
        )
        self.metadata_reader = metadata_reader or RepositoryMetadataReader()
        self.report_builder = report_builder or SyncReportBuilder(upstream_name=config.upstream.name)
        self.logger = get_logger("sync")

    def run(self) -> SyncRun:
        """Sync the configured mappings and write the sync report."""
        source_root = self.config.source_root
        if not source_root.is_dir():
            raise SourceRootNotFoundError(
                f"Source repository not found: {source_root}. "
                "Ensure the upstream repository is cloned at the configured paths.source."
            )
        self.logger.info("Starting documentation sync from %s", source_root)

        metadata = self.metadata_reader.read(source_root)
        self.logger.info("Syncing from %s@%s", metadata.branch, metadata.hash)

        outcomes = self.sync(self.config.mappings)
        report = self.report_builder.build(outcomes, metadata)
        report_path = self.report_builder.write(report, self.config.sync_report_path)

        succeeded = sum(1 for outcome in outcomes if outcome.success)
        self.logger.info("Documentation sync completed: %d/%d files", succeeded, len(outcomes))
        return SyncRun(outcomes=outcomes, metadata=metadata, report_path=report_path)

    def sync(self, mappings: Mapping[str, MappingTarget]) -> List[SyncOutcome]:
        """Process every mapping entry; one failing file never blocks the rest."""
        outcomes: List[SyncOutcome] = []
        for entry in iter_entries(mappings):
            if entry.skipped:
                self.logger.info("Skipping %s", entry.source_path)
                continue
            outcomes.append(self._sync_entry(entry))
        return outcomes

    def _sync_entry(self, entry: MappingEntry) -> SyncOutcome:
        source = entry.source_path
        target = str(entry.target_path)
        source_path = self.config.source_root / source
        target_root = self.config.target_root.resolve()
        target_path = (target_root / target).resolve()

        if not target_path.is_relative_to(target_root):
            self.logger.error("Refusing to write %s outside %s", target, target_root)
            return SyncOutcome(source, target, False, "target outside docs root")

        if not source_path.is_file():
            self.logger.warning("Source file not found: %s", source)
            return SyncOutcome(source, target, False, "source not found")

        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            content = source_path.read_text(encoding="utf-8")
            processed = self.transformer.transform(content, source)
            target_path.write_text(processed, encoding="utf-8")
        except (OSError, UnicodeDecodeError, MalformedFrontMatterError) as exc:
            self.logger.error("Error syncing %s: %s", source, exc)
            return SyncOutcome(source, target, False, str(exc))

        self.logger.info("Synced: %s -> %s", source, target)
        return SyncOutcome(source, target, True)


__all__ = ["SourceRootNotFoundError", "SyncEngine", "SyncRun"]
