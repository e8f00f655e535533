"""Sync report rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..models import RepositoryMetadata, SyncOutcome
from .rendering import Clock, create_environment, utc_now, write_report


class SyncReportBuilder:
    """Summarises one sync run as a markdown report."""

    TEMPLATE = "sync_report.md.j2"

    def __init__(
        self,
        *,
        upstream_name: str = "upstream",
        templates_dir: Path | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.upstream_name = upstream_name
        self._env = create_environment(templates_dir)
        self._clock = clock

    def build(self, outcomes: Sequence[SyncOutcome], metadata: RepositoryMetadata) -> str:
        successful = sum(1 for outcome in outcomes if outcome.success)
        failed = len(outcomes) - successful
        template = self._env.get_template(self.TEMPLATE)
        rendered = template.render(
            generated=self._clock().isoformat(),
            upstream_name=self.upstream_name,
            metadata=metadata,
            outcomes=list(outcomes),
            successful=successful,
            failed=failed,
            total=len(outcomes),
        )
        return rendered.strip() + "\n"

    def write(self, report: str, path: Path) -> Path:
        return write_report(path, report)


__all__ = ["SyncReportBuilder"]
