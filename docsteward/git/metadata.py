"""Best-effort lookup of the upstream repository's commit and branch."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable

from ..logging import get_logger
from ..models import RepositoryMetadata

HASH_LENGTH = 7


class RepositoryMetadataReader:
    """Queries git for the current commit hash and branch of a checkout."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git")

    def read(self, repo_path: Path | str) -> RepositoryMetadata:
        """Return ``branch``/``hash`` for ``repo_path`` or the ``unknown`` sentinel."""
        repo = Path(repo_path)
        try:
            commit = self._run(["git", "rev-parse", "HEAD"], cwd=repo).strip()
            branch = self._run(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=repo).strip()
        except (OSError, subprocess.SubprocessError, RuntimeError, ValueError) as exc:
            self.logger.debug("Repository metadata unavailable for %s: %s", repo, exc)
            return RepositoryMetadata.unknown()
        if not commit or not branch:
            self.logger.debug("git returned no metadata for %s", repo)
            return RepositoryMetadata.unknown()
        return RepositoryMetadata(hash=commit[:HASH_LENGTH], branch=branch)

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = ["HASH_LENGTH", "RepositoryMetadataReader"]
