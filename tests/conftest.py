from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.repo_builder import UpstreamBuilder


@pytest.fixture
def upstream(tmp_path: Path) -> UpstreamBuilder:
    """Provide an upstream checkout and docs site rooted at the pytest tmp_path."""
    return UpstreamBuilder(tmp_path)


@pytest.fixture
def no_git_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop git from discovering a repository above tmp_path."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))


@pytest.fixture(autouse=True)
def _clear_executable_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCSTEWARD_CLAUDE_BIN", raising=False)
