"""Core data models shared across docsteward components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union


class _Skip:
    """Sentinel type marking a mapping entry that is intentionally excluded."""

    _instance: Optional["_Skip"] = None

    def __new__(cls) -> "_Skip":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __bool__(self) -> bool:
        return False


SKIP = _Skip()

MappingTarget = Union[str, _Skip]

UNKNOWN = "unknown"


@dataclass(frozen=True)
class MappingEntry:
    """Association of an upstream document with its location in the docs site."""

    source_path: str
    target_path: MappingTarget

    @property
    def skipped(self) -> bool:
        return self.target_path is SKIP


@dataclass(frozen=True)
class SyncOutcome:
    """Per-file result of one sync run."""

    source: str
    target: str
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class RepositoryMetadata:
    """Commit and branch of the upstream repository at sync time."""

    hash: str
    branch: str

    @classmethod
    def unknown(cls) -> "RepositoryMetadata":
        return cls(hash=UNKNOWN, branch=UNKNOWN)


@dataclass(frozen=True)
class AnalysisTask:
    """One named prompt sent to the external AI tool during a stewardship run."""

    name: str
    title: str
    prompt: str
    system_prompt: Optional[str]
    working_directory: Path
    prerequisite: Optional[Callable[[], None]] = None


@dataclass(frozen=True)
class AnalysisResult:
    """Captured output of a single analysis task."""

    content: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str) -> "AnalysisResult":
        return cls(content=f"Error: {message}", error=message)
