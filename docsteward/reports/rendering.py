"""Template environment and persistence shared by the report builders."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

from jinja2 import Environment, FileSystemLoader

from ..logging import get_logger

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment that prefers ``templates_dir`` over the bundled templates."""
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    default_dir = str(DEFAULT_TEMPLATES_DIR)
    if default_dir not in directories:
        directories.append(default_dir)
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def write_report(path: Path, content: str) -> Path:
    """Overwrite the report at ``path``; errors propagate to the caller."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    get_logger("reports").info("Report written to %s", path)
    return path


__all__ = ["Clock", "DEFAULT_TEMPLATES_DIR", "create_environment", "utc_now", "write_report"]
