"""Configuration loading for docsteward (.docsteward.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .sync.mappings import DEFAULT_MAPPINGS, MappingTable, parse_mappings

CONFIG_FILENAME = ".docsteward.yml"
ENV_CLAUDE_BIN = "DOCSTEWARD_CLAUDE_BIN"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class UpstreamConfig:
    """How the upstream repository is named in notices and reports."""

    name: str = "claude-hub repository"
    url: str = "https://github.com/intelligence-assist/claude-hub"


@dataclass
class ClaudeConfig:
    """Invocation settings for the external AI command-line tool."""

    executable: str = "claude"
    extra_args: List[str] = field(default_factory=list)
    skip_permissions: bool = False


@dataclass
class StewardConfig:
    """Explicit paths and settings for sync and stewardship runs."""

    root: Path
    source_root: Path
    target_root: Path
    sync_report_path: Path
    steward_report_path: Path
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    claude: ClaudeConfig = field(default_factory=ClaudeConfig)
    mappings: MappingTable = field(default_factory=lambda: dict(DEFAULT_MAPPINGS))
    config_path: Optional[Path] = None

    @classmethod
    def from_paths(
        cls,
        source_root: Path,
        target_root: Path,
        *,
        root: Path | None = None,
        sync_report_path: Path | None = None,
        steward_report_path: Path | None = None,
        **kwargs: Any,
    ) -> "StewardConfig":
        """Build a config in code, defaulting report paths under ``root``."""
        base = (root or Path.cwd()).resolve()
        return cls(
            root=base,
            source_root=Path(source_root).resolve(),
            target_root=Path(target_root).resolve(),
            sync_report_path=Path(sync_report_path or base / "sync-report.md").resolve(),
            steward_report_path=Path(
                steward_report_path or base / "docops-steward-report.md"
            ).resolve(),
            **kwargs,
        )


def load_config(config_path: Path) -> StewardConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        raise ConfigError(
            f"{CONFIG_FILENAME} not found at {config_file}. Configure paths.source and paths.target."
        )

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    paths = _as_dict(data.get("paths"))
    source = _as_str(paths.get("source"))
    target = _as_str(paths.get("target"))
    if not source or not target:
        raise ConfigError("paths.source and paths.target are required")

    upstream_data = _as_dict(data.get("upstream"))
    upstream = UpstreamConfig()
    if upstream_data:
        upstream.name = _as_str(upstream_data.get("name")) or upstream.name
        upstream.url = _as_str(upstream_data.get("url")) or upstream.url

    claude_data = _as_dict(data.get("claude"))
    claude = ClaudeConfig()
    if claude_data:
        claude.executable = _as_str(claude_data.get("executable")) or claude.executable
        claude.extra_args = _as_str_list(claude_data.get("extra_args"))
        claude.skip_permissions = bool(_as_bool(claude_data.get("skip_permissions")))
    env_executable = os.getenv(ENV_CLAUDE_BIN)
    if env_executable:
        claude.executable = env_executable

    mappings: MappingTable = dict(DEFAULT_MAPPINGS)
    if "mappings" in data:
        raw_mappings = data.get("mappings")
        if not isinstance(raw_mappings, dict):
            raise ConfigError("mappings must be a mapping of source paths to targets")
        try:
            mappings = parse_mappings(raw_mappings)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    return StewardConfig(
        root=root,
        source_root=_resolve_path(root, source),
        target_root=_resolve_path(root, target),
        sync_report_path=_resolve_path(
            root, _as_str(paths.get("sync_report")) or "sync-report.md"
        ),
        steward_report_path=_resolve_path(
            root, _as_str(paths.get("steward_report")) or "docops-steward-report.md"
        ),
        upstream=upstream,
        claude=claude,
        mappings=mappings,
        config_path=config_file,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _resolve_path(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ClaudeConfig",
    "ConfigError",
    "StewardConfig",
    "UpstreamConfig",
    "load_config",
]
