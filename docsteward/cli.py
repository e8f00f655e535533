"""CLI entrypoints for docsteward commands."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigError, StewardConfig, load_config
from .logging import configure_logging
from .prompting.constants import COMMAND_TASKS
from .steward.orchestrator import StewardOrchestrator
from .sync.engine import SyncEngine

LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TASK_COMMAND_HELP = {
    "monitor": "Review the upstream repository for documentation changes.",
    "quality": "Audit documentation quality and completeness.",
    "drift": "Re-sync, then compare upstream docs with the synchronized copy.",
    "improve": "Generate documentation improvement suggestions.",
    "fix": "Propose safe automatic documentation fixes.",
}


def _add_common_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    verbose_default: object = argparse.SUPPRESS if suppress_default else False
    config_default: object = argparse.SUPPRESS if suppress_default else "."
    log_file_default: object = argparse.SUPPRESS if suppress_default else None
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=verbose_default,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=config_default,
        help="Path to .docsteward.yml or the directory containing it (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        default=log_file_default,
        help="Also write timestamped log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsteward",
        description="Mirror upstream documentation and run AI-assisted documentation stewardship.",
    )
    _add_common_options(parser)
    subparsers = parser.add_subparsers(dest="command")
    parser.set_defaults(command="full")

    full_parser = subparsers.add_parser(
        "full",
        help="Run the complete stewardship cycle and write the steward report (default).",
    )
    _add_common_options(full_parser, suppress_default=True)

    sync_parser = subparsers.add_parser(
        "sync",
        help="Synchronize mapped documentation and write the sync report.",
    )
    _add_common_options(sync_parser, suppress_default=True)

    for command in COMMAND_TASKS:
        task_parser = subparsers.add_parser(command, help=_TASK_COMMAND_HELP[command])
        _add_common_options(task_parser, suppress_default=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docsteward commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        handlers = [_log_file_handler(Path(args.log_file))] if args.log_file else []
    except OSError as exc:
        parser.exit(1, f"Cannot open log file {args.log_file}: {exc}\n")
    configure_logging(verbose=bool(args.verbose), handlers=handlers)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "sync":
        _run_sync(parser, config)
    elif args.command == "full":
        _run_full(parser, config)
    elif args.command in COMMAND_TASKS:
        try:
            result = StewardOrchestrator(config).run_command(args.command)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        print(result.content)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_sync(parser: argparse.ArgumentParser, config: StewardConfig) -> None:
    try:
        run = SyncEngine(config).run()
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"docsteward sync failed: {exc}\nRun with --verbose for more details.\n")
    print(f"Sync report generated at {_relativize(run.report_path)}")


def _run_full(parser: argparse.ArgumentParser, config: StewardConfig) -> None:
    try:
        StewardOrchestrator(config).run_stewardship()
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"Stewardship cycle failed: {exc}\nRun with --verbose for more details.\n")
    print(f"Steward report generated at {_relativize(config.steward_report_path)}")


def _log_file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
    return handler


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
