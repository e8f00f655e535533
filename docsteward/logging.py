"""The ``docsteward`` logger tree.

Modules log through ``get_logger(<area>)``; only the CLI decides where the
records go.
"""

from __future__ import annotations

import logging
from typing import Iterable

ROOT_LOGGER = "docsteward"


def get_logger(area: str | None = None) -> logging.Logger:
    """Return the logger for one area of docsteward (``sync``, ``steward``, ...)."""
    return logging.getLogger(f"{ROOT_LOGGER}.{area}" if area else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, handlers: Iterable[logging.Handler] = ()
) -> logging.Logger:
    """Route docsteward records to the console plus any extra ``handlers``."""
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger(ROOT_LOGGER)
    _detach_handlers(root)
    root.setLevel(level)
    root.propagate = False

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("[docsteward] %(levelname)s %(message)s"))
    for handler in (console, *handlers):
        handler.setLevel(level)
        root.addHandler(handler)
    return root


def _detach_handlers(logger: logging.Logger) -> None:
    # Repeated main() calls in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
