"""Markdown report builders."""

from .steward_report import StewardReportBuilder
from .sync_report import SyncReportBuilder

__all__ = ["StewardReportBuilder", "SyncReportBuilder"]
