"""Steward report rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from ..models import AnalysisResult
from ..prompting.constants import NEXT_ACTIONS, REPORT_SECTIONS
from .rendering import Clock, create_environment, utc_now, write_report


class StewardReportBuilder:
    """Combines analysis task results into the positional steward report."""

    TEMPLATE = "steward_report.md.j2"

    def __init__(self, *, templates_dir: Path | None = None, clock: Clock = utc_now) -> None:
        self._env = create_environment(templates_dir)
        self._clock = clock

    def build(self, results: Mapping[str, AnalysisResult]) -> str:
        sections = []
        for task_name, title, placeholder in REPORT_SECTIONS:
            result = results.get(task_name)
            body = result.content if result is not None and result.content else placeholder
            sections.append({"name": task_name, "title": title, "body": body})
        template = self._env.get_template(self.TEMPLATE)
        rendered = template.render(
            generated=self._clock().isoformat(),
            sections=sections,
            next_actions=NEXT_ACTIONS,
        )
        return rendered.strip() + "\n"

    def write(self, report: str, path: Path) -> Path:
        return write_report(path, report)


__all__ = ["StewardReportBuilder"]
