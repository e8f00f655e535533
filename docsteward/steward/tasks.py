"""The fixed set of analysis tasks run during a stewardship cycle."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..config import StewardConfig
from ..models import AnalysisTask
from ..prompting.constants import (
    DRIFT_DETECTION,
    SYSTEM_PROMPTS,
    TASK_ORDER,
    TASK_TITLES,
    task_prompt,
)


def build_tasks(
    config: StewardConfig,
    *,
    drift_prerequisite: Optional[Callable[[], None]] = None,
) -> List[AnalysisTask]:
    """Return the analysis tasks in execution order.

    Drift detection inspects the synchronized docs, so it runs in the target
    root and re-syncs first; every other task works in the upstream checkout.
    """
    tasks: List[AnalysisTask] = []
    for name in TASK_ORDER:
        is_drift = name == DRIFT_DETECTION
        tasks.append(
            AnalysisTask(
                name=name,
                title=TASK_TITLES[name],
                prompt=task_prompt(name, upstream_name=config.upstream.name),
                system_prompt=SYSTEM_PROMPTS.get(name),
                working_directory=config.target_root if is_drift else config.source_root,
                prerequisite=drift_prerequisite if is_drift else None,
            )
        )
    return tasks


__all__ = ["build_tasks"]
