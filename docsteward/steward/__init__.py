"""Stewardship analysis tasks and their orchestration."""

from .orchestrator import SequentialTaskRunner, StewardOrchestrator
from .tasks import build_tasks

__all__ = ["SequentialTaskRunner", "StewardOrchestrator", "build_tasks"]
