"""Sequential orchestration of stewardship analysis tasks."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from ..config import StewardConfig
from ..llm.runner import ClaudeRunner
from ..logging import get_logger
from ..models import AnalysisResult, AnalysisTask
from ..prompting.constants import COMMAND_TASKS
from ..reports.steward_report import StewardReportBuilder
from ..sync.engine import SourceRootNotFoundError, SyncEngine
from .tasks import build_tasks

TaskJob = Tuple[str, Callable[[], AnalysisResult]]


class SequentialTaskRunner:
    """Executes task jobs one after another, collecting results by name."""

    def run(self, jobs: Iterable[TaskJob]) -> Dict[str, AnalysisResult]:
        results: Dict[str, AnalysisResult] = {}
        for name, execute in jobs:
            results[name] = execute()
        return results


class StewardOrchestrator:
    """Runs the analysis tasks against the AI tool and writes the steward report."""

    def __init__(
        self,
        config: StewardConfig,
        *,
        runner: ClaudeRunner | None = None,
        report_builder: StewardReportBuilder | None = None,
        task_runner: SequentialTaskRunner | None = None,
        sync_invoker: Callable[[Sequence[str], Path], None] | None = None,
    ) -> None:
        self.config = config
        self.runner = runner or ClaudeRunner(
            executable=config.claude.executable,
            extra_args=config.claude.extra_args,
            skip_permissions=config.claude.skip_permissions,
        )
        self.report_builder = report_builder or StewardReportBuilder()
        self.task_runner = task_runner or SequentialTaskRunner()
        self._sync_invoker = sync_invoker
        self.logger = get_logger("steward")
        self.tasks: List[AnalysisTask] = build_tasks(
            config, drift_prerequisite=self._resync_documentation
        )

    def task(self, name: str) -> AnalysisTask:
        for task in self.tasks:
            if task.name == name:
                return task
        raise KeyError(f"Unknown analysis task: {name}")

    def run_command(self, command: str) -> AnalysisResult:
        """Run the single task selected by a CLI verb (``monitor``, ``drift``, ...)."""
        self._ensure_source_root()
        return self.run_task(COMMAND_TASKS[command])

    def run_task(self, name: str) -> AnalysisResult:
        """Run one task; failures are captured in the result, never raised."""
        task = self.task(name)
        self.logger.info("Running %s", task.title)
        if task.prerequisite is not None:
            try:
                task.prerequisite()
            except Exception as exc:
                self.logger.error("Prerequisite for %s failed: %s", task.title, exc)
        return self._execute(task)

    def run_stewardship(self) -> Dict[str, AnalysisResult]:
        """Run every task in order, then write the combined steward report."""
        self._ensure_source_root()
        self.logger.info("DocOps steward starting")
        jobs = [(task.name, self._job(task.name)) for task in self.tasks]
        results = self.task_runner.run(jobs)

        report = self.report_builder.build(results)
        self.report_builder.write(report, self.config.steward_report_path)

        failed = [name for name, result in results.items() if not result.ok]
        if failed:
            self.logger.warning("Stewardship completed with failed tasks: %s", ", ".join(failed))
        else:
            self.logger.info("DocOps stewardship cycle completed successfully")
        return results

    def sync_command(self) -> List[str]:
        """Command line that re-runs the documentation sync as a child process."""
        args = [sys.executable, "-m", "docsteward.cli", "sync"]
        if self.config.config_path is not None:
            args.extend(["--config", str(self.config.config_path)])
        return args

    def _ensure_source_root(self) -> None:
        if not self.config.source_root.is_dir():
            raise SourceRootNotFoundError(f"Source repository not found: {self.config.source_root}")

    def _job(self, name: str) -> Callable[[], AnalysisResult]:
        return lambda: self.run_task(name)

    def _execute(self, task: AnalysisTask) -> AnalysisResult:
        self.logger.debug("Working directory: %s", task.working_directory)
        try:
            content = self.runner.run(
                task.prompt,
                system=task.system_prompt,
                cwd=task.working_directory,
            )
        except Exception as exc:
            self.logger.error("%s failed: %s", task.title, exc)
            return AnalysisResult.failure(str(exc))
        self.logger.info("%s completed (%d characters)", task.title, len(content))
        return AnalysisResult(content=content)

    def _resync_documentation(self) -> None:
        """Refresh the mirrored docs so drift detection compares current copies.

        A config loaded from disk is re-synced by a child ``docsteward sync``
        process (or the injected ``sync_invoker``). A config built in code has
        no file for a child to load, so the sync runs in this process.
        """
        self.logger.info("Re-running documentation sync before drift detection")
        if self._sync_invoker is not None:
            self._sync_invoker(self.sync_command(), self.config.root)
        elif self.config.config_path is None:
            run = SyncEngine(self.config).run()
            if run.failed:
                self.logger.warning("Re-sync finished with %d failed file(s)", run.failed)
        else:
            self._default_sync_invoker(self.sync_command(), self.config.root)

    @staticmethod
    def _default_sync_invoker(args: Sequence[str], cwd: Path) -> None:
        try:
            subprocess.run(list(args), cwd=str(cwd), check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip().splitlines()
            message = detail[-1] if detail else f"exit code {exc.returncode}"
            raise RuntimeError(f"Sync failed: {message}") from exc


__all__ = ["SequentialTaskRunner", "StewardOrchestrator"]
