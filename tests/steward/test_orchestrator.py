"""Tests for the stewardship orchestrator."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from docsteward.config import load_config
from docsteward.llm.runner import ClaudeRunner
from docsteward.models import AnalysisResult
from docsteward.prompting.constants import (
    AUTOMATIC_FIXES,
    DRIFT_DETECTION,
    SOURCE_CHANGES,
    SYSTEM_PROMPTS,
    TASK_ORDER,
)
from docsteward.steward.orchestrator import SequentialTaskRunner, StewardOrchestrator
from docsteward.sync.engine import SourceRootNotFoundError
from docsteward.sync.transform import SYNC_MARKER
from tests._fixtures.repo_builder import UpstreamBuilder

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class RecordingRunner:
    """Stands in for the AI CLI, recording each prompt and its working directory."""

    def __init__(self, events: list[str] | None = None, *, fail_on: set[int] | None = None) -> None:
        self.calls: list[dict[str, object]] = []
        self.events = events if events is not None else []
        self.fail_on = fail_on or set()

    def run(self, prompt: str, *, system: str | None = None, cwd: Path | None = None) -> str:
        index = len(self.calls)
        self.calls.append({"prompt": prompt, "system": system, "cwd": cwd})
        self.events.append(f"prompt:{index}")
        if index in self.fail_on:
            raise RuntimeError(f"call {index} failed")
        return f"analysis {index}"


def _orchestrator(upstream: UpstreamBuilder, runner, **kwargs) -> StewardOrchestrator:  # type: ignore[no-untyped-def]
    kwargs.setdefault("sync_invoker", lambda args, cwd: None)
    return StewardOrchestrator(upstream.config({}), runner=runner, **kwargs)


def test_full_run_collects_five_results_and_writes_report(upstream: UpstreamBuilder) -> None:
    runner = RecordingRunner()
    orchestrator = _orchestrator(upstream, runner)

    results = orchestrator.run_stewardship()

    assert list(results) == list(TASK_ORDER)
    assert all(result.ok for result in results.values())
    assert results[SOURCE_CHANGES] == AnalysisResult("analysis 0")
    report = orchestrator.config.steward_report_path.read_text(encoding="utf-8")
    assert "## Executive Summary\nanalysis 0\n" in report
    assert "## Automated Fixes Applied\nanalysis 4\n" in report


def test_tasks_run_in_their_working_directories(upstream: UpstreamBuilder) -> None:
    runner = RecordingRunner()
    orchestrator = _orchestrator(upstream, runner)

    orchestrator.run_stewardship()

    cwds = [call["cwd"] for call in runner.calls]
    config = orchestrator.config
    assert cwds == [
        config.source_root,
        config.source_root,
        config.target_root,
        config.source_root,
        config.source_root,
    ]
    assert runner.calls[0]["system"] == SYSTEM_PROMPTS[SOURCE_CHANGES]


def test_drift_detection_resyncs_before_prompting(upstream: UpstreamBuilder) -> None:
    events: list[str] = []
    invocations: list[tuple[list[str], Path]] = []

    def sync_invoker(args, cwd):  # type: ignore[no-untyped-def]
        invocations.append((list(args), Path(cwd)))
        events.append("sync")

    runner = RecordingRunner(events)
    orchestrator = _orchestrator(upstream, runner, sync_invoker=sync_invoker)

    orchestrator.run_stewardship()

    assert events == ["prompt:0", "prompt:1", "sync", "prompt:2", "prompt:3", "prompt:4"]
    args, cwd = invocations[0]
    assert args[:4] == [sys.executable, "-m", "docsteward.cli", "sync"]
    assert cwd == orchestrator.config.root


def test_failed_resync_does_not_block_drift_prompt(upstream: UpstreamBuilder) -> None:
    def sync_invoker(args, cwd):  # type: ignore[no-untyped-def]
        raise RuntimeError("Sync failed: source missing")

    runner = RecordingRunner()
    orchestrator = _orchestrator(upstream, runner, sync_invoker=sync_invoker)

    result = orchestrator.run_task(DRIFT_DETECTION)

    assert result == AnalysisResult("analysis 0")
    assert runner.calls[0]["cwd"] == orchestrator.config.target_root


@pytest.mark.usefixtures("no_git_discovery")
def test_drift_resyncs_in_process_for_configs_built_in_code(upstream: UpstreamBuilder) -> None:
    upstream.write({"README.md": "# Tool\n\nSee [guide](./docs/guide.md).\n"})
    config = upstream.config({"README.md": "overview.md"})
    runner = RecordingRunner()

    result = StewardOrchestrator(config, runner=runner).run_task(DRIFT_DETECTION)

    assert result == AnalysisResult("analysis 0")
    content = upstream.target("overview.md").read_text(encoding="utf-8")
    assert content.startswith("---\ntitle: Tool\n---\n\n" + SYNC_MARKER)
    assert "[guide](../guide.md)" in content
    assert config.sync_report_path.is_file()


@pytest.mark.usefixtures("no_git_discovery")
def test_drift_resyncs_through_a_child_process_for_loaded_configs(
    upstream: UpstreamBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    pythonpath = [str(PROJECT_ROOT), os.environ.get("PYTHONPATH", "")]
    monkeypatch.setenv("PYTHONPATH", os.pathsep.join(part for part in pythonpath if part))
    upstream.write({"README.md": "# Tool\n"})
    config_file = upstream.site / ".docsteward.yml"
    config_file.write_text(
        "paths:\n  source: ../upstream\n  target: docs-upstream\nmappings:\n  README.md: overview.md\n",
        encoding="utf-8",
    )
    config = load_config(config_file)
    runner = RecordingRunner()

    result = StewardOrchestrator(config, runner=runner).run_task(DRIFT_DETECTION)

    assert result.ok
    assert upstream.target("overview.md").read_text(encoding="utf-8").startswith(
        "---\ntitle: Tool\n---\n\n" + SYNC_MARKER
    )
    report = config.sync_report_path.read_text(encoding="utf-8")
    assert "- ✅ Successful: 1/1" in report
    assert runner.calls[0]["cwd"] == config.target_root


def test_default_sync_invoker_reports_last_stderr_line(tmp_path: Path) -> None:
    script = "import sys; sys.stderr.write(\"starting\\nSource repository not found\\n\"); sys.exit(1)"

    with pytest.raises(RuntimeError, match="Sync failed: Source repository not found"):
        StewardOrchestrator._default_sync_invoker([sys.executable, "-c", script], tmp_path)


def test_task_failures_are_recorded_and_the_run_continues(upstream: UpstreamBuilder) -> None:
    runner = RecordingRunner(fail_on={0, 1, 2, 3, 4})
    orchestrator = _orchestrator(upstream, runner)

    results = orchestrator.run_stewardship()

    assert len(results) == 5
    assert len(runner.calls) == 5
    for index, name in enumerate(TASK_ORDER):
        assert results[name].error == f"call {index} failed"
        assert results[name].content == f"Error: call {index} failed"
    report = orchestrator.config.steward_report_path.read_text(encoding="utf-8")
    assert "Error: call 4 failed" in report


def test_empty_tool_output_becomes_error_result(upstream: UpstreamBuilder) -> None:
    runner = ClaudeRunner(runner=lambda request: b"")
    orchestrator = _orchestrator(upstream, runner)

    result = orchestrator.run_task(AUTOMATIC_FIXES)

    assert result.error == "Empty response"
    assert result.content.startswith("Error:")


def test_run_command_maps_cli_verbs(upstream: UpstreamBuilder) -> None:
    runner = RecordingRunner()
    orchestrator = _orchestrator(upstream, runner)

    orchestrator.run_command("fix")

    assert runner.calls[0]["system"] == SYSTEM_PROMPTS[AUTOMATIC_FIXES]
    assert not orchestrator.config.steward_report_path.exists()


def test_sync_command_forwards_config_path(upstream: UpstreamBuilder, tmp_path: Path) -> None:
    config_file = tmp_path / ".docsteward.yml"
    config = upstream.config({}, config_path=config_file)
    orchestrator = StewardOrchestrator(config, runner=RecordingRunner())

    assert orchestrator.sync_command()[-2:] == ["--config", str(config_file)]


def test_missing_source_root_aborts_before_any_task(upstream: UpstreamBuilder) -> None:
    runner = RecordingRunner()
    orchestrator = _orchestrator(upstream, runner)
    upstream.root.rmdir()

    with pytest.raises(SourceRootNotFoundError):
        orchestrator.run_stewardship()
    assert runner.calls == []


def test_report_write_failure_aborts_the_run(upstream: UpstreamBuilder) -> None:
    blocker = upstream.site / "reports"
    blocker.write_text("not a directory", encoding="utf-8")
    config = upstream.config({}, steward_report_path=blocker / "steward.md")
    orchestrator = StewardOrchestrator(
        config, runner=RecordingRunner(), sync_invoker=lambda args, cwd: None
    )

    with pytest.raises(OSError):
        orchestrator.run_stewardship()


def test_sequential_runner_preserves_order() -> None:
    order: list[str] = []

    def job(name: str):  # type: ignore[no-untyped-def]
        def execute() -> AnalysisResult:
            order.append(name)
            return AnalysisResult(name)

        return execute

    results = SequentialTaskRunner().run([("b", job("b")), ("a", job("a"))])

    assert order == ["b", "a"]
    assert list(results) == ["b", "a"]
