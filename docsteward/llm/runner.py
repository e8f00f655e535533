"""Adapter around the external AI command-line tool (``claude --print``)."""

from __future__ import annotations

import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

MAX_OUTPUT_BYTES = 10 * 1024 * 1024


@dataclass
class CLIRequest:
    """Represents one non-interactive invocation of the AI tool."""

    prompt: str
    system: Optional[str]
    executable: str
    cwd: Optional[Path]
    extra_args: List[str] = field(default_factory=list)

    def argv(self) -> List[str]:
        args = [self.executable, *self.extra_args, "--print"]
        if self.system:
            args.extend(["--append-system-prompt", self.system])
        args.append(self.prompt)
        return args


class ClaudeRunner:
    """Executes prompts through the AI CLI and returns its text output."""

    SKIP_PERMISSIONS_FLAG = "--dangerously-skip-permissions"

    def __init__(
        self,
        *,
        executable: str = "claude",
        extra_args: Sequence[str] = (),
        skip_permissions: bool = False,
        max_output_bytes: int = MAX_OUTPUT_BYTES,
        runner: Callable[[CLIRequest], bytes] | None = None,
    ) -> None:
        self.executable = executable
        self.extra_args = list(extra_args)
        if skip_permissions and self.SKIP_PERMISSIONS_FLAG not in self.extra_args:
            self.extra_args.insert(0, self.SKIP_PERMISSIONS_FLAG)
        self.max_output_bytes = max_output_bytes
        self._runner = runner or self._subprocess_runner

    def run(self, prompt: str, *, system: str | None = None, cwd: Path | None = None) -> str:
        """Send the prompt and return the stripped stdout text."""
        request = CLIRequest(
            prompt=prompt,
            system=system,
            executable=self.executable,
            cwd=cwd,
            extra_args=list(self.extra_args),
        )
        raw = self._runner(request)
        if len(raw) > self.max_output_bytes:
            raise RuntimeError(f"AI tool output exceeded {self.max_output_bytes} bytes")
        content = raw.decode("utf-8", errors="replace").strip()
        if not content:
            raise RuntimeError("Empty response")
        return content

    def _subprocess_runner(self, request: CLIRequest) -> bytes:
        """Run the CLI and read at most one byte past ``max_output_bytes``.

        A child that keeps writing past the ceiling is killed; ``run`` then
        rejects the truncated output. stderr goes to a temporary file so a
        chatty child cannot block on a full pipe while stdout is read.
        """
        limit = self.max_output_bytes + 1
        with tempfile.TemporaryFile() as stderr_sink:
            try:
                process = subprocess.Popen(
                    request.argv(),
                    cwd=str(request.cwd) if request.cwd else None,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.PIPE,
                    stderr=stderr_sink,
                )
            except FileNotFoundError as exc:
                raise RuntimeError(
                    f"Unable to locate '{request.executable}'. Install the CLI or set DOCSTEWARD_CLAUDE_BIN."
                ) from exc
            with process:
                stdout = process.stdout.read(limit)
                if len(stdout) >= limit:
                    process.kill()
                    return stdout
                returncode = process.wait()
            if returncode != 0:
                stderr_sink.seek(0)
                stderr = stderr_sink.read().decode("utf-8", errors="replace").strip()
                raise RuntimeError(
                    f"AI tool failed with exit code {returncode}: {stderr or 'no stderr output'}"
                )
        return stdout


__all__ = ["CLIRequest", "ClaudeRunner", "MAX_OUTPUT_BYTES"]
