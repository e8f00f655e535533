"""External AI tool adapters."""

from .runner import ClaudeRunner, CLIRequest, MAX_OUTPUT_BYTES

__all__ = ["CLIRequest", "ClaudeRunner", "MAX_OUTPUT_BYTES"]
