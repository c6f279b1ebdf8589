from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schema import ExecResult


class ToolRunnerError(Exception):
    """Base exception for the toolrunner module."""


class ArgumentParseError(ToolRunnerError):
    """Raised when an argument string cannot be tokenized."""


class ExecutableNotFound(ToolRunnerError):
    """Raised when a required tool cannot be found on the search path."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Unable to locate executable file: {tool}")
        self.tool = tool


class SpawnFailure(ToolRunnerError):
    """Raised when the OS refuses to start the child process."""

    def __init__(self, tool_path: str, reason: str) -> None:
        super().__init__(f"Failed to spawn {tool_path}: {reason}")
        self.tool_path = tool_path
        self.reason = reason


class RunnerStateError(ToolRunnerError):
    """Raised when a runner is modified or executed outside the `CREATED` state."""


class ExecutionFailed(ToolRunnerError):
    """Raised when a finished process violates the configured policy."""

    def __init__(self, message: str, result: ExecResult) -> None:
        super().__init__(message)
        self.result = result


class NonZeroExit(ExecutionFailed):
    """Raised when the process exits with a non-zero code."""


class StdErrPolicyViolation(ExecutionFailed):
    """Raised when the process wrote to stderr and `fail_on_stderr` is set."""
