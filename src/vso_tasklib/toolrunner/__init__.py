from __future__ import annotations

from .exceptions import (
    ArgumentParseError,
    ExecutableNotFound,
    ExecutionFailed,
    NonZeroExit,
    RunnerStateError,
    SpawnFailure,
    StdErrPolicyViolation,
    ToolRunnerError,
)
from .runner import ToolRunner, create_tool_runner, exec_tool, exec_tool_sync
from .schema import (
    ExecCompleted,
    ExecEvent,
    ExecOptions,
    ExecResult,
    OutputChannel,
    OutputChunk,
    RunnerState,
    Sink,
)
from .tokenizer import append_args, split_args
from .which import which

__all__ = [
    "ArgumentParseError",
    "ExecCompleted",
    "ExecEvent",
    "ExecOptions",
    "ExecResult",
    "ExecutableNotFound",
    "ExecutionFailed",
    "NonZeroExit",
    "OutputChannel",
    "OutputChunk",
    "RunnerState",
    "RunnerStateError",
    "Sink",
    "SpawnFailure",
    "StdErrPolicyViolation",
    "ToolRunner",
    "ToolRunnerError",
    "append_args",
    "create_tool_runner",
    "exec_tool",
    "exec_tool_sync",
    "split_args",
    "which",
]
