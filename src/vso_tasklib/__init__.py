from __future__ import annotations

from loguru import logger

from .command import TaskCommand, TaskConsole, TaskResult, decode, encode
from .fs import mkdir_p, rm_rf
from .toolrunner import (
    ExecOptions,
    ExecResult,
    ToolRunner,
    create_tool_runner,
    exec_tool,
    exec_tool_sync,
    which,
)

logger.disable("vso_tasklib")

__all__ = [
    "ExecOptions",
    "ExecResult",
    "TaskCommand",
    "TaskConsole",
    "TaskResult",
    "ToolRunner",
    "create_tool_runner",
    "decode",
    "encode",
    "exec_tool",
    "exec_tool_sync",
    "mkdir_p",
    "rm_rf",
    "which",
]
