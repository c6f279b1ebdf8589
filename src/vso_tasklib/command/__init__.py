from __future__ import annotations

from .codec import COMMAND_PREFIX, decode, encode, iter_commands
from .console import (
    TaskConsole,
    TaskResult,
    debug,
    error,
    exit_task,
    set_result,
    warning,
)
from .exceptions import CommandError, CommandParseError
from .schema import TaskCommand

__all__ = [
    "COMMAND_PREFIX",
    "CommandError",
    "CommandParseError",
    "TaskCommand",
    "TaskConsole",
    "TaskResult",
    "debug",
    "decode",
    "encode",
    "error",
    "exit_task",
    "iter_commands",
    "set_result",
    "warning",
]
