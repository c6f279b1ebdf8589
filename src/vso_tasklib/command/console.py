from __future__ import annotations

import sys
from collections.abc import Mapping
from enum import IntEnum
from typing import NoReturn, TextIO

from attrs import define

from .codec import encode


class TaskResult(IntEnum):
    Succeeded = 0
    Failed = 1


@define
class TaskConsole:
    """
    Writes directives for the host to pick up from standard output.

    The stream is resolved on every write when not given, so redirection of
    `sys.stdout` by the host (or by pytest) is honoured.
    """

    stream: TextIO | None = None

    def emit(
        self,
        command: str,
        properties: Mapping[str, str] | None = None,
        message: str = "",
    ) -> None:
        out = self.stream or sys.stdout
        out.write(encode(command, properties, message) + "\n")
        out.flush()

    def debug(self, message: str) -> None:
        self.emit("task.debug", message=message)

    def warning(self, message: str) -> None:
        self.emit("task.issue", {"type": "warning"}, message)

    def error(self, message: str) -> None:
        self.emit("task.issue", {"type": "error"}, message)

    def set_result(self, result: TaskResult, message: str) -> None:
        self.debug(f"task result: {result.name}")
        self.emit("task.complete", {"result": result.name}, message)

    def exit(self, code: int) -> NoReturn:
        result = TaskResult.Succeeded if code == 0 else TaskResult.Failed
        self.set_result(result, f"return code: {code}")
        raise SystemExit(code)


def debug(message: str) -> None:
    TaskConsole().debug(message)


def warning(message: str) -> None:
    TaskConsole().warning(message)


def error(message: str) -> None:
    TaskConsole().error(message)


def set_result(result: TaskResult, message: str) -> None:
    TaskConsole().set_result(result, message)


def exit_task(code: int) -> NoReturn:
    TaskConsole().exit(code)
