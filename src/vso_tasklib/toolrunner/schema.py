from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO

from attrs import field, frozen

if TYPE_CHECKING:
    from .exceptions import ToolRunnerError


class Sink(Protocol):
    """Destination for raw output bytes, e.g. `sys.stdout.buffer` or an `io.BytesIO`."""

    def write(self, data: bytes, /) -> object: ...


@frozen
class ExecOptions:
    cwd: str | Path | None = None
    env: Mapping[str, str] = field(factory=dict)
    """Overrides applied on top of the inherited environment."""

    out_stream: Sink | None = None
    """Receives stdout bytes as they arrive. Defaults to `sys.stdout.buffer`."""

    err_stream: Sink | None = None
    """Receives stderr bytes as they arrive. Defaults to `sys.stderr.buffer`."""

    debug_stream: TextIO | None = None
    """Channel for `task.debug` directives. Defaults to `sys.stdout`."""

    silent: bool = False
    """Suppress diagnostics, the command echo and forwarding to the sinks."""

    fail_on_stderr: bool = False
    ignore_return_code: bool = False
    encoding: str = "utf-8"


@frozen
class ExecResult:
    code: int
    stdout: str
    stderr: str


class RunnerState(StrEnum):
    CREATED = "created"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"


class OutputChannel(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


@frozen
class OutputChunk:
    channel: OutputChannel
    data: bytes


@frozen
class ExecCompleted:
    """Last event of an execution, carrying either the result or the error."""

    result: ExecResult | None = None
    error: ToolRunnerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


type ExecEvent = OutputChunk | ExecCompleted
