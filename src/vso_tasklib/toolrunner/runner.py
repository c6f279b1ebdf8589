from __future__ import annotations

import sys
from collections.abc import Sequence
from functools import partial
from pathlib import Path
from typing import Self

import anyio
import loguru
from anyio.abc import ByteReceiveStream, ObjectSendStream
from attrs import define, field
from loguru import logger

from vso_tasklib.command import TaskConsole
from vso_tasklib.utils.process import open_process

from .exceptions import (
    NonZeroExit,
    RunnerStateError,
    StdErrPolicyViolation,
    ToolRunnerError,
)
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
from .tokenizer import append_args
from .which import which


@define
class ToolRunner:
    """
    Runs one executable once.

    Arguments are collected with `arg()` while the runner is `CREATED`; `exec()` or
    `exec_sync()` then moves it to `COMPLETED` or `FAILED`. A finished runner cannot be
    executed again, create a new one instead.
    """

    tool_path: str
    args: list[str] = field(factory=list)

    _state: RunnerState = field(init=False, default=RunnerState.CREATED)
    _logger: loguru.Logger = field(init=False)

    def __attrs_post_init__(self) -> None:
        self._logger = logger.bind(tool=Path(self.tool_path).name)

    @property
    def state(self) -> RunnerState:
        return self._state

    def arg(self, val: str | Sequence[str]) -> Self:
        """
        Append arguments.

        A string is tokenized (see `split_args`); a sequence is appended verbatim.
        """
        if self._state is not RunnerState.CREATED:
            raise RunnerStateError(
                f"Cannot add arguments to a runner in state {self._state}"
            )

        if isinstance(val, str):
            append_args(self.args, val)
        else:
            self.args.extend(val)
        return self

    async def exec(
        self,
        options: ExecOptions | None = None,
        *,
        events: ObjectSendStream[ExecEvent] | None = None,
    ) -> ExecResult:
        """
        Run the tool and wait for it to exit.

        If `events` is given, every output chunk is sent to it as it arrives, followed by a
        single `ExecCompleted`, after which the stream is closed.

        Raises:
            SpawnFailure: the process could not be started.
            NonZeroExit: exit code was non-zero and `ignore_return_code` is not set.
            StdErrPolicyViolation: stderr was written and `fail_on_stderr` is set.
            RunnerStateError: the runner was already used. A completion event carrying
                the error is still sent to `events`.
        """
        options = options or ExecOptions()
        try:
            try:
                self._begin()
            except RunnerStateError as exc:
                if events is not None:
                    await events.send(ExecCompleted(error=exc))
                raise
            return await self._exec(options, events)
        finally:
            if events is not None:
                await events.aclose()

    def exec_sync(self, options: ExecOptions | None = None) -> ExecResult:
        """Blocking variant of `exec`. Must not be called from a running event loop."""
        return anyio.run(partial(self.exec, options))

    def _begin(self) -> None:
        if self._state is not RunnerState.CREATED:
            raise RunnerStateError(f"Runner already used (state {self._state})")
        self._state = RunnerState.EXECUTING

    async def _exec(
        self, options: ExecOptions, events: ObjectSendStream[ExecEvent] | None
    ) -> ExecResult:
        try:
            result = await self._run(options, events)
            self._check(options, result)
        except ToolRunnerError as exc:
            self._state = RunnerState.FAILED
            self._logger.debug("{} failed: {}", self.tool_path, exc)
            if events is not None:
                await events.send(ExecCompleted(error=exc))
            raise
        except BaseException:
            self._state = RunnerState.FAILED
            raise

        self._state = RunnerState.COMPLETED
        if events is not None:
            await events.send(ExecCompleted(result=result))
        return result

    async def _run(
        self, options: ExecOptions, events: ObjectSendStream[ExecEvent] | None
    ) -> ExecResult:
        self._logger.debug("exec tool: {}", self.tool_path)
        self._logger.debug("arguments: {}", self.args)

        if not options.silent:
            console = TaskConsole(options.debug_stream)
            console.debug(f"exec tool: {self.tool_path}")
            console.debug("arguments:")
            for arg in self.args:
                console.debug(f"   {arg}")

        out_sink = None if options.silent else options.out_stream or sys.stdout.buffer
        err_sink = None if options.silent else options.err_stream or sys.stderr.buffer

        if out_sink is not None:
            cmd_line = " ".join([self.tool_path, *self.args])
            out_sink.write(f"[command]{cmd_line}\n".encode(options.encoding))

        process = await open_process(
            {
                "command": [self.tool_path, *self.args],
                "cwd": options.cwd,
                "env": options.env,
            }
        )

        stdout = bytearray()
        stderr = bytearray()
        pipes = (
            (process.stdout, OutputChannel.STDOUT, stdout, out_sink),
            (process.stderr, OutputChannel.STDERR, stderr, err_sink),
        )
        async with process:
            # one reader per channel keeps each channel FIFO
            async with anyio.create_task_group() as tg:
                for stream, channel, buffer, sink in pipes:
                    if stream is not None:
                        tg.start_soon(_pump, stream, channel, buffer, sink, events)
            code = await process.wait()

        self._logger.debug("{} exited with code {}", self.tool_path, code)
        return ExecResult(
            code=code,
            stdout=stdout.decode(options.encoding, errors="replace"),
            stderr=stderr.decode(options.encoding, errors="replace"),
        )

    def _check(self, options: ExecOptions, result: ExecResult) -> None:
        if result.code != 0 and not options.ignore_return_code:
            raise NonZeroExit(
                f"{self.tool_path} failed with return code: {result.code}", result
            )
        if options.fail_on_stderr and result.stderr:
            raise StdErrPolicyViolation(
                f"{self.tool_path} failed with error: wrote to stderr", result
            )


async def _pump(
    stream: ByteReceiveStream,
    channel: OutputChannel,
    buffer: bytearray,
    sink: Sink | None,
    events: ObjectSendStream[ExecEvent] | None,
) -> None:
    async for chunk in stream:
        buffer.extend(chunk)
        if sink is not None:
            sink.write(chunk)
        if events is not None:
            await events.send(OutputChunk(channel, chunk))


def create_tool_runner(tool_path: str) -> ToolRunner:
    return ToolRunner(tool_path)


async def exec_tool(
    tool: str, args: str | Sequence[str] = (), options: ExecOptions | None = None
) -> ExecResult:
    """Resolve `tool` on `PATH`, append `args` and run it."""
    runner = ToolRunner(which(tool, required=True)).arg(args)
    return await runner.exec(options)


def exec_tool_sync(
    tool: str, args: str | Sequence[str] = (), options: ExecOptions | None = None
) -> ExecResult:
    runner = ToolRunner(which(tool, required=True)).arg(args)
    return runner.exec_sync(options)

