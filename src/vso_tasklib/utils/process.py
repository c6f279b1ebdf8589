from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TypedDict

import anyio
from anyio.abc import Process

from vso_tasklib.toolrunner.exceptions import SpawnFailure


class ProcessArgs(TypedDict):
    command: Sequence[str]
    cwd: str | Path | None
    env: Mapping[str, str]


def merge_env(overrides: Mapping[str, str]) -> dict[str, str]:
    """Inherit the current environment and apply `overrides` on top."""
    env = dict(os.environ)
    env.update(overrides)
    return env


async def open_process(args: ProcessArgs) -> Process:
    """Start a process with piped stdout/stderr and no stdin."""
    command = list(args["command"])
    try:
        return await anyio.open_process(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=args["cwd"],
            env=merge_env(args["env"]),
        )
    except OSError as exc:
        raise SpawnFailure(command[0], exc.strerror or str(exc)) from exc
