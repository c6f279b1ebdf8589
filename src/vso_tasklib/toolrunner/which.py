from __future__ import annotations

import os
import shutil
from typing import Literal, overload

from loguru import logger

from .exceptions import ExecutableNotFound


@overload
def which(tool: str, required: Literal[True]) -> str: ...


@overload
def which(tool: str, required: bool = False) -> str | None: ...


def which(tool: str, required: bool = False) -> str | None:
    """
    Resolve `tool` to an absolute executable path via `PATH`.

    Returns `None` when the tool is missing and not `required`.
    """
    found = shutil.which(tool)
    if found is None:
        logger.debug("which {}: not found", tool)
        if required:
            raise ExecutableNotFound(tool)
        return None

    path = os.path.abspath(found)
    logger.debug("which {}: {}", tool, path)
    return path
