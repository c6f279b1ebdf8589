from __future__ import annotations

import ntpath
import os
import shutil
import stat
import uuid
from collections.abc import Callable
from typing import ClassVar, final, override

from loguru import logger

from .abc import FileSystem

_RESERVED: frozenset[str] = frozenset('<>"|?*') | frozenset(map(chr, range(32)))


def _clear_readonly(
    func: Callable[[str], object], path: str, exc: BaseException
) -> None:
    if not isinstance(exc, PermissionError):
        raise exc
    os.chmod(path, stat.S_IWRITE)
    func(path)


@final
class WindowsFileSystem(FileSystem):
    """
    Exclusive-lock semantics: an open handle anywhere in a tree blocks its removal.

    The tree is first renamed to a sibling. Windows refuses the rename while any file
    inside is open, so a locked tree is left exactly as it was.
    """

    illegal_chars: ClassVar[frozenset[str]] = _RESERVED

    @override
    def invalid_reason(self, path: str) -> str | None:
        if reason := super().invalid_reason(path):
            return reason
        _, tail = ntpath.splitdrive(path)
        if ":" in tail:
            return "Path contains illegal characters ':'"
        return None

    @override
    def remove_tree(self, path: str) -> None:
        parent, name = os.path.split(os.path.normpath(path))
        staging = os.path.join(parent, f".{name}.{uuid.uuid4().hex[:8]}.rmrf")
        os.rename(path, staging)
        logger.debug("Renamed {} to {} for removal", path, staging)
        try:
            shutil.rmtree(staging, onexc=_clear_readonly)
        except OSError:
            # put what is left back so a retry targets the same path
            os.rename(staging, path)
            raise
