from __future__ import annotations

import os
import sys

from loguru import logger

from .abc import FileSystem
from .exceptions import MkdirFailure, RmrfFailure
from .posix import PosixFileSystem
from .schema import FsOutcome
from .windows import WindowsFileSystem

type StrPath = str | os.PathLike[str]


def get_filesystem() -> FileSystem:
    """Pick the filesystem backend for the running platform."""
    if sys.platform == "win32":
        return WindowsFileSystem()
    return PosixFileSystem()


def mkdir_p(path: StrPath | None, *, fs: FileSystem | None = None) -> FsOutcome:
    """
    Create `path` and any missing parents. An existing directory is a success.

    Failures are returned, not raised. Creation is best-effort: parents created before
    a failure are not removed.
    """
    fs = fs or get_filesystem()
    target = os.fspath(path) if path is not None else None
    reason = "Path is empty" if target is None else fs.invalid_reason(target)
    if reason:
        failure = MkdirFailure(target, reason)
        logger.debug("mkdirP {}: {}", target, failure.reason)
        return FsOutcome(target, failure)

    try:
        fs.make_dirs(target)
    except (OSError, ValueError) as exc:
        logger.debug("mkdirP {} failed: {}", target, exc)
        return FsOutcome(target, MkdirFailure(target, str(exc)))

    return FsOutcome(target)


def rm_rf(path: StrPath | None, *, fs: FileSystem | None = None) -> FsOutcome:
    """
    Remove a file or a whole directory tree. A missing path is a success.

    Whether an open handle blocks removal depends on the backend, see `FileSystem`.
    """
    fs = fs or get_filesystem()
    target = os.fspath(path) if path is not None else None
    reason = "Path is empty" if target is None else fs.invalid_reason(target)
    if reason:
        failure = RmrfFailure(target, reason)
        logger.debug("rmRF {}: {}", target, failure.reason)
        return FsOutcome(target, failure)

    if not os.path.lexists(target):
        return FsOutcome(target)

    try:
        if os.path.isdir(target) and not os.path.islink(target):
            fs.remove_tree(target)
        else:
            fs.remove_file(target)
    except OSError as exc:
        logger.debug("rmRF {} failed: {}", target, exc)
        return FsOutcome(target, RmrfFailure(target, str(exc)))

    return FsOutcome(target)
