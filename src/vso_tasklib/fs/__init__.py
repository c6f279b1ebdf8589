from __future__ import annotations

from .abc import FileSystem
from .exceptions import FileSystemError, MkdirFailure, RmrfFailure
from .ops import get_filesystem, mkdir_p, rm_rf
from .posix import PosixFileSystem
from .schema import FsOutcome
from .windows import WindowsFileSystem

__all__ = [
    "FileSystem",
    "FileSystemError",
    "FsOutcome",
    "MkdirFailure",
    "PosixFileSystem",
    "RmrfFailure",
    "WindowsFileSystem",
    "get_filesystem",
    "mkdir_p",
    "rm_rf",
]
