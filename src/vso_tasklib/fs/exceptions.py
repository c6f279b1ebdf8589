from __future__ import annotations


class FileSystemError(Exception):
    """Base exception for the fs module."""

    def __init__(self, path: str | None, reason: str) -> None:
        super().__init__(f"{reason}: {path!r}")
        self.path = path
        self.reason = reason


class MkdirFailure(FileSystemError):
    """Directory creation was refused."""


class RmrfFailure(FileSystemError):
    """Recursive removal was refused."""
