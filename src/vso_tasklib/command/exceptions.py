from __future__ import annotations


class CommandError(Exception):
    """Base exception for the command module."""


class CommandParseError(CommandError):
    """Raised when a line does not match the directive grammar."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason
