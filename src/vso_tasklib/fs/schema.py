from __future__ import annotations

from attrs import frozen

from .exceptions import FileSystemError


@frozen
class FsOutcome:
    """Result of a PathOps call. Truthy on success."""

    path: str | None
    error: FileSystemError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> None:
        """Raise the carried failure, if any."""
        if self.error is not None:
            raise self.error
