from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import ClassVar


class FileSystem(ABC):
    """Platform capability used by `mkdir_p` and `rm_rf`."""

    illegal_chars: ClassVar[frozenset[str]] = frozenset("\0")

    def invalid_reason(self, path: str) -> str | None:
        """Return why `path` is unusable on this platform, or `None` if it is fine."""
        if not path:
            return "Path is empty"
        if bad := sorted(set(path) & self.illegal_chars):
            return f"Path contains illegal characters {''.join(bad)!r}"
        return None

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def remove_file(self, path: str) -> None:
        os.remove(path)

    @abstractmethod
    def remove_tree(self, path: str) -> None:
        """
        Remove a directory and everything under it.

        Raises `OSError` when the platform refuses.
        """
