from __future__ import annotations

import shutil
from typing import final, override

from .abc import FileSystem


@final
class PosixFileSystem(FileSystem):
    """
    Unlink semantics: entries can be removed while a handle is still open elsewhere,
    the handle keeps pointing at the unlinked data until it is closed.
    """

    @override
    def remove_tree(self, path: str) -> None:
        shutil.rmtree(path)
