from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from vso_tasklib.toolrunner import ExecutableNotFound, which

MISSING_TOOL = "definitely-not-a-real-tool-xyz"


def test_which_resolves_absolute_path(monkeypatch: pytest.MonkeyPatch):
    python = Path(sys.executable)
    monkeypatch.setenv("PATH", str(python.parent))

    path = which(python.name, required=True)

    assert os.path.isabs(path)
    assert Path(path).name == python.name


def test_which_missing_not_required():
    assert which(MISSING_TOOL) is None


def test_which_missing_required():
    with pytest.raises(ExecutableNotFound) as exc_info:
        which(MISSING_TOOL, required=True)
    assert exc_info.value.tool == MISSING_TOOL
