from __future__ import annotations

import os
from pathlib import Path

import pytest

from vso_tasklib.fs import (
    PosixFileSystem,
    RmrfFailure,
    WindowsFileSystem,
    mkdir_p,
    rm_rf,
)
from vso_tasklib.fs import windows as windows_fs


def _tree(root: Path) -> Path:
    target = root / "tree"
    (target / "sub").mkdir(parents=True)
    (target / "sub" / "file.txt").write_text("some data")
    (target / "top.txt").write_text("top")
    return target


def _snapshot(root: Path) -> list[str]:
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


class TestWindowsFileSystem:
    @pytest.mark.parametrize(
        "path",
        [
            "C:\\work\\a<b",
            "C:\\work\\a|b",
            "C:\\work\\a?b",
            'a"b',
            "a*b",
            "a\x01b",
            "dir\\a:b",
        ],
    )
    def test_illegal_paths(self, path: str):
        assert WindowsFileSystem().invalid_reason(path) is not None

    @pytest.mark.parametrize("path", ["C:\\work\\dir", "relative\\dir", "D:", "x/y"])
    def test_legal_paths(self, path: str):
        assert WindowsFileSystem().invalid_reason(path) is None

    def test_mkdir_rejects_illegal_chars(self, tmp_path: Path):
        outcome = mkdir_p(tmp_path / "bad|name", fs=WindowsFileSystem())
        assert not outcome
        assert not (tmp_path / "bad|name").exists()

    def test_removes_tree(self, tmp_path: Path):
        target = _tree(tmp_path)

        assert rm_rf(target, fs=WindowsFileSystem())
        assert not target.exists()
        assert _snapshot(tmp_path) == []

    def test_locked_tree_stays_intact(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        target = _tree(tmp_path)
        before = _snapshot(tmp_path)

        def locked(src: str, dst: str) -> None:
            raise PermissionError(32, "The process cannot access the file", src)

        monkeypatch.setattr(windows_fs.os, "rename", locked)
        outcome = rm_rf(target, fs=WindowsFileSystem())

        assert not outcome
        assert isinstance(outcome.error, RmrfFailure)
        assert _snapshot(tmp_path) == before

        # lock released: a retry succeeds
        monkeypatch.undo()
        assert rm_rf(target, fs=WindowsFileSystem())
        assert not target.exists()

    def test_failed_delete_restores_tree(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        target = _tree(tmp_path)
        before = _snapshot(tmp_path)

        def denied(path: str, **kwargs: object) -> None:
            raise PermissionError(5, "Access is denied", path)

        monkeypatch.setattr(windows_fs.shutil, "rmtree", denied)
        outcome = rm_rf(target, fs=WindowsFileSystem())

        assert not outcome
        assert isinstance(outcome.error, RmrfFailure)
        # no staging sibling is left behind
        assert _snapshot(tmp_path) == before

        monkeypatch.undo()
        assert rm_rf(target, fs=WindowsFileSystem())
        assert _snapshot(tmp_path) == []


class TestPosixFileSystem:
    def test_only_nul_is_illegal(self):
        fs = PosixFileSystem()
        assert fs.invalid_reason("a<b|c:d") is None
        assert fs.invalid_reason("a\0b") is not None
        assert fs.invalid_reason("") is not None

    @pytest.mark.skipif(os.name == "nt", reason="unlink semantics")
    def test_removes_tree_with_open_handle(self, tmp_path: Path):
        target = _tree(tmp_path)
        with (target / "sub" / "file.txt").open() as handle:
            assert rm_rf(target, fs=PosixFileSystem())
            assert not target.exists()
            assert handle.read() == "some data"
