"""Tests for addons_pull.walker."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from addons_pull.walker import WalkError, walk


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_walk_lists_nested_files_relative_to_root(tmp_path: Path) -> None:
    _write(tmp_path / "userscript.js")
    _write(tmp_path / "icons" / "close.svg")
    _write(tmp_path / "icons" / "deep" / "nested" / "arrow.png")
    _write(tmp_path / "addon.json")

    assert walk(tmp_path) == [
        "addon.json",
        "icons/close.svg",
        "icons/deep/nested/arrow.png",
        "userscript.js",
    ]


def test_walk_accepts_string_roots(tmp_path: Path) -> None:
    _write(tmp_path / "a" / "b.txt")

    assert walk(str(tmp_path)) == ["a/b.txt"]


def test_walk_returns_empty_list_for_empty_directory(tmp_path: Path) -> None:
    (tmp_path / "empty").mkdir()

    assert walk(tmp_path) == []


def test_walk_rejects_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(FileNotFoundError) as excinfo:
        walk(missing)

    assert str(missing) in str(excinfo.value)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_walk_follows_symlinked_directories(tmp_path: Path) -> None:
    shared = tmp_path / "shared"
    _write(shared / "logo.svg")
    root = tmp_path / "root"
    root.mkdir()
    try:
        (root / "linked").symlink_to(shared, target_is_directory=True)
    except OSError:  # pragma: no cover - platform dependent
        pytest.skip("cannot create symlinks")

    assert walk(root) == ["linked/logo.svg"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_walk_fails_fast_on_directory_cycles(tmp_path: Path) -> None:
    root = tmp_path / "root"
    _write(root / "nested" / "file.js")
    try:
        (root / "nested" / "loop").symlink_to(root, target_is_directory=True)
    except OSError:  # pragma: no cover - platform dependent
        pytest.skip("cannot create symlinks")

    with pytest.raises(WalkError):
        walk(root)
