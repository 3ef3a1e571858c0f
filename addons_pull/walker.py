"""Recursive file listing for upstream directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Set, Tuple


class WalkError(RuntimeError):
    """Raised when a directory tree cannot be traversed safely."""


def walk(root: Path | str) -> List[str]:
    """Return every file below ``root`` as a POSIX path relative to ``root``.

    Entries are visited depth-first in sorted name order. Symbolic links are
    followed; a link that loops back into a directory currently being
    traversed raises :class:`WalkError`.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Directory not found: {root_path}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {root_path}")
    return _walk(root_path, "", set())


def _walk(directory: Path, prefix: str, active: Set[Tuple[int, int]]) -> List[str]:
    stat_result = os.stat(directory)
    identity = (stat_result.st_dev, stat_result.st_ino)
    if identity in active:
        raise WalkError(f"Directory cycle detected at {directory}")
    active.add(identity)

    files: List[str] = []
    try:
        for name in sorted(os.listdir(directory)):
            path = directory / name
            rel_path = f"{prefix}/{name}" if prefix else name
            if path.is_dir():
                files.extend(_walk(path, rel_path, active))
            else:
                files.append(rel_path)
    finally:
        active.discard(identity)
    return files


__all__ = ["WalkError", "walk"]
