"""Copy shared libraries imported by addon scripts into the output tree."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from ..logging import get_logger

# import { normalizeHex, getHexRegex } from "../../libraries/normalize-color.js";
# import RateLimiter from "../../libraries/rate-limiter.js";
_LIBRARY_IMPORT = re.compile(
    r"""import +(?:\{.*\}|.*) +from +["']\.\./\.\./libraries/([\w/-]+(?:\.esm)?\.js)["'];""",
    re.ASCII,
)

logger = get_logger("libraries")


def find_library_imports(contents: str) -> List[str]:
    """Return library paths (relative to ``libraries/``) imported by ``contents``."""
    return [match.group(1) for match in _LIBRARY_IMPORT.finditer(contents)]


def include_imported_libraries(
    contents: str,
    *,
    source_root: Path,
    output_root: Path,
) -> List[str]:
    """Copy every library imported by ``contents`` from ``source_root`` to ``output_root``.

    The importing script is left untouched; only the import target is made to
    exist at the matching location. Returns the copied library paths.
    """
    copied: List[str] = []
    for library_file in find_library_imports(contents):
        source = source_root / library_file
        target = output_root / library_file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(source.read_bytes())
        logger.debug("Copied library %s", library_file)
        copied.append(library_file)
    return copied


__all__ = ["find_library_imports", "include_imported_libraries"]
