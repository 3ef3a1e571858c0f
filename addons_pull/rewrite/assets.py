"""Rewrite dynamic asset paths into a static import lookup table.

Addon scripts build asset URLs at run time, for example::

    el.src = addon.self.dir + "/" + name + ".svg";

Bundlers cannot follow those, so every image in the addon directory is
imported up front and the expression is routed through ``_twGetAsset``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from ..rendering import js_string, render
from ..walker import walk

DYNAMIC_MARKERS = ("addon.self.dir", "addon.self.lib")

ASSET_SUFFIXES = (".svg", ".png")

# `${addon.self.dir + "/icon.svg"}` inside a template literal
_INTERPOLATED_REFERENCE = re.compile(r"\$\{addon\.self\.(?:dir|lib) *\+ *([^;\n]+)\}")
# addon.self.dir + "/" + name + ".svg"
_BARE_REFERENCE = re.compile(r"addon\.self\.(?:dir|lib) *\+ *([^;,]+)")


@dataclass(frozen=True)
class AssetImport:
    """One imported asset and the literals used to reference it."""

    index: int
    path: str

    @property
    def local_name(self) -> str:
        return f"_twAsset{self.index}"

    @property
    def import_path(self) -> str:
        return _stringify_path(f"./{self.path}")

    @property
    def lookup_path(self) -> str:
        return _stringify_path(f"/{self.path}")


def needs_asset_rewrite(contents: str) -> bool:
    """Return True when ``contents`` builds asset paths from the addon root."""
    return any(marker in contents for marker in DYNAMIC_MARKERS)


def find_assets(folder: Path | str) -> List[str]:
    """Return image files below ``folder`` in traversal order."""
    return [file for file in walk(folder) if file.endswith(ASSET_SUFFIXES)]


def build_asset_header(assets: Sequence[str]) -> str:
    """Render the import prelude and ``_twGetAsset`` lookup for ``assets``."""
    imports = [AssetImport(index=index, path=path) for index, path in enumerate(assets)]
    return render("asset_header.js.j2", assets=imports)


def rewrite_references(contents: str) -> str:
    """Replace ``addon.self.dir``/``addon.self.lib`` concatenations with lookups."""
    contents = _INTERPOLATED_REFERENCE.sub(_interpolated_replacement, contents)
    return _BARE_REFERENCE.sub(_bare_replacement, contents)


def include_imports(
    folder: Path | str,
    contents: str,
    *,
    assets: Sequence[str] | None = None,
) -> str:
    """Return ``contents`` prefixed with asset imports and with references rerouted.

    ``assets`` may be supplied when the caller has already listed the folder.
    """
    if assets is None:
        assets = find_assets(folder)
    return build_asset_header(assets) + rewrite_references(contents)


def _interpolated_replacement(match: re.Match[str]) -> str:
    return "${_twGetAsset(" + match.group(1) + ")}"


def _bare_replacement(match: re.Match[str]) -> str:
    return f"_twGetAsset({match.group(1)})"


def _stringify_path(path: str) -> str:
    return js_string(path).replace("\\\\", "/")


__all__ = [
    "ASSET_SUFFIXES",
    "AssetImport",
    "DYNAMIC_MARKERS",
    "build_asset_header",
    "find_assets",
    "include_imports",
    "needs_asset_rewrite",
    "rewrite_references",
]
