"""Source rewrites applied to upstream addon scripts."""

from .assets import DYNAMIC_MARKERS, build_asset_header, find_assets, include_imports, needs_asset_rewrite
from .libraries import find_library_imports, include_imported_libraries

__all__ = [
    "DYNAMIC_MARKERS",
    "build_asset_header",
    "find_assets",
    "find_library_imports",
    "include_imported_libraries",
    "include_imports",
    "needs_asset_rewrite",
]
