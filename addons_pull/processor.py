"""Copy upstream addons into the output tree, rewriting their scripts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .logging import get_logger
from .rewrite.assets import find_assets, include_imports, needs_asset_rewrite
from .rewrite.libraries import include_imported_libraries
from .walker import walk

SCRIPT_SUFFIX = ".js"


@dataclass
class AddonReport:
    """Summary of one processed addon."""

    addon: str
    files: int
    rewritten: List[str]
    libraries: List[str]


class AddonProcessor:
    """Recreates addon directories with bundler-friendly scripts."""

    def __init__(self, *, library_source: Path, library_output: Path) -> None:
        self.library_source = library_source
        self.library_output = library_output
        self.logger = get_logger("processor")

    def process(self, addon: str, old_directory: Path, new_directory: Path) -> AddonReport:
        """Copy ``old_directory`` to ``new_directory`` applying script rewrites."""
        files = walk(old_directory)
        assets: Optional[List[str]] = None
        rewritten: List[str] = []
        libraries: List[str] = []

        for file in files:
            old_path = old_directory / file
            new_path = new_directory / file
            new_path.parent.mkdir(parents=True, exist_ok=True)
            contents = old_path.read_bytes()

            if file.endswith(SCRIPT_SUFFIX):
                text = contents.decode("utf-8", errors="replace")
                libraries.extend(
                    include_imported_libraries(
                        text,
                        source_root=self.library_source,
                        output_root=self.library_output,
                    )
                )
                if needs_asset_rewrite(text):
                    if assets is None:
                        assets = find_assets(old_directory)
                    text = include_imports(old_directory, text, assets=assets)
                    rewritten.append(file)
                    self.logger.debug("Rewrote asset references in %s/%s", addon, file)
                contents = text.encode("utf-8")

            new_path.write_bytes(contents)

        return AddonReport(addon=addon, files=len(files), rewritten=rewritten, libraries=libraries)


__all__ = ["AddonProcessor", "AddonReport", "SCRIPT_SUFFIX"]
