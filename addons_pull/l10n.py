"""Merge per-addon translation files into one file per locale."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Sequence

from .logging import get_logger

logger = get_logger("l10n")


def get_all_messages(locale_path: Path, addons: Sequence[str]) -> Dict[str, object]:
    """Return the union of every addon's messages for the locale at ``locale_path``.

    Addons are merged in order with a shallow update, so a key defined by
    several addons keeps the value of the last one. Missing or unreadable
    files are skipped; partial translations are normal.
    """
    all_messages: Dict[str, object] = {}
    for addon in addons:
        path = locale_path / f"{addon}.json"
        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.debug("Skipping %s: %s", path, exc)
            continue
        if not isinstance(parsed, dict):
            logger.debug("Skipping %s: expected a JSON object", path)
            continue
        all_messages.update(parsed)
    return all_messages


class LocaleAggregator:
    """Writes consolidated ``<locale>.json`` files from the upstream l10n tree."""

    def __init__(self, addons: Sequence[str]) -> None:
        self.addons = list(addons)

    def aggregate(self, l10n_root: Path, output_dir: Path) -> List[str]:
        """Write one merged file per locale directory and return the locales found."""
        languages: List[str] = []
        for name in sorted(entry.name for entry in l10n_root.iterdir()):
            locale_path = l10n_root / name
            # README and other loose files
            if not locale_path.is_dir():
                continue
            languages.append(name)
            messages = get_all_messages(locale_path, self.addons)
            output_path = output_dir / f"{name}.json"
            output_path.write_text(
                json.dumps(messages, ensure_ascii=False, separators=(",", ":")),
                encoding="utf-8",
            )
            logger.debug("Wrote %d messages for %s", len(messages), name)
        return languages


__all__ = ["LocaleAggregator", "get_all_messages"]
