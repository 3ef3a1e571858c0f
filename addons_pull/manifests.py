"""Generated manifests describing the pulled snapshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Sequence

from .models import UpstreamMeta
from .rendering import js_string, render


class ManifestError(RuntimeError):
    """Raised when the upstream extension manifest cannot be read."""


def generate_l10n_entries(locales: Sequence[str], *, base_locale: str = "en") -> str:
    """Return a module mapping each non-base locale to a lazy JSON import."""
    entries: List[Dict[str, str]] = []
    for locale in locales:
        if locale == base_locale:
            continue
        entries.append(
            {
                "locale": js_string(locale),
                "chunk_name": js_string(f"addon-l10n-{locale}"),
                "path": js_string(f"../addons-l10n/{locale}.json"),
            }
        )
    return render("l10n_entries.js.j2", entries=entries)


def read_version_name(manifest_path: Path) -> str | None:
    """Return ``version_name`` from the upstream extension manifest."""
    try:
        payload = json.loads(manifest_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ManifestError(f"Unable to read {manifest_path}: {exc}") from exc
    except ValueError as exc:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ManifestError(f"{manifest_path} must contain a JSON object")
    return payload.get("version_name")


class ManifestEmitter:
    """Writes ``generated/l10n-entries.js`` and ``upstream-meta.json``."""

    def __init__(self, *, base_locale: str = "en") -> None:
        self.base_locale = base_locale

    def write_l10n_entries(self, path: Path, locales: Sequence[str]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        content = generate_l10n_entries(locales, base_locale=self.base_locale)
        path.write_bytes(content.encode("utf-8"))
        return path

    def write_upstream_meta(self, path: Path, meta: UpstreamMeta) -> Path:
        path.write_text(
            json.dumps(meta.to_dict(), ensure_ascii=False, separators=(",", ":")),
            encoding="utf-8",
        )
        return path


__all__ = ["ManifestEmitter", "ManifestError", "generate_l10n_entries", "read_version_name"]
