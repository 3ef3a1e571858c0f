"""Best-effort download of translator credits."""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .logging import get_logger

TRANSLATION_CONTRIBUTION = "translation"

Fetch = Callable[[str, Optional[float]], bytes]


def filter_translators(payload: Any) -> List[Dict[str, Any]]:
    """Return contributor records whose contributions include translation."""
    if not isinstance(payload, dict):
        raise ValueError("Contributor document must be a JSON object")
    contributors = payload.get("contributors")
    if not isinstance(contributors, list):
        raise ValueError("Contributor document has no 'contributors' list")
    translators: List[Dict[str, Any]] = []
    for entry in contributors:
        if not isinstance(entry, dict):
            continue
        contributions = entry.get("contributions")
        if isinstance(contributions, list) and TRANSLATION_CONTRIBUTION in contributions:
            translators.append(entry)
    return translators


class ContributorFetcher:
    """Downloads the contributor list and keeps the translators."""

    def __init__(self, fetch: Fetch | None = None) -> None:
        self._fetch = fetch or self._default_fetch
        self.logger = get_logger("contributors")
        self._thread: Optional[threading.Thread] = None

    def fetch(self, url: str, output_path: Path, *, timeout: Optional[float] = None) -> int:
        """Fetch ``url`` and write the translators to ``output_path``; return their count."""
        raw = self._fetch(url, timeout)
        try:
            payload = json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise RuntimeError(f"Contributor endpoint returned invalid JSON: {exc}") from exc
        translators = filter_translators(payload)
        output_path.write_text(
            json.dumps(translators, indent=4, ensure_ascii=False), encoding="utf-8"
        )
        return len(translators)

    def start(
        self, url: str, output_path: Path, *, timeout: Optional[float] = None
    ) -> threading.Thread:
        """Run :meth:`fetch` on a background thread without waiting for it.

        Failures are logged and never propagate to the caller. The thread is
        not a daemon, so the interpreter lets it finish before exiting.
        """
        if self._thread and self._thread.is_alive():
            return self._thread

        def _worker() -> None:
            try:
                count = self.fetch(url, output_path, timeout=timeout)
            except Exception as exc:
                self.logger.warning("Contributor fetch failed: %s", exc)
                return
            self.logger.info("Wrote %d translators to %s", count, output_path)

        thread = threading.Thread(target=_worker, name="addons-pull-contributors")
        self._thread = thread
        thread.start()
        return thread

    @staticmethod
    def _default_fetch(url: str, timeout: Optional[float]) -> bytes:
        request = Request(url, headers={"Accept": "application/json"})
        try:
            if timeout is None:
                response = urlopen(request)
            else:
                response = urlopen(request, timeout=timeout)
            with response:
                return response.read()
        except HTTPError as exc:
            raise RuntimeError(f"Contributor fetch failed with status {exc.code}: {exc.reason}") from exc
        except URLError as exc:
            raise RuntimeError(f"Contributor fetch failed: {exc.reason}") from exc


__all__ = ["ContributorFetcher", "filter_translators"]
