"""Tests for the translator credit fetch."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from addons_pull.contributors import ContributorFetcher, filter_translators

URL = "https://example.invalid/.all-contributorsrc"

DOCUMENT = {
    "projectName": "ScratchAddons",
    "contributors": [
        {"login": "alice", "name": "Alice", "contributions": ["code", "translation"]},
        {"login": "bob", "name": "Bob", "contributions": ["code"]},
        {"login": "chloé", "name": "Chloé", "contributions": ["translation"]},
        {"login": "dan", "name": "Dan"},
    ],
}


def test_filter_translators_keeps_translation_contributors() -> None:
    assert [entry["login"] for entry in filter_translators(DOCUMENT)] == ["alice", "chloé"]


def test_filter_translators_rejects_unexpected_document() -> None:
    with pytest.raises(ValueError):
        filter_translators({"projectName": "ScratchAddons"})


def test_fetch_writes_indented_translators(tmp_path: Path) -> None:
    requested: list[tuple[str, float | None]] = []

    def fetch(url: str, timeout: float | None) -> bytes:
        requested.append((url, timeout))
        return json.dumps(DOCUMENT).encode("utf-8")

    output = tmp_path / "translators.json"
    count = ContributorFetcher(fetch=fetch).fetch(URL, output, timeout=5.0)

    assert count == 2
    assert requested == [(URL, 5.0)]
    text = output.read_text(encoding="utf-8")
    assert text.startswith('[\n    {\n        "login": "alice"')
    assert "chloé" in text
    assert json.loads(text) == [DOCUMENT["contributors"][0], DOCUMENT["contributors"][2]]


def test_start_runs_in_background_thread(tmp_path: Path) -> None:
    output = tmp_path / "translators.json"
    fetcher = ContributorFetcher(fetch=lambda url, timeout: json.dumps(DOCUMENT).encode("utf-8"))

    thread = fetcher.start(URL, output)
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert not thread.daemon
    assert len(json.loads(output.read_text(encoding="utf-8"))) == 2


def test_start_isolates_failures(tmp_path: Path, caplog) -> None:
    def failing_fetch(url: str, timeout: float | None) -> bytes:
        raise RuntimeError("network unreachable")

    logger = logging.getLogger("addons_pull")
    previous = logger.propagate
    logger.propagate = True
    try:
        with caplog.at_level(logging.WARNING, logger="addons_pull.contributors"):
            thread = ContributorFetcher(fetch=failing_fetch).start(URL, tmp_path / "translators.json")
            thread.join(timeout=5)
    finally:
        logger.propagate = previous

    assert not (tmp_path / "translators.json").exists()
    assert "network unreachable" in caplog.text


def test_invalid_json_is_reported(tmp_path: Path) -> None:
    fetcher = ContributorFetcher(fetch=lambda url, timeout: b"<html>")

    with pytest.raises(RuntimeError):
        fetcher.fetch(URL, tmp_path / "translators.json")
