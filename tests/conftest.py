from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.upstream_builder import UpstreamBuilder


@pytest.fixture
def upstream(tmp_path: Path) -> UpstreamBuilder:
    """Provide a fake upstream checkout rooted at the pytest tmp_path."""
    return UpstreamBuilder(tmp_path)
