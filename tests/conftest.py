from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from models.compat_entry import CompatEntry, Release  # noqa: E402


@pytest.fixture
def sample_entries():
    """A small collection covering every category."""
    return (
        CompatEntry("Game A", 0, (Release("0004000000055D00"),)),
        CompatEntry("Game B", 5),
        CompatEntry("Mario Kart 7", 3, (Release("0004000000030800"), Release("00040000000A1B00"))),
        CompatEntry("Steel Diver", 99),
    )


@pytest.fixture
def sample_json() -> bytes:
    return (
        b'[{"title": "Game A", "compatibility": 0, '
        b'"releases": [{"id": "0004000000055D00", "region": "USA"}]},'
        b' {"title": "Game B", "compatibility": 5}]'
    )
