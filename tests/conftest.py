from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def make_state():
    """Build a ``ChatState`` for the ``main`` session with optional overrides."""

    from conduit.chat import ChatState

    def _make(**overrides: object) -> ChatState:
        values: dict[str, object] = {"session_key": "main", "connected": True}
        values.update(overrides)
        return ChatState(**values)

    return _make
