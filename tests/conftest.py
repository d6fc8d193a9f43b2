"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgrid.core.types import Square


@pytest.fixture
def corners() -> tuple[Square, Square, Square, Square]:
    """a1, h1, a8, h8 built from raw coordinates."""
    return (
        Square(0, 0),
        Square(7, 0),
        Square(0, 7),
        Square(7, 7),
    )
