"""Unit-specific fixtures (no I/O beyond in-memory SQLite)."""

from __future__ import annotations

import aiosqlite
import pytest

from nutrion.store import FoodStore


@pytest.fixture()
async def store():
    """In-memory SQLite food store for unit tests."""
    async with aiosqlite.connect(":memory:") as db:
        s = FoodStore(db)
        await s.init_db()
        yield s
