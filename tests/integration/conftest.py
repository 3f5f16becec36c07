"""Integration test fixtures.

Provides a fully wired AppState with in-memory SQLite and a real
httpx client (mock responses with respx in the tests that need them).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import aiosqlite
import httpx
import pytest

from nutrion.config import Settings
from nutrion.state import create_app_state

if TYPE_CHECKING:
    from pathlib import Path

    from nutrion.state import AppState


@pytest.fixture()
async def app_state() -> AppState:
    """Seeded AppState with a provider attached."""
    async with aiosqlite.connect(":memory:") as db:
        async with httpx.AsyncClient() as client:
            state = await create_app_state(Settings(), db, client)
            yield state


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Environment for running ``python -m nutrion`` against a throwaway database."""
    env = os.environ.copy()
    env = {k: v for k, v in env.items() if not k.startswith("NUTRION__")}
    env["NUTRION__STORE__DB_PATH"] = str(tmp_path / "data" / "foods.db")
    env["NUTRION__LOGGING__FORMAT"] = "text"
    return env
