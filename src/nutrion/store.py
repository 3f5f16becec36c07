"""SQLite persistence for catalog foods.

All store operations catch ``aiosqlite.Error`` internally and degrade
gracefully: read failures return ``None`` or an empty list, write failures
are logged and ignored (the in-memory catalog still reflects the change
for the rest of the session). Infrastructure errors never cross the
FoodStore class boundary. Errors are logged with ``exc_info=True`` so they
remain observable via stderr.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

import aiosqlite
import structlog
from pydantic import ValidationError

from nutrion.models.catalog import CatalogRecord

log = structlog.get_logger()

_CREATE_FOODS_TABLE = """
CREATE TABLE IF NOT EXISTS foods (
    name        TEXT PRIMARY KEY,
    payload     TEXT NOT NULL,
    updated_at  TEXT NOT NULL
)
"""


class FoodStore:
    """SQLite-backed food records keyed by name."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def init_db(self) -> None:
        """Create tables and set WAL mode. Called once at startup."""
        await self._db.execute("PRAGMA journal_mode = WAL")
        await self._db.execute(_CREATE_FOODS_TABLE)
        await self._db.commit()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_food(self, name: str) -> CatalogRecord | None:
        """Read one food. Returns ``None`` when missing or on read failure."""
        try:
            cursor = await self._db.execute("SELECT payload FROM foods WHERE name = ?", (name,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return CatalogRecord.model_validate_json(row[0])
        except aiosqlite.Error:
            log.warning("store_read_error", key=f"food:{name}", exc_info=True)
            return None
        except ValidationError:
            log.warning("store_corrupt_row", key=f"food:{name}", exc_info=True)
            return None

    async def list_foods(self) -> list[CatalogRecord]:
        """All stored foods ordered by name. Rows that fail validation are skipped."""
        try:
            cursor = await self._db.execute("SELECT name, payload FROM foods ORDER BY name")
            rows = await cursor.fetchall()
        except aiosqlite.Error:
            log.warning("store_read_error", key="foods", exc_info=True)
            return []

        records: list[CatalogRecord] = []
        for name, payload in rows:
            try:
                records.append(CatalogRecord.model_validate_json(payload))
            except ValidationError:
                log.warning("store_corrupt_row", key=f"food:{name}")
        return records

    async def count(self) -> int:
        try:
            cursor = await self._db.execute("SELECT COUNT(*) FROM foods")
            row = await cursor.fetchone()
            return int(row[0]) if row else 0
        except aiosqlite.Error:
            log.warning("store_read_error", key="foods:count", exc_info=True)
            return 0

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def save_food(self, record: CatalogRecord) -> None:
        """Insert or replace a food by name. Non-fatal on failure."""
        try:
            await self._db.execute(
                "INSERT OR REPLACE INTO foods (name, payload, updated_at) VALUES (?, ?, ?)",
                (record.name, record.model_dump_json(), datetime.now(UTC).isoformat()),
            )
            await self._db.commit()
        except aiosqlite.Error:
            log.warning("store_write_error", key=f"food:{record.name}", exc_info=True)

    async def delete_food(self, name: str) -> None:
        """Delete a food by name. Non-fatal on failure."""
        try:
            await self._db.execute("DELETE FROM foods WHERE name = ?", (name,))
            await self._db.commit()
        except aiosqlite.Error:
            log.warning("store_write_error", key=f"food:{name}", exc_info=True)

    async def seed_if_empty(self, records: Iterable[CatalogRecord]) -> int:
        """Write ``records`` only when the table has no rows. Returns rows written."""
        if await self.count() > 0:
            return 0
        try:
            now = datetime.now(UTC).isoformat()
            rows = [(r.name, r.model_dump_json(), now) for r in records]
            await self._db.executemany(
                "INSERT OR REPLACE INTO foods (name, payload, updated_at) VALUES (?, ?, ?)",
                rows,
            )
            await self._db.commit()
        except aiosqlite.Error:
            log.warning("store_seed_error", exc_info=True)
            return 0
        log.info("store_seeded", count=len(rows))
        return len(rows)
