"""Application state: every long-lived component, wired explicitly.

Nothing here is created at import time. ``create_app_state`` builds the
store, loads the catalog (which builds the search index) and attaches the
external provider; the caller owns the SQLite connection and HTTP client
and closes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import aiosqlite
import structlog

from nutrion.catalog import FoodCatalog
from nutrion.providers.openfoodfacts import OpenFoodFactsClient, to_catalog_record
from nutrion.seed import SEED_FOODS
from nutrion.store import FoodStore

if TYPE_CHECKING:
    import httpx

    from nutrion.config import Settings
    from nutrion.models.catalog import CatalogRecord

log = structlog.get_logger()


@dataclass
class AppState:
    settings: Settings
    catalog: FoodCatalog
    store: FoodStore | None = None
    provider: OpenFoodFactsClient | None = None

    async def import_barcode(self, code: str) -> CatalogRecord:
        """Look up a barcode with the external provider and add it to the catalog."""
        if self.provider is None:
            raise RuntimeError("No external food provider configured")
        food = await self.provider.search_by_code(code)
        record = to_catalog_record(food)
        await self.catalog.add(record)
        return record


async def open_database(db_path: str) -> aiosqlite.Connection:
    """Open the SQLite file, creating parent directories as needed."""
    path = Path(db_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return await aiosqlite.connect(path)


async def create_app_state(
    settings: Settings,
    db: aiosqlite.Connection,
    http_client: httpx.AsyncClient | None = None,
) -> AppState:
    store = FoodStore(db)
    await store.init_db()

    catalog = await FoodCatalog.load(
        store,
        settings=settings.search,
        seed=SEED_FOODS if settings.store.seed_on_empty else None,
    )
    provider = (
        OpenFoodFactsClient(http_client, settings.provider) if http_client is not None else None
    )

    log.info("app_state_ready", foods=len(catalog), provider=provider is not None)
    return AppState(settings=settings, catalog=catalog, store=store, provider=provider)

