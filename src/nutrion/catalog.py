"""In-memory food catalog and the name index built from it.

The catalog is the only owner of its NameSearchIndex. The index is created
when the catalog loads and rebuilt from scratch (clear + reinsert) after
every add or delete, since the index has no targeted removal.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog

from nutrion.config import SearchSettings
from nutrion.errors import ErrorCode, NutrionError
from nutrion.search_index import NameSearchIndex
from nutrion.seed import SEED_FOODS

if TYPE_CHECKING:
    from nutrion.models.catalog import CatalogRecord, IndexStats
    from nutrion.store import FoodStore

log = structlog.get_logger()


class FoodCatalog:
    def __init__(
        self,
        records: Iterable[CatalogRecord] = (),
        store: FoodStore | None = None,
        settings: SearchSettings | None = None,
    ) -> None:
        self._records: dict[str, CatalogRecord] = {}
        for record in records:
            self._records[record.name] = record
        self._store = store
        self._settings = settings or SearchSettings()
        self.index = NameSearchIndex()
        self.rebuild()

    @classmethod
    async def load(
        cls,
        store: FoodStore,
        settings: SearchSettings | None = None,
        seed: Iterable[CatalogRecord] | None = SEED_FOODS,
    ) -> FoodCatalog:
        """Read every stored food (seeding an empty store first) and index it."""
        if seed is not None:
            await store.seed_if_empty(seed)
        records = await store.list_foods()
        catalog = cls(records, store=store, settings=settings)
        log.info("catalog_loaded", foods=len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    @property
    def records(self) -> list[CatalogRecord]:
        """All foods, alphabetical."""
        return sorted(self._records.values(), key=lambda r: r.name.casefold())

    def get(self, name: str) -> CatalogRecord | None:
        return self._records.get(name)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def rebuild(self) -> None:
        """Replace the index contents with the current record set.

        Runs to completion without yielding, so no query can observe a
        half-built index from the same thread.
        """
        self.index.clear()
        for record in self.records:
            self.index.insert(record.name, record)
        log.debug("index_rebuilt", foods=len(self._records))

    async def add(self, record: CatalogRecord) -> None:
        """Add a food, replacing any existing food with the same name."""
        replaced = record.name in self._records
        self._records[record.name] = record
        if self._store is not None:
            await self._store.save_food(record)
        self.rebuild()
        log.info("food_saved", name=record.name, replaced=replaced)

    async def delete(self, name: str) -> None:
        if name not in self._records:
            raise NutrionError(
                code=ErrorCode.FOOD_NOT_FOUND,
                message=f"Food not found: {name!r}",
                recoverable=False,
            )
        del self._records[name]
        if self._store is not None:
            await self._store.delete_food(name)
        self.rebuild()
        log.info("food_deleted", name=name)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str, limit: int | None = None) -> list[CatalogRecord]:
        if not query.strip():
            return []
        return self.index.intelligent_search(
            query.strip(), self._settings.default_limit if limit is None else limit
        )

    def suggest(self, query: str, limit: int | None = None) -> list[CatalogRecord]:
        if not query.strip():
            return []
        return self.index.get_suggestions(
            query.strip(), self._settings.suggestion_limit if limit is None else limit
        )

    def stats(self) -> IndexStats:
        return self.index.get_stats()
