"""Open Food Facts lookup by name or barcode.

Products come back without a glycemic index, so ``to_catalog_record``
estimates one from the category text and the sugar/fibre share of the
carbohydrates before the product can join the catalog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog

from nutrion.config import ProviderSettings
from nutrion.errors import ErrorCode, NutrionError
from nutrion.models.catalog import CatalogRecord
from nutrion.models.provider import ExternalFood, ExternalSearchPage

if TYPE_CHECKING:
    from collections.abc import Mapping

log = structlog.get_logger()

_FIELDS = "code,product_name,brands,nutriments,image_url,image_small_url,categories"

# First matching category wins; order matters.
CATEGORY_GI_ESTIMATES: dict[str, int] = {
    "cereales": 70,
    "pan": 75,
    "pasta": 50,
    "arroz": 70,
    "legumbres": 30,
    "frutas": 50,
    "verduras": 15,
    "lacteos": 35,
    "carnes": 0,
    "pescados": 0,
    "bebidas": 60,
    "dulces": 70,
    "snacks": 65,
}
DEFAULT_GI_ESTIMATE = 50


def build_http_client(settings: ProviderSettings | None = None) -> httpx.AsyncClient:
    settings = settings or ProviderSettings()
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
        headers={"Accept": "application/json", "User-Agent": settings.user_agent},
    )


def estimate_glycemic_index(
    categories: str | None,
    carbs: float,
    sugars: float | None,
    fiber: float | None,
) -> int:
    if carbs < 1:
        return 0
    sugars = sugars or 0.0
    fiber = fiber or 0.0
    sugar_ratio = sugars / carbs

    lowered = (categories or "").lower()
    for category, gi in CATEGORY_GI_ESTIMATES.items():
        if category in lowered:
            fiber_adjustment = min(fiber * 2, 15)
            sugar_adjustment = 10 if sugar_ratio > 0.5 else 0
            return int(max(0, min(100, gi - fiber_adjustment + sugar_adjustment)))

    if sugar_ratio > 0.7:
        return 70
    if sugar_ratio > 0.3:
        return 55
    if fiber > 5:
        return 40
    return DEFAULT_GI_ESTIMATE


def to_catalog_record(food: ExternalFood) -> CatalogRecord:
    name = f"{food.name} ({food.brand})" if food.brand else food.name
    return CatalogRecord(
        name=name,
        glycemic_index=estimate_glycemic_index(food.categories, food.carbs, food.sugars, food.fiber),
        carbs_per_100=food.carbs,
        kcal_per_100=food.kcal,
    )


def _parse_product(product: Mapping[str, Any]) -> ExternalFood:
    nutriments = product.get("nutriments") or {}
    return ExternalFood(
        code=product.get("code") or "",
        name=product.get("product_name") or "Unnamed product",
        brand=product.get("brands") or None,
        kcal=nutriments.get("energy-kcal_100g") or 0.0,
        carbs=nutriments.get("carbohydrates_100g") or 0.0,
        sugars=nutriments.get("sugars_100g"),
        fat=nutriments.get("fat_100g"),
        protein=nutriments.get("proteins_100g"),
        fiber=nutriments.get("fiber_100g"),
        categories=product.get("categories") or None,
        image_url=product.get("image_url") or product.get("image_small_url") or None,
    )


class OpenFoodFactsClient:
    """Thin async client; the caller owns the ``httpx.AsyncClient`` lifecycle."""

    def __init__(self, client: httpx.AsyncClient, settings: ProviderSettings | None = None) -> None:
        self._client = client
        self._settings = settings or ProviderSettings()

    async def search_by_name(
        self, query: str, page: int = 1, page_size: int | None = None
    ) -> ExternalSearchPage:
        query = query.strip()
        if len(query) < 2:
            raise NutrionError(
                code=ErrorCode.INVALID_INPUT,
                message="query must be at least 2 characters",
                recoverable=False,
            )
        params = {
            "search_terms": query,
            "page": str(page),
            "page_size": str(page_size or self._settings.page_size),
            "json": "1",
            "fields": _FIELDS,
        }
        data = await self._get_json(f"{self._settings.base_url}/cgi/search.pl", params)

        products = [
            p for p in data.get("products") or [] if p.get("product_name") and p.get("nutriments")
        ]
        foods = [_parse_product(p) for p in products]
        log.info("provider_search", query=query, results=len(foods))
        return ExternalSearchPage(
            foods=foods,
            total=int(data.get("count") or 0),
            page=int(data.get("page") or page),
        )

    async def search_by_code(self, code: str) -> ExternalFood:
        code = code.strip()
        if len(code) < 8 or not code.isdigit():
            raise NutrionError(
                code=ErrorCode.INVALID_INPUT,
                message=f"Invalid barcode: {code!r}",
                recoverable=False,
            )
        data = await self._get_json(
            f"{self._settings.base_url}/api/v2/product/{code}", {"fields": _FIELDS}
        )
        if data.get("status") != 1 or not data.get("product"):
            raise NutrionError(
                code=ErrorCode.FOOD_NOT_FOUND,
                message=f"No product for barcode {code}",
                recoverable=False,
            )
        return _parse_product(data["product"])

    async def _get_json(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            log.warning("provider_http_error", url=url, status=exc.response.status_code)
            raise NutrionError(
                code=ErrorCode.PROVIDER_UNAVAILABLE,
                message=f"Food provider returned HTTP {exc.response.status_code}",
                recoverable=True,
            ) from exc
        except httpx.HTTPError as exc:
            log.warning("provider_network_error", url=url, error=str(exc))
            raise NutrionError(
                code=ErrorCode.PROVIDER_UNAVAILABLE,
                message=f"Food provider unreachable: {exc}",
                recoverable=True,
            ) from exc
        except ValueError as exc:
            raise NutrionError(
                code=ErrorCode.PROVIDER_UNAVAILABLE,
                message="Food provider returned invalid JSON",
                recoverable=True,
            ) from exc
