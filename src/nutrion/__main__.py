"""Command-line food search: ``python -m nutrion <query>``.

Loads settings, opens the food database (seeding it on first run) and
prints the ranked matches, one per line, to stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from nutrion.config import Settings
from nutrion.logging_config import setup_logging
from nutrion.state import create_app_state, open_database


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="nutrion", description="Search the food catalog.")
    parser.add_argument("query", help="food name or part of it")
    parser.add_argument("-n", "--limit", type=int, default=None, help="maximum results")
    parser.add_argument(
        "--suggest", action="store_true", help="rank by relevance instead of search order"
    )
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    db = await open_database(settings.store.db_path)
    try:
        state = await create_app_state(settings, db)
        if args.suggest:
            results = state.catalog.suggest(args.query, args.limit)
        else:
            results = state.catalog.search(args.query, args.limit)
    finally:
        await db.close()

    for record in results:
        print(
            f"{record.name}\tGI {record.glycemic_index:g}\t"
            f"{record.carbs_per_100:g} g carbs\t{record.kcal_per_100:g} kcal"
        )
    return 0 if results else 1


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = Settings()
    setup_logging(settings.logging)
    return asyncio.run(_run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
