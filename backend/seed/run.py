#!/usr/bin/env python3
"""Run seed scripts to populate the configuration database with development data.

Usage:
    python -m seed.run [--clear]

Options:
    --clear     Remove all seed data before inserting
"""

import argparse
import asyncio
import sys

import psycopg

from core.config import AppConfig
from seed.config_tables import seed_config_tables, clear_config_tables
from seed.schema import create_schema


async def main(clear: bool = False) -> int:
    """Run all seed scripts."""
    config = AppConfig.load()

    if not config.database.host:
        print("Error: No database configured")
        return 1

    print(f"Connecting to database: {config.database.host}/{config.database.name}")

    async with await psycopg.AsyncConnection.connect(
        config.database.conninfo
    ) as conn:
        await conn.set_autocommit(True)

        print("\n=== Creating schema ===")
        await create_schema(conn)

        if clear:
            print("\n=== Clearing seed data ===")
            await clear_config_tables(conn)

        print("\n=== Seeding configuration tables ===")
        await seed_config_tables(conn)

        print("\n=== Seed complete ===")
        return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the configuration database with development data")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear existing seed data before inserting",
    )
    args = parser.parse_args()

    sys.exit(asyncio.run(main(clear=args.clear)))
