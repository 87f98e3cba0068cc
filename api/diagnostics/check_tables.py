"""
List the tables in the `public` schema of the configured database.

Usage:
    python -m diagnostics.check_tables     (from api/)
    check-tables                           (installed console script)

DATABASE_URL is read from the environment, falling back to a local `.env`.
Exits 0 when the listing succeeded and 1 otherwise.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from core.app_logging import configure_logging
from core.db import Database

logger = logging.getLogger(__name__)

LIST_TABLES_SQL = """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = 'public'
    ORDER BY table_name
"""


async def list_public_tables(db: Database) -> list[str]:
    rows = await db.fetch_all(LIST_TABLES_SQL)
    return [str(row["table_name"]) for row in rows]


async def run(database_url: str) -> int:
    db = Database(database_url)
    try:
        await db.connect()
        tables = await list_public_tables(db)
    except Exception:
        logger.exception("Error checking tables")
        return 1
    finally:
        await db.close()

    print("Tables in database:")
    for name in tables:
        print(f"  - {name}")
    if not tables:
        print("  (none)")
    return 0


def main() -> int:
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    if not os.getenv("DATABASE_URL"):
        load_dotenv()

    database_url = (os.getenv("DATABASE_URL") or "").strip()
    if not database_url:
        print("DATABASE_URL is not set.", file=sys.stderr)
        return 1
    return asyncio.run(run(database_url))


if __name__ == "__main__":
    raise SystemExit(main())
