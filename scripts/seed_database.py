"""
CLI helper to create the hub tables and load the demo catalog into a database.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hub.config import get_settings
from hub.db import PostgresDbClient


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the hub database")
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy URL (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Only create the tables",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    database_url = args.database_url or get_settings().database_url
    if not database_url:
        print("DATABASE_URL is not set and --database-url was not given", file=sys.stderr)
        return 2

    db = PostgresDbClient(database_url, seed=not args.no_seed)
    print(
        f"Database ready: {len(db.list_scripts())} scripts, "
        f"{len(db.list_news())} news articles"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
