#!/usr/bin/env python3
"""
Create the eCourts tables in a PostgreSQL database.

Usage:
    python scripts/init_db.py                 # uses DATABASE_URL from the environment / .env
    python scripts/init_db.py --database-url postgresql://...
    python scripts/init_db.py --reset         # also empties both tables
"""

from __future__ import annotations

import argparse
import logging

import psycopg

from ecourts.config import get_settings
from ecourts.db import queries

logger = logging.getLogger("init_db")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL.")
    parser.add_argument("--reset", action="store_true", help="Truncate cases and cause lists after creating them.")
    return parser.parse_args()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    args = parse_args()
    database_url = args.database_url or get_settings().database_url

    logger.info("Connecting to database...")
    with psycopg.connect(database_url) as conn:
        queries.ensure_schema(conn)
        if args.reset:
            queries.delete_all(conn)
            logger.info("Existing rows removed")
        logger.info(
            "Schema ready: %d cases, %d cause lists",
            queries.count_rows(conn, "cases"),
            queries.count_rows(conn, "cause_lists"),
        )


if __name__ == "__main__":
    main()
