"""
PostgreSQL connection utilities.
"""

from __future__ import annotations

from psycopg_pool import ConnectionPool

from ecourts.config import Settings


def create_connection_pool(settings: Settings, *, open: bool = False) -> ConnectionPool:
    """Build a ConnectionPool for the configured database; the caller owns its lifecycle."""
    return ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        open=open,
    )
