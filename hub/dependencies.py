"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging
import threading

from hub.config import get_settings
from hub.db import DbClient, InMemoryDbClient, PostgresDbClient
from hub.monitor import StatsSampler

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_db_client: DbClient | None = None
_stats_sampler: StatsSampler | None = None


def get_db_client() -> DbClient:
    """
    Return a singleton DB client so state persists across requests.
    """
    global _db_client
    if _db_client:
        return _db_client

    with _lock:
        if _db_client:
            return _db_client
        settings = get_settings()
        if settings.database_url:
            logger.info("Using relational storage backend")
            _db_client = PostgresDbClient(settings.database_url)
        else:
            logger.info("DATABASE_URL not set; using in-memory storage backend")
            _db_client = InMemoryDbClient()
    return _db_client


def get_stats_sampler() -> StatsSampler:
    global _stats_sampler
    if _stats_sampler:
        return _stats_sampler

    db = get_db_client()
    with _lock:
        if not _stats_sampler:
            settings = get_settings()
            _stats_sampler = StatsSampler(
                db, interval=settings.stats_sample_interval_seconds
            )
    return _stats_sampler


def reset_db_client() -> None:
    """Forget the cached clients. Tests only."""
    global _db_client, _stats_sampler
    with _lock:
        if _stats_sampler:
            _stats_sampler.stop()
        _stats_sampler = None
        _db_client = None
