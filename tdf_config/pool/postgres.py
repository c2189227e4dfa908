"""
PostgreSQL pool: psycopg 3 connections pooled by psycopg_pool.ConnectionPool.

Eager: the pool is opened with wait=True, so construction blocks until
min_pool_size connections are up and fails if they cannot be made in time.
"""

import logging

import psycopg
from psycopg_pool import ConnectionPool, PoolTimeout

from tdf_config.core.exceptions import PoolConstructionError
from tdf_config.models import DataSourceConfig

from .url import check_postgres_url, redact_url

_log = logging.getLogger(__name__)

POOL_NAME = "tdf-postgres"


def build_postgres_pool(config: DataSourceConfig) -> ConnectionPool:
    """Build and open a ConnectionPool for *config*. Malformed URL -> InvalidConfiguration."""
    check_postgres_url(config.url)
    pool = ConnectionPool(
        conninfo=config.url,
        min_size=config.min_pool_size,
        max_size=config.max_pool_size,
        timeout=config.pool_timeout,
        name=POOL_NAME,
        open=False,
        kwargs={"connect_timeout": config.connect_timeout},
    )
    try:
        pool.open(wait=True, timeout=config.pool_timeout)
    except (PoolTimeout, psycopg.Error) as e:
        pool.close()
        raise PoolConstructionError(
            f"Could not build PostgreSQL pool for {redact_url(config.url)}: {e}"
        ) from e
    _log.info(
        "PostgreSQL pool ready url=%s min=%d max=%d",
        redact_url(config.url),
        config.min_pool_size,
        config.max_pool_size,
    )
    return pool
