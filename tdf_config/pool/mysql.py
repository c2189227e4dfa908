"""
MySQL pool: pymysql connections pooled by DBUtils PooledDB.

Eager: the minimum number of connections is opened while the pool is built,
so an unreachable server fails construction.
"""

import logging

import pymysql
from dbutils.pooled_db import PooledDB

from tdf_config.core.exceptions import PoolConstructionError
from tdf_config.models import DataSourceConfig

from .url import mysql_connect_kwargs, redact_url

_log = logging.getLogger(__name__)


def build_mysql_pool(config: DataSourceConfig) -> PooledDB:
    """Build a PooledDB for *config*. Malformed URL -> InvalidConfiguration."""
    kwargs = mysql_connect_kwargs(config.url)
    kwargs.setdefault("connect_timeout", config.connect_timeout)
    try:
        pool = PooledDB(
            creator=pymysql,
            mincached=config.min_pool_size,
            maxcached=config.max_pool_size,
            maxconnections=config.max_pool_size,
            blocking=True,
            **kwargs,
        )
    except pymysql.MySQLError as e:
        raise PoolConstructionError(
            f"Could not build MySQL pool for {redact_url(config.url)}: {e}"
        ) from e
    _log.info(
        "MySQL pool ready url=%s min=%d max=%d",
        redact_url(config.url),
        config.min_pool_size,
        config.max_pool_size,
    )
    return pool
