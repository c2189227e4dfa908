"""
Redis pool: redis-py BlockingConnectionPool.

Lazy: building the pool opens no socket. The first borrowed connection
connects, so an unreachable server surfaces at first use, not here.
"""

import logging

import redis

from tdf_config.core.exceptions import InvalidConfiguration
from tdf_config.models import DataSourceConfig

from .url import redact_url

_log = logging.getLogger(__name__)


def build_redis_pool(config: DataSourceConfig) -> redis.BlockingConnectionPool:
    """Build a BlockingConnectionPool of max_pool_size connections for *config*."""
    try:
        pool = redis.BlockingConnectionPool.from_url(
            config.url,
            max_connections=config.max_pool_size,
            timeout=config.pool_timeout,
            socket_connect_timeout=config.connect_timeout,
        )
    except ValueError as e:
        raise InvalidConfiguration(f"Malformed Redis URL: {e}") from e
    _log.info(
        "Redis pool ready url=%s max=%d (connects on first use)",
        redact_url(config.url),
        config.max_pool_size,
    )
    return pool
