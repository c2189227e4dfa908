"""Unit tests for the Redis pool builder. Building is lazy, so no server is needed."""

import pytest
import redis

from tdf_config.core.exceptions import InvalidConfiguration
from tdf_config.models import BackendKind, DataSourceConfig
from tdf_config.pool.redis_pool import build_redis_pool


def _config(url: str = "redis://localhost:6390/0", size: int = 32, **kwargs) -> DataSourceConfig:
    return DataSourceConfig(BackendKind.REDIS, url, 1, size, **kwargs)


def test_build_redis_pool_bounds(clean_env: pytest.MonkeyPatch) -> None:
    pool = build_redis_pool(_config(size=5))
    try:
        assert isinstance(pool, redis.BlockingConnectionPool)
        assert pool.max_connections == 5
        assert pool.timeout == 30.0
        assert pool.connection_kwargs["host"] == "localhost"
        assert pool.connection_kwargs["port"] == 6390
        assert pool.connection_kwargs["db"] == 0
        assert pool.connection_kwargs["socket_connect_timeout"] == 10
    finally:
        pool.disconnect()


def test_build_redis_pool_is_lazy(clean_env: pytest.MonkeyPatch) -> None:
    """Nothing listens on the port; building still succeeds because no socket is opened."""
    pool = build_redis_pool(_config("redis://127.0.0.1:1/0"))
    pool.disconnect()


def test_build_redis_pool_config_timeouts(clean_env: pytest.MonkeyPatch) -> None:
    pool = build_redis_pool(_config(pool_timeout=1.5, connect_timeout=2))
    assert pool.timeout == 1.5
    assert pool.connection_kwargs["socket_connect_timeout"] == 2
    pool.disconnect()


def test_build_redis_pool_malformed_url(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(InvalidConfiguration, match="Redis"):
        build_redis_pool(_config("http://localhost/0"))
