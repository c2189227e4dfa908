"""
DataSource objects: a resolved URL paired with the pool built for it.

Each backend has its own class; ``DataSource`` is the closed union of them.
``get_pool`` always hands back the pool built at construction.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

import redis
from dbutils.pooled_db import PooledDB
from psycopg_pool import ConnectionPool

from tdf_config.core.config import (
    load_datasource_config,
    load_env_file,
    mysql_config,
    postgres_config,
    redis_config,
)
from tdf_config.models import BackendKind, DataSourceConfig
from tdf_config.pool.mysql import build_mysql_pool
from tdf_config.pool.postgres import build_postgres_pool
from tdf_config.pool.redis_pool import build_redis_pool
from tdf_config.pool.url import redact_url

_log = logging.getLogger(__name__)

P = TypeVar("P")


class _PooledDataSource(Generic[P]):
    kind: BackendKind

    def __init__(self, url: str, pool: P) -> None:
        self._url = url
        self._pool = pool

    def get_url(self) -> str:
        return self._url

    def get_pool(self) -> P:
        """Return the pool built at construction (never a new one)."""
        return self._pool

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={redact_url(self._url)!r})"


class MysqlDataSource(_PooledDataSource[PooledDB]):
    kind = BackendKind.MYSQL

    @classmethod
    def from_config(cls, config: DataSourceConfig) -> "MysqlDataSource":
        return cls(config.url, build_mysql_pool(config))

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """Borrow a pymysql connection; it goes back to the pool on exit."""
        conn = self._pool.connection()
        try:
            yield conn
        finally:
            conn.close()

    def close(self) -> None:
        self._pool.close()


class PostgresDataSource(_PooledDataSource[ConnectionPool]):
    kind = BackendKind.POSTGRES

    @classmethod
    def from_config(cls, config: DataSourceConfig) -> "PostgresDataSource":
        return cls(config.url, build_postgres_pool(config))

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """Borrow a psycopg connection; it goes back to the pool on exit."""
        with self._pool.connection() as conn:
            yield conn

    def close(self) -> None:
        self._pool.close()


class RedisDataSource(_PooledDataSource[redis.BlockingConnectionPool]):
    kind = BackendKind.REDIS

    @classmethod
    def from_config(cls, config: DataSourceConfig) -> "RedisDataSource":
        return cls(config.url, build_redis_pool(config))

    @contextmanager
    def connection(self) -> Iterator[redis.Redis]:
        """Yield a client bound to the shared pool; each command borrows a connection."""
        yield redis.Redis(connection_pool=self._pool)

    def close(self) -> None:
        self._pool.disconnect()


DataSource = MysqlDataSource | PostgresDataSource | RedisDataSource

_CLASSES: dict[BackendKind, type[DataSource]] = {
    BackendKind.MYSQL: MysqlDataSource,
    BackendKind.POSTGRES: PostgresDataSource,
    BackendKind.REDIS: RedisDataSource,
}


def from_config(config: DataSourceConfig) -> DataSource:
    """Build the DataSource for an explicit config (no environment reads)."""
    return _CLASSES[config.kind].from_config(config)


def mysql_connection() -> MysqlDataSource:
    load_env_file()
    return MysqlDataSource.from_config(mysql_config())


def postgres_connection() -> PostgresDataSource:
    load_env_file()
    return PostgresDataSource.from_config(postgres_config())


def redis_connection() -> RedisDataSource:
    load_env_file()
    return RedisDataSource.from_config(redis_config())


def build_datasource(kind: BackendKind | str) -> DataSource:
    """Resolve config for *kind* from the environment and build its DataSource."""
    load_env_file()
    config = load_datasource_config(kind)
    _log.debug("Building %s datasource", config.kind.value)
    return from_config(config)
