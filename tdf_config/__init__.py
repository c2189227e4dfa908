"""
Environment-driven connection pools for MySQL, PostgreSQL and Redis.
"""

from .core.exceptions import (
    ConfigurationError,
    InvalidConfiguration,
    MissingConfiguration,
    PoolConstructionError,
)
from .datasource import (
    DataSource,
    MysqlDataSource,
    PostgresDataSource,
    RedisDataSource,
    build_datasource,
    from_config,
    mysql_connection,
    postgres_connection,
    redis_connection,
)
from .models import BackendKind, DataSourceConfig
from .provider import (
    DataSourceProvider,
    establish_connection,
    get_connection,
    get_provider,
)

__all__ = [
    "BackendKind",
    "DataSourceConfig",
    "DataSource",
    "MysqlDataSource",
    "PostgresDataSource",
    "RedisDataSource",
    "from_config",
    "build_datasource",
    "mysql_connection",
    "postgres_connection",
    "redis_connection",
    "DataSourceProvider",
    "get_provider",
    "establish_connection",
    "get_connection",
    "ConfigurationError",
    "MissingConfiguration",
    "InvalidConfiguration",
    "PoolConstructionError",
]
