"""
Package settings and per-backend DataSource configuration.

Values come from the process environment. A local ``.env`` file may populate
the environment first (``load_env_file``); variables already exported win.
"""

import logging
from pathlib import Path
from typing import TypeVar

from dotenv import find_dotenv, load_dotenv
from pydantic import PositiveFloat, PositiveInt, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from tdf_config.models import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_POOL_TIMEOUT,
    BackendKind,
    DataSourceConfig,
)

from .env import get_int, get_str
from .exceptions import InvalidConfiguration

_log = logging.getLogger(__name__)

DB_MAX_POOL_SIZE = 64
DB_MIN_POOL_SIZE = 8
REDIS_POOL_SIZE = 32


_ENV_CONFIG = SettingsConfigDict(
    case_sensitive=True,
    env_ignore_empty=True,
    extra="ignore",
)


class Settings(BaseSettings):
    model_config = _ENV_CONFIG

    # Seconds to wait for pool warm-up and for a free connection
    DATASOURCE_POOL_TIMEOUT: PositiveFloat = DEFAULT_POOL_TIMEOUT
    DATASOURCE_CONNECT_TIMEOUT: PositiveInt = DEFAULT_CONNECT_TIMEOUT


class ProviderSettings(BaseSettings):
    model_config = _ENV_CONFIG

    # Backend of the process-wide DataSource (see tdf_config.provider)
    DATASOURCE_BACKEND: BackendKind | None = None


S = TypeVar("S", bound=BaseSettings)


def _read(cls: type[S]) -> S:
    try:
        return cls()
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e


def get_settings() -> Settings:
    """Read pool timeouts from the environment; invalid values raise InvalidConfiguration."""
    return _read(Settings)


def get_backend() -> BackendKind | None:
    """Backend selected for the process-wide DataSource, or None when unset."""
    return _read(ProviderSettings).DATASOURCE_BACKEND


def load_env_file(path: str | Path | None = None) -> bool:
    """Populate os.environ from a .env file without overriding exported variables."""
    if path is None:
        path = find_dotenv(usecwd=True)
        if not path:
            return False
    loaded = load_dotenv(dotenv_path=path, override=False)
    if loaded:
        _log.debug("Loaded environment from %s", path)
    return loaded


def mysql_config() -> DataSourceConfig:
    settings = get_settings()
    return DataSourceConfig(
        kind=BackendKind.MYSQL,
        url=get_str("MYSQL_URL"),
        min_pool_size=get_int("MYSQL_MIN_POOL_SIZE", DB_MIN_POOL_SIZE),
        max_pool_size=get_int("MYSQL_MAX_POOL_SIZE", DB_MAX_POOL_SIZE),
        pool_timeout=settings.DATASOURCE_POOL_TIMEOUT,
        connect_timeout=settings.DATASOURCE_CONNECT_TIMEOUT,
    )


def postgres_config() -> DataSourceConfig:
    settings = get_settings()
    return DataSourceConfig(
        kind=BackendKind.POSTGRES,
        url=get_str("PG_URL", aliases=("POSTGRESQL_URL",)),
        min_pool_size=get_int("PG_MIN_POOL_SIZE", DB_MIN_POOL_SIZE),
        max_pool_size=get_int("PG_MAX_POOL_SIZE", DB_MAX_POOL_SIZE),
        pool_timeout=settings.DATASOURCE_POOL_TIMEOUT,
        connect_timeout=settings.DATASOURCE_CONNECT_TIMEOUT,
    )


def redis_config() -> DataSourceConfig:
    settings = get_settings()
    size = get_int("REDIS_POOL_SIZE", REDIS_POOL_SIZE)
    return DataSourceConfig(
        kind=BackendKind.REDIS,
        url=get_str("REDIS_URL"),
        min_pool_size=1,
        max_pool_size=size,
        pool_timeout=settings.DATASOURCE_POOL_TIMEOUT,
        connect_timeout=settings.DATASOURCE_CONNECT_TIMEOUT,
    )


_LOADERS = {
    BackendKind.MYSQL: mysql_config,
    BackendKind.POSTGRES: postgres_config,
    BackendKind.REDIS: redis_config,
}


def load_datasource_config(kind: BackendKind | str) -> DataSourceConfig:
    """Resolve the DataSourceConfig for *kind* from the environment."""
    try:
        kind = BackendKind(kind)
    except ValueError as e:
        raise InvalidConfiguration(f"Unsupported backend: {kind}") from e
    return _LOADERS[kind]()
