from collections.abc import Iterator
from pathlib import Path

import pytest

from tdf_config import provider

DATASOURCE_ENV = (
    "MYSQL_URL",
    "MYSQL_MAX_POOL_SIZE",
    "MYSQL_MIN_POOL_SIZE",
    "PG_URL",
    "POSTGRESQL_URL",
    "PG_MAX_POOL_SIZE",
    "PG_MIN_POOL_SIZE",
    "REDIS_URL",
    "REDIS_POOL_SIZE",
    "DATASOURCE_BACKEND",
    "DATASOURCE_POOL_TIMEOUT",
    "DATASOURCE_CONNECT_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[pytest.MonkeyPatch]:
    """Start from an environment without datasource variables and no .env in reach."""
    for name in DATASOURCE_ENV:
        # setenv first so teardown also removes values a test loads from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield monkeypatch


@pytest.fixture(autouse=True)
def _reset_default_provider() -> Iterator[None]:
    provider._provider = None
    yield
    provider._provider = None
