"""Unit tests for health_check and get_version against mocked DataSources."""

from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest

from tdf_config.models import BackendKind
from tdf_config.pool.health import get_version, health_check


def _datasource(kind: BackendKind, conn: MagicMock) -> MagicMock:
    ds = MagicMock()
    ds.kind = kind

    @contextmanager
    def connection():
        yield conn

    ds.connection = connection
    return ds


def _sql_conn(row: tuple = (1,)) -> MagicMock:
    conn = MagicMock()
    conn.cursor.return_value.fetchone.return_value = row
    return conn


@pytest.mark.parametrize("kind", [BackendKind.MYSQL, BackendKind.POSTGRES])
def test_health_check_sql(kind: BackendKind) -> None:
    conn = _sql_conn()
    assert health_check(_datasource(kind, conn)) is True
    conn.cursor.return_value.execute.assert_called_once_with("SELECT 1")
    conn.cursor.return_value.close.assert_called_once()


def test_health_check_sql_failure() -> None:
    """Driver error -> False, cursor still closed."""
    conn = _sql_conn()
    conn.cursor.return_value.execute.side_effect = RuntimeError("server has gone away")
    assert health_check(_datasource(BackendKind.MYSQL, conn)) is False
    conn.cursor.return_value.close.assert_called_once()


def test_health_check_redis() -> None:
    client = MagicMock()
    client.ping.return_value = True
    assert health_check(_datasource(BackendKind.REDIS, client)) is True
    client.ping.assert_called_once()


def test_health_check_redis_failure() -> None:
    client = MagicMock()
    client.ping.side_effect = ConnectionError("Connection refused")
    assert health_check(_datasource(BackendKind.REDIS, client)) is False


def test_get_version_sql() -> None:
    conn = _sql_conn(("8.0.36",))
    assert get_version(_datasource(BackendKind.MYSQL, conn)) == "8.0.36"
    conn.cursor.return_value.execute.assert_called_once_with("SELECT version()")


def test_get_version_redis() -> None:
    client = MagicMock()
    client.info.return_value = {"redis_version": "7.2.4"}
    assert get_version(_datasource(BackendKind.REDIS, client)) == "7.2.4"
    client.info.assert_called_once_with("server")


def test_get_version_propagates_errors() -> None:
    conn = _sql_conn()
    conn.cursor.return_value.execute.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError, match="boom"):
        get_version(_datasource(BackendKind.POSTGRES, conn))
