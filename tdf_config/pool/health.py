"""
Connection health check and server version lookup for DataSources.
"""

import logging
from typing import Any

from tdf_config.models import BackendKind

_log = logging.getLogger(__name__)


def health_check(datasource: Any) -> bool:
    """
    Borrow a connection and run SELECT 1 (MySQL, PostgreSQL) or PING (Redis).
    Returns True if no exception.
    """
    try:
        with datasource.connection() as conn:
            if datasource.kind == BackendKind.REDIS:
                return bool(conn.ping())
            cur = conn.cursor()
            try:
                cur.execute("SELECT 1")
                cur.fetchone()
            finally:
                cur.close()
        return True
    except Exception as e:
        _log.debug("Health check failed for %r: %s", datasource, e)
        return False


def get_version(datasource: Any) -> str:
    """Return the server version string. Driver errors propagate."""
    with datasource.connection() as conn:
        if datasource.kind == BackendKind.REDIS:
            return str(conn.info("server")["redis_version"])
        cur = conn.cursor()
        try:
            cur.execute("SELECT version()")
            row = cur.fetchone()
        finally:
            cur.close()
    return str(row[0])
