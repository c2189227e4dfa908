"""
Pool builders for MySQL (DBUtils + pymysql), PostgreSQL (psycopg_pool) and Redis (redis-py).
"""

from .health import get_version, health_check
from .mysql import build_mysql_pool
from .postgres import build_postgres_pool
from .redis_pool import build_redis_pool

__all__ = [
    "build_mysql_pool",
    "build_postgres_pool",
    "build_redis_pool",
    "health_check",
    "get_version",
]
