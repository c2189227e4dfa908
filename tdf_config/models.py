"""
Backend kinds and the resolved per-backend configuration.
"""

from dataclasses import dataclass
from enum import Enum

from tdf_config.core.exceptions import InvalidConfiguration

DEFAULT_POOL_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10


class BackendKind(str, Enum):
    MYSQL = "mysql"
    POSTGRES = "postgres"
    REDIS = "redis"


@dataclass(frozen=True)
class DataSourceConfig:
    """URL, pool bounds and timeouts for one backend. Bounds: max >= min >= 1."""

    kind: BackendKind
    url: str
    min_pool_size: int
    max_pool_size: int
    # Seconds to wait for pool warm-up and for a free connection
    pool_timeout: float = DEFAULT_POOL_TIMEOUT
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.url or not self.url.strip():
            raise InvalidConfiguration(f"{self.kind.value} url must not be empty")
        if self.min_pool_size < 1:
            raise InvalidConfiguration(
                f"{self.kind.value} min_pool_size must be >= 1, got {self.min_pool_size}"
            )
        if self.max_pool_size < self.min_pool_size:
            raise InvalidConfiguration(
                f"{self.kind.value} max_pool_size ({self.max_pool_size}) must be >= "
                f"min_pool_size ({self.min_pool_size})"
            )
        if self.pool_timeout <= 0 or self.connect_timeout <= 0:
            raise InvalidConfiguration(
                f"{self.kind.value} timeouts must be positive, got "
                f"pool_timeout={self.pool_timeout} connect_timeout={self.connect_timeout}"
            )
