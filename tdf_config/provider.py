"""
Process-wide DataSource built lazily, exactly once.

The backend is chosen by ``DATASOURCE_BACKEND``. Call sites can take a
``DataSourceProvider`` as a dependency, or use the module-level default
through ``establish_connection`` / ``get_connection``.
"""

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from tdf_config.core.config import get_backend, load_datasource_config, load_env_file
from tdf_config.core.exceptions import MissingConfiguration

from .datasource import DataSource, from_config

_log = logging.getLogger(__name__)


def _datasource_from_settings() -> DataSource:
    load_env_file()
    backend = get_backend()
    if backend is None:
        raise MissingConfiguration("DATASOURCE_BACKEND")
    return from_config(load_datasource_config(backend))


class DataSourceProvider:
    """Builds one DataSource on first get() and returns it ever after."""

    def __init__(self, factory: Callable[[], DataSource] | None = None) -> None:
        self._factory = factory or _datasource_from_settings
        self._datasource: DataSource | None = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._datasource is not None

    def get(self) -> DataSource:
        """Return the shared DataSource (thread-safe double-checked locking).

        A failed build is not remembered; the next call tries again.
        """
        ds = self._datasource
        if ds is not None:
            return ds
        with self._lock:
            if self._datasource is None:
                self._datasource = self._factory()
                _log.info("Process-wide datasource initialised: %r", self._datasource)
            return self._datasource

    @contextmanager
    def connection(self) -> Iterator[Any]:
        with self.get().connection() as conn:
            yield conn

    def reset(self) -> None:
        """Close and forget the DataSource; the next get() builds a new one."""
        with self._lock:
            ds, self._datasource = self._datasource, None
        if ds is not None:
            ds.close()


_provider: DataSourceProvider | None = None
_provider_lock = threading.Lock()


def get_provider() -> DataSourceProvider:
    """Return the default provider (thread-safe double-checked locking)."""
    global _provider
    if _provider is None:
        with _provider_lock:
            if _provider is None:
                _provider = DataSourceProvider()
    return _provider


def establish_connection() -> DataSource:
    return get_provider().get()


@contextmanager
def get_connection() -> Iterator[Any]:
    """Borrow one connection from the process-wide DataSource."""
    with get_provider().connection() as conn:
        yield conn
