"""
Errors raised while resolving configuration and building pools.

Nothing here is retried or swallowed: every error aborts the construction
path that raised it.
"""


class ConfigurationError(ValueError):
    """Configuration could not be resolved into a usable DataSource."""


class MissingConfiguration(ConfigurationError):
    """A required environment variable is absent or empty."""

    def __init__(self, *names: str) -> None:
        self.names = names
        super().__init__(f"{' or '.join(names)} must be set")


class InvalidConfiguration(ConfigurationError):
    """A value is present but unusable (bad integer, bad URL, bad bounds)."""


class PoolConstructionError(ConnectionError):
    """The pooling library failed to build the pool."""
