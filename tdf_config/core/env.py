"""
Environment resolver: get_str, get_int.

Absent variables fall back to the default (or fail when there is none);
explicitly set but unparsable values always fail.
"""

import os

from pydantic import PositiveInt, TypeAdapter, ValidationError

from .exceptions import InvalidConfiguration, MissingConfiguration

_POSITIVE_INT = TypeAdapter(PositiveInt)


def _raw(name: str) -> str | None:
    v = os.environ.get(name)
    if v is None or not v.strip():
        return None
    return v


def get_str(
    name: str,
    default: str | None = None,
    *,
    aliases: tuple[str, ...] = (),
) -> str:
    """
    Return the first non-empty value of *name* or one of *aliases*.

    Raises MissingConfiguration when none is set and no default is given.
    """
    for key in (name, *aliases):
        v = _raw(key)
        if v is not None:
            return v
    if default is None:
        raise MissingConfiguration(name, *aliases)
    return default


def get_int(name: str, default: int) -> int:
    """Return *name* as a positive integer (plain ASCII digits), or *default* when unset."""
    v = _raw(name)
    if v is None:
        return default
    s = v.strip()
    try:
        if not (s.isascii() and s.isdigit()):
            raise ValueError(s)
        return _POSITIVE_INT.validate_python(int(s))
    except (ValueError, ValidationError) as e:
        raise InvalidConfiguration(
            f"{name} must be a positive integer, got {v!r}"
        ) from e
