"""Environment variable accessors used by the services at config-load time."""

from __future__ import annotations

import math
import os

from orca_shared.errors import InvalidEnvironmentError, MissingEnvironmentError


def require_env(key: str) -> str:
    """Return the value of ``key``.

    Raises
    ------
    MissingEnvironmentError
        If the variable is unset or set to an empty string.
    """
    value = os.environ.get(key)
    if not value:
        raise MissingEnvironmentError(key)
    return value


def require_env_number(key: str) -> int | float:
    """Return ``key`` parsed as a number.

    Integral values come back as ``int`` (``"8080"`` -> ``8080``); decimals and
    exponents as ``float``. Surrounding whitespace is ignored. Python-only
    spellings such as ``"1_000"`` and non-finite values are rejected.

    Raises
    ------
    MissingEnvironmentError
        If the variable is unset or empty.
    InvalidEnvironmentError
        If the value is not a finite number.
    """
    value = require_env(key).strip()
    if "_" in value:
        raise InvalidEnvironmentError(key, "number")

    try:
        return int(value)
    except ValueError:
        pass

    try:
        number = float(value)
    except ValueError:
        raise InvalidEnvironmentError(key, "number") from None

    if not math.isfinite(number):
        raise InvalidEnvironmentError(key, "number")
    return number


def optional_env(key: str, default: str) -> str:
    """Return ``key`` or ``default`` when it is unset or empty. Never raises."""
    return os.environ.get(key) or default
