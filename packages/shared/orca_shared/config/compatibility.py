"""Compatibility marker helpers.

The marker is an integer version carried in ``ApiConfig.compatibility_header``.
Callers attach it to requests and the server compares it against its own
version; ``OrcaFetcher`` never adds it on its own.
"""

from __future__ import annotations

from orca_shared.config.settings import ApiConfig


def compatibility_headers(config: ApiConfig) -> dict[str, str]:
    """Headers announcing the client's compatibility version."""
    return {config.compatibility_header: str(config.compatibility_check)}


def is_compatible(value: str | None, config: ApiConfig) -> bool:
    """Whether a client-sent marker ``value`` satisfies ``config``.

    A client is compatible when its version is at least the configured one.
    Missing or non-integer markers are never compatible.
    """
    if value is None:
        return False
    try:
        version = int(value.strip())
    except ValueError:
        return False
    return version >= config.compatibility_check
