"""Configuration module: constants, networks, settings and compatibility."""

from orca_shared.config.compatibility import compatibility_headers, is_compatible
from orca_shared.config.constants import (
    API_VERSION,
    AUTH_COOKIE_NAME,
    COMPATIBILITY_CHECK,
    COMPATIBILITY_CHECK_HEADER,
)
from orca_shared.config.networks import (
    NETWORKS,
    TOKEN_ICONS,
    get_network,
    get_network_by_blockchain,
    get_token_icon,
)
from orca_shared.config.settings import ApiConfig, OrcaSettings

__all__ = [
    "API_VERSION",
    "AUTH_COOKIE_NAME",
    "COMPATIBILITY_CHECK",
    "COMPATIBILITY_CHECK_HEADER",
    "NETWORKS",
    "TOKEN_ICONS",
    "ApiConfig",
    "OrcaSettings",
    "compatibility_headers",
    "get_network",
    "get_network_by_blockchain",
    "get_token_icon",
    "is_compatible",
]
