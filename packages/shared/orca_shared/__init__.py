"""Shared contracts and typed HTTP client for the Orca wallet services."""

from orca_shared.config.settings import ApiConfig, OrcaSettings
from orca_shared.errors import (
    ConfigurationError,
    InvalidEnvironmentError,
    MissingEnvironmentError,
    OrcaError,
)
from orca_shared.http.fetcher import OrcaFetcher
from orca_shared.http.types import UNSET, RawEnvelope
from orca_shared.models.responses import ResponseBody

__all__ = [
    "ApiConfig",
    "ConfigurationError",
    "InvalidEnvironmentError",
    "MissingEnvironmentError",
    "OrcaError",
    "OrcaFetcher",
    "OrcaSettings",
    "RawEnvelope",
    "ResponseBody",
    "UNSET",
]
