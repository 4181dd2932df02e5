"""Immutable API configuration and its environment-backed settings.

``ApiConfig`` is the value handed to ``OrcaFetcher`` at construction time.
``OrcaSettings`` loads the overridable parts from environment variables with
the ORCA_ prefix, e.g. ORCA_API_BASE_URL=https://wallet.example.com
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

from orca_shared.config.constants import (
    API_VERSION,
    AUTH_COOKIE_NAME,
    COMPATIBILITY_CHECK,
    COMPATIBILITY_CHECK_HEADER,
)
from orca_shared.config.networks import NETWORKS
from orca_shared.models.networks import Network


class ApiConfig(BaseModel):
    """Frozen, process-wide configuration consumed by the HTTP client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = ""  # Empty: URLs passed to the client are absolute
    api_version: str = API_VERSION
    compatibility_check: int = Field(default=COMPATIBILITY_CHECK, ge=0)
    compatibility_header: str = COMPATIBILITY_CHECK_HEADER
    auth_cookie_name: str = AUTH_COOKIE_NAME
    networks: tuple[Network, ...] = NETWORKS

    def api_path(self, path: str) -> str:
        """Return the versioned route for ``path``, e.g. ``/api/v1/wallets``."""
        return f"/api/{self.api_version}/{path.lstrip('/')}"


class OrcaSettings(BaseSettings):
    """Client-side settings validated from environment variables."""

    api_base_url: str = ""
    log_level: str = "INFO"
    compatibility_check: int = Field(default=COMPATIBILITY_CHECK, ge=0)

    model_config = {"env_prefix": "ORCA_"}

    def to_api_config(self) -> ApiConfig:
        return ApiConfig(
            base_url=self.api_base_url,
            compatibility_check=self.compatibility_check,
        )
