"""Startup helper for services that talk to the API through the shared client."""

from __future__ import annotations

import logging

from orca_shared.config.settings import OrcaSettings
from orca_shared.http.fetcher import OrcaFetcher
from orca_shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_fetcher(settings: OrcaSettings | None = None, **fetcher_kwargs) -> OrcaFetcher:
    """Load settings, configure JSON logging and build a fetcher.

    Raises pydantic's ``ValidationError`` when ORCA_* variables are malformed.
    """
    settings = settings or OrcaSettings()
    configure_logging(settings.log_level)

    config = settings.to_api_config()
    logger.info(
        "API client configured for %s (api %s, compatibility %d)",
        config.base_url or "<relative URLs>",
        config.api_version,
        config.compatibility_check,
    )
    return OrcaFetcher(config, **fetcher_kwargs)
