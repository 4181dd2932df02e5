"""Shared test fixtures for the shared-package test suite."""

from __future__ import annotations

import pytest

from orca_shared.config.settings import ApiConfig
from orca_shared.http.fetcher import OrcaFetcher
from tests.support import BASE_URL, OK_ENVELOPE, RecordingTransport, json_responder


# ---------------------------------------------------------------------------
# Keep ORCA_* variables from the developer's shell out of the tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_orca_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("ORCA_API_BASE_URL", "ORCA_LOG_LEVEL", "ORCA_COMPATIBILITY_CHECK"):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def api_config() -> ApiConfig:
    return ApiConfig(base_url=BASE_URL)


@pytest.fixture
def transport() -> RecordingTransport:
    """Transport answering every request with a successful envelope."""
    return RecordingTransport(json_responder(OK_ENVELOPE))


@pytest.fixture
def fetcher(api_config: ApiConfig, transport: RecordingTransport) -> OrcaFetcher:
    return OrcaFetcher(api_config, transport=transport)
