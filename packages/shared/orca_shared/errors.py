"""Error hierarchy for the shared package.

Only configuration problems are raised as package errors. Transport failures
(``httpx.TransportError``) and decode failures (``json.JSONDecodeError``) from
``OrcaFetcher`` reach the caller unchanged and are not wrapped here.
"""

from __future__ import annotations


class OrcaError(Exception):
    """Base error for all shared-package errors."""

    message: str = "Unexpected error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(OrcaError):
    """Required configuration is missing or malformed. Fatal at startup."""

    message = "Invalid configuration"


class MissingEnvironmentError(ConfigurationError):
    """A required environment variable is unset or empty."""

    message = "Required environment variable is not set"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Environment variable {key} is required", key=key)


class InvalidEnvironmentError(ConfigurationError):
    """An environment variable is set but cannot be parsed as required."""

    message = "Environment variable has an invalid value"

    def __init__(self, key: str, expected: str) -> None:
        self.key = key
        self.expected = expected
        super().__init__(
            f"Environment variable {key} must be a {expected}",
            key=key,
            expected=expected,
        )
