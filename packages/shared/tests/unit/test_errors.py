"""Unit tests for the error hierarchy."""

from __future__ import annotations

from orca_shared.errors import (
    ConfigurationError,
    InvalidEnvironmentError,
    MissingEnvironmentError,
    OrcaError,
)


class TestOrcaError:
    def test_default_message(self) -> None:
        err = ConfigurationError()
        assert err.message == "Invalid configuration"
        assert str(err) == "Invalid configuration"
        assert err.details == {}

    def test_custom_message_and_details(self) -> None:
        err = OrcaError("boom", key="value")
        assert err.message == "boom"
        assert err.details == {"key": "value"}

    def test_environment_errors_carry_the_key(self) -> None:
        missing = MissingEnvironmentError("DATABASE_URL")
        invalid = InvalidEnvironmentError("PORT", "number")

        assert missing.details == {"key": "DATABASE_URL"}
        assert invalid.details == {"key": "PORT", "expected": "number"}
        assert isinstance(missing, ConfigurationError)
        assert isinstance(invalid, ConfigurationError)
