"""
Unit tests for application settings and Logfire setup (Subtask 4.2).

Tests verify that settings honour environment overrides and that
observability is configured from them.
"""

import logging

from src.core.config import Settings
from src.core.observability import configure_observability


class TestSettings:
    """Test suite for application settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.logfire_service_name == "genesis"
        assert settings.log_level == "INFO"
        assert settings.is_production is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOGFIRE_SERVICE_NAME", "genesis-worker")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        settings = Settings(_env_file=None)

        assert settings.is_production is True
        assert settings.logfire_service_name == "genesis-worker"
        assert settings.log_level == "WARNING"


class TestLogfireConfiguration:
    """Test suite for configure_observability."""

    def test_logfire_configure_called(self, mocker):
        mock_logfire = mocker.patch("src.core.observability.logfire")
        settings = Settings(_env_file=None, logfire_environment="testing", log_level="DEBUG")

        configure_observability(settings)

        assert mock_logfire.configure.called
        call_kwargs = mock_logfire.configure.call_args[1]
        assert call_kwargs["service_name"] == "genesis"
        assert call_kwargs["environment"] == "testing"
        assert call_kwargs["token"] is None
        assert call_kwargs["send_to_logfire"] == "if-token-present"
        assert call_kwargs["console"] is False
        assert logging.getLogger("genesis").level == logging.DEBUG

    def test_token_forwarded(self, mocker):
        mock_logfire = mocker.patch("src.core.observability.logfire")

        configure_observability(Settings(_env_file=None, logfire_token="secret"))

        assert mock_logfire.configure.call_args[1]["token"] == "secret"
