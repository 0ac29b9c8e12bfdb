"""Test configuration and logging setup."""
import json
import pytest
import structlog
from pydantic import ValidationError
from currency_input.config import Settings
from currency_input.utils.logging import get_logger, setup_logging


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CURRENCY_INPUT_DEFAULT_CURRENCY", raising=False)
        monkeypatch.delenv("CURRENCY_INPUT_LOG_LEVEL", raising=False)
        settings = Settings()
        assert settings.default_currency == "USD"
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CURRENCY_INPUT_DEFAULT_CURRENCY", "GBP")
        monkeypatch.setenv("CURRENCY_INPUT_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.default_currency == "GBP"
        assert settings.log_level == "DEBUG"

    def test_unsupported_default_rejected(self):
        with pytest.raises(ValidationError):
            Settings(default_currency="JPY")


class TestLogging:
    def test_json_output(self, capsys, reset_structlog):
        setup_logging("INFO")
        get_logger("test").info("currency_field_blurred", currency="USD")
        line = capsys.readouterr().out.strip()
        event = json.loads(line)
        assert event["event"] == "currency_field_blurred"
        assert event["currency"] == "USD"
        assert event["level"] == "info"

    def test_level_filtering(self, capsys, reset_structlog):
        setup_logging("WARNING")
        get_logger("test").debug("currency_field_focused")
        assert capsys.readouterr().out == ""
