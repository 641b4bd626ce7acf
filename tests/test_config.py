"""Settings tests."""

import pytest
from pydantic import ValidationError

from enumerations.catalogs.log_level import LogLevelID
from enumerations.core.config import Settings


class TestSettings:
    """Test settings loading and log level decoding."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_DIR", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == LogLevelID("INFO")
        assert settings.log_dir == "logs"
        assert settings.api_port == 8000

    def test_log_level_is_canonicalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.loguru_level == "DEBUG"

    def test_log_level_mapped_to_loguru(self):
        assert Settings(_env_file=None, log_level="warn").loguru_level == "WARNING"
        assert Settings(_env_file=None, log_level="FATAL").loguru_level == "CRITICAL"

    def test_unknown_log_level_fails_fast(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_invalid_captures_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_INVALID_CAPTURES", "false")
        assert Settings(_env_file=None).log_invalid_captures is False
