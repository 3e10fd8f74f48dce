"""
Tests for the Neynar settings.
"""

import pytest
from pydantic import ValidationError

from neynar_sdk.config import DEFAULT_BASE_URL, NeynarSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("NEYNAR_API_KEY", "NEYNAR_BASE_URL", "NEYNAR_TIMEOUT", "NEYNAR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestNeynarSettings:
    """Test NeynarSettings validation and defaults."""

    def test_defaults(self):
        """Test default values."""
        settings = NeynarSettings(_env_file=None)
        assert settings.api_key is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30.0
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        """Test NEYNAR_ environment variables."""
        monkeypatch.setenv("NEYNAR_API_KEY", "env_key")
        monkeypatch.setenv("NEYNAR_BASE_URL", "https://neynar.example.test/")
        monkeypatch.setenv("NEYNAR_TIMEOUT", "12.5")

        settings = get_settings()

        assert settings.api_key == "env_key"
        assert settings.base_url == "https://neynar.example.test"
        assert settings.timeout == 12.5

    def test_reads_env_file(self, tmp_path):
        """Test loading from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("NEYNAR_API_KEY=file_key\nUNRELATED=1\n")

        settings = NeynarSettings(_env_file=env_file)

        assert settings.api_key == "file_key"

    def test_log_level_validation(self):
        """Test log level validation."""
        assert NeynarSettings(log_level="debug").log_level == "DEBUG"

        with pytest.raises(ValidationError, match="Log level must be one of"):
            NeynarSettings(log_level="LOUD")

    def test_base_url_validation(self):
        with pytest.raises(ValidationError, match="must start with http"):
            NeynarSettings(base_url="api.neynar.com")

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_validation(self, timeout):
        with pytest.raises(ValidationError, match="must be positive"):
            NeynarSettings(timeout=timeout)
