"""Tests for configuration loading."""

import pytest
from coincheck_sdk import ClientConfig, LogLevel, UsageError


class TestClientConfig:
    """Test ClientConfig.from_env."""

    def test_defaults(self):
        """Test an empty environment gives defaults."""
        config = ClientConfig.from_env({})

        assert config.api_key == ""
        assert config.api_secret == ""
        assert config.base_url == "https://coincheck.com/api"
        assert config.timeout == 30.0
        assert config.log_level == LogLevel.INFO

    def test_credentials(self):
        """Test key and secret come from the environment."""
        config = ClientConfig.from_env(
            {"COINCHECK_API_KEY": "key", "COINCHECK_API_SECRET": "secret"}
        )

        assert config.api_key == "key"
        assert config.api_secret == "secret"

    def test_overrides(self):
        """Test optional overrides."""
        config = ClientConfig.from_env(
            {
                "COINCHECK_BASE_URL": "http://localhost:8080/api",
                "COINCHECK_TIMEOUT": "2.5",
                "COINCHECK_LOG_LEVEL": "DEBUG",
            }
        )

        assert config.base_url == "http://localhost:8080/api"
        assert config.timeout == 2.5
        assert config.log_level == LogLevel.DEBUG

    def test_reads_process_environment(self, monkeypatch):
        """Test os.environ is used when no mapping is given."""
        monkeypatch.setenv("COINCHECK_API_KEY", "from-env")

        assert ClientConfig.from_env().api_key == "from-env"

    @pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
    def test_bad_timeout(self, timeout):
        """Test an invalid timeout is a usage error."""
        with pytest.raises(UsageError, match="COINCHECK_TIMEOUT"):
            ClientConfig.from_env({"COINCHECK_TIMEOUT": timeout})

    def test_bad_log_level(self):
        """Test an unknown log level is a usage error."""
        with pytest.raises(UsageError, match="COINCHECK_LOG_LEVEL"):
            ClientConfig.from_env({"COINCHECK_LOG_LEVEL": "loud"})

    @pytest.mark.parametrize("base_url", ["http://[::1/api", "ftp://coincheck.com/api", "coincheck.com/api"])
    def test_bad_base_url(self, base_url):
        """Test a malformed or non-http base URL is a usage error."""
        with pytest.raises(UsageError, match="COINCHECK_BASE_URL"):
            ClientConfig.from_env({"COINCHECK_BASE_URL": base_url})
