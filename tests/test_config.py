import pytest

from api_tool_agent import config
from api_tool_agent.errors import ConfigError


class TestRequireEnv:
    def test_returns_value(self, monkeypatch):
        monkeypatch.setenv("SOME_VAR", "x")
        assert config.require_env("SOME_VAR") == "x"

    def test_missing(self, monkeypatch):
        monkeypatch.delenv("SOME_VAR", raising=False)
        with pytest.raises(ConfigError, match="not set"):
            config.require_env("SOME_VAR")

    def test_empty(self, monkeypatch):
        monkeypatch.setenv("SOME_VAR", "")
        with pytest.raises(ConfigError, match="empty"):
            config.require_env("SOME_VAR")


class TestTimeout:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("API_TOOL_TIMEOUT_MS", raising=False)
        assert config.get_default_timeout_ms() == 30000

    def test_override(self, monkeypatch):
        monkeypatch.setenv("API_TOOL_TIMEOUT_MS", "5000")
        assert config.get_default_timeout_ms() == 5000

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_invalid(self, monkeypatch, value):
        monkeypatch.setenv("API_TOOL_TIMEOUT_MS", value)
        with pytest.raises(ConfigError):
            config.get_default_timeout_ms()


class TestLogLevel:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("API_TOOL_LOG_LEVEL", raising=False)
        assert config.get_log_level() == "WARNING"

    def test_override_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("API_TOOL_LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"
