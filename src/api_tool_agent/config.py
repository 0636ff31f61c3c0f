"""Central configuration.

Values come from the environment; a `.env` file in the working directory
(or a parent) is loaded at import time.
"""

import os

from dotenv import load_dotenv

from api_tool_agent.errors import ConfigError
from api_tool_agent.http_client.models import DEFAULT_TIMEOUT_MS

load_dotenv()

WEATHER_API_KEY_ENV = "WEATHERAPI_KEY"
TIMEOUT_ENV = "API_TOOL_TIMEOUT_MS"
LOG_LEVEL_ENV = "API_TOOL_LOG_LEVEL"

WEATHER_API_URL = "http://api.weatherapi.com/v1/current.json"
DEFAULT_LOG_LEVEL = "WARNING"


def require_env(var_name: str) -> str:
    """Return an environment variable, raising ConfigError when missing or empty."""
    value = os.environ.get(var_name)
    if value is None:
        raise ConfigError(f"Required environment variable '{var_name}' is not set.")
    if not value:
        raise ConfigError(f"Environment variable '{var_name}' is empty.")
    return value


def get_weather_api_key() -> str:
    return require_env(WEATHER_API_KEY_ENV)


def get_default_timeout_ms() -> int:
    """Default HTTP timeout in milliseconds, overridable via API_TOOL_TIMEOUT_MS."""
    raw = os.environ.get(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT_MS
    try:
        timeout = int(raw)
    except ValueError as e:
        raise ConfigError(f"{TIMEOUT_ENV} must be an integer, got {raw!r}") from e
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {timeout}")
    return timeout


def get_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
