"""The get-weather tool, backed by WeatherAPI.com."""

import logging

import requests
from pydantic import Field

from api_tool_agent import config
from api_tool_agent.errors import ConfigError

from .base import ToolArgs, ToolHandler, ToolResult, ToolSpec

logger = logging.getLogger(__name__)

WEATHER_TIMEOUT_SECONDS = 10


class WeatherArgs(ToolArgs):
    city: str = Field(min_length=1, description="The name of the city to get the weather for")


def format_weather(data: dict) -> str:
    location, current = data["location"], data["current"]
    return (
        f"Current weather in {location['name']}, {location['country']}:\n"
        f"- Temperature: {current['temp_c']}°C\n"
        f"- Condition: {current['condition']['text']}\n"
        f"- Humidity: {current['humidity']}%\n"
        f"- Wind: {current['wind_kph']} kph"
    )


class WeatherTools(ToolHandler):
    def __init__(self, api_key: str | None = None):
        self.api_key = api_key

    def tool_specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="get-weather",
                description="Fetches current weather information for a specified city using the WeatherAPI.com service",
                args_model=WeatherArgs,
                fn=self.get_weather,
            ),
        ]

    def get_weather(self, args: WeatherArgs) -> ToolResult:
        try:
            api_key = self.api_key or config.get_weather_api_key()
            response = requests.get(
                config.WEATHER_API_URL,
                params={"key": api_key, "q": args.city},
                timeout=WEATHER_TIMEOUT_SECONDS,
            )
            if not response.ok:
                raise ValueError(f"HTTP {response.status_code}: {response.reason}")
            text = format_weather(response.json())
        except (ConfigError, requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.warning("Weather lookup for %r failed: %s", args.city, e)
            return ToolResult.from_text(f"Error fetching weather data for {args.city}: {e}", is_error=True)
        return ToolResult.from_text(text)
