from unittest.mock import patch

import requests

from api_tool_agent.tools.weather import WeatherTools

GET = "api_tool_agent.tools.weather.requests.get"

WEATHER = {
    "location": {"name": "London", "country": "United Kingdom"},
    "current": {
        "temp_c": 15.0,
        "condition": {"text": "Partly cloudy"},
        "humidity": 72,
        "wind_kph": 11.2,
    },
}


class TestGetWeather:
    @patch(GET)
    def test_formats_current_weather(self, mock_get, make_response):
        mock_get.return_value = make_response(200, WEATHER)

        result = WeatherTools(api_key="k").handle("get-weather", {"city": "London"})

        assert result.is_error is False
        assert result.text.startswith("Current weather in London, United Kingdom:")
        assert "- Temperature: 15.0°C" in result.text
        assert "- Condition: Partly cloudy" in result.text
        assert "- Humidity: 72%" in result.text
        assert "- Wind: 11.2 kph" in result.text
        assert mock_get.call_args[1]["params"] == {"key": "k", "q": "London"}

    @patch(GET)
    def test_http_error(self, mock_get, make_response):
        mock_get.return_value = make_response(400, {"error": {"message": "No matching location"}}, reason="Bad Request")

        result = WeatherTools(api_key="k").handle("get-weather", {"city": "Nowhere"})

        assert result.is_error is True
        assert result.text == "Error fetching weather data for Nowhere: HTTP 400: Bad Request"

    @patch(GET, side_effect=requests.ConnectionError("offline"))
    def test_network_error(self, mock_get):
        result = WeatherTools(api_key="k").handle("get-weather", {"city": "Paris"})
        assert result.is_error is True
        assert "offline" in result.text

    @patch(GET)
    def test_missing_api_key(self, mock_get, monkeypatch):
        monkeypatch.delenv("WEATHERAPI_KEY", raising=False)

        result = WeatherTools().handle("get-weather", {"city": "Paris"})

        assert result.is_error is True
        assert "WEATHERAPI_KEY" in result.text
        mock_get.assert_not_called()

    @patch(GET)
    def test_unexpected_payload(self, mock_get, make_response):
        mock_get.return_value = make_response(200, {"unexpected": True})
        result = WeatherTools(api_key="k").handle("get-weather", {"city": "Paris"})
        assert result.is_error is True
