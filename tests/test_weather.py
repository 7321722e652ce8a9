import json

import pytest

from watchface.location import DEFAULT_LOCATION, Location
from watchface.weather import (
    DEFAULT_WEATHER,
    WEATHER_UPDATE_INTERVAL,
    WeatherData,
    WeatherProvider,
    build_weather_url,
    format_weather_report,
    parse_weather_response,
    weather_condition_to_string,
)

SAMPLE = json.dumps(
    {
        "weather": [{"id": 804, "main": "Clouds"}],
        "main": {"temp": 11.76, "humidity": 83},
        "name": "Collingwood",
    }
)


class _FixedLocation:
    def __init__(self, location):
        self.location = location

    def get_location(self):
        return self.location


def test_known_conditions():
    assert weather_condition_to_string(804) == "cloudy"
    assert weather_condition_to_string(200) == "thunderstorm & light rain"
    assert weather_condition_to_string(731) == "sand/dust whirls"


def test_unknown_condition():
    assert weather_condition_to_string(999) == "unknown"
    assert weather_condition_to_string(0) == "unknown"


def test_build_url():
    url = build_weather_url("https://api.example.com/weather", -37.8136, 144.9631, "metric", "placeholder")
    assert url == "https://api.example.com/weather?lat=-37.8136&lon=144.9631&units=metric&appid=placeholder"


def test_parse_response_truncates_temperature():
    data = parse_weather_response(SAMPLE, "Melbourne")
    assert data == WeatherData(temperature=11, condition_code=804, city="Melbourne")


def test_parse_missing_field():
    with pytest.raises(KeyError):
        parse_weather_response(json.dumps({"weather": [{"id": 800}]}), "x")


def test_parse_bad_json():
    with pytest.raises(ValueError):
        parse_weather_response("not json", "x")


def test_format_report():
    text = format_weather_report(WeatherData(22, 800, "Melbourne"))
    lines = text.split("\n")
    assert lines[2] == "Melbourne".ljust(20) + ","
    assert lines[3].startswith("22C ")
    assert lines[-1] == "clear"


def _provider(fetch, now, location=DEFAULT_LOCATION):
    return WeatherProvider(
        fetch, _FixedLocation(location), lambda: now, "https://api.example.com/weather", "placeholder"
    )


def test_throttled_returns_cached():
    calls = []
    provider = _provider(lambda url: calls.append(url) or (200, SAMPLE), 0)
    assert provider.get_weather() == DEFAULT_WEATHER
    assert calls == []


def test_refresh_uses_location_and_updates():
    calls = []
    loc = Location(1.5, 2.25, "UTC0", "Testville")

    def fetch(url):
        calls.append(url)
        return 200, SAMPLE

    provider = _provider(fetch, WEATHER_UPDATE_INTERVAL + 1, loc)
    weather = provider.get_weather()
    assert weather.city == "Testville"
    assert weather.condition_code == 804
    assert calls == [build_weather_url("https://api.example.com/weather", 1.5, 2.25, "metric", "placeholder")]
    assert provider.last_update == WEATHER_UPDATE_INTERVAL + 1


def test_http_error_keeps_cache():
    provider = _provider(lambda url: (500, ""), WEATHER_UPDATE_INTERVAL)
    assert provider.get_weather() == DEFAULT_WEATHER


def test_connection_error_keeps_cache():
    def fetch(url):
        raise OSError("no network")

    provider = _provider(fetch, WEATHER_UPDATE_INTERVAL)
    assert provider.get_weather() == DEFAULT_WEATHER
    assert provider.last_update == 0.0