"""Fetch current weather for the watch's location and describe it.

Weather comes from an OpenWeatherMap-style JSON API. Results are cached and
the lookup is throttled so it runs at most once per update interval.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from watchface.location import Location

__all__ = [
    "WEATHER_UPDATE_INTERVAL",
    "DEFAULT_WEATHER",
    "WeatherData",
    "WeatherProvider",
    "weather_condition_to_string",
    "build_weather_url",
    "parse_weather_response",
    "format_weather_report",
]

_log = logging.getLogger(__name__)

# Thirty minutes, in the same units as the location update interval.
WEATHER_UPDATE_INTERVAL = 30 * 60 * 1000

_CONDITIONS = {
    # 2xx thunderstorm
    200: "thunderstorm & light rain",
    201: "thunderstorm & rain",
    202: "thunderstorm & heavy rain",
    210: "light thunderstorm",
    211: "thunderstorm",
    212: "heavy thunderstorm",
    221: "ragged thunderstorm",
    230: "thunderstorm & light drizzle",
    231: "thunderstorm & drizzle",
    232: "thunderstorm & heavy drizzle",
    # 3xx drizzle
    300: "light drizzle",
    301: "drizzle",
    302: "heavy drizzle",
    310: "light drizzle rain",
    311: "drizzle rain",
    312: "heavy drizzle rain",
    313: "drizzle & rain showers",
    314: "drizzle & heavy rain showers",
    321: "drizzle showers",
    # 5xx rain
    500: "light rain",
    501: "moderate rain",
    502: "heavy rain",
    503: "very heavy rain",
    504: "extreme rain",
    511: "freezing rain",
    520: "light rain showers",
    521: "rain showers",
    522: "heavy rain showers",
    531: "ragged rain showers",
    # 6xx snow
    600: "light snow",
    601: "snow",
    602: "heavy snow",
    611: "sleet",
    612: "light sleet showers",
    613: "sleet showers",
    615: "light rain & snow",
    616: "rain & snow",
    620: "light snow showers",
    621: "snow showers",
    622: "heavy snow showers",
    # 7xx atmosphere
    701: "mist",
    711: "smoke",
    721: "haze",
    731: "sand/dust whirls",
    741: "fog",
    751: "sand",
    761: "dust",
    762: "volcanic ash",
    771: "squalls",
    781: "tornado",
    # 80x clouds
    800: "clear",
    801: "light clouds",
    802: "partly cloudy",
    803: "mostly cloudy",
    804: "cloudy",
}


@dataclass(frozen=True)
class WeatherData:
    """Temperature, condition code and the city the reading is for."""

    temperature: int
    condition_code: int
    city: str = ""


DEFAULT_WEATHER = WeatherData(temperature=22, condition_code=800)


def weather_condition_to_string(code: int) -> str:
    """Return a short description of a weather condition code, or ``unknown``."""
    return _CONDITIONS.get(code, "unknown")


def build_weather_url(base_url: str, lat: float, lon: float, units: str, api_key: str) -> str:
    """Return the query URL for the weather at ``lat``/``lon``."""
    return f"{base_url}?lat={lat:.4f}&lon={lon:.4f}&units={units}&appid={api_key}"


def parse_weather_response(payload: str, city: str) -> WeatherData:
    """Build WeatherData from a weather JSON response.

    The temperature is truncated to a whole number. Raises ValueError for
    malformed JSON, KeyError or IndexError for missing fields.
    """
    response = json.loads(payload)
    if not isinstance(response, dict):
        raise ValueError("weather response is not a JSON object")
    return WeatherData(
        temperature=int(response["main"]["temp"]),
        condition_code=int(response["weather"][0]["id"]),
        city=city,
    )


def format_weather_report(data: WeatherData) -> str:
    """Return the weather screen text; the temperature is taken as Celsius."""
    fahrenheit = data.temperature * 1.8 + 32
    return (
        f"\n\n{data.city:<20},\n{data.temperature}C {fahrenheit:3.0f}F"
        f"\n{weather_condition_to_string(data.condition_code)}"
    )


class _LocationSource(Protocol):
    def get_location(self) -> Location: ...


class WeatherProvider:
    """Cache the current weather and refresh it when it is stale.

    ``fetch`` takes a URL and returns ``(status_code, body)``; it raises
    OSError when no connection can be made. ``clock`` returns the current
    time in the same units as WEATHER_UPDATE_INTERVAL.
    """

    def __init__(
        self,
        fetch: Callable[[str], tuple[int, str]],
        location_provider: _LocationSource,
        clock: Callable[[], float],
        base_url: str,
        api_key: str,
        units: str = "metric",
    ) -> None:
        self._fetch = fetch
        self._location_provider = location_provider
        self._clock = clock
        self.base_url = base_url
        self.api_key = api_key
        self.units = units
        self.current_weather = DEFAULT_WEATHER
        self.last_update = 0.0

    def get_weather(self) -> WeatherData:
        """Return the current weather, refreshing it if the interval has passed.

        Any failure leaves the cached weather in place.
        """
        if self._clock() - self.last_update < WEATHER_UPDATE_INTERVAL:
            return self.current_weather
        location = self._location_provider.get_location()
        url = build_weather_url(self.base_url, location.lat, location.lon, self.units, self.api_key)
        try:
            status, body = self._fetch(url)
        except OSError as error:
            _log.error("weather lookup failed: %s", error)
            return self.current_weather
        if status != 200:
            _log.error("http response %d", status)
            return self.current_weather
        try:
            weather = parse_weather_response(body, location.city)
        except (KeyError, IndexError, ValueError, TypeError) as error:
            _log.error("could not use weather response: %r", error)
            return self.current_weather
        self.current_weather = weather
        self.last_update = self._clock()
        return self.current_weather