import json

import pytest

from watchface.location import (
    CITY_MAX_LENGTH,
    DEFAULT_LOCATION,
    LOCATION_UPDATE_INTERVAL,
    Location,
    LocationProvider,
    format_location,
    parse_location_response,
)
from watchface.timezones import posix_tz_for_olson

BRISBANE = json.dumps(
    {
        "status": "success",
        "lat": -27.4649,
        "lon": 153.028,
        "timezone": "Australia/Brisbane",
        "city": "Brisbane",
        "query": "192.0.2.1",
    }
)


class FakeFetch:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def test_parse_brisbane_response():
    location = parse_location_response(BRISBANE)
    assert location.lat == pytest.approx(-27.4649)
    assert location.lon == pytest.approx(153.028)
    assert location.city == "Brisbane"
    assert location.timezone == "AEST-10"


def test_parse_uses_timezone_table():
    payload = json.dumps(
        {"lat": 1, "lon": 2, "timezone": "Europe/London", "city": "London"}
    )
    assert parse_location_response(payload).timezone == posix_tz_for_olson(
        "Europe/London"
    )


def test_parse_truncates_long_city():
    city = "A" * 40
    payload = json.dumps(
        {"lat": 0, "lon": 0, "timezone": "Australia/Brisbane", "city": city}
    )
    parsed = parse_location_response(payload)
    assert len(parsed.city) == CITY_MAX_LENGTH
    assert city.startswith(parsed.city)


def test_parse_unknown_timezone_raises():
    payload = json.dumps(
        {"lat": 0, "lon": 0, "timezone": "Mars/Olympus_Mons", "city": "X"}
    )
    with pytest.raises(KeyError):
        parse_location_response(payload)


def test_parse_missing_field_raises():
    with pytest.raises(KeyError):
        parse_location_response(json.dumps({"lat": 0, "lon": 0}))


def test_parse_malformed_json_raises():
    with pytest.raises(ValueError):
        parse_location_response("not json")


def test_format_default_location():
    assert format_location(DEFAULT_LOCATION) == (
        "\nsuccess\nlat -37.8136\nlon 144.9631\nAEST-10AEDT,M10.1.0,M4.1.0/3"
    )


def test_format_contains_timezone_last():
    location = Location(1.5, -2.25, "UTC0", "Nowhere")
    assert format_location(location).endswith("\nUTC0")


def test_provider_throttles_before_interval():
    fetch = FakeFetch((200, BRISBANE))
    provider = LocationProvider(fetch, FakeClock(LOCATION_UPDATE_INTERVAL - 1))
    assert provider.get_location() == DEFAULT_LOCATION
    assert fetch.calls == 0


def test_provider_fetches_and_caches():
    fetch = FakeFetch((200, BRISBANE))
    clock = FakeClock(LOCATION_UPDATE_INTERVAL)
    provider = LocationProvider(fetch, clock)
    first = provider.get_location()
    assert first == parse_location_response(BRISBANE)
    clock.now += 1
    assert provider.get_location() == first
    assert fetch.calls == 1


def test_provider_refreshes_after_interval():
    other = json.dumps(
        {"lat": 51.5, "lon": -0.1, "timezone": "Europe/London", "city": "London"}
    )
    fetch = FakeFetch((200, BRISBANE), (200, other))
    clock = FakeClock(LOCATION_UPDATE_INTERVAL)
    provider = LocationProvider(fetch, clock)
    provider.get_location()
    clock.now += LOCATION_UPDATE_INTERVAL
    assert provider.get_location().city == "London"
    assert fetch.calls == 2


def test_provider_keeps_location_on_http_error_and_retries():
    fetch = FakeFetch((500, ""), (200, BRISBANE))
    provider = LocationProvider(fetch, FakeClock(LOCATION_UPDATE_INTERVAL))
    assert provider.get_location() == DEFAULT_LOCATION
    assert provider.get_location().city == "Brisbane"
    assert fetch.calls == 2


def test_provider_keeps_location_on_connection_failure():
    fetch = FakeFetch(OSError("no network"))
    provider = LocationProvider(fetch, FakeClock(LOCATION_UPDATE_INTERVAL))
    assert provider.get_location() == DEFAULT_LOCATION
    assert provider.last_update == 0


def test_provider_keeps_location_on_bad_payload():
    bad = json.dumps({"lat": 0, "lon": 0, "city": "X"})
    fetch = FakeFetch((200, bad))
    provider = LocationProvider(fetch, FakeClock(LOCATION_UPDATE_INTERVAL))
    assert provider.get_location() == DEFAULT_LOCATION
    assert provider.current_location == DEFAULT_LOCATION