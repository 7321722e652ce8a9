"""Find the watch's location from an IP geolocation lookup.

The lookup response is a JSON object with ``lat``, ``lon``, ``city`` and
``timezone`` (an Olson zone name) fields. Results are cached and the
lookup is throttled so it runs at most once per update interval.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable

from watchface.timezones import posix_tz_for_olson

__all__ = [
    "CITY_MAX_LENGTH",
    "DEFAULT_LOCATION",
    "LOCATION_UPDATE_INTERVAL",
    "Location",
    "LocationProvider",
    "parse_location_response",
    "format_location",
]

_log = logging.getLogger(__name__)

# Compared directly against the provider's clock readings.
LOCATION_UPDATE_INTERVAL = 5 * 60 * 1000

# Long city names are cut so they fit the screen width.
CITY_MAX_LENGTH = 29


@dataclass(frozen=True)
class Location:
    """A position with its POSIX TZ rule and city name."""

    lat: float
    lon: float
    timezone: str
    city: str


DEFAULT_LOCATION = Location(
    lat=-37.8136,
    lon=144.9631,
    timezone="AEST-10AEDT,M10.1.0,M4.1.0/3",
    city="Melbourne",
)


def parse_location_response(payload: str) -> Location:
    """Build a Location from a geolocation JSON response.

    Raises ValueError for malformed JSON and KeyError for a missing field
    or a time zone name that is not in the zone table.
    """
    response = json.loads(payload)
    if not isinstance(response, dict):
        raise ValueError("location response is not a JSON object")
    olson = response["timezone"]
    return Location(
        lat=float(response["lat"]),
        lon=float(response["lon"]),
        timezone=posix_tz_for_olson(str(olson)),
        city=str(response["city"])[:CITY_MAX_LENGTH],
    )


def format_location(location: Location) -> str:
    """Return the text the location screen shows for ``location``."""
    return (
        f"\nsuccess\nlat {location.lat:.4f}\nlon {location.lon:.4f}"
        f"\n{location.timezone}"
    )


class LocationProvider:
    """Cache the current location and refresh it when it is stale.

    ``fetch`` performs the lookup and returns ``(status_code, body)``; it
    raises OSError when no connection can be made. ``clock`` returns the
    current time in the same units as LOCATION_UPDATE_INTERVAL.
    """

    def __init__(
        self,
        fetch: Callable[[], tuple[int, str]],
        clock: Callable[[], float],
    ) -> None:
        self._fetch = fetch
        self._clock = clock
        self.current_location = DEFAULT_LOCATION
        self.last_update = 0.0

    def get_location(self) -> Location:
        """Return the current location, refreshing it if the interval has passed.

        Any failure leaves the cached location in place.
        """
        if self._clock() - self.last_update < LOCATION_UPDATE_INTERVAL:
            return self.current_location
        try:
            status, body = self._fetch()
        except OSError as error:
            _log.error("location lookup failed: %s", error)
            return self.current_location
        if status != 200:
            _log.error("http error %d", status)
            return self.current_location
        try:
            location = parse_location_response(body)
        except (KeyError, ValueError, TypeError) as error:
            _log.error("could not use location response: %r", error)
            return self.current_location
        self.current_location = location
        self.last_update = self._clock()
        return self.current_location