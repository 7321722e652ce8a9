# watchface

The logic behind a small e-paper smartwatch face, in plain Python with no dependencies outside the standard library.

## Modules

- `watchface.timezones`
  - `fnv_hash(text)` returns the 32-bit FNV-1a hash of a string.
  - `posix_tz_for_olson(olson)` maps an Olson name such as `Australia/Melbourne` to its POSIX TZ rule, here `AEST-10AEDT,M10.1.0,M4.1.0/3`.
  - The table comes from tzdb 2021a. An unknown name raises `KeyError`.
- `watchface.location`
  - `Location` holds `lat`, `lon`, `timezone` and `city`. `DEFAULT_LOCATION` is Melbourne.
  - `parse_location_response(payload)` reads a geolocation JSON reply with `lat`, `lon`, `city` and `timezone` fields.
  - `format_location(location)` returns the text shown on the location screen.
  - `LocationProvider(fetch, clock)` caches the location and refreshes it at most once per `LOCATION_UPDATE_INTERVAL`. On any failure it keeps the cached location.
- `watchface.weather`
  - `WeatherData` holds `temperature`, `condition_code` and `city`. `DEFAULT_WEATHER` is 22 degrees and clear.
  - `weather_condition_to_string(code)` turns a weather code into text, or `"unknown"`.
  - `build_weather_url`, `parse_weather_response` and `format_weather_report` build the request, read the reply and produce the screen text.
  - `WeatherProvider(fetch, location_provider, clock, base_url, api_key, units)` caches the weather and refreshes it at most once per `WEATHER_UPDATE_INTERVAL`.
- `watchface.screens` models button navigation (menu, back, up, down). Each screen's `show()` returns the text it displays, and a `Navigator` holds the current screen and its last rendering.
  - `Screen`
  - `MenuScreen` with `MenuItem` scrolls and highlights one item.
  - `CarouselScreen` with `CarouselItem` wraps at both ends.
  - `SetTimeScreen` edits hour, minute, year, month and day in turn. On commit it sets `result` to a `datetime` that includes a ten-second allowance.
- `watchface.notifications`
  - `parse_notifications(data)` reads lines of the form `source,message;` into at most five `Notification` objects.
  - `count_lines` and `format_notification` are also provided.
- `watchface.timeutil`
  - Weekday helpers: `day_of_week`, `day_name`, `is_leap_year`.
  - `parse_bt_time` parses the phone's `HH:MM:SS DD/MM/YYYY` time string into a `BtTime`.
  - `needs_rtc_update` decides whether the clock has drifted enough to be reset.
  - Display formatters: `format_clock`, `format_date`, `format_step_count`, `format_notification_count`.
  - `battery_level` maps a voltage to an icon level.

## Example

```python
from watchface.timezones import posix_tz_for_olson
from watchface.weather import weather_condition_to_string

posix_tz_for_olson("Europe/London")      # "GMT0BST,M3.5.0/1,M10.5.0"
weather_condition_to_string(804)         # "cloudy"
```

Network access is injected by the caller.

- `LocationProvider` takes a `fetch()` that returns `(status_code, body)`.
- `WeatherProvider` takes a `fetch(url)` with the same result.
- Both take a `clock()`.

A `fetch` that cannot connect should raise `OSError`.

## What it does not do

- It has no HTTP client of its own.
- It does not draw to a display; screens only produce text.
- It does not talk to Bluetooth hardware, so it has no phone link and no firmware updates over the air.
- It has no command-line program.

## Install and test

```
pip install ".[test]"
pytest
```