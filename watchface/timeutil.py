"""Date, time and status helpers for the main watch face.

Covers the weekday calculation, the time string received from the paired
phone, and the formatting of the clock, date, step and notification fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "DAYLIGHT_SAVINGS_OFFSET",
    "MAX_MINUTE_DRIFT",
    "BtTime",
    "is_leap_year",
    "day_of_week",
    "day_name",
    "parse_bt_time",
    "needs_rtc_update",
    "format_clock",
    "format_date",
    "format_step_count",
    "format_notification_count",
    "battery_level",
]

# Hours added to the time received from the phone.
DAYLIGHT_SAVINGS_OFFSET = 0
# Minutes the clock may drift before it is reset from the phone's time.
MAX_MINUTE_DRIFT = 2

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
# Days before the first of each month in a common year.
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)

_BT_TIME_LENGTH = 19


@dataclass(frozen=True)
class BtTime:
    """A time received from the phone; ``year`` counts from 1900."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a leap year; years up to 0 never are."""
    return year > 0 and year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the weekday index (as used by ``day_name``) of a date.

    Raises ValueError for a month outside 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    days = year * 365
    days += sum(1 for leap_candidate in range(4, year, 4) if is_leap_year(leap_candidate))
    days += _DAYS_BEFORE_MONTH[month - 1] + day
    if month > 2 and is_leap_year(year):
        days += 1
    return days % 7


def day_name(index: int) -> str:
    """Return the weekday name for an index 0..6, or ``NAN`` otherwise."""
    if 0 <= index < len(_DAY_NAMES):
        return _DAY_NAMES[index]
    return "NAN"


def _field(text: str, start: int, end: int) -> int:
    chunk = text[start:end]
    if not chunk.isdigit():
        raise ValueError(f"not a number at {start}:{end} in {text!r}")
    return int(chunk)


def parse_bt_time(text: str) -> BtTime:
    """Parse the phone's ``HH:MM:SS DD/MM/YYYY`` time string.

    Raises ValueError when the text is too short or a field is not numeric.
    """
    if len(text) < _BT_TIME_LENGTH:
        raise ValueError(f"time string too short: {text!r}")
    return BtTime(
        year=_field(text, 15, 19) - 1900,
        month=_field(text, 12, 14),
        day=_field(text, 9, 11),
        hour=_field(text, 0, 2) + DAYLIGHT_SAVINGS_OFFSET,
        minute=_field(text, 3, 5),
        second=_field(text, 6, 8),
    )


def needs_rtc_update(current_hour: int, current_minute: int, received: BtTime) -> bool:
    """Return whether the clock should be reset to the received time."""
    if current_hour != received.hour:
        return True
    return abs(current_minute - received.minute) >= MAX_MINUTE_DRIFT


def format_clock(hour: int, minute: int) -> str:
    """Return ``HH:MM`` with both fields zero padded."""
    return f"{hour:02d}:{minute:02d}"


def format_date(weekday_index: int, day: int, month: int) -> str:
    """Return ``Www, DD, Mmm`` for a weekday index, day of month and month 1..12.

    Raises ValueError for a month outside 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    return f"{day_name(weekday_index)[:3]}, {day:02d}, {_MONTH_ABBREVIATIONS[month - 1]}"


def format_step_count(steps: int) -> str:
    """Return the step count padded with zeros to at least five digits."""
    if steps < 0:
        raise ValueError(f"step count cannot be negative: {steps}")
    return f"{steps:05d}"


def format_notification_count(count: int) -> str:
    """Return the notification count, with a leading zero below ten."""
    return f"0{count}" if count < 10 else str(count)


def battery_level(voltage: float) -> Optional[int]:
    """Return the battery icon level 1..4 for a voltage.

    Voltages just above 3.70 and up to 3.71 select no icon and give None.
    """
    if voltage > 4.1:
        return 4
    if voltage > 3.95:
        return 3
    if voltage > 3.71:
        return 2
    if voltage <= 3.70:
        return 1
    return None