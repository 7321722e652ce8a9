"""Smartwatch face logic: timezones, location, weather, screens, notifications and clock helpers."""

__version__ = "0.1.0"