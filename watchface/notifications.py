"""Parse the notification text sent by the paired phone."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "NOTIFICATION_LIMIT",
    "Notification",
    "parse_notifications",
    "count_lines",
    "format_notification",
]

NOTIFICATION_LIMIT = 5


@dataclass(frozen=True)
class Notification:
    """One notification: the app that sent it and its message text."""

    source: str
    message: str


def parse_notifications(data: str) -> list[Notification]:
    """Split phone notification text into at most NOTIFICATION_LIMIT entries.

    Each line reads ``source,message;...``. The source is the trimmed text
    before the first comma; the message is the text between that comma and
    the first semicolon, and is empty when the semicolon ends the line.
    A line without a comma keeps the previous source and is not counted;
    a line without a semicolon keeps the previous message.
    """
    stored: list[Notification] = []
    sources_seen = 0
    pending = ""
    source = ""
    message = ""
    got_source = False
    got_message = False

    for position, char in enumerate(data):
        if char == "\n":
            got_source = False
            got_message = False
            pending = ""
            stored.append(Notification(source, message))
            if len(stored) > NOTIFICATION_LIMIT:
                break
        if char == "," and not got_source:
            got_source = True
            source = pending.strip()
            pending = ""
            sources_seen += 1
        if char == ";" and not got_message:
            following = data[position + 1 : position + 2]
            message = pending[1:] if following != "\n" and pending else ""
            pending = ""
            got_message = True
        pending += char

    return stored[: min(sources_seen, NOTIFICATION_LIMIT)]


def count_lines(data: str) -> int:
    """Return the number of newline-terminated lines in ``data``."""
    return data.count("\n")


def format_notification(notification: Notification) -> str:
    """Return the display line ``source: message``, trimmed."""
    return f"{notification.source}: {notification.message}".strip()