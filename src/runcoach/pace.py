"""Pace and duration conversion utilities."""

from collections.abc import Mapping
from typing import Any

# Strings the recording pipeline uses for "not recorded"
UNKNOWN_PACE_VALUES = frozenset({"", "--:--", "0:00", "00:00"})
UNKNOWN_PACE = "--:--"


def parse_pace(text: str | None) -> int | None:
    """
    Convert a pace or duration string to total seconds.

    Two segments are read as ``minutes:seconds`` and three as
    ``hours:minutes:seconds``.

    Args:
        text: Pace string such as "5:05" or "1:02:30"

    Returns:
        Total seconds, or None when the value is a sentinel or unparseable
    """
    if text is None:
        return None
    text = text.strip()
    if text in UNKNOWN_PACE_VALUES:
        return None

    parts = text.split(":")
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None

    values = [int(part) for part in parts]
    if len(values) == 2:
        return values[0] * 60 + values[1]
    if len(values) == 3:
        return values[0] * 3600 + values[1] * 60 + values[2]
    return None


def pace_to_seconds(text: str | None) -> int:
    """
    Convert a pace string to seconds, using 0 for unknown values.

    Callers must treat 0 as "not recorded"; prefer parse_pace() when the
    distinction matters.
    """
    seconds = parse_pace(text)
    return seconds if seconds is not None else 0


def format_pace(seconds: float | None) -> str:
    """
    Format seconds per kilometer as M:SS.

    Args:
        seconds: Pace in seconds per kilometer

    Returns:
        Formatted pace (e.g., "4:41"), or "--:--" when unknown
    """
    if seconds is None or seconds <= 0:
        return UNKNOWN_PACE
    total = round(seconds)
    return f"{total // 60}:{total % 60:02d}"


def format_duration(seconds: float) -> str:
    """Format elapsed seconds as HH:MM:SS."""
    total = max(0, round(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_interval(value: str | Mapping[str, Any] | None) -> str:
    """
    Normalize a stored interval to HH:MM:SS.

    Args:
        value: Interval string, or a mapping with hours/minutes/seconds keys

    Returns:
        Duration string ("00:00:00" when missing)
    """
    if not value:
        return "00:00:00"
    if isinstance(value, str):
        return value
    total = (
        int(value.get("hours") or 0) * 3600
        + int(value.get("minutes") or 0) * 60
        + int(value.get("seconds") or 0)
    )
    return format_duration(total)
