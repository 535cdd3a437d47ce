"""Shared utilities for time parsing and date conversion."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigError, MalformedResponse

API_DATE_FORMAT = "%Y-%m-%d"
ROLLOVER_FORMAT = "%H:%M"


def parse_rollover_time(value: str) -> time:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("Rollover time must be a non-empty string.")
    try:
        return datetime.strptime(value.strip(), ROLLOVER_FORMAT).time()
    except ValueError as exc:
        raise ConfigError(f"Rollover time {value!r} is not in HH:MM format.") from exc


def load_timezone(name: str | None) -> ZoneInfo | None:
    if name is None or not name.strip():
        return None
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone {name!r}.") from exc


def local_clock(tz: ZoneInfo | None = None) -> Callable[[], datetime]:
    """Return a callable producing the current naive wall-clock time."""

    def now() -> datetime:
        if tz is None:
            return datetime.now()
        return datetime.now(tz).replace(tzinfo=None)

    return now


def format_api_date(value: date) -> str:
    return value.strftime(API_DATE_FORMAT)


def parse_api_date(raw: Any) -> date:
    """Convert the source's ``{"day", "month", "year"}`` object to a date.

    Months are zero-indexed on the wire.
    """
    if not isinstance(raw, dict):
        raise MalformedResponse("Date must be an object.")
    parts: list[int] = []
    for key in ("year", "month", "day"):
        value = raw.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedResponse(f"Date field {key!r} must be an integer.")
        parts.append(value)
    year, month, day = parts
    try:
        return date(year, month + 1, day)
    except (ValueError, OverflowError) as exc:
        raise MalformedResponse(
            f"Date {year:04d}-{month + 1:02d}-{day:02d} is not a valid calendar date."
        ) from exc
