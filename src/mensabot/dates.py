"""Day token parsing and menu date resolution."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta

from .exceptions import InvalidDayArgument
from .models import CorrectionKind, DayToken, Resolution

_RELATIVE_OFFSETS = {
    DayToken.TODAY: 0,
    DayToken.TOMORROW: 1,
    DayToken.DAY_AFTER_TOMORROW: 2,
}

_WEEKDAYS = {
    DayToken.MONDAY: 0,
    DayToken.TUESDAY: 1,
    DayToken.WEDNESDAY: 2,
    DayToken.THURSDAY: 3,
    DayToken.FRIDAY: 4,
}


def parse_day(token: str, now: datetime) -> date:
    """Turn a day token into a date relative to ``now``."""
    try:
        day_token = DayToken(token)
    except ValueError as exc:
        raise InvalidDayArgument(token) from exc
    today = now.date()
    if day_token in _RELATIVE_OFFSETS:
        return today + timedelta(days=_RELATIVE_OFFSETS[day_token])
    return next_weekday(today, _WEEKDAYS[day_token])


def next_weekday(today: date, weekday: int) -> date:
    """Return the first date on or after ``today`` falling on ``weekday``."""
    days_ahead = (weekday - today.weekday()) % 7
    return today + timedelta(days=days_ahead)


def resolve_date(
    requested: date | None,
    now: datetime,
    rollover: time,
    available: Iterable[date],
) -> Resolution:
    """Pick the menu date to show and classify why it moved.

    Without an explicit request the current day is used, moved to the next
    day once ``now`` is past ``rollover``. The first available date on or
    after that baseline wins. A rollover is never reported as a skip.
    """
    correction = CorrectionKind.NONE
    if requested is not None:
        baseline = requested
    else:
        baseline = now.date()
        if now.time() > rollover:
            baseline += timedelta(days=1)
            correction = CorrectionKind.ROLLED_OVER

    selected = next((day for day in sorted(available) if day >= baseline), None)
    if selected is None:
        return Resolution(date=None, correction=correction)
    if selected != baseline and correction is CorrectionKind.NONE:
        correction = CorrectionKind.DAYS_SKIPPED
    return Resolution(date=selected, correction=correction)
