from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from mensabot.dates import next_weekday, parse_day, resolve_date
from mensabot.exceptions import InvalidDayArgument
from mensabot.models import CorrectionKind, DayToken, Resolution

WEDNESDAY = datetime(2024, 1, 3, 10, 0)
MONDAY = datetime(2024, 1, 1, 9, 30)
TUESDAY = datetime(2024, 1, 2, 9, 30)


def test_parse_relative_tokens() -> None:
    assert parse_day("today", WEDNESDAY) == date(2024, 1, 3)
    assert parse_day("tomorrow", WEDNESDAY) == date(2024, 1, 4)
    assert parse_day("dayaftertomorrow", WEDNESDAY) == date(2024, 1, 5)


def test_parse_relative_tokens_ignore_time_of_day() -> None:
    late = WEDNESDAY.replace(hour=23, minute=59)
    for token in (DayToken.TODAY, DayToken.TOMORROW, DayToken.DAY_AFTER_TOMORROW):
        assert parse_day(token, late) == parse_day(token, WEDNESDAY)


@pytest.mark.parametrize(
    ("token", "offset"),
    [(DayToken.TODAY, 0), (DayToken.TOMORROW, 1), (DayToken.DAY_AFTER_TOMORROW, 2)],
)
def test_parse_relative_tokens_ignore_weekday(token: DayToken, offset: int) -> None:
    for days in range(7):
        now = MONDAY + timedelta(days=days)
        assert parse_day(token, now) == now.date() + timedelta(days=offset)


def test_parse_same_weekday_is_today() -> None:
    assert parse_day("monday", MONDAY) == date(2024, 1, 1)


def test_parse_weekday_after_today_wraps_to_next_week() -> None:
    assert parse_day("monday", TUESDAY) == date(2024, 1, 8)
    assert parse_day("monday", TUESDAY) - TUESDAY.date() == timedelta(days=6)


def test_parse_weekday_later_this_week() -> None:
    assert parse_day("friday", WEDNESDAY) == date(2024, 1, 5)


def test_parse_invalid_token() -> None:
    with pytest.raises(InvalidDayArgument) as info:
        parse_day("saturday", WEDNESDAY)
    assert info.value.token == "saturday"
    assert info.value.error_code == "invalid_day_argument"


def test_next_weekday_across_month_boundary() -> None:
    assert next_weekday(date(2024, 1, 31), 0) == date(2024, 2, 5)


def test_resolve_empty_availability() -> None:
    for requested in (None, date(2024, 1, 3)):
        for now in (WEDNESDAY, WEDNESDAY.replace(hour=23)):
            result = resolve_date(requested, now, time(20, 0), [])
            assert result.date is None


def test_resolve_requested_available() -> None:
    day = date(2024, 1, 3)
    result = resolve_date(day, WEDNESDAY, time(20, 0), [day])
    assert result == Resolution(date=day, correction=CorrectionKind.NONE)


def test_resolve_requested_skips_to_next_available() -> None:
    day = date(2024, 1, 3)
    later = day + timedelta(days=3)
    result = resolve_date(day, WEDNESDAY, time(20, 0), [later])
    assert result == Resolution(date=later, correction=CorrectionKind.DAYS_SKIPPED)


def test_resolve_rollover() -> None:
    now = WEDNESDAY.replace(hour=23)
    tomorrow = date(2024, 1, 4)
    result = resolve_date(None, now, time(20, 0), [tomorrow])
    assert result == Resolution(date=tomorrow, correction=CorrectionKind.ROLLED_OVER)


def test_resolve_exactly_at_rollover_keeps_today() -> None:
    now = WEDNESDAY.replace(hour=20, minute=0)
    result = resolve_date(None, now, time(20, 0), [date(2024, 1, 3), date(2024, 1, 4)])
    assert result == Resolution(date=date(2024, 1, 3), correction=CorrectionKind.NONE)


def test_resolve_rollover_takes_precedence_over_skip() -> None:
    now = WEDNESDAY.replace(hour=21)
    monday = date(2024, 1, 8)
    result = resolve_date(None, now, time(20, 0), [monday])
    assert result == Resolution(date=monday, correction=CorrectionKind.ROLLED_OVER)


def test_resolve_rollover_without_data_reports_correction() -> None:
    now = WEDNESDAY.replace(hour=21)
    result = resolve_date(None, now, time(20, 0), [date(2024, 1, 3)])
    assert result == Resolution(date=None, correction=CorrectionKind.ROLLED_OVER)


def test_resolve_sorts_unsorted_availability() -> None:
    available = [date(2024, 1, 10), date(2024, 1, 2), date(2024, 1, 5), date(2024, 1, 5)]
    result = resolve_date(None, WEDNESDAY, time(20, 0), available)
    assert result == Resolution(date=date(2024, 1, 5), correction=CorrectionKind.DAYS_SKIPPED)


def test_resolve_ignores_past_dates() -> None:
    result = resolve_date(date(2024, 1, 3), WEDNESDAY, time(20, 0), [date(2024, 1, 2)])
    assert result.date is None
    assert result.correction is CorrectionKind.NONE
