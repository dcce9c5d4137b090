"""Unit tests for utilkit.date_utils.

Dates are built from naive strings so results do not depend on the machine's
time zone; epoch-millisecond inputs are compared against
``datetime.fromtimestamp`` for the same reason.
"""

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from utilkit import date_utils as d

# pylint: disable=magic-value-comparison

FRIDAY = "2024-03-15"
INVALID = ["not a date", None, [2024, 3, 15], True, math.nan, "2024-02-30"]


def _close_to_now(value: datetime) -> bool:
    return abs(datetime.now() - value) < timedelta(seconds=5)


# ============================================================================
#                               Coercion
# ============================================================================


def test_to_date_accepts_supported_inputs():
    assert d.to_date(FRIDAY) == datetime(2024, 3, 15)
    assert d.to_date("2024-03-15T08:30:00") == datetime(2024, 3, 15, 8, 30)
    assert d.to_date(date(2024, 3, 15)) == datetime(2024, 3, 15)
    naive = datetime(2024, 3, 15, 8, 30)
    assert d.to_date(naive) == naive


def test_to_date_epoch_milliseconds_are_local():
    assert d.to_date(0) == datetime.fromtimestamp(0)
    assert d.to_date(1_500.0) == datetime.fromtimestamp(1.5)


def test_to_date_aware_values_become_local_naive():
    aware = datetime(2024, 3, 15, 12, tzinfo=timezone.utc)
    result = d.to_date(aware)
    assert result.tzinfo is None
    assert result == aware.astimezone().replace(tzinfo=None)


@pytest.mark.parametrize("value", INVALID + [10**20])
def test_to_date_invalid_returns_none(value):
    assert d.to_date(value) is None


@pytest.mark.parametrize("text", ["2024-03-15 10:00 +2500", "2024-03-15 10:00 -2400"])
def test_to_date_out_of_range_offset_is_invalid(text):
    assert d.to_date(text) is None
    assert d.format(text) == ""
    assert d.diff(text, FRIDAY) == 0
    assert not d.is_weekend(text)
    assert _close_to_now(d.add(text, 1))


def test_to_date_aware_value_at_calendar_edge_is_invalid():
    edge = datetime.min.replace(tzinfo=timezone(timedelta(hours=14)))
    assert d.to_date(edge) is None
    assert d.get_quarter(edge) == 0


def test_is_valid_date():
    assert d.is_valid_date(datetime(2024, 1, 1))
    assert not d.is_valid_date("2024-01-01")
    assert not d.is_valid_date(date(2024, 1, 1))


# ============================================================================
#                               Formatting
# ============================================================================


def test_format_default_pattern():
    assert d.format("2024-03-15 14:05:09") == "2024-03-15 14:05:09"


def test_format_all_tokens_zh():
    value = "2024-03-15 14:05:09.123"
    assert d.format(value, "YYYY/MM/DD HH:mm:ss.SSS") == "2024/03/15 14:05:09.123"
    assert d.format(value, "hh A") == "02 下午"
    assert d.format(value, "d dd") == "5 五"


def test_format_en_us():
    assert d.format("2024-03-15 09:00", "dd hh A", locale="en-US") == "Fri 09 AM"


def test_format_uses_environment_locale(en_us):
    assert d.format("2024-03-17", "dd") == "Sun"


def test_format_midnight_and_noon_in_12_hour_clock():
    assert d.format("2024-03-15 00:10", "hh:mm A", locale="en-US") == "12:10 AM"
    assert d.format("2024-03-15 12:10", "hh:mm A", locale="en-US") == "12:10 PM"


def test_format_escapes_bracketed_text():
    assert d.format(FRIDAY, "[YYYY] YYYY") == "YYYY 2024"
    assert d.format(FRIDAY, "YYYY[年]MM[月]DD[日]") == "2024年03月15日"


def test_format_invalid_returns_empty():
    assert d.format("nope") == ""
    assert d.format(FRIDAY, None) == ""


# ============================================================================
#                               Relative time
# ============================================================================

BASE = datetime(2024, 3, 15, 12, 0, 0)


@pytest.mark.parametrize(
    "delta, zh, en",
    [
        (timedelta(seconds=30), "刚刚", "just now"),
        (timedelta(minutes=5), "5分钟前", "5 minutes ago"),
        (timedelta(hours=3), "3小时前", "3 hours ago"),
        (timedelta(days=3), "3天前", "3 days ago"),
        (timedelta(days=14), "2周前", "2 weeks ago"),
        (timedelta(days=60), "2个月前", "2 months ago"),
        (timedelta(days=800), "2年前", "2 years ago"),
    ],
)
def test_relative_time_past(delta, zh, en):
    assert d.relative_time(BASE - delta, BASE) == zh
    assert d.relative_time(BASE - delta, BASE, locale="en-US") == en


def test_relative_time_future():
    assert d.relative_time(BASE + timedelta(hours=2), BASE) == "2小时后"
    assert d.relative_time(BASE + timedelta(hours=2), BASE, locale="en-US") == "2 hours from now"


def test_relative_time_defaults_to_now():
    assert d.relative_time(datetime.now()) == "刚刚"


def test_relative_time_invalid():
    assert d.relative_time("nope", BASE) == ""
    assert d.relative_time(BASE, "nope") == ""


# ============================================================================
#                           Unit boundaries and arithmetic
# ============================================================================

MOMENT = "2024-03-15 13:45:30.250"


@pytest.mark.parametrize(
    "unit, start, end",
    [
        ("year", datetime(2024, 1, 1), datetime(2024, 12, 31, 23, 59, 59, 999999)),
        ("month", datetime(2024, 3, 1), datetime(2024, 3, 31, 23, 59, 59, 999999)),
        ("week", datetime(2024, 3, 10), datetime(2024, 3, 16, 23, 59, 59, 999999)),
        ("day", datetime(2024, 3, 15), datetime(2024, 3, 15, 23, 59, 59, 999999)),
        ("hour", datetime(2024, 3, 15, 13), datetime(2024, 3, 15, 13, 59, 59, 999999)),
        ("minute", datetime(2024, 3, 15, 13, 45), datetime(2024, 3, 15, 13, 45, 59, 999999)),
        ("second", datetime(2024, 3, 15, 13, 45, 30), datetime(2024, 3, 15, 13, 45, 30, 999999)),
    ],
)
def test_start_and_end_of(unit, start, end):
    assert d.start_of(MOMENT, unit) == start
    assert d.end_of(MOMENT, unit) == end


def test_start_and_end_of_unknown_unit_returns_date():
    assert d.start_of(MOMENT, "decade") == d.to_date(MOMENT)
    assert d.end_of(MOMENT, "decade") == d.to_date(MOMENT)


def test_start_and_end_of_invalid_date_is_now():
    assert _close_to_now(d.start_of("nope"))
    assert _close_to_now(d.end_of("nope"))


def test_end_of_february_in_leap_year():
    assert d.end_of("2024-02-10", "month").day == 29


@pytest.mark.parametrize(
    "value, amount, unit, expected",
    [
        (FRIDAY, 1, "day", datetime(2024, 3, 16)),
        (FRIDAY, 1.5, "day", datetime(2024, 3, 16, 12)),
        (FRIDAY, 2, "week", datetime(2024, 3, 29)),
        (FRIDAY, 3, "hour", datetime(2024, 3, 15, 3)),
        (FRIDAY, 90, "minute", datetime(2024, 3, 15, 1, 30)),
        (FRIDAY, 45, "second", datetime(2024, 3, 15, 0, 0, 45)),
        ("2024-01-31", 1, "month", datetime(2024, 2, 29)),
        ("2024-02-29", 1, "year", datetime(2025, 2, 28)),
        (FRIDAY, -14, "month", datetime(2023, 1, 15)),
    ],
)
def test_add(value, amount, unit, expected):
    assert d.add(value, amount, unit) == expected


def test_add_non_numeric_amount_or_unknown_unit_returns_date():
    assert d.add(FRIDAY, "1", "day") == datetime(2024, 3, 15)
    assert d.add(FRIDAY, 1, "fortnight") == datetime(2024, 3, 15)


def test_add_invalid_date_or_overflow_is_now():
    assert _close_to_now(d.add("nope", 1))
    assert _close_to_now(d.add("9999-12-31", 1, "day"))


def test_subtract():
    assert d.subtract(FRIDAY, 1, "day") == datetime(2024, 3, 14)
    assert d.subtract("2024-03-31", 1, "month") == datetime(2024, 2, 29)


@pytest.mark.parametrize(
    "first, second, unit, expected",
    [
        ("2024-01-01", "2024-03-15", "month", 2),
        ("2024-01-01", "2024-01-03", "day", 2),
        ("2024-01-03", "2024-01-01", "day", -2),
        ("2024-01-02", "2024-01-01 12:00", "day", 0),
        ("2023-12-31", "2024-01-01", "year", 1),
        ("2024-01-01", "2024-01-22", "week", 3),
        ("2024-01-01", "2024-01-01 05:59", "hour", 5),
        ("2024-01-01", "2024-01-01 00:01:30", "minute", 1),
        ("2024-01-01", "2024-01-01 00:01:30", "second", 90),
        ("2024-01-01", "2024-01-01 00:00:01", "fortnight", 1000),
    ],
)
def test_diff(first, second, unit, expected):
    assert d.diff(first, second, unit) == expected


def test_diff_invalid_is_zero():
    assert d.diff("nope", FRIDAY) == 0
    assert d.diff(FRIDAY, None) == 0


# ============================================================================
#                               Calendar queries
# ============================================================================


def test_day_and_week_of_year():
    assert d.get_day_of_year("2024-01-01") == 1
    assert d.get_day_of_year("2024-12-31") == 366
    assert d.get_week_of_year("2024-01-01") == 1
    assert d.get_week_of_year("2024-01-06") == 1
    assert d.get_week_of_year("2024-01-07") == 2


@pytest.mark.parametrize("year, leap", [(2024, True), (2023, False), (1900, False), (2000, True)])
def test_is_leap_year(year, leap):
    assert d.is_leap_year(f"{year}-06-01") is leap
    assert d.get_days_in_year(f"{year}-06-01") == (366 if leap else 365)


def test_days_in_month():
    assert d.get_days_in_month("2024-02-10") == 29
    assert d.get_days_in_month("2023-02-10") == 28
    assert d.get_days_in_month("2023-04-10") == 30


def test_is_weekend_and_is_today():
    assert d.is_weekend("2024-03-16")
    assert d.is_weekend("2024-03-17")
    assert not d.is_weekend(FRIDAY)
    assert d.is_today(datetime.now())
    assert not d.is_today(datetime.now() - timedelta(days=2))


def test_comparisons():
    assert d.is_after("2024-03-16", FRIDAY)
    assert not d.is_after(FRIDAY, FRIDAY)
    assert d.is_before("2024-03-14", FRIDAY)
    assert d.is_between(FRIDAY, "2024-03-01", "2024-03-31")
    assert d.is_between(FRIDAY, FRIDAY, FRIDAY)
    assert not d.is_between(FRIDAY, "2024-03-16", "2024-03-31")


def test_get_dates_between():
    dates = d.get_dates_between("2024-02-28 15:00", "2024-03-02")
    assert dates == [
        datetime(2024, 2, 28),
        datetime(2024, 2, 29),
        datetime(2024, 3, 1),
        datetime(2024, 3, 2),
    ]
    assert d.get_dates_between("2024-03-02", "2024-02-28") == []


def test_month_and_quarter_boundaries():
    assert d.get_first_day_of_month("2024-02-10 08:00") == datetime(2024, 2, 1)
    assert d.get_last_day_of_month("2024-02-10") == datetime(2024, 2, 29, 23, 59, 59, 999999)
    assert d.get_quarter("2024-05-20") == 2
    assert d.get_first_day_of_quarter("2024-05-20") == datetime(2024, 4, 1)
    assert d.get_last_day_of_quarter("2024-05-20") == datetime(2024, 6, 30)
    assert d.get_last_day_of_quarter("2024-11-02") == datetime(2024, 12, 31)


@pytest.mark.parametrize("value", INVALID)
def test_calendar_queries_on_invalid_input(value):
    assert d.get_day_of_year(value) == 0
    assert d.get_week_of_year(value) == 0
    assert d.get_days_in_month(value) == 0
    assert d.get_days_in_year(value) == 0
    assert d.get_quarter(value) == 0
    assert d.is_leap_year(value) is False
    assert d.is_weekend(value) is False
    assert d.is_today(value) is False
    assert d.is_after(value, FRIDAY) is False
    assert d.is_before(value, FRIDAY) is False
    assert d.is_between(value, FRIDAY, FRIDAY) is False
    assert d.get_dates_between(value, FRIDAY) == []


def test_partial_dates_parse_to_first_day():
    assert d.is_leap_year("2024")
    assert not d.is_leap_year("2023")
    assert d.get_days_in_month("2024-02") == 29
    assert d.format(d.to_date("2024-03-15"), "YYYY-MM-DD") == "2024-03-15"
