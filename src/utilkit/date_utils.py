"""Date helpers.

Every function accepts a date-like value and normalizes it with `to_date`
before doing any work. The canonical representation is a naive ``datetime``
in local time. Accepted inputs:

- ``datetime`` (aware values are converted to local time and made naive);
- ``date`` (local midnight);
- ``int``/``float`` epoch milliseconds;
- ``"YYYY-MM-DD"`` strings (local midnight) and any other string
  ``dateutil`` can parse.

Nothing here raises for bad input. Unparseable values make `to_date` return
None and every other function falls back to ``""``, ``0``, ``False``, ``[]`` or
the current datetime, as documented per function.

Units are ``year``, ``month``, ``week``, ``day``, ``hour``, ``minute`` and
``second``. Weeks start on Sunday.
"""

# pylint: disable=redefined-builtin

import calendar
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Literal, TypeAlias

from dateutil import parser
from dateutil.relativedelta import relativedelta

from utilkit.config import DEFAULT_DATE_PATTERN
from utilkit.messages import catalog

Unit: TypeAlias = Literal["year", "month", "week", "day", "hour", "minute", "second"]
DateLike: TypeAlias = datetime | date | int | float | str

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TOKENS = re.compile(r"\[([^\]]+)\]|YYYY|SSS|MM|DD|HH|hh|mm|ss|dd|d|A")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_PARSE_DEFAULT = datetime(1970, 1, 1)

_MICROSECONDS = {
    "week": 7 * 24 * 60 * 60 * 1_000_000,
    "day": 24 * 60 * 60 * 1_000_000,
    "hour": 60 * 60 * 1_000_000,
    "minute": 60 * 1_000_000,
    "second": 1_000_000,
}
_MINUTE_MS = 60 * 1000
_HOUR_MS = 60 * _MINUTE_MS
_DAY_MS = 24 * _HOUR_MS
_WEEK_MS = 7 * _DAY_MS
_MONTH_MS = 30 * _DAY_MS
_YEAR_MS = 365 * _DAY_MS


# ============================================================================
#                               Coercion
# ============================================================================


def _local_naive(value: datetime) -> datetime | None:
    try:
        if value.tzinfo is None or value.utcoffset() is None:
            return value
        return value.astimezone().replace(tzinfo=None)
    except (OverflowError, ValueError, OSError):
        return None


def _from_epoch_ms(value: float) -> datetime | None:
    if not math.isfinite(value):
        return None
    try:
        return _local_naive(_EPOCH + timedelta(milliseconds=value))
    except (OverflowError, ValueError):
        return None


def _parse(text: str) -> datetime | None:
    text = text.strip()
    if _DATE_ONLY.match(text):
        try:
            return datetime.strptime(text, "%Y-%m-%d")
        except ValueError:
            return None
    try:
        parsed = parser.parse(text, default=_PARSE_DEFAULT)
    except (ValueError, OverflowError):
        return None
    return _local_naive(parsed)


def to_date(value: Any) -> datetime | None:
    """Normalize a date-like value to a naive local ``datetime``.

    Args:
        value: A ``datetime``, ``date``, epoch-millisecond number or string.

    Returns:
        The normalized datetime, or None when ``value`` is of an unsupported
        type, cannot be parsed, or is out of range.

    Examples:
        >>> to_date("2024-03-15")
        datetime.datetime(2024, 3, 15, 0, 0)
        >>> to_date("not a date") is None
        True
    """
    if isinstance(value, datetime):
        return _local_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_epoch_ms(value)
    if isinstance(value, str):
        return _parse(value)
    return None


def is_valid_date(value: Any) -> bool:
    """Return True if ``value`` is a ``datetime`` instance."""
    return isinstance(value, datetime)


def _weekday(value: datetime) -> int:
    """Day of week with Sunday = 0."""
    return (value.weekday() + 1) % 7


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _is_amount(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


# ============================================================================
#                               Formatting
# ============================================================================


def format(value: Any, pattern: str = DEFAULT_DATE_PATTERN, *, locale: str | None = None) -> str:
    """Render a date with a token pattern.

    Tokens: ``YYYY`` year, ``MM`` month, ``DD`` day, ``HH`` 24-hour,
    ``hh`` 12-hour, ``mm`` minute, ``ss`` second, ``SSS`` millisecond,
    ``d`` weekday number (Sunday = 0), ``dd`` weekday name, ``A`` meridiem.
    Text in square brackets is emitted literally; anything else passes
    through unchanged.

    Args:
        value: Date-like value.
        pattern: Format pattern.
        locale: Locale for ``dd`` and ``A``; defaults to the configured one.

    Returns:
        The formatted string, or ``""`` for an invalid date.

    Examples:
        >>> format("2024-03-15", "YYYY/MM/DD")
        '2024/03/15'
        >>> format("2024-03-15", "[YYYY] YYYY")
        'YYYY 2024'
    """
    d = to_date(value)
    if d is None or not isinstance(pattern, str):
        return ""

    texts = catalog(locale)
    weekday = _weekday(d)
    values = {
        "YYYY": f"{d.year:04d}",
        "MM": f"{d.month:02d}",
        "DD": f"{d.day:02d}",
        "HH": f"{d.hour:02d}",
        "hh": f"{d.hour % 12 or 12:02d}",
        "mm": f"{d.minute:02d}",
        "ss": f"{d.second:02d}",
        "SSS": f"{d.microsecond // 1000:03d}",
        "d": str(weekday),
        "dd": texts[f"weekday.{weekday}"],
        "A": texts["meridiem.am" if d.hour < 12 else "meridiem.pm"],
    }

    def _replace(match: re.Match[str]) -> str:
        if match.group(1) is not None:
            return match.group(1)
        return values[match.group(0)]

    return _TOKENS.sub(_replace, pattern)


def relative_time(value: Any, base: Any = None, *, locale: str | None = None) -> str:
    """Describe ``value`` relative to ``base`` (default: now).

    The absolute difference is bucketed into just-now (< 1 minute), minutes,
    hours, days, weeks, months (30 days) and years (365 days), each floored,
    with a past or future suffix.

    Returns:
        The description, or ``""`` when either date is invalid.
    """
    d1 = to_date(value)
    d2 = datetime.now() if base is None else to_date(base)
    if d1 is None or d2 is None:
        return ""

    elapsed = (d2 - d1) // timedelta(milliseconds=1)
    texts = catalog(locale)
    suffix = texts["relative.future" if elapsed < 0 else "relative.past"]
    span = abs(elapsed)

    if span < _MINUTE_MS:
        return texts["relative.just_now"]
    for limit, size, key in (
        (_HOUR_MS, _MINUTE_MS, "relative.minutes"),
        (_DAY_MS, _HOUR_MS, "relative.hours"),
        (_WEEK_MS, _DAY_MS, "relative.days"),
        (_MONTH_MS, _WEEK_MS, "relative.weeks"),
        (_YEAR_MS, _MONTH_MS, "relative.months"),
    ):
        if span < limit:
            return texts[key].format(n=span // size, suffix=suffix)
    return texts["relative.years"].format(n=span // _YEAR_MS, suffix=suffix)


# ============================================================================
#                           Unit boundaries and arithmetic
# ============================================================================


def start_of(value: Any, unit: Unit | str = "day") -> datetime:
    """First instant of the ``unit`` containing ``value``.

    Invalid dates yield the current datetime; unknown units return the
    normalized date unchanged.
    """
    d = to_date(value)
    if d is None:
        return datetime.now()

    midnight = d.replace(hour=0, minute=0, second=0, microsecond=0)
    match unit:
        case "year":
            return datetime(d.year, 1, 1)
        case "month":
            return datetime(d.year, d.month, 1)
        case "week":
            try:
                return midnight - timedelta(days=_weekday(d))
            except OverflowError:
                return midnight
        case "day":
            return midnight
        case "hour":
            return d.replace(minute=0, second=0, microsecond=0)
        case "minute":
            return d.replace(second=0, microsecond=0)
        case "second":
            return d.replace(microsecond=0)
        case _:
            return d


def end_of(value: Any, unit: Unit | str = "day") -> datetime:
    """Last representable instant of the ``unit`` containing ``value``.

    Invalid dates yield the current datetime; unknown units return the
    normalized date unchanged.
    """
    d = to_date(value)
    if d is None:
        return datetime.now()

    last_moment = d.replace(hour=23, minute=59, second=59, microsecond=999999)
    match unit:
        case "year":
            return last_moment.replace(month=12, day=31)
        case "month":
            return last_moment.replace(day=calendar.monthrange(d.year, d.month)[1])
        case "week":
            try:
                return last_moment + timedelta(days=6 - _weekday(d))
            except OverflowError:
                return last_moment
        case "day":
            return last_moment
        case "hour":
            return d.replace(minute=59, second=59, microsecond=999999)
        case "minute":
            return d.replace(second=59, microsecond=999999)
        case "second":
            return d.replace(microsecond=999999)
        case _:
            return d


def add(value: Any, amount: float, unit: Unit | str = "day") -> datetime:
    """Shift ``value`` by ``amount`` units.

    Week and smaller units use exact ``timedelta`` arithmetic. Months and
    years use calendar arithmetic (``relativedelta``) with whole amounts;
    when the day of month does not exist in the target month it is clamped
    to that month's last day.

    Returns:
        The shifted datetime. Invalid dates and results outside the
        representable range yield the current datetime; a non-numeric amount
        or an unknown unit returns the normalized date unchanged.

    Examples:
        >>> add("2024-01-31", 1, "month")
        datetime.datetime(2024, 2, 29, 0, 0)
    """
    d = to_date(value)
    if d is None:
        return datetime.now()
    if not _is_amount(amount):
        return d

    try:
        match unit:
            case "year":
                return d + relativedelta(years=int(amount))
            case "month":
                return d + relativedelta(months=int(amount))
            case "week":
                return d + timedelta(weeks=amount)
            case "day":
                return d + timedelta(days=amount)
            case "hour":
                return d + timedelta(hours=amount)
            case "minute":
                return d + timedelta(minutes=amount)
            case "second":
                return d + timedelta(seconds=amount)
            case _:
                return d
    except (OverflowError, ValueError):
        return datetime.now()


def subtract(value: Any, amount: float, unit: Unit | str = "day") -> datetime:
    """Shift ``value`` back by ``amount`` units (see `add`)."""
    return add(value, -amount if _is_amount(amount) else amount, unit)


def diff(first: Any, second: Any, unit: Unit | str = "day") -> int:
    """Difference ``second - first`` expressed in ``unit``.

    Years and months subtract calendar components; smaller units divide the
    elapsed time and truncate toward zero. Unknown units return
    milliseconds.

    Returns:
        The difference, or 0 when either date is invalid.

    Examples:
        >>> diff("2024-01-01", "2024-03-15", "month")
        2
        >>> diff("2024-01-02", "2024-01-01 12:00", "day")
        0
    """
    d1 = to_date(first)
    d2 = to_date(second)
    if d1 is None or d2 is None:
        return 0

    if unit == "year":
        return d2.year - d1.year
    if unit == "month":
        return (d2.year - d1.year) * 12 + d2.month - d1.month

    elapsed = (d2 - d1) // timedelta(microseconds=1)
    if unit in _MICROSECONDS:
        return _trunc_div(elapsed, _MICROSECONDS[unit])
    return _trunc_div(elapsed, 1000)


# ============================================================================
#                               Calendar queries
# ============================================================================


def get_day_of_year(value: Any) -> int:
    """Ordinal day within the year (1-366), or 0 for an invalid date."""
    d = to_date(value)
    if d is None:
        return 0
    return d.timetuple().tm_yday


def get_week_of_year(value: Any) -> int:
    """Sunday-based week number within the year, or 0 for an invalid date."""
    d = to_date(value)
    if d is None:
        return 0
    start = datetime(d.year, 1, 1)
    offset = (d - start) + timedelta(days=_weekday(start))
    return offset // timedelta(weeks=1) + 1


def is_leap_year(value: Any) -> bool:
    """Return True if the year of ``value`` is a leap year."""
    d = to_date(value)
    return d is not None and calendar.isleap(d.year)


def get_days_in_month(value: Any) -> int:
    """Number of days in the month of ``value``, or 0 for an invalid date."""
    d = to_date(value)
    if d is None:
        return 0
    return calendar.monthrange(d.year, d.month)[1]


def get_days_in_year(value: Any) -> int:
    """365 or 366, or 0 for an invalid date."""
    d = to_date(value)
    if d is None:
        return 0
    return 366 if calendar.isleap(d.year) else 365


def is_weekend(value: Any) -> bool:
    """Return True for Saturdays and Sundays."""
    d = to_date(value)
    return d is not None and d.weekday() >= 5


def is_today(value: Any) -> bool:
    """Return True if ``value`` falls on the current local day."""
    d = to_date(value)
    return d is not None and d.date() == date.today()


def is_after(value: Any, other: Any) -> bool:
    """Return True if ``value`` is strictly later than ``other``."""
    d1, d2 = to_date(value), to_date(other)
    return d1 is not None and d2 is not None and d1 > d2


def is_before(value: Any, other: Any) -> bool:
    """Return True if ``value`` is strictly earlier than ``other``."""
    d1, d2 = to_date(value), to_date(other)
    return d1 is not None and d2 is not None and d1 < d2


def is_between(value: Any, start: Any, end: Any) -> bool:
    """Return True if ``start <= value <= end``."""
    d, lower, upper = to_date(value), to_date(start), to_date(end)
    if d is None or lower is None or upper is None:
        return False
    return lower <= d <= upper


def get_dates_between(start: Any, end: Any) -> list[datetime]:
    """Every midnight from the day of ``start`` to the day of ``end``, inclusive.

    Returns an empty list when either date is invalid or ``start`` is after
    ``end``.
    """
    if to_date(start) is None or to_date(end) is None:
        return []
    current = start_of(start, "day")
    last = start_of(end, "day")
    dates = []
    while current <= last:
        dates.append(current)
        try:
            current += timedelta(days=1)
        except OverflowError:
            break
    return dates


def get_first_day_of_month(value: Any) -> datetime:
    """Midnight of the first day of the month."""
    return start_of(value, "month")


def get_last_day_of_month(value: Any) -> datetime:
    """Last instant of the month."""
    return end_of(value, "month")


def get_first_day_of_quarter(value: Any) -> datetime:
    """Midnight of the first day of the quarter (now for an invalid date)."""
    d = to_date(value)
    if d is None:
        return datetime.now()
    return datetime(d.year, (d.month - 1) // 3 * 3 + 1, 1)


def get_last_day_of_quarter(value: Any) -> datetime:
    """Midnight of the last day of the quarter (now for an invalid date)."""
    d = to_date(value)
    if d is None:
        return datetime.now()
    month = (d.month - 1) // 3 * 3 + 3
    return datetime(d.year, month, calendar.monthrange(d.year, month)[1])


def get_quarter(value: Any) -> int:
    """Quarter number 1-4, or 0 for an invalid date."""
    d = to_date(value)
    if d is None:
        return 0
    return (d.month - 1) // 3 + 1
