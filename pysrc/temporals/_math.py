"""Exact integer arithmetic helpers for durations and periods."""

MAX_I64 = (1 << 63) - 1
MIN_I64 = -(1 << 63)

MICROS_PER_MILLI = 1_000
MICROS_PER_SECOND = 1_000_000
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7

_SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY

# Length of each unit in microseconds. Date-based units are estimates
# based on a year of 365 days.
UNIT_MICROS = {
    "Micros": 1,
    "Millis": MICROS_PER_MILLI,
    "Seconds": MICROS_PER_SECOND,
    "Minutes": SECONDS_PER_MINUTE * MICROS_PER_SECOND,
    "Hours": SECONDS_PER_HOUR * MICROS_PER_SECOND,
    "HalfDays": 12 * SECONDS_PER_HOUR * MICROS_PER_SECOND,
    "Days": SECONDS_PER_DAY * MICROS_PER_SECOND,
    "Weeks": DAYS_PER_WEEK * SECONDS_PER_DAY * MICROS_PER_SECOND,
    "Months": _SECONDS_PER_YEAR // MONTHS_PER_YEAR * MICROS_PER_SECOND,
    "Years": _SECONDS_PER_YEAR * MICROS_PER_SECOND,
    "Decades": 10 * _SECONDS_PER_YEAR * MICROS_PER_SECOND,
    "Centuries": 100 * _SECONDS_PER_YEAR * MICROS_PER_SECOND,
    "Millennia": 1_000 * _SECONDS_PER_YEAR * MICROS_PER_SECOND,
}


def in_i64(*values: int) -> bool:
    return all(MIN_I64 <= v <= MAX_I64 for v in values)


def normalize_micros(seconds: int, micros: int) -> tuple[int, int]:
    """Move whole seconds out of the microsecond part, so that the
    microseconds are always in ``[0, 1_000_000)``, also for negative values.

    >>> normalize_micros(4, -999_999)
    (3, 1)
    >>> normalize_micros(0, -500_000)
    (-1, 500000)
    """
    carry, micros = divmod(micros, MICROS_PER_SECOND)
    return seconds + carry, micros


def split_total_months(total: int) -> tuple[int, int]:
    """Split months into years and months, truncating towards zero so that
    both parts always share the same sign.

    >>> split_total_months(27)
    (2, 3)
    >>> split_total_months(-27)
    (-2, -3)
    """
    years, months = divmod(abs(total), MONTHS_PER_YEAR)
    return (-years, -months) if total < 0 else (years, months)
