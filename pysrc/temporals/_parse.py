from ._common import InvalidFormat
from ._math import (
    DAYS_PER_WEEK,
    MICROS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

_MAX_DIGITS = 35
_FRACTION_DIGITS = 6  # microsecond resolution


def _split_sign(s: str) -> tuple[int, str]:
    if s[:1] == "-":
        return -1, s[1:]
    elif s[:1] == "+":
        return 1, s[1:]
    return 1, s


def _parse_component(
    fullstr: str, units: str, exc: Exception
) -> tuple[str, int, str]:
    # Scan a single (optionally signed) component like "-12H" off the front.
    # Seconds may have a fraction, and are returned in microseconds.
    try:
        split_index, unit = next(
            (i, c) for i, c in enumerate(fullstr) if c in units
        )
    except StopIteration:
        raise exc

    raw, rest = fullstr[:split_index], fullstr[split_index + 1 :]
    sign, raw = _split_sign(raw)

    if unit == "S":
        digits, sep, fraction = raw.partition(".")
        if sep and not fraction.isdigit():
            raise exc
    else:
        digits, fraction = raw, ""

    if len(digits) > _MAX_DIGITS or not digits.isdigit():
        raise exc

    if unit == "S":
        # extra digits are rounded half up to whole microseconds
        micros = int(
            fraction[:_FRACTION_DIGITS].ljust(_FRACTION_DIGITS, "0")
        )
        if fraction[_FRACTION_DIGITS : _FRACTION_DIGITS + 1] >= "5":
            micros += 1
        value = int(digits) * MICROS_PER_SECOND + micros
    else:
        value = int(digits)
    return rest, sign * value, unit


def duration_from_iso(s: str) -> int:
    """Parse an ISO 8601 duration like ``-P1DT2H3M4.5S`` to microseconds.

    Each component may carry its own sign. A leading sign applies
    to the duration as a whole.
    """
    exc = InvalidFormat(f"Invalid ISO 8601 duration format: {s!r}")
    if s in ("PT0S", "P0D"):
        return 0

    if not s.isascii():
        raise exc

    sign, rest = _split_sign(s)
    if len(rest) < 2 or rest[0] != "P":
        raise exc

    date_raw, sep, time_raw = rest[1:].partition("T")
    # 'T' must be followed by at least one time component
    if sep and not time_raw:
        raise exc

    micros = 0
    if date_raw:
        leftover, days, _ = _parse_component(date_raw, "D", exc)
        if leftover:
            raise exc
        micros += days * SECONDS_PER_DAY * MICROS_PER_SECOND

    prev_unit = ""
    while time_raw:
        time_raw, value, unit = _parse_component(time_raw, "HMS", exc)

        if unit == "H" and prev_unit == "":
            micros += value * SECONDS_PER_HOUR * MICROS_PER_SECOND
        elif unit == "M" and prev_unit in "H":
            micros += value * SECONDS_PER_MINUTE * MICROS_PER_SECOND
        elif unit == "S":
            micros += value
            if time_raw:
                raise exc  # leftover characters
            break
        else:
            raise exc  # components out of order

        prev_unit = unit

    return sign * micros


def period_from_iso(s: str) -> tuple[int, int, int]:
    """Parse an ISO 8601 period like ``P1Y-2M3W4D`` to years, months, days.

    Weeks are folded into days. A leading sign negates every component.
    """
    exc = InvalidFormat(f"Invalid ISO 8601 period format: {s!r}")
    if s == "P0D":
        return 0, 0, 0

    if not s.isascii():
        raise exc

    sign, rest = _split_sign(s)
    if len(rest) < 2 or rest[0] != "P":
        raise exc

    rest = rest[1:]
    years = months = days = 0
    prev_unit = ""
    while rest:
        rest, value, unit = _parse_component(rest, "YMWD", exc)

        if unit == "Y" and prev_unit == "":
            years = value
        elif unit == "M" and prev_unit in "Y":
            months = value
        elif unit == "W" and prev_unit in "YM":
            days += value * DAYS_PER_WEEK
        elif unit == "D" and prev_unit in "YMW":
            days += value
            if rest:
                raise exc  # leftover characters
            break
        else:
            raise exc  # components out of order

        prev_unit = unit

    return sign * years, sign * months, sign * days
