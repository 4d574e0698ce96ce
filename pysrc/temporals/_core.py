# The MIT License (MIT)
#
# Copyright (c) The temporals developers
# Derived from whenever, Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why is everything in one file?
#   - Flat is better than nested
#   - It prevents circular imports since the classes 'know' about each other:
#     units have a Duration, durations are expressed in units.
#   - It's easier to vendor (i.e. copy-paste) this library if needed
# - ChronoUnit and ChronoField are enums, and enums can't share a metaclass
#   with ABC. They are registered as virtual subclasses of TemporalUnit and
#   TemporalField instead, so they implement the full interface themselves.
# - Durations and periods are always validated to fit in 64-bit integers,
#   so that their values can be exchanged with other implementations.
from __future__ import annotations

__version__ = "0.1.0"

import enum
from abc import ABC, abstractmethod
from datetime import (
    date as _date,
    datetime as _datetime,
    time as _time,
    timedelta as _timedelta,
)
from typing import TYPE_CHECKING, ClassVar, TypeVar, no_type_check

from ._common import (
    DateTimeError,
    InvalidArgument,
    InvalidFormat,
    UnsupportedField,
    UnsupportedUnit,
)
from ._math import (
    DAYS_PER_WEEK,
    MICROS_PER_MILLI,
    MICROS_PER_SECOND,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIT_MICROS,
    in_i64,
    normalize_micros,
    split_total_months,
)
from ._parse import duration_from_iso, period_from_iso

__all__ = [
    # Amounts of time
    "Duration",
    "Period",
    # Units and fields
    "ChronoUnit",
    "ChronoField",
    "ValueRange",
    # Interfaces
    "TemporalUnit",
    "TemporalField",
    "TemporalAmount",
    "TemporalAccessor",
    "Temporal",
    # Exceptions
    "DateTimeError",
    "InvalidArgument",
    "InvalidFormat",
    "UnsupportedUnit",
    "UnsupportedField",
]

_object_new = object.__new__
_MICROS_PER_MINUTE = SECONDS_PER_MINUTE * MICROS_PER_SECOND
_MICROS_PER_HOUR = SECONDS_PER_HOUR * MICROS_PER_SECOND
_MICROS_PER_DAY = SECONDS_PER_DAY * MICROS_PER_SECOND
_MILLIS_PER_SECOND = MICROS_PER_SECOND // MICROS_PER_MILLI


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


@final
class ValueRange(_ImmutableBase):
    """The range of valid values of a field, such as 1-31 for the day of
    the month.

    Both ends of the range may vary: the day of the month has a minimum
    of 1, and a maximum between 28 and 31 depending on the month.
    This is expressed as the smallest and largest possible minimum,
    and the smallest and largest possible maximum.

    Examples
    --------
    >>> r = ValueRange.of_variable_max(1, 28, 31)
    ValueRange(1 - 28/31)
    >>> r.is_valid_value(30)
    True
    >>> 32 in r
    False

    Note
    ----
    The largest minimum must be *strictly* smaller than the smallest
    maximum. A range in which these touch is rejected.
    """

    __slots__ = (
        "_smallest_min",
        "_largest_min",
        "_smallest_max",
        "_largest_max",
    )

    def __init__(
        self,
        smallest_min: int,
        largest_min: int,
        smallest_max: int,
        largest_max: int,
    ) -> None:
        if smallest_min > largest_min:
            raise InvalidArgument(
                f"Smallest minimum {smallest_min} must not be greater "
                f"than largest minimum {largest_min}"
            )
        elif largest_min >= smallest_max:
            raise InvalidArgument(
                f"Largest minimum {largest_min} must be less "
                f"than smallest maximum {smallest_max}"
            )
        elif smallest_max > largest_max:
            raise InvalidArgument(
                f"Smallest maximum {smallest_max} must not be greater "
                f"than largest maximum {largest_max}"
            )
        self._smallest_min = smallest_min
        self._largest_min = largest_min
        self._smallest_max = smallest_max
        self._largest_max = largest_max

    @classmethod
    def of_fixed(cls, min: int, max: int, /) -> ValueRange:
        """Create a range where both minimum and maximum are fixed

        >>> ValueRange.of_fixed(1, 12)
        ValueRange(1 - 12)
        """
        return cls(min, min, max, max)

    @classmethod
    def of_variable_max(
        cls, min: int, smallest_max: int, largest_max: int, /
    ) -> ValueRange:
        """Create a range with a fixed minimum and a variable maximum

        >>> ValueRange.of_variable_max(1, 365, 366)
        ValueRange(1 - 365/366)
        """
        return cls(min, min, smallest_max, largest_max)

    @classmethod
    def of_variable(
        cls,
        smallest_min: int,
        largest_min: int,
        smallest_max: int,
        largest_max: int,
        /,
    ) -> ValueRange:
        """Create a range where both minimum and maximum vary"""
        return cls(smallest_min, largest_min, smallest_max, largest_max)

    @property
    def minimum(self) -> int:
        """The smallest possible minimum"""
        return self._smallest_min

    @property
    def largest_minimum(self) -> int:
        return self._largest_min

    @property
    def smallest_maximum(self) -> int:
        return self._smallest_max

    @property
    def maximum(self) -> int:
        """The largest possible maximum"""
        return self._largest_max

    def is_fixed(self) -> bool:
        """Whether the minimum and maximum don't vary"""
        return (
            self._smallest_min == self._largest_min
            and self._smallest_max == self._largest_max
        )

    def is_valid_value(self, value: int, /) -> bool:
        """Whether the value is between the smallest minimum
        and the largest maximum (inclusive)"""
        return self._smallest_min <= value <= self._largest_max

    def check_valid_value(self, value: int, field: object, /) -> int:
        """Return the value unchanged if it's valid, or raise otherwise.

        Example
        -------
        >>> r = ValueRange.of_fixed(0, 5)
        >>> r.check_valid_value(3, ChronoField.DAY_OF_MONTH)
        3
        >>> r.check_valid_value(6, ChronoField.DAY_OF_MONTH)
        Traceback (most recent call last):
          ...
        InvalidArgument: Expected a value within range 0 - 5 for DayOfMonth, got 6
        """
        if not self.is_valid_value(value):
            raise InvalidArgument(
                f"Expected a value within range {self} for {field}, got {value}"
            )
        return value

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.is_valid_value(value)

    def __str__(self) -> str:
        return (
            str(self._smallest_min)
            + f"/{self._largest_min}"
            * (self._smallest_min != self._largest_min)
            + f" - {self._smallest_max}"
            + f"/{self._largest_max}"
            * (self._smallest_max != self._largest_max)
        )

    def __repr__(self) -> str:
        return f"ValueRange({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return (
            self._smallest_min,
            self._largest_min,
            self._smallest_max,
            self._largest_max,
        ) == (
            other._smallest_min,
            other._largest_min,
            other._smallest_max,
            other._largest_max,
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._smallest_min,
                self._largest_min,
                self._smallest_max,
                self._largest_max,
            )
        )


class TemporalUnit(ABC):
    """A unit of time, such as days or hours.

    :class:`ChronoUnit` contains the standard units. Implement this
    interface to define additional units.
    """

    __slots__ = ()

    @abstractmethod
    def is_date_based(self) -> bool:
        """Whether the unit is a date unit (days or larger)"""

    @abstractmethod
    def is_time_based(self) -> bool:
        """Whether the unit is a time unit (smaller than a day)"""

    @abstractmethod
    def is_duration_estimated(self) -> bool:
        """Whether :meth:`duration` is an estimate rather than exact"""

    @abstractmethod
    def duration(self) -> Duration:
        """The (possibly estimated) duration of the unit"""

    def is_supported_by(self, temporal: Temporal, /) -> bool:
        """Whether the temporal can be shifted by this unit"""
        return temporal.supports_unit(self)


class TemporalField(ABC):
    """A field of date or time, such as month-of-year or hour-of-day.

    :class:`ChronoField` contains the standard fields. Implement this
    interface to define additional fields.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def base_unit(self) -> TemporalUnit:
        """The unit the field is measured in"""

    @property
    @abstractmethod
    def range_unit(self) -> TemporalUnit:
        """The unit the field is bound by"""

    @abstractmethod
    def range(self) -> ValueRange:
        """The range of valid values"""

    @abstractmethod
    def get_from_native(self, value: _date | _time, /) -> int:
        """Extract the field from a standard library date, time,
        or datetime"""

    def is_date_based(self) -> bool:
        return _field_is_date_based(self)

    def is_time_based(self) -> bool:
        return _field_is_time_based(self)

    def is_supported_by(self, accessor: TemporalAccessor, /) -> bool:
        """Whether the field can be queried on the accessor"""
        return accessor.supports_field(self)


def _field_is_date_based(field: TemporalField) -> bool:
    return (
        field.base_unit.is_date_based()
        and not field.range_unit.is_time_based()
    )


def _field_is_time_based(field: TemporalField) -> bool:
    return field.base_unit.is_time_based() and (
        field.range_unit.is_time_based() or field.range_unit is ChronoUnit.DAYS
    )


_TTemporal = TypeVar("_TTemporal", bound="Temporal")


class TemporalAmount(ABC):
    """An amount of time, such as "6 hours" or "2 years and 3 days",
    expressed as a value per unit.

    Adding an amount to a :class:`Temporal` walks through :attr:`units`
    in order, shifting the temporal by each value in turn.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def units(self) -> tuple[TemporalUnit, ...]:
        """The units in which the amount is expressed, in order"""

    @abstractmethod
    def get(self, unit: TemporalUnit, /) -> int:
        """The value for the given unit

        Raises
        ------
        UnsupportedUnit
            If the unit isn't one of :attr:`units`
        """

    def add_to(self, temporal: _TTemporal, /) -> _TTemporal:
        """Add this amount to the temporal, unit by unit"""
        for unit in self.units:
            temporal = temporal.plus(self.get(unit), unit)
        return temporal

    def subtract_from(self, temporal: _TTemporal, /) -> _TTemporal:
        """Subtract this amount from the temporal, unit by unit"""
        for unit in self.units:
            temporal = temporal.minus(self.get(unit), unit)
        return temporal


class TemporalAccessor(ABC):
    """Read-only access to the fields of a date, time, or datetime"""

    __slots__ = ()

    @abstractmethod
    def supports_field(self, field: TemporalField, /) -> bool: ...

    @abstractmethod
    def get(self, field: TemporalField, /) -> int:
        """The value of the field

        Raises
        ------
        UnsupportedField
            If the field isn't supported
        """


class Temporal(TemporalAccessor):
    """A date, time, or datetime which can be shifted by units
    and amounts of time.

    Subclasses implement :meth:`supports_unit` and :meth:`plus`.
    Amount arithmetic is delegated to the amount itself:

    >>> date + Period.of(1, 2, 3)  # same as Period.of(1, 2, 3).add_to(date)
    """

    __slots__ = ()

    @abstractmethod
    def supports_unit(self, unit: TemporalUnit, /) -> bool: ...

    @abstractmethod
    def plus(self: _TTemporal, amount: int, unit: TemporalUnit, /) -> _TTemporal:
        """Shift by an amount of the given unit

        Raises
        ------
        UnsupportedUnit
            If the unit isn't supported
        """

    def minus(self: _TTemporal, amount: int, unit: TemporalUnit, /) -> _TTemporal:
        return self.plus(-amount, unit)

    def plus_amount(self: _TTemporal, amount: TemporalAmount, /) -> _TTemporal:
        return amount.add_to(self)

    def minus_amount(self: _TTemporal, amount: TemporalAmount, /) -> _TTemporal:
        return amount.subtract_from(self)

    def __add__(self: _TTemporal, amount: TemporalAmount) -> _TTemporal:
        if not isinstance(amount, TemporalAmount):
            return NotImplemented
        return self.plus_amount(amount)

    def __sub__(self: _TTemporal, amount: TemporalAmount) -> _TTemporal:
        if not isinstance(amount, TemporalAmount):
            return NotImplemented
        return self.minus_amount(amount)


class ChronoUnit(enum.Enum):
    """The standard units of time, ordered from small to large.

    The ``.value`` is the display name of the unit.

    The duration of date-based units is an estimate based on a year
    of 365 days. :attr:`FOREVER` is neither date- nor time-based,
    and has no duration at all.
    """

    MICROS = "Micros"
    MILLIS = "Millis"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    HALF_DAYS = "HalfDays"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    FOREVER = "Forever"

    def is_date_based(self) -> bool:
        return self in _DATE_BASED_UNITS

    def is_time_based(self) -> bool:
        return self in _TIME_BASED_UNITS

    def is_duration_estimated(self) -> bool:
        return self in _DATE_BASED_UNITS

    def duration(self) -> Duration:
        """The duration of the unit

        >>> ChronoUnit.HOURS.duration()
        Duration(PT1H)
        >>> ChronoUnit.YEARS.duration()  # estimated
        Duration(P365D)

        Raises
        ------
        UnsupportedUnit
            For :attr:`FOREVER`
        """
        try:
            micros = UNIT_MICROS[self.value]
        except KeyError:
            raise UnsupportedUnit._for_unit(self) from None
        return Duration._from_micros(micros)

    def is_supported_by(self, temporal: Temporal, /) -> bool:
        return temporal.supports_unit(self)

    def compare_to(self, other: ChronoUnit, /) -> int:
        if not isinstance(other, ChronoUnit):
            raise TypeError(f"Cannot compare ChronoUnit with {type(other)}")
        a, b = _UNIT_ORDINALS[self], _UNIT_ORDINALS[other]
        return (a > b) - (a < b)

    def __lt__(self, other: ChronoUnit) -> bool:
        if not isinstance(other, ChronoUnit):
            return NotImplemented
        return _UNIT_ORDINALS[self] < _UNIT_ORDINALS[other]

    def __le__(self, other: ChronoUnit) -> bool:
        if not isinstance(other, ChronoUnit):
            return NotImplemented
        return _UNIT_ORDINALS[self] <= _UNIT_ORDINALS[other]

    def __gt__(self, other: ChronoUnit) -> bool:
        if not isinstance(other, ChronoUnit):
            return NotImplemented
        return _UNIT_ORDINALS[self] > _UNIT_ORDINALS[other]

    def __ge__(self, other: ChronoUnit) -> bool:
        if not isinstance(other, ChronoUnit):
            return NotImplemented
        return _UNIT_ORDINALS[self] >= _UNIT_ORDINALS[other]

    def __str__(self) -> str:
        return self.value


_UNIT_ORDINALS = {u: i for i, u in enumerate(ChronoUnit)}
_TIME_BASED_UNITS = frozenset(
    [
        ChronoUnit.MICROS,
        ChronoUnit.MILLIS,
        ChronoUnit.SECONDS,
        ChronoUnit.MINUTES,
        ChronoUnit.HOURS,
        ChronoUnit.HALF_DAYS,
    ]
)
_DATE_BASED_UNITS = frozenset(
    [
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ChronoUnit.MONTHS,
        ChronoUnit.YEARS,
        ChronoUnit.DECADES,
        ChronoUnit.CENTURIES,
        ChronoUnit.MILLENNIA,
    ]
)
TemporalUnit.register(ChronoUnit)


class ChronoField(enum.Enum):
    """The standard fields of date and time.

    The ``.value`` is the display name of the field.

    Example
    -------
    >>> ChronoField.DAY_OF_MONTH.range()
    ValueRange(1 - 28/31)
    >>> ChronoField.DAY_OF_MONTH.base_unit
    <ChronoUnit.DAYS: 'Days'>
    >>> ChronoField.MONTH_OF_YEAR.get_from_native(date(2024, 3, 4))
    3
    """

    MICRO_OF_SECOND = "MicroOfSecond"
    SECOND_OF_MINUTE = "SecondOfMinute"
    MINUTE_OF_HOUR = "MinuteOfHour"
    HOUR_OF_DAY = "HourOfDay"
    DAY_OF_WEEK = "DayOfWeek"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    MONTH_OF_YEAR = "MonthOfYear"
    YEAR = "Year"

    @property
    def base_unit(self) -> ChronoUnit:
        return _FIELD_UNITS[self][0]

    @property
    def range_unit(self) -> ChronoUnit:
        return _FIELD_UNITS[self][1]

    def range(self) -> ValueRange:
        """The range of valid values, regardless of context.
        For example, the day of the month may be 31,
        although not every month has 31 days."""
        return _FIELD_RANGES[self]

    def is_date_based(self) -> bool:
        return _field_is_date_based(self)

    def is_time_based(self) -> bool:
        return _field_is_time_based(self)

    def is_supported_by(self, accessor: TemporalAccessor, /) -> bool:
        return accessor.supports_field(self)

    def get_from_native(self, value: _date | _time, /) -> int:
        """Extract the field from a standard library date, time,
        or datetime

        Raises
        ------
        UnsupportedField
            If the value doesn't have the field, such as the year of a time
        """
        if isinstance(value, _datetime):
            pass
        elif isinstance(value, _date):
            if not self.is_date_based():
                raise UnsupportedField._for_field(self)
        elif not self.is_time_based():
            raise UnsupportedField._for_field(self)
        return int(value.strftime(_FIELD_FORMATS[self]))

    def __str__(self) -> str:
        return self.value


def _range_from_bounds(bounds: tuple[int, ...]) -> ValueRange:
    if len(bounds) == 1:
        return ValueRange.of_fixed(1, *bounds)
    elif len(bounds) == 2:
        return ValueRange.of_fixed(*bounds)
    elif len(bounds) == 3:
        return ValueRange.of_variable_max(*bounds)
    return ValueRange.of_variable(*bounds)


# field: (base unit, range unit, range bounds, strftime directive)
_FIELD_DATA: dict[
    ChronoField, tuple[ChronoUnit, ChronoUnit, tuple[int, ...], str]
] = {
    ChronoField.MICRO_OF_SECOND: (
        ChronoUnit.MICROS,
        ChronoUnit.SECONDS,
        (0, 999_999),
        "%f",
    ),
    ChronoField.SECOND_OF_MINUTE: (
        ChronoUnit.SECONDS,
        ChronoUnit.MINUTES,
        (0, 59),
        "%S",
    ),
    ChronoField.MINUTE_OF_HOUR: (
        ChronoUnit.MINUTES,
        ChronoUnit.HOURS,
        (0, 59),
        "%M",
    ),
    ChronoField.HOUR_OF_DAY: (
        ChronoUnit.HOURS,
        ChronoUnit.DAYS,
        (0, 23),
        "%H",
    ),
    ChronoField.DAY_OF_WEEK: (ChronoUnit.DAYS, ChronoUnit.WEEKS, (7,), "%u"),
    ChronoField.DAY_OF_MONTH: (
        ChronoUnit.DAYS,
        ChronoUnit.MONTHS,
        (1, 28, 31),
        "%d",
    ),
    ChronoField.DAY_OF_YEAR: (
        ChronoUnit.DAYS,
        ChronoUnit.YEARS,
        (1, 365, 366),
        "%j",
    ),
    ChronoField.MONTH_OF_YEAR: (
        ChronoUnit.MONTHS,
        ChronoUnit.YEARS,
        (12,),
        "%m",
    ),
    ChronoField.YEAR: (
        ChronoUnit.YEARS,
        ChronoUnit.FOREVER,
        (-999_999_999, 999_999_999),
        "%Y",
    ),
}
_FIELD_UNITS = {f: (data[0], data[1]) for f, data in _FIELD_DATA.items()}
_FIELD_RANGES = {
    f: _range_from_bounds(data[2]) for f, data in _FIELD_DATA.items()
}
_FIELD_FORMATS = {f: data[3] for f, data in _FIELD_DATA.items()}
TemporalField.register(ChronoField)


@final
class Duration(_ImmutableBase, TemporalAmount):
    """An exact amount of time, such as "34.5 seconds",
    with microsecond precision.

    The value is stored as seconds and a microsecond adjustment.
    The microseconds are always in the range 0-999_999, also for negative
    durations: -0.5 seconds is stored as -1 seconds plus 500_000 microseconds.

    Examples
    --------
    >>> d = Duration.of_hours(1).plus_minutes(30)
    Duration(PT1H30M)
    >>> d.to_minutes()
    90
    >>> Duration.of_seconds(4, -999_999)
    Duration(PT3.000001S)

    Note
    ----
    A day is always exactly 24 hours here. This is different from a day
    in a :class:`Period`, which is a calendar day.
    """

    __slots__ = ("_secs", "_micros")

    def __init__(self, *, seconds: int = 0, micros: int = 0) -> None:
        secs, micros = normalize_micros(seconds, micros)
        if not in_i64(secs):
            raise InvalidArgument("Duration out of range")
        self._secs = secs
        self._micros = micros

    ZERO: ClassVar[Duration]
    """A duration of zero"""

    @classmethod
    def zero(cls) -> Duration:
        return cls.ZERO

    @classmethod
    def of_seconds(cls, seconds: int, micro_adjustment: int = 0, /) -> Duration:
        """Create from seconds, with an optional adjustment in microseconds.
        The adjustment may be negative, or larger than a second.

        >>> Duration.of_seconds(3, 1) == Duration.of_seconds(2, 1_000_001)
        True
        """
        return cls(seconds=seconds, micros=micro_adjustment)

    @classmethod
    def of_days(cls, days: int, /) -> Duration:
        """Create from days of exactly 24 hours"""
        return cls._from_micros(days * _MICROS_PER_DAY)

    @classmethod
    def of_hours(cls, hours: int, /) -> Duration:
        return cls._from_micros(hours * _MICROS_PER_HOUR)

    @classmethod
    def of_minutes(cls, minutes: int, /) -> Duration:
        return cls._from_micros(minutes * _MICROS_PER_MINUTE)

    @classmethod
    def of_millis(cls, millis: int, /) -> Duration:
        return cls._from_micros(millis * MICROS_PER_MILLI)

    @classmethod
    def of_micros(cls, micros: int, /) -> Duration:
        return cls._from_micros(micros)

    @classmethod
    def of(cls, amount: int, unit: TemporalUnit, /) -> Duration:
        """Create from an amount of the given unit.

        Only units with an exact duration are accepted, and
        :attr:`ChronoUnit.DAYS` which is treated as 24 hours.

        >>> Duration.of(2, ChronoUnit.DAYS)
        Duration(P2D)
        >>> Duration.of(1, ChronoUnit.MONTHS)
        Traceback (most recent call last):
          ...
        UnsupportedUnit: Unsupported unit: Months
        """
        if unit.is_duration_estimated() and unit is not ChronoUnit.DAYS:
            raise UnsupportedUnit._for_unit(unit)
        return unit.duration().multiplied_by(amount)

    @classmethod
    def from_amount(cls, amount: TemporalAmount, /) -> Duration:
        """Create from any amount of time, by summing the duration of
        each of its units.

        Raises
        ------
        UnsupportedUnit
            If the amount has a unit with an estimated duration
            (other than days)
        """
        total = cls.ZERO
        for unit in amount.units:
            total = total.plus_duration(cls.of(amount.get(unit), unit))
        return total

    @classmethod
    def parse(cls, s: str, /) -> Duration:
        """Parse an ISO 8601 duration string, such as ``P1DT2H3M4.5S``.

        Inverse of :meth:`format_iso`

        Each component may have its own sign (``P1DT-2H``),
        and a leading sign negates the whole duration (``-PT2H``).
        Fractions are only allowed on the seconds, and are rounded
        to whole microseconds.

        Example
        -------
        >>> Duration.parse("P1DT2H3M4S").seconds
        93784
        >>> Duration.parse("PT-90M")
        Duration(-PT1H30M)
        """
        return cls._from_micros(duration_from_iso(s))

    @classmethod
    def from_py_timedelta(cls, td: _timedelta, /) -> Duration:
        """Create from a :class:`~datetime.timedelta`

        Inverse of :meth:`py_timedelta`
        """
        return cls._from_micros(
            (td.days * SECONDS_PER_DAY + td.seconds) * MICROS_PER_SECOND
            + td.microseconds
        )

    def py_timedelta(self) -> _timedelta:
        """Convert to a :class:`~datetime.timedelta`

        Inverse of :meth:`from_py_timedelta`

        Raises
        ------
        DateTimeError
            If the duration is too large for a timedelta
        """
        try:
            return _timedelta(seconds=self._secs, microseconds=self._micros)
        except OverflowError as e:
            raise DateTimeError(f"Cannot convert {self} to timedelta") from e

    @property
    def seconds(self) -> int:
        """The seconds part, rounded towards negative infinity"""
        return self._secs

    @property
    def micros(self) -> int:
        """The microseconds part, always in the range 0-999_999"""
        return self._micros

    @property
    def units(self) -> tuple[ChronoUnit, ...]:
        return _DURATION_UNITS

    def get(self, unit: TemporalUnit, /) -> int:
        if unit is ChronoUnit.SECONDS:
            return self._secs
        elif unit is ChronoUnit.MICROS:
            return self._micros
        raise UnsupportedUnit._for_unit(unit)

    def is_zero(self) -> bool:
        return not (self._secs or self._micros)

    def is_negative(self) -> bool:
        return self._secs < 0

    def with_seconds(self, seconds: int, /) -> Duration:
        return Duration(seconds=seconds, micros=self._micros)

    def with_micros(self, micros: int, /) -> Duration:
        return Duration(seconds=self._secs, micros=micros)

    def plus(self, amount: int, unit: TemporalUnit, /) -> Duration:
        """Add an amount of seconds or microseconds

        Raises
        ------
        UnsupportedUnit
            For any other unit
        """
        if unit is ChronoUnit.SECONDS:
            return self.plus_seconds(amount)
        elif unit is ChronoUnit.MICROS:
            return self.plus_micros(amount)
        raise UnsupportedUnit._for_unit(unit)

    def minus(self, amount: int, unit: TemporalUnit, /) -> Duration:
        return self.plus(-amount, unit)

    def plus_duration(self, other: Duration, /) -> Duration:
        return self._plus_micros(other._total_micros())

    def minus_duration(self, other: Duration, /) -> Duration:
        return self._plus_micros(-other._total_micros())

    def plus_days(self, days: int, /) -> Duration:
        return self._plus_micros(days * _MICROS_PER_DAY)

    def minus_days(self, days: int, /) -> Duration:
        return self._plus_micros(-days * _MICROS_PER_DAY)

    def plus_hours(self, hours: int, /) -> Duration:
        return self._plus_micros(hours * _MICROS_PER_HOUR)

    def minus_hours(self, hours: int, /) -> Duration:
        return self._plus_micros(-hours * _MICROS_PER_HOUR)

    def plus_minutes(self, minutes: int, /) -> Duration:
        return self._plus_micros(minutes * _MICROS_PER_MINUTE)

    def minus_minutes(self, minutes: int, /) -> Duration:
        return self._plus_micros(-minutes * _MICROS_PER_MINUTE)

    def plus_seconds(self, seconds: int, /) -> Duration:
        return self._plus_micros(seconds * MICROS_PER_SECOND)

    def minus_seconds(self, seconds: int, /) -> Duration:
        return self._plus_micros(-seconds * MICROS_PER_SECOND)

    def plus_millis(self, millis: int, /) -> Duration:
        return self._plus_micros(millis * MICROS_PER_MILLI)

    def minus_millis(self, millis: int, /) -> Duration:
        return self._plus_micros(-millis * MICROS_PER_MILLI)

    def plus_micros(self, micros: int, /) -> Duration:
        return self._plus_micros(micros)

    def minus_micros(self, micros: int, /) -> Duration:
        return self._plus_micros(-micros)

    def multiplied_by(self, factor: int, /) -> Duration:
        """Multiply by a whole number

        >>> Duration.of_seconds(2).multiplied_by(-3)
        Duration(-PT6S)
        """
        return Duration._from_micros(self._total_micros() * factor)

    def divided_by(self, divisor: int, /) -> Duration:
        """Divide by a whole number, rounding towards negative infinity
        at microsecond precision.

        Dividing by zero, or dividing a zero duration,
        returns the duration unchanged.

        >>> Duration.of_seconds(10, 3).divided_by(3)
        Duration(PT3.333334S)
        >>> Duration.of_seconds(1).divided_by(0)
        Duration(PT1S)
        """
        if divisor == 0 or self.is_zero():
            return self
        return Duration._from_micros(self._total_micros() // divisor)

    def negated(self) -> Duration:
        return Duration._from_micros(-self._total_micros())

    def abs(self) -> Duration:
        return self.negated() if self._secs < 0 else self

    def to_days(self) -> int:
        """The number of whole days of 24 hours, rounded towards
        negative infinity"""
        return self._secs // SECONDS_PER_DAY

    def to_hours(self) -> int:
        return self._secs // SECONDS_PER_HOUR

    def to_minutes(self) -> int:
        return self._secs // SECONDS_PER_MINUTE

    def to_seconds(self) -> int:
        return self._secs

    def to_millis(self) -> int:
        return self._total_micros() // MICROS_PER_MILLI

    def to_micros(self) -> int:
        return self._total_micros()

    def to_days_part(self) -> int:
        return self.to_days()

    def to_hours_part(self) -> int:
        """The hours within the day, 0-23

        >>> Duration.of_hours(26).to_hours_part()
        2
        """
        return self.to_hours() - self.to_days() * 24

    def to_minutes_part(self) -> int:
        return self.to_minutes() - self.to_hours() * 60

    def to_seconds_part(self) -> int:
        return self._secs - self.to_minutes() * 60

    def to_millis_part(self) -> int:
        return self.to_millis() - self._secs * _MILLIS_PER_SECOND

    def to_micros_part(self) -> int:
        return self._total_micros() - self.to_millis() * MICROS_PER_MILLI

    def compare_to(self, other: Duration, /) -> int:
        """Compare to another duration: -1, 0, or 1"""
        if not isinstance(other, Duration):
            raise TypeError(f"Cannot compare Duration with {type(other)}")
        a = (self._secs, self._micros)
        b = (other._secs, other._micros)
        return (a > b) - (a < b)

    def format_iso(self) -> str:
        """Format as an ISO 8601 duration string, such as ``PT1H30M``.

        Inverse of :meth:`parse`

        The sign is always placed in front of the whole duration.
        Days are only used for durations of at least 24 hours.

        Example
        -------
        >>> Duration.of_hours(26).plus_millis(500).format_iso()
        'P1DT2H0.5S'
        >>> Duration.ZERO.format_iso()
        'PT0S'
        """
        if self.is_zero():
            return "PT0S"
        total = self._total_micros()
        secs, micros = divmod(abs(total), MICROS_PER_SECOND)
        days, secs = divmod(secs, SECONDS_PER_DAY)
        hours, secs = divmod(secs, SECONDS_PER_HOUR)
        mins, secs = divmod(secs, SECONDS_PER_MINUTE)
        seconds = f"{secs}.{micros:06}".rstrip("0") if micros else str(secs)
        return (
            "-" * (total < 0)
            + "P"
            + f"{days}D" * bool(days)
            + "T" * bool(hours or mins or secs or micros)
            + f"{hours}H" * bool(hours)
            + f"{mins}M" * bool(mins)
            + f"{seconds}S" * bool(secs or micros)
        )

    __str__ = format_iso

    def __repr__(self) -> str:
        return f"Duration({self})"

    def __eq__(self, other: object) -> bool:
        """Compare for equality

        Example
        -------
        >>> Duration.of_days(1) == Duration.of_hours(24)
        True
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self._secs == other._secs and self._micros == other._micros

    def __hash__(self) -> int:
        return hash((self._secs, self._micros))

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._micros) < (other._secs, other._micros)

    def __le__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._micros) <= (other._secs, other._micros)

    def __gt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._micros) > (other._secs, other._micros)

    def __ge__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._micros) >= (other._secs, other._micros)

    def __bool__(self) -> bool:
        """True if the value is non-zero"""
        return not self.is_zero()

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus_duration(other)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus_duration(other)

    def __mul__(self, other: int) -> Duration:
        if not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: int) -> Duration:
        if not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def _total_micros(self) -> int:
        return self._secs * MICROS_PER_SECOND + self._micros

    def _plus_micros(self, micros: int) -> Duration:
        return Duration._from_micros(self._total_micros() + micros)

    @classmethod
    def _from_micros(cls, total: int) -> Duration:
        secs, micros = divmod(total, MICROS_PER_SECOND)
        if not in_i64(secs):
            raise InvalidArgument("Duration out of range")
        new = _object_new(cls)
        new._secs = secs
        new._micros = micros
        return new


_DURATION_UNITS = (ChronoUnit.SECONDS, ChronoUnit.MICROS)
Duration.ZERO = Duration()


@final
class Period(_ImmutableBase, TemporalAmount):
    """A calendar-based amount of time, such as "2 years, 3 months
    and 4 days".

    The years, months, and days are stored independently and may each
    have their own sign. They aren't normalized automatically:
    15 months stays 15 months until :meth:`normalized` is called.

    Examples
    --------
    >>> p = Period(years=1, months=15, weeks=1)
    Period(P1Y15M7D)
    >>> p.normalized()
    Period(P2Y3M7D)
    >>> date + p  # add to any Temporal

    Note
    ----
    Weeks are accepted as input, but are stored as 7 days each.
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(
        self, *, years: int = 0, months: int = 0, weeks: int = 0, days: int = 0
    ) -> None:
        days += weeks * DAYS_PER_WEEK
        if not in_i64(years, months, days):
            raise InvalidArgument("Period out of range")
        self._years = years
        self._months = months
        self._days = days

    ZERO: ClassVar[Period]
    """A period of zero"""

    @classmethod
    def zero(cls) -> Period:
        return cls.ZERO

    @classmethod
    def of(cls, years: int, months: int, days: int, /) -> Period:
        return cls(years=years, months=months, days=days)

    @classmethod
    def of_years(cls, years: int, /) -> Period:
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int, /) -> Period:
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int, /) -> Period:
        return cls(weeks=weeks)

    @classmethod
    def of_days(cls, days: int, /) -> Period:
        return cls(days=days)

    @classmethod
    def from_amount(cls, amount: TemporalAmount, /) -> Period:
        """Create from any amount of time, taking its years, months,
        and days. Other units are ignored.

        Periods are returned unchanged.

        >>> Period.from_amount(Duration.of_days(3))  # no calendar days!
        Period(P0D)
        """
        if isinstance(amount, Period):
            return amount
        years = months = days = 0
        for unit in amount.units:
            if unit is ChronoUnit.YEARS:
                years += amount.get(unit)
            elif unit is ChronoUnit.MONTHS:
                months += amount.get(unit)
            elif unit is ChronoUnit.DAYS:
                days += amount.get(unit)
        return cls(years=years, months=months, days=days)

    @classmethod
    def parse(cls, s: str, /) -> Period:
        """Parse an ISO 8601 period string, such as ``P1Y2M3W4D``.

        Inverse of :meth:`format_iso`

        Each component may have its own sign (``P1Y-2M``),
        and a leading sign negates all components (``-P1Y2M``).
        Weeks are converted to days.

        Example
        -------
        >>> Period.parse("P1Y15M")
        Period(P1Y15M)
        >>> Period.parse("-P2W")
        Period(-P14D)
        """
        years, months, days = period_from_iso(s)
        return cls(years=years, months=months, days=days)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def units(self) -> tuple[ChronoUnit, ...]:
        return _PERIOD_UNITS

    def get(self, unit: TemporalUnit, /) -> int:
        if unit is ChronoUnit.YEARS:
            return self._years
        elif unit is ChronoUnit.MONTHS:
            return self._months
        elif unit is ChronoUnit.DAYS:
            return self._days
        raise UnsupportedUnit._for_unit(unit)

    def is_zero(self) -> bool:
        return not (self._years or self._months or self._days)

    def is_negative(self) -> bool:
        """Whether any of the components is negative"""
        return self._years < 0 or self._months < 0 or self._days < 0

    def with_years(self, years: int, /) -> Period:
        return Period(years=years, months=self._months, days=self._days)

    def with_months(self, months: int, /) -> Period:
        return Period(years=self._years, months=months, days=self._days)

    def with_days(self, days: int, /) -> Period:
        return Period(years=self._years, months=self._months, days=days)

    def plus_amount(self, amount: TemporalAmount, /) -> Period:
        """Add the years, months, and days of another amount.
        The components are added independently.

        >>> Period.of(1, 11, 0).plus_amount(Period.of_months(2))
        Period(P1Y13M)
        """
        other = Period.from_amount(amount)
        return Period(
            years=self._years + other._years,
            months=self._months + other._months,
            days=self._days + other._days,
        )

    def minus_amount(self, amount: TemporalAmount, /) -> Period:
        other = Period.from_amount(amount)
        return Period(
            years=self._years - other._years,
            months=self._months - other._months,
            days=self._days - other._days,
        )

    def plus_years(self, years: int, /) -> Period:
        return self.with_years(self._years + years)

    def minus_years(self, years: int, /) -> Period:
        return self.with_years(self._years - years)

    def plus_months(self, months: int, /) -> Period:
        return self.with_months(self._months + months)

    def minus_months(self, months: int, /) -> Period:
        return self.with_months(self._months - months)

    def plus_days(self, days: int, /) -> Period:
        return self.with_days(self._days + days)

    def minus_days(self, days: int, /) -> Period:
        return self.with_days(self._days - days)

    def normalized(self) -> Period:
        """Fold whole years out of the months, so that the months are
        within -11 and 11. Years and months end up with the same sign.
        Days are left alone, since their relation to months varies.

        Example
        -------
        >>> Period.of(1, 15, 35).normalized()
        Period(P2Y3M35D)
        >>> Period.of(1, -15, 0).normalized()
        Period(-P3M)
        """
        if -MONTHS_PER_YEAR < self._months < MONTHS_PER_YEAR:
            return self
        years, months = split_total_months(self.to_total_months())
        return Period(years=years, months=months, days=self._days)

    def multiplied_by(self, factor: int, /) -> Period:
        return Period(
            years=self._years * factor,
            months=self._months * factor,
            days=self._days * factor,
        )

    def negated(self) -> Period:
        """Negate each component

        >>> Period.of(2, -3, 4).negated()
        Period(P-2Y3M-4D)
        """
        return Period(
            years=-self._years, months=-self._months, days=-self._days
        )

    def to_total_months(self) -> int:
        return self._years * MONTHS_PER_YEAR + self._months

    def format_iso(self) -> str:
        """Format as an ISO 8601 period string, such as ``P1Y2M3D``.

        Inverse of :meth:`parse`

        If all (non-zero) components are negative, the sign is placed
        in front. Otherwise, each negative component carries its own sign.

        Example
        -------
        >>> Period.of(-1, -2, 0).format_iso()
        '-P1Y2M'
        >>> Period.of(1, -2, 3).format_iso()
        'P1Y-2M3D'
        >>> Period.ZERO.format_iso()
        'P0D'
        """
        if self.is_zero():
            return "P0D"
        years, months, days = self._years, self._months, self._days
        if years <= 0 and months <= 0 and days <= 0:
            sign = "-"
            years, months, days = -years, -months, -days
        else:
            sign = ""
        return (
            sign
            + "P"
            + f"{years}Y" * bool(years)
            + f"{months}M" * bool(months)
            + f"{days}D" * bool(days)
        )

    __str__ = format_iso

    def __repr__(self) -> str:
        return f"Period({self})"

    def __eq__(self, other: object) -> bool:
        """Compare the components for equality. Periods which are
        equivalent after normalization aren't necessarily equal.

        >>> Period.of_months(12) == Period.of_years(1)
        False
        """
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __bool__(self) -> bool:
        """True if any component is non-zero"""
        return not self.is_zero()

    def __add__(self, other: TemporalAmount) -> Period:
        if not isinstance(other, TemporalAmount):
            return NotImplemented
        return self.plus_amount(other)

    def __sub__(self, other: TemporalAmount) -> Period:
        if not isinstance(other, TemporalAmount):
            return NotImplemented
        return self.minus_amount(other)

    def __mul__(self, other: int) -> Period:
        if not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: int) -> Period:
        if not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __pos__(self) -> Period:
        return self


_PERIOD_UNITS = (ChronoUnit.YEARS, ChronoUnit.MONTHS, ChronoUnit.DAYS)
Period.ZERO = Period()
