from datetime import date

import pytest

from temporals import (
    ChronoField,
    ChronoUnit,
    Duration,
    Period,
    Temporal,
    TemporalAccessor,
    TemporalAmount,
    TemporalField,
    TemporalUnit,
    UnsupportedField,
    UnsupportedUnit,
    ValueRange,
)

from .common import RecordingTemporal, SimpleAmount, SimpleDate


class Fortnights(TemporalUnit):

    def is_date_based(self):
        return True

    def is_time_based(self):
        return False

    def is_duration_estimated(self):
        return True

    def duration(self):
        return Duration.of_days(14)

    def __str__(self):
        return "Fortnights"


class QuarterOfYear(TemporalField):

    @property
    def base_unit(self):
        return ChronoUnit.MONTHS

    @property
    def range_unit(self):
        return ChronoUnit.YEARS

    def range(self):
        return ValueRange.of_fixed(1, 4)

    def get_from_native(self, value):
        return (value.month - 1) // 3 + 1


class MilliOfDay(TemporalField):

    @property
    def base_unit(self):
        return ChronoUnit.MILLIS

    @property
    def range_unit(self):
        return ChronoUnit.DAYS

    def range(self):
        return ValueRange.of_fixed(0, 86_399_999)

    def get_from_native(self, value):
        return (
            (value.hour * 60 + value.minute) * 60 + value.second
        ) * 1_000 + value.microsecond // 1_000


def test_abstract():
    with pytest.raises(TypeError):
        Temporal()  # type: ignore[abstract]

    with pytest.raises(TypeError):
        TemporalAmount()  # type: ignore[abstract]

    with pytest.raises(TypeError):
        TemporalUnit()  # type: ignore[abstract]

    with pytest.raises(TypeError):
        TemporalField()  # type: ignore[abstract]


def test_hierarchy():
    assert issubclass(Temporal, TemporalAccessor)
    assert isinstance(SimpleDate(2024, 1, 1), TemporalAccessor)


class TestCustomUnit:

    def test_defaults(self):
        unit = Fortnights()
        assert not unit.is_supported_by(SimpleDate(2024, 1, 1))
        assert unit.is_supported_by(RecordingTemporal())

    def test_not_exact(self):
        with pytest.raises(UnsupportedUnit, match="Fortnights"):
            Duration.of(1, Fortnights())

    def test_in_amount(self):
        unit = Fortnights()
        amount = SimpleAmount({unit: 2, ChronoUnit.DAYS: 1})
        assert (RecordingTemporal() + amount).calls == (
            (2, unit),
            (1, ChronoUnit.DAYS),
        )
        assert Period.from_amount(amount) == Period.of_days(1)

        with pytest.raises(UnsupportedUnit, match="Fortnights"):
            SimpleDate(2024, 1, 1) + amount


class TestCustomField:

    def test_date_based(self):
        field = QuarterOfYear()
        assert field.is_date_based()
        assert not field.is_time_based()
        assert field.get_from_native(date(2024, 5, 1)) == 2

    def test_time_based(self):
        field = MilliOfDay()
        assert field.is_time_based()
        assert not field.is_date_based()

    def test_supported_by(self):
        d = SimpleDate(2024, 5, 1)
        assert not QuarterOfYear().is_supported_by(d)
        with pytest.raises(UnsupportedField):
            d.get(QuarterOfYear())


class TestDoubleDispatch:

    def test_plus_amount(self):
        d = SimpleDate(2024, 1, 31)
        assert d.plus_amount(Period.of_months(1)) == SimpleDate(2024, 2, 29)
        assert d + Period.of_months(1) == SimpleDate(2024, 2, 29)

    def test_minus_amount(self):
        d = SimpleDate(2024, 3, 31)
        assert d.minus_amount(Period.of_months(1)) == SimpleDate(2024, 2, 29)
        assert d - Period.of(0, 1, 1) == SimpleDate(2024, 2, 28)

    def test_minus_unit(self):
        d = SimpleDate(2024, 1, 1)
        assert d.minus(1, ChronoUnit.DECADES) == SimpleDate(2014, 1, 1)
        assert d.minus(2, ChronoUnit.WEEKS) == SimpleDate(2023, 12, 18)

    def test_plus_unsupported_unit(self):
        with pytest.raises(UnsupportedUnit, match="Hours"):
            SimpleDate(2024, 1, 1).plus(1, ChronoUnit.HOURS)

    def test_other_types(self):
        d = SimpleDate(2024, 1, 1)
        with pytest.raises(TypeError, match="unsupported operand"):
            d + 1  # type: ignore[operator]

        with pytest.raises(TypeError, match="unsupported operand"):
            d - ChronoUnit.DAYS  # type: ignore[operator]

    def test_custom_amount(self):
        amount = SimpleAmount({ChronoUnit.WEEKS: 1, ChronoUnit.YEARS: -1})
        assert SimpleDate(2024, 2, 29) + amount == SimpleDate(2023, 3, 7)
        assert SimpleDate(2023, 3, 7) - amount == SimpleDate(2024, 2, 28)

    def test_amount_methods_delegate(self):
        p = Period.of(1, 2, 3)
        t = RecordingTemporal()
        assert t.plus_amount(p).calls == p.add_to(t).calls
        assert t.minus_amount(p).calls == p.subtract_from(t).calls


def test_unit_field_interplay():
    # a field is always measured in a smaller unit than it's bound by
    for field in ChronoField:
        assert field.range_unit is ChronoUnit.FOREVER or (
            field.base_unit.duration() < field.range_unit.duration()
        )
