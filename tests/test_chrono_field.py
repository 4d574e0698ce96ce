from datetime import date, datetime, time
from unittest.mock import Mock

import pytest

from temporals import (
    ChronoField,
    ChronoUnit,
    InvalidArgument,
    TemporalField,
    UnsupportedField,
    ValueRange,
)

from .common import SimpleDate

TIME_FIELDS = [
    ChronoField.MICRO_OF_SECOND,
    ChronoField.SECOND_OF_MINUTE,
    ChronoField.MINUTE_OF_HOUR,
    ChronoField.HOUR_OF_DAY,
]
DATE_FIELDS = [
    ChronoField.DAY_OF_WEEK,
    ChronoField.DAY_OF_MONTH,
    ChronoField.DAY_OF_YEAR,
    ChronoField.MONTH_OF_YEAR,
    ChronoField.YEAR,
]


def test_members():
    assert list(ChronoField) == [*TIME_FIELDS, *DATE_FIELDS]


def test_str():
    assert str(ChronoField.DAY_OF_MONTH) == "DayOfMonth"
    assert str(ChronoField.YEAR) == "Year"


def test_is_temporal_field():
    assert all(isinstance(f, TemporalField) for f in ChronoField)


@pytest.mark.parametrize(
    "field, base, range_unit",
    [
        (ChronoField.MICRO_OF_SECOND, ChronoUnit.MICROS, ChronoUnit.SECONDS),
        (ChronoField.SECOND_OF_MINUTE, ChronoUnit.SECONDS, ChronoUnit.MINUTES),
        (ChronoField.MINUTE_OF_HOUR, ChronoUnit.MINUTES, ChronoUnit.HOURS),
        (ChronoField.HOUR_OF_DAY, ChronoUnit.HOURS, ChronoUnit.DAYS),
        (ChronoField.DAY_OF_WEEK, ChronoUnit.DAYS, ChronoUnit.WEEKS),
        (ChronoField.DAY_OF_MONTH, ChronoUnit.DAYS, ChronoUnit.MONTHS),
        (ChronoField.DAY_OF_YEAR, ChronoUnit.DAYS, ChronoUnit.YEARS),
        (ChronoField.MONTH_OF_YEAR, ChronoUnit.MONTHS, ChronoUnit.YEARS),
        (ChronoField.YEAR, ChronoUnit.YEARS, ChronoUnit.FOREVER),
    ],
)
def test_units(field, base, range_unit):
    assert field.base_unit is base
    assert field.range_unit is range_unit


@pytest.mark.parametrize(
    "field, expect",
    [
        (ChronoField.MICRO_OF_SECOND, ValueRange.of_fixed(0, 999_999)),
        (ChronoField.SECOND_OF_MINUTE, ValueRange.of_fixed(0, 59)),
        (ChronoField.MINUTE_OF_HOUR, ValueRange.of_fixed(0, 59)),
        (ChronoField.HOUR_OF_DAY, ValueRange.of_fixed(0, 23)),
        (ChronoField.DAY_OF_WEEK, ValueRange.of_fixed(1, 7)),
        (ChronoField.DAY_OF_MONTH, ValueRange.of_variable_max(1, 28, 31)),
        (ChronoField.DAY_OF_YEAR, ValueRange.of_variable_max(1, 365, 366)),
        (ChronoField.MONTH_OF_YEAR, ValueRange.of_fixed(1, 12)),
        (
            ChronoField.YEAR,
            ValueRange.of_fixed(-999_999_999, 999_999_999),
        ),
    ],
)
def test_range(field, expect):
    assert field.range() == expect
    assert field.range() is field.range()


@pytest.mark.parametrize("field", TIME_FIELDS)
def test_time_based(field):
    assert field.is_time_based()
    assert not field.is_date_based()


@pytest.mark.parametrize("field", DATE_FIELDS)
def test_date_based(field):
    assert field.is_date_based()
    assert not field.is_time_based()


def test_check_value():
    r = ChronoField.DAY_OF_MONTH.range()
    assert r.check_valid_value(31, ChronoField.DAY_OF_MONTH) == 31

    with pytest.raises(
        InvalidArgument,
        match="Expected a value within range 1 - 28/31 for DayOfMonth, got 32",
    ):
        r.check_valid_value(32, ChronoField.DAY_OF_MONTH)


class TestGetFromNative:

    dt = datetime(2024, 3, 4, 5, 6, 7, 8)

    @pytest.mark.parametrize(
        "field, expect",
        [
            (ChronoField.MICRO_OF_SECOND, 8),
            (ChronoField.SECOND_OF_MINUTE, 7),
            (ChronoField.MINUTE_OF_HOUR, 6),
            (ChronoField.HOUR_OF_DAY, 5),
            (ChronoField.DAY_OF_WEEK, 1),
            (ChronoField.DAY_OF_MONTH, 4),
            (ChronoField.DAY_OF_YEAR, 64),
            (ChronoField.MONTH_OF_YEAR, 3),
            (ChronoField.YEAR, 2024),
        ],
    )
    def test_datetime(self, field, expect):
        assert field.get_from_native(self.dt) == expect

    def test_date(self):
        assert ChronoField.DAY_OF_YEAR.get_from_native(date(2024, 12, 31)) == 366
        assert ChronoField.DAY_OF_WEEK.get_from_native(date(2024, 3, 10)) == 7

    def test_time(self):
        t = time(13, 45, 30, 250_000)
        assert ChronoField.HOUR_OF_DAY.get_from_native(t) == 13
        assert ChronoField.MINUTE_OF_HOUR.get_from_native(t) == 45
        assert ChronoField.MICRO_OF_SECOND.get_from_native(t) == 250_000

    @pytest.mark.parametrize("field", DATE_FIELDS)
    def test_date_field_of_time(self, field):
        with pytest.raises(UnsupportedField, match=str(field)):
            field.get_from_native(time(13, 45))

    @pytest.mark.parametrize("field", TIME_FIELDS)
    def test_time_field_of_date(self, field):
        with pytest.raises(UnsupportedField, match=str(field)):
            field.get_from_native(date(2024, 3, 4))

    @pytest.mark.parametrize("field", [*TIME_FIELDS, *DATE_FIELDS])
    def test_datetime_has_all_fields(self, field):
        assert field.get_from_native(datetime(2024, 3, 4)) in field.range()


class TestIsSupportedBy:

    def test_delegates(self):
        accessor = Mock()
        accessor.supports_field.return_value = True
        assert ChronoField.YEAR.is_supported_by(accessor)
        accessor.supports_field.assert_called_once_with(ChronoField.YEAR)

    def test_date(self):
        d = SimpleDate(2024, 3, 4)
        assert ChronoField.DAY_OF_MONTH.is_supported_by(d)
        assert not ChronoField.HOUR_OF_DAY.is_supported_by(d)

        assert d.get(ChronoField.DAY_OF_YEAR) == 64
        with pytest.raises(UnsupportedField, match="HourOfDay"):
            d.get(ChronoField.HOUR_OF_DAY)
