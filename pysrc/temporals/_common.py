from __future__ import annotations


class DateTimeError(Exception):
    """Base class for all errors raised by this library"""


class InvalidArgument(DateTimeError, ValueError):
    """A value is outside the range allowed for it"""


class InvalidFormat(InvalidArgument):
    """A string doesn't match the expected format"""


class UnsupportedUnit(DateTimeError):
    """A unit is used with a type that doesn't support it"""

    @classmethod
    def _for_unit(cls, unit: object) -> UnsupportedUnit:
        return cls(f"Unsupported unit: {unit}")


class UnsupportedField(DateTimeError):
    """A field is queried on a type that doesn't support it"""

    @classmethod
    def _for_field(cls, field: object) -> UnsupportedField:
        return cls(f"Unsupported field: {field}")
