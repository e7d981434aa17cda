"""Error taxonomy: invalid calendar dates, out-of-range inputs, model advisories."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidDate(ValueError):
    """Calendar date (or MJD) outside the supported Gregorian domain."""

    field = 'date'

    def __init__(self, value: float, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f'bad {self.field} = {value}')


class BadYear(InvalidDate):
    """Year earlier than the supported minimum."""

    field = 'year'


class BadMonth(InvalidDate):
    """Month not in 1-12."""

    field = 'month'


class BadDay(InvalidDate):
    """Day not valid for the given year and month."""

    field = 'day'


class BadDate(InvalidDate):
    """MJD outside the range the calendar inverse supports."""

    field = 'mjd'


class RangeError(ValueError):
    """Input value outside its valid range.

    Attributes:
        field: Name of the offending input (e.g. 'longitude').
        value: The rejected value.
        low, high: The valid range.
    """

    def __init__(
        self,
        field: str,
        value: float,
        low: float,
        high: float,
        *,
        low_inclusive: bool = True,
        high_inclusive: bool = True,
    ) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        left = '[' if low_inclusive else '('
        right = ']' if high_inclusive else ')'
        super().__init__(f'{field} = {value} out of range {left}{low}, {high}{right}')


@dataclass(frozen=True)
class DomainLimitation:
    """Non-fatal advisory: a model was evaluated outside its calibrated domain.

    Never raised; returned by domain_limitations() so callers can decide.
    """

    name: str
    limit_deg: float
    value_deg: float
    message: str
