"""Gregorian calendar date <-> Modified Julian Date.

The proleptic Gregorian calendar is used throughout, so dates before the 1582
reform do not match historical (Julian calendar) records.
"""

from __future__ import annotations

import math

from observing_tools.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_JULIAN_YEAR,
    J2000_EPOCH_MJD,
    MIN_CALENDAR_YEAR,
)
from observing_tools.errors import BadDate, BadDay, BadMonth, BadYear

# MJD limits of mjd_to_calendar (exclusive)
MIN_CALENDAR_MJD = -2395520.0
MAX_CALENDAR_MJD = 1.0e9


def is_leap_year(year: int) -> bool:
    """Return True for a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in month (1-12) of year."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def calendar_to_mjd(year: int, month: int, day: int) -> float:
    """Convert a Gregorian calendar date to MJD at 0h.

    Checks are made in the order year, month, day; the first failure is raised.

    Parameters:
        year: Year, -4699 or later.
        month: Month, 1-12.
        day: Day of month, valid for that year and month.

    Returns:
        MJD (JD - 2400000.5) of 0h on that date.

    Raises:
        BadYear, BadMonth, BadDay: Invalid field (all subclasses of InvalidDate).
    """
    if year < MIN_CALENDAR_YEAR:
        raise BadYear(year)
    if month < 1 or month > 12:
        raise BadMonth(month)
    if day < 1 or day > days_in_month(year, month):
        raise BadDay(day)
    # Fliegel & Van Flandern; all intermediate quantities are positive.
    jan_feb = (12 - month) // 10
    mjd = (
        (1461 * (year - jan_feb + 4712)) // 4
        + (306 * ((month + 9) % 12) + 5) // 10
        - (3 * ((year - jan_feb + 4900) // 100)) // 4
        + day
        - 2399904
    )
    return float(mjd)


def mjd_to_calendar(mjd: float) -> tuple[int, int, int, float]:
    """Convert MJD to Gregorian calendar date and fraction of day.

    Parameters:
        mjd: Modified Julian Date.

    Returns:
        (year, month, day, fraction) with fraction in [0, 1).

    Raises:
        BadDate: mjd outside the supported range.
    """
    if not math.isfinite(mjd) or mjd <= MIN_CALENDAR_MJD or mjd >= MAX_CALENDAR_MJD:
        raise BadDate(mjd, f'mjd = {mjd} outside ({MIN_CALENDAR_MJD}, {MAX_CALENDAR_MJD})')
    day_number = math.floor(mjd)
    fraction = mjd - day_number
    jd = int(day_number) + 2400001
    n4 = 4 * (jd + ((6 * ((4 * jd - 17918) // 146097)) // 4 + 1) // 2 - 37)
    nd10 = 10 * (((n4 - 237) % 1461) // 4) + 5
    year = n4 // 1461 - 4712
    month = ((nd10 // 306 + 2) % 12) + 1
    day = (nd10 % 306) // 10 + 1
    return (year, month, day, fraction)


def julian_epoch(mjd: float) -> float:
    """Julian epoch (e.g. 2000.0) of an MJD."""
    return 2000.0 + (mjd - J2000_EPOCH_MJD) / DAYS_PER_JULIAN_YEAR


def mjd_from_julian_epoch(epoch: float) -> float:
    """MJD of a Julian epoch; inverse of julian_epoch."""
    return J2000_EPOCH_MJD + (epoch - 2000.0) * DAYS_PER_JULIAN_YEAR
