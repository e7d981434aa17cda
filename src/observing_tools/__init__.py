"""Time-scale and observed-place reductions for ground-based astronomy.

Converts a UTC timestamp into TT, TDB and times corrected for light travel to
the heliocentre and Solar System barycentre, and a catalog position into the
airmass, altitude, azimuth, hour angle, parallactic angle and refraction seen
from an observatory.

Leap seconds come from rms-julian; the Earth ephemeris, precession-nutation
and sidereal time series come from ERFA (pyerfa); vector algebra uses cspyce.
"""

from observing_tools.calendar_utils import calendar_to_mjd, julian_epoch, mjd_to_calendar
from observing_tools.errors import (
    BadDate,
    BadDay,
    BadMonth,
    BadYear,
    DomainLimitation,
    InvalidDate,
    RangeError,
)
from observing_tools.models import (
    AtmosphericConditions,
    GeodeticSite,
    ObservedPlace,
    SkyPosition,
    TimeCorrection,
)
from observing_tools.reduction import domain_limitations, observed_place, time_correct
from observing_tools.time_utils import Time, TimeScale, dtt

__all__: list[str] = [
    'AtmosphericConditions',
    'BadDate',
    'BadDay',
    'BadMonth',
    'BadYear',
    'DomainLimitation',
    'GeodeticSite',
    'InvalidDate',
    'ObservedPlace',
    'RangeError',
    'SkyPosition',
    'Time',
    'TimeCorrection',
    'TimeScale',
    'calendar_to_mjd',
    'domain_limitations',
    'dtt',
    'julian_epoch',
    'mjd_to_calendar',
    'observed_place',
    'time_correct',
]
