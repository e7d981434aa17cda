"""Fixed constants: time scales, unit conversions, Earth model, default atmosphere.

All conversions between hours, degrees, radians, arcseconds, AU, metres, days
and seconds go through the names below.
"""

import math

# Time: seconds per unit and MJD reference points
SECONDS_PER_DAY = 86400.0
MJD_ZERO_JD = 2400000.5  # JD of MJD 0
J2000_MJD = 51544.0  # 2000-01-01 00:00 (calendar day zero for rms-julian)
J2000_EPOCH_MJD = 51544.5  # 2000-01-01 12:00, epoch J2000.0
DAYS_PER_JULIAN_YEAR = 365.25
TT_MINUS_TAI = 32.184  # seconds
TAI_MINUS_UTC_AT_J2000 = 32.0  # seconds, in force 1999-01-01 .. 2005-12-31
LEAPSECOND_TABLE_START_MJD = 41317.0  # 1972-01-01, first entry of the UTC leap-second table
LEAPSECOND_TABLE_VALID_UNTIL_MJD = 61406.0  # 2027-01-01, end of announced TAI-UTC offsets

# Angle: degrees per circle and sexagesimal
TWOPI = 2.0 * math.pi
DEGREES_PER_CIRCLE = 360.0
HOURS_PER_CIRCLE = 24.0
ARCSEC_PER_DEGREE = 3600.0
RADIANS_PER_DEGREE = math.pi / 180.0
RADIANS_PER_HOUR = TWOPI / HOURS_PER_CIRCLE
RADIANS_PER_ARCSEC = RADIANS_PER_DEGREE / ARCSEC_PER_DEGREE

# Distance and speed
AU_M = 149597870700.0
SPEED_OF_LIGHT_M_S = 299792458.0
AU_LIGHT_TIME_S = AU_M / SPEED_OF_LIGHT_M_S
KM_S_TO_AU_PER_YEAR = 1000.0 * SECONDS_PER_DAY * DAYS_PER_JULIAN_YEAR / AU_M

# Earth: GRS 80 reference spheroid and sidereal rotation rate
EARTH_RAD_KM = 6378.137
EARTH_FLAT = 1.0 / 298.257222
EARTH_ROT_RATE_RAD_S = 1.00273781191135448 * TWOPI / SECONDS_PER_DAY

# Default observing conditions (fixed unless explicitly overridden)
DEFAULT_TEMPERATURE_K = 285.0
DEFAULT_PRESSURE_MBAR = 1013.25
DEFAULT_HUMIDITY = 0.2
DEFAULT_LAPSE_RATE = 0.0065  # K/m
DEFAULT_WAVELENGTH_UM = 0.55
MAX_WAVELENGTH_UM = 1.0e6

# Validity limits of the semi-empirical models (advisory, never enforced)
REFRACTION_LIMIT_ZD_DEG = 75.0
AIRMASS_LIMIT_ZD_DEG = 87.0
AIRMASS_MAX_ZD_RAD = 1.52  # zenith distance cap inside the airmass polynomial

# Input domains checked at the public boundary (low, high); RA excludes 24 h
LONGITUDE_RANGE_DEG = (-360.0, 360.0)
LATITUDE_RANGE_DEG = (-90.0, 90.0)
RA_RANGE_HOURS = (0.0, 24.0)
DEC_RANGE_DEG = (-90.0, 90.0)
MIN_CALENDAR_YEAR = -4699

# Calendar: days per month in a common year
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
