"""Input value types (site, target, atmosphere) and result records."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import NamedTuple

from observing_tools.astrometry.space_motion import apply_space_motion
from observing_tools.constants import (
    DEC_RANGE_DEG,
    DEFAULT_HUMIDITY,
    DEFAULT_LAPSE_RATE,
    DEFAULT_PRESSURE_MBAR,
    DEFAULT_TEMPERATURE_K,
    DEFAULT_WAVELENGTH_UM,
    HOURS_PER_CIRCLE,
    LATITUDE_RANGE_DEG,
    LONGITUDE_RANGE_DEG,
    MAX_WAVELENGTH_UM,
    RA_RANGE_HOURS,
    RADIANS_PER_ARCSEC,
    RADIANS_PER_DEGREE,
    RADIANS_PER_HOUR,
)
from observing_tools.errors import RangeError


def check_range(
    field: str,
    value: float,
    low: float,
    high: float,
    *,
    low_inclusive: bool = True,
    high_inclusive: bool = True,
) -> None:
    """Raise RangeError naming field unless low <= value <= high.

    NaN always fails. The bounds are made exclusive with the keyword flags.
    """
    ok_low = value >= low if low_inclusive else value > low
    ok_high = value <= high if high_inclusive else value < high
    if not (ok_low and ok_high):
        raise RangeError(
            field, value, low, high, low_inclusive=low_inclusive, high_inclusive=high_inclusive
        )


@dataclass(frozen=True)
class GeodeticSite:
    """Observatory location on the reference ellipsoid.

    Attributes:
        longitude: East longitude in degrees, [-360, 360].
        latitude: Geodetic latitude in degrees, [-90, 90].
        height: Height above the ellipsoid in metres.
    """

    longitude: float
    latitude: float
    height: float = 0.0

    def __post_init__(self) -> None:
        check_range('longitude', self.longitude, *LONGITUDE_RANGE_DEG)
        check_range('latitude', self.latitude, *LATITUDE_RANGE_DEG)
        if not math.isfinite(self.height):
            raise RangeError('height', self.height, -math.inf, math.inf)

    @property
    def longitude_rad(self) -> float:
        return self.longitude * RADIANS_PER_DEGREE

    @property
    def latitude_rad(self) -> float:
        return self.latitude * RADIANS_PER_DEGREE


@dataclass(frozen=True)
class SkyPosition:
    """Catalog position of a target with its space motion.

    Attributes:
        ra: Right ascension in hours, [0, 24).
        dec: Declination in degrees, [-90, 90].
        pm_ra: Proper motion in RA as a true angular rate (mu_alpha * cos dec),
            arcsec per Julian year; not seconds of time.
        pm_dec: Proper motion in Dec, arcsec per Julian year.
        parallax: Parallax in arcsec, >= 0.
        rv: Radial velocity in km/s, positive receding.
        epoch: Julian epoch of the position (e.g. 2000.0).
    """

    ra: float
    dec: float
    pm_ra: float = 0.0
    pm_dec: float = 0.0
    parallax: float = 0.0
    rv: float = 0.0
    epoch: float = 2000.0

    def __post_init__(self) -> None:
        check_range('ra', self.ra, *RA_RANGE_HOURS, high_inclusive=False)
        check_range('dec', self.dec, *DEC_RANGE_DEG)
        check_range('parallax', self.parallax, 0.0, math.inf)
        for name in ('pm_ra', 'pm_dec', 'rv', 'epoch'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise RangeError(name, value, -math.inf, math.inf)

    @property
    def ra_rad(self) -> float:
        return self.ra * RADIANS_PER_HOUR

    @property
    def dec_rad(self) -> float:
        return self.dec * RADIANS_PER_DEGREE

    def at_epoch(self, epoch: float) -> SkyPosition:
        """Return the position propagated to another Julian epoch.

        Proper motions, parallax and radial velocity are carried over unchanged.
        """
        ra, dec = apply_space_motion(
            self.ra_rad,
            self.dec_rad,
            self.pm_ra * RADIANS_PER_ARCSEC,
            self.pm_dec * RADIANS_PER_ARCSEC,
            self.parallax,
            self.rv,
            self.epoch,
            epoch,
        )
        ra_hours = (ra / RADIANS_PER_HOUR) % HOURS_PER_CIRCLE
        dec_deg = max(-90.0, min(90.0, dec / RADIANS_PER_DEGREE))
        return replace(self, ra=ra_hours, dec=dec_deg, epoch=epoch)


@dataclass(frozen=True)
class AtmosphericConditions:
    """Ambient conditions at the observer that drive refraction.

    Attributes:
        temperature: Ambient temperature in K.
        pressure: Ambient pressure in mbar; 0 disables refraction.
        humidity: Relative humidity as a fraction, [0, 1].
        wavelength: Effective wavelength in microns, (0, 1e6].
        lapse_rate: Tropospheric lapse rate in K/m. Validated and carried for
            callers, but the closed-form refraction constants do not use it.
    """

    temperature: float = DEFAULT_TEMPERATURE_K
    pressure: float = DEFAULT_PRESSURE_MBAR
    humidity: float = DEFAULT_HUMIDITY
    wavelength: float = DEFAULT_WAVELENGTH_UM
    lapse_rate: float = DEFAULT_LAPSE_RATE

    def __post_init__(self) -> None:
        check_range('temperature', self.temperature, 0.0, math.inf, low_inclusive=False)
        check_range('pressure', self.pressure, 0.0, math.inf)
        check_range('humidity', self.humidity, 0.0, 1.0)
        check_range(
            'wavelength', self.wavelength, 0.0, MAX_WAVELENGTH_UM, low_inclusive=False
        )
        check_range('lapse_rate', self.lapse_rate, 0.0, math.inf)


class TimeCorrection(NamedTuple):
    """Result of time_correct.

    tt, tdb: TT and TDB of the observation (MJD).
    btdb: TDB corrected for light travel to the Solar System barycentre (MJD).
    hutc: UTC corrected for light travel to the heliocentre (MJD).
    htdb: TDB corrected for light travel to the heliocentre (MJD).
    v_helio, v_bary: Radial velocity of the target induced by the observer's
        motion relative to the heliocentre and barycentre (km/s).
    """

    tt: float
    tdb: float
    btdb: float
    hutc: float
    htdb: float
    v_helio: float
    v_bary: float


class ObservedPlace(NamedTuple):
    """Result of observed_place.

    airmass: Relative air path (>= 1).
    altitude: Observed altitude in degrees.
    azimuth: Observed azimuth in degrees, North = 0, East = 90.
    hour_angle: Observed hour angle in hours.
    parallactic_angle: Parallactic angle in degrees, [0, 360).
    refraction: Refraction displacement of the zenith distance in degrees.
    """

    airmass: float
    altitude: float
    azimuth: float
    hour_angle: float
    parallactic_angle: float
    refraction: float

    @property
    def zenith_distance(self) -> float:
        return 90.0 - self.altitude


class TopocentricPlace(NamedTuple):
    """Observed place in radians, as produced by apparent_to_observed."""

    azimuth: float
    zenith_distance: float
    hour_angle: float
    declination: float
    right_ascension: float

