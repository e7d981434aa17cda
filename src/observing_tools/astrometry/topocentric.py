"""Catalog -> apparent -> observed place for a ground-based site.

The observed place is computed in the usual sequence: local apparent sidereal
time, polar motion, diurnal aberration, rotation to the horizon, refraction of
the zenith distance, and rotation back to hour angle and declination so the
returned azimuth, zenith distance, hour angle, declination and RA are mutually
consistent. The observed-place step is ERFA atioq, whose refraction closed form
is frozen below about 3 deg elevation rather than diverging at the horizon.
"""

from __future__ import annotations

import math

import erfa
import numpy as np

from observing_tools.astrometry.ephemeris import EarthState, earth_state
from observing_tools.astrometry.observer import geodetic_to_geocentric
from observing_tools.astrometry.precession import (
    local_apparent_sidereal_time,
    precession_nutation_matrix,
)
from observing_tools.astrometry.refraction import refraction_coefficients
from observing_tools.constants import (
    AU_LIGHT_TIME_S,
    EARTH_ROT_RATE_RAD_S,
    RADIANS_PER_ARCSEC,
    SECONDS_PER_DAY,
    SPEED_OF_LIGHT_M_S,
    TWOPI,
)
from observing_tools.models import AtmosphericConditions, GeodeticSite, TopocentricPlace
from observing_tools.time_utils import tt_minus_utc
from observing_tools.vectors import add, apply, dot, scale, spherical, unit_vector

# Zenith distance below which the azimuth is reported as 0
_ZENITH_EPS = 1e-12


def catalog_to_apparent(
    ra: float,
    dec: float,
    parallax: float,
    tt_mjd: float,
    earth: EarthState | None = None,
) -> tuple[float, float]:
    """Geocentric apparent place of a catalog (BCRS) direction.

    Applies annual parallax, annual aberration (first order in v/c, about
    1 mas) and precession-nutation. Gravitational light deflection is not
    included.

    Parameters:
        ra, dec: Catalog position at the epoch of observation (radians).
        parallax: Parallax (arcsec); 0 for infinite distance.
        tt_mjd: TT of the observation as MJD.
        earth: Earth state at tt_mjd, computed when not supplied.

    Returns:
        (ra, dec) apparent, true equator and equinox of date, radians.
    """
    if earth is None:
        earth = earth_state(tt_mjd)
    p = unit_vector(ra, dec)
    if parallax > 0.0:
        p = add(p, scale(-parallax * RADIANS_PER_ARCSEC, earth.bary_pos))
        p = scale(1.0 / math.sqrt(dot(p, p)), p)
    # Earth velocity in units of c
    beta = scale(AU_LIGHT_TIME_S / SECONDS_PER_DAY, earth.bary_vel)
    p = add(add(p, beta), scale(-dot(p, beta), p))
    return spherical(apply(precession_nutation_matrix(tt_mjd), p))


def _site_astrom(
    latitude: float,
    refa: float,
    refb: float,
    diurnal_aberration: float,
    xpl: float,
    ypl: float,
) -> np.ndarray:
    """ERFA star-independent context for a site, with hour angles taken from zero."""
    astrom = np.zeros((), dtype=erfa.dt_eraASTROM)
    astrom['sphi'] = math.sin(latitude)
    astrom['cphi'] = math.cos(latitude)
    astrom['diurab'] = diurnal_aberration
    astrom['xpl'] = xpl
    astrom['ypl'] = ypl
    astrom['refa'] = refa
    astrom['refb'] = refb
    return astrom


def observe_hadec(
    ha: float,
    dec: float,
    latitude: float,
    *,
    refa: float = 0.0,
    refb: float = 0.0,
    diurnal_aberration: float = 0.0,
    xpl: float = 0.0,
    ypl: float = 0.0,
) -> tuple[float, float, float, float]:
    """Observed azimuth, zenith distance, hour angle and declination.

    Evaluated by ERFA atioq with the hour angle entered as minus a right
    ascension about a zero local sidereal angle.

    Parameters:
        ha, dec: Apparent (topocentric) hour angle and declination (radians).
        latitude: Geodetic latitude (radians).
        refa, refb: Refraction constants (radians); zero disables refraction.
        diurnal_aberration: Site speed over c from Earth rotation.
        xpl, ypl: Polar motion referred to the site meridian (radians).

    Returns:
        (azimuth in [0, 2pi) N through E, zenith distance, hour angle in
        [-pi, pi], declination), radians. At the zenith the azimuth is 0.
    """
    astrom = _site_astrom(latitude, refa, refb, diurnal_aberration, xpl, ypl)
    aob, zob, hob, dob, _ = erfa.atioq(-ha, dec, astrom)
    zenith_distance = float(zob)
    azimuth = float(aob) if zenith_distance > _ZENITH_EPS else 0.0
    return (azimuth, zenith_distance, float(hob), float(dob))


def apparent_to_observed(
    ra: float,
    dec: float,
    utc: float,
    site: GeodeticSite,
    atmosphere: AtmosphericConditions,
    *,
    dut1: float = 0.0,
    xp: float = 0.0,
    yp: float = 0.0,
) -> TopocentricPlace:
    """Observed place of a geocentric apparent position.

    Parameters:
        ra, dec: Apparent RA and Dec, true equator and equinox of date (radians).
        utc: UTC as MJD.
        site: Observatory.
        atmosphere: Conditions for refraction (pressure 0 disables it).
        dut1: UT1-UTC (seconds).
        xp, yp: Polar motion (radians); when both are zero no polar-motion
            terms are evaluated.

    Returns:
        TopocentricPlace in radians; right_ascension is on the apparent
        (equinox) system, in [0, 2pi).
    """
    tt = utc + tt_minus_utc(utc) / SECONDS_PER_DAY
    ut1 = utc + dut1 / SECONDS_PER_DAY
    longitude = site.longitude_rad
    last = local_apparent_sidereal_time(ut1, tt, longitude)

    if xp != 0.0 or yp != 0.0:
        sl = math.sin(longitude)
        cl = math.cos(longitude)
        xpl = xp * cl - yp * sl
        ypl = xp * sl + yp * cl
    else:
        xpl = ypl = 0.0

    u_km, _ = geodetic_to_geocentric(site.latitude_rad, site.height)
    diurab = EARTH_ROT_RATE_RAD_S * u_km * 1000.0 / SPEED_OF_LIGHT_M_S

    refa, refb = refraction_coefficients(
        atmosphere.temperature,
        atmosphere.pressure,
        atmosphere.humidity,
        atmosphere.wavelength,
    )
    azimuth, zenith_distance, hour_angle, declination = observe_hadec(
        last - ra,
        dec,
        site.latitude_rad,
        refa=refa,
        refb=refb,
        diurnal_aberration=diurab,
        xpl=xpl,
        ypl=ypl,
    )
    right_ascension = (last - hour_angle) % TWOPI
    return TopocentricPlace(azimuth, zenith_distance, hour_angle, declination, right_ascension)


def parallactic_angle(ha: float, dec: float, latitude: float) -> float:
    """Parallactic angle (radians, (-pi, pi]) of a target at (ha, dec), by ERFA hd2pa.

    Positive for targets west of the meridian. Defined as 0 when the target
    is at the zenith or the pole, where hd2pa falls back to atan2(0, 1).
    """
    return float(erfa.hd2pa(ha, dec, latitude))
