"""Observatory geometry: geocentric coordinates and diurnal position/velocity."""

from __future__ import annotations

import math

import cspyce
import numpy as np

from observing_tools.constants import (
    AU_M,
    EARTH_FLAT,
    EARTH_RAD_KM,
    EARTH_ROT_RATE_RAD_S,
    SECONDS_PER_DAY,
)
from observing_tools.vectors import apply_transpose, vector3

_KM_PER_AU = AU_M / 1000.0
_EARTH_ROT_RATE_RAD_DAY = EARTH_ROT_RATE_RAD_S * SECONDS_PER_DAY


def geodetic_to_geocentric(latitude: float, height_m: float) -> tuple[float, float]:
    """Distances of a site from Earth's spin axis and equatorial plane (GRS 80).

    Parameters:
        latitude: Geodetic latitude (radians).
        height_m: Height above the reference spheroid (metres).

    Returns:
        (u, v) in km: distance from the spin axis, distance north of the equator.
    """
    rect = cspyce.georec(0.0, latitude, height_m / 1000.0, EARTH_RAD_KM, EARTH_FLAT)
    return (math.hypot(rect[0], rect[1]), float(rect[2]))


def observer_pv(
    latitude: float,
    height_m: float,
    last: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Geocentric position and velocity of a site due to Earth rotation alone.

    Axes are the true equator and equinox of date, with x toward the true
    equinox; no motion of Earth's centre is included.

    Parameters:
        latitude: Geodetic latitude (radians).
        height_m: Height above the reference spheroid (metres).
        last: Local apparent sidereal time (radians).

    Returns:
        (position in AU, velocity in AU/day).
    """
    u_km, v_km = geodetic_to_geocentric(latitude, height_m)
    u = u_km / _KM_PER_AU
    v = v_km / _KM_PER_AU
    s = math.sin(last)
    c = math.cos(last)
    pos = vector3(u * c, u * s, v)
    vel = vector3(-_EARTH_ROT_RATE_RAD_DAY * u * s, _EARTH_ROT_RATE_RAD_DAY * u * c, 0.0)
    return (pos, vel)


def observer_pv_mean(
    latitude: float,
    height_m: float,
    last: float,
    rnpb: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Site position/velocity rotated back to the mean J2000 (BCRS) axes.

    Parameters:
        latitude, height_m, last: As for observer_pv.
        rnpb: Precession-nutation matrix (mean J2000 to true of date).

    Returns:
        (position in AU, velocity in AU/day) on the axes of the Earth ephemeris.
    """
    pos, vel = observer_pv(latitude, height_m, last)
    return (apply_transpose(rnpb, pos), apply_transpose(rnpb, vel))
