"""Precession-nutation matrix and sidereal time (IAU 2006/2000A via ERFA)."""

from __future__ import annotations

import math

import erfa
import numpy as np

from observing_tools.constants import MJD_ZERO_JD, TWOPI


def precession_nutation_matrix(tt_mjd: float) -> np.ndarray:
    """Rotation from GCRS (mean J2000 with frame bias) to true equator and equinox of date.

    Parameters:
        tt_mjd: TT (or TDB) as MJD.

    Returns:
        3x3 rotation matrix; apply to a mean vector to get the true-of-date vector.
    """
    return np.array(erfa.pnm06a(MJD_ZERO_JD, tt_mjd), dtype=np.float64)


def equation_of_equinoxes(tt_mjd: float) -> float:
    """Equation of the equinoxes (radians): GAST - GMST."""
    return float(erfa.ee06a(MJD_ZERO_JD, tt_mjd))


def greenwich_mean_sidereal_time(ut1_mjd: float, tt_mjd: float | None = None) -> float:
    """Greenwich mean sidereal time (radians, [0, 2pi)).

    Parameters:
        ut1_mjd: UT1 as MJD (UTC is adequate at the 1 s level).
        tt_mjd: TT as MJD for the precession part; UT1 is used when omitted.

    Returns:
        GMST in radians.
    """
    if tt_mjd is None:
        tt_mjd = ut1_mjd
    return float(erfa.gmst06(MJD_ZERO_JD, ut1_mjd, MJD_ZERO_JD, tt_mjd))


def local_apparent_sidereal_time(ut1_mjd: float, tt_mjd: float, longitude: float) -> float:
    """Local apparent sidereal time (radians, [0, 2pi)).

    Parameters:
        ut1_mjd: UT1 as MJD.
        tt_mjd: TT as MJD.
        longitude: East longitude (radians).
    """
    last = (
        greenwich_mean_sidereal_time(ut1_mjd, tt_mjd)
        + equation_of_equinoxes(tt_mjd)
        + longitude
    )
    return math.fmod(math.fmod(last, TWOPI) + TWOPI, TWOPI)
