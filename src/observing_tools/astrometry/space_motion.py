"""Catalog position update for proper motion, parallax and radial velocity."""

from __future__ import annotations

import math

from observing_tools.constants import KM_S_TO_AU_PER_YEAR, RADIANS_PER_ARCSEC
from observing_tools.vectors import add, scale, spherical, unit_vector, vector3


def apply_space_motion(
    ra: float,
    dec: float,
    pm_ra: float,
    pm_dec: float,
    parallax: float,
    rv: float,
    epoch_from: float,
    epoch_to: float,
) -> tuple[float, float]:
    """Propagate a star's position between epochs along a straight space path.

    The star moves uniformly in 3-D: the tangential velocity comes from the
    proper motion and the radial velocity enters scaled by the parallax, so
    foreshortening is included. Unlike a tangent-plane ra + pm*t update this
    stays valid near the poles and over long baselines. A zero parallax places
    the star at infinite distance and the radial term vanishes.

    Parameters:
        ra, dec: Position at epoch_from (radians).
        pm_ra: Proper motion in RA as a true angular rate, mu_alpha * cos(dec)
            (radians per Julian year).
        pm_dec: Proper motion in Dec (radians per Julian year).
        parallax: Parallax (arcsec).
        rv: Radial velocity (km/s, positive receding).
        epoch_from, epoch_to: Julian epochs (years).

    Returns:
        (ra, dec) at epoch_to in radians, ra in [0, 2pi).
    """
    sr = math.sin(ra)
    cr = math.cos(ra)
    sd = math.sin(dec)
    cd = math.cos(dec)
    p = unit_vector(ra, dec)
    east = vector3(-sr, cr, 0.0)
    north = vector3(-sd * cr, -sd * sr, cd)
    # Radial velocity as a fractional change of distance per year.
    w = KM_S_TO_AU_PER_YEAR * rv * parallax * RADIANS_PER_ARCSEC
    motion = add(add(scale(pm_ra, east), scale(pm_dec, north)), scale(w, p))
    return spherical(add(p, scale(epoch_to - epoch_from, motion)))
