"""Earth position and velocity (ERFA epv00 analytical series)."""

from __future__ import annotations

from typing import NamedTuple

import erfa
import numpy as np

from observing_tools.constants import MJD_ZERO_JD


class EarthState(NamedTuple):
    """Earth centre relative to the Sun and the Solar System barycentre.

    Positions in AU, velocities in AU/day, BCRS (mean J2000 equator) axes.
    """

    helio_pos: np.ndarray
    helio_vel: np.ndarray
    bary_pos: np.ndarray
    bary_vel: np.ndarray


def earth_state(tdb_mjd: float) -> EarthState:
    """Heliocentric and barycentric position/velocity of the Earth at a TDB.

    The series is good to a few km in position over 1900-2100, ample for
    light-time and radial-velocity corrections. TT may be passed instead of TDB.

    Parameters:
        tdb_mjd: TDB as MJD.

    Returns:
        EarthState with new arrays.
    """
    pvh, pvb = erfa.epv00(MJD_ZERO_JD, tdb_mjd)
    return EarthState(
        helio_pos=np.array(pvh['p'], dtype=np.float64),
        helio_vel=np.array(pvh['v'], dtype=np.float64),
        bary_pos=np.array(pvb['p'], dtype=np.float64),
        bary_vel=np.array(pvb['v'], dtype=np.float64),
    )
