"""Tests for the Earth ephemeris, precession-nutation and sidereal time."""

from __future__ import annotations

import math

import numpy as np
import pytest

from observing_tools.astrometry.ephemeris import earth_state
from observing_tools.astrometry.precession import (
    equation_of_equinoxes,
    greenwich_mean_sidereal_time,
    local_apparent_sidereal_time,
    precession_nutation_matrix,
)


def test_earth_state_near_perihelion() -> None:
    """Early January the Earth is about 0.983 AU from the Sun, moving about 1 deg/day."""
    earth = earth_state(51544.5)
    assert float(np.linalg.norm(earth.helio_pos)) == pytest.approx(0.9833, abs=1e-3)
    assert float(np.linalg.norm(earth.helio_vel)) == pytest.approx(0.01749, abs=2e-4)
    assert float(np.linalg.norm(earth.bary_pos - earth.helio_pos)) < 0.011
    assert abs(float(np.dot(earth.helio_pos, earth.helio_vel))) < 1e-4


def test_earth_state_returns_independent_arrays() -> None:
    """Each call builds new float arrays of shape (3,)."""
    first = earth_state(58849.0)
    second = earth_state(58849.0)
    assert first.helio_pos is not second.helio_pos
    for vector in first:
        assert vector.shape == (3,)
        assert vector.dtype == np.float64


@pytest.mark.parametrize('tt_mjd', [51544.5, 58849.0, 73000.0])
def test_precession_nutation_matrix_is_rotation(tt_mjd: float) -> None:
    """The matrix is orthonormal with determinant +1."""
    m = precession_nutation_matrix(tt_mjd)
    assert m @ m.T == pytest.approx(np.eye(3), abs=1e-14)
    assert float(np.linalg.det(m)) == pytest.approx(1.0, abs=1e-14)


def test_precession_nutation_near_identity_at_j2000() -> None:
    """At J2000 only frame bias and nutation (tens of arcsec) remain."""
    m = precession_nutation_matrix(51544.5)
    assert m == pytest.approx(np.eye(3), abs=1e-4)


def test_gmst_at_j2000() -> None:
    """GMST at J2000.0 is 280.46 deg."""
    gmst = greenwich_mean_sidereal_time(51544.5)
    assert math.degrees(gmst) == pytest.approx(280.4606, abs=1e-3)
    assert greenwich_mean_sidereal_time(51544.5, 51544.5) == gmst


def test_equation_of_equinoxes_is_small() -> None:
    """The equation of the equinoxes stays below about 1.2 s of time."""
    for tt_mjd in (51544.5, 55000.0, 60000.0):
        assert abs(equation_of_equinoxes(tt_mjd)) < 1e-4


def test_local_apparent_sidereal_time_longitude() -> None:
    """LAST is in [0, 2pi) and advances by the east longitude."""
    utc = 58849.3
    greenwich = local_apparent_sidereal_time(utc, utc, 0.0)
    east = local_apparent_sidereal_time(utc, utc, math.pi / 2)
    west = local_apparent_sidereal_time(utc, utc, -3.0)
    for value in (greenwich, east, west):
        assert 0.0 <= value < 2.0 * math.pi
    assert math.remainder(east - greenwich - math.pi / 2, 2.0 * math.pi) == pytest.approx(
        0.0, abs=1e-12
    )
    assert math.remainder(west - greenwich + 3.0, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-12)
