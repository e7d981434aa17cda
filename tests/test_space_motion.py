"""Tests for catalog position propagation (proper motion, parallax, RV)."""

from __future__ import annotations

import math

import pytest

from observing_tools.astrometry.space_motion import apply_space_motion
from observing_tools.constants import RADIANS_PER_ARCSEC
from observing_tools.models import SkyPosition

_MAS = 1e-3 * RADIANS_PER_ARCSEC


def test_zero_motion_is_identity() -> None:
    """Without proper motion or radial velocity the position is unchanged."""
    ra, dec = apply_space_motion(1.2, -0.3, 0.0, 0.0, 0.5, 0.0, 2000.0, 2050.0)
    assert ra == pytest.approx(1.2, abs=1e-15)
    assert dec == pytest.approx(-0.3, abs=1e-15)


def test_zero_parallax_decouples_radial_velocity() -> None:
    """A zero parallax is infinite distance: rv has no effect and no error is raised."""
    pm = 0.5 * RADIANS_PER_ARCSEC
    with_rv = apply_space_motion(2.0, 0.4, pm, pm, 0.0, -300.0, 2000.0, 2100.0)
    without_rv = apply_space_motion(2.0, 0.4, pm, pm, 0.0, 0.0, 2000.0, 2100.0)
    assert with_rv == without_rv


def test_dec_motion_over_a_century() -> None:
    """1 arcsec/yr in Dec for 100 years moves the star 100 arcsec north."""
    ra, dec = apply_space_motion(0.5, 0.0, 0.0, RADIANS_PER_ARCSEC, 0.0, 0.0, 2000.0, 2100.0)
    assert ra == pytest.approx(0.5, abs=_MAS)
    assert dec == pytest.approx(100.0 * RADIANS_PER_ARCSEC, abs=_MAS)


def test_ra_motion_is_true_angle() -> None:
    """pm_ra is mu_alpha * cos(dec): at Dec 60 the RA change is twice the angle."""
    dec0 = math.radians(60.0)
    ra, dec = apply_space_motion(1.0, dec0, RADIANS_PER_ARCSEC, 0.0, 0.0, 0.0, 2000.0, 2010.0)
    assert (ra - 1.0) * math.cos(dec0) == pytest.approx(10.0 * RADIANS_PER_ARCSEC, abs=_MAS)
    assert (ra - 1.0) == pytest.approx(20.0 * RADIANS_PER_ARCSEC, abs=2 * _MAS)


def test_backwards_in_time() -> None:
    """Propagating to an earlier epoch reverses the motion."""
    pm = 2.0 * RADIANS_PER_ARCSEC
    ra1, dec1 = apply_space_motion(3.0, 0.2, pm, -pm, 0.1, 20.0, 2000.0, 1950.0)
    ra2, dec2 = apply_space_motion(3.0, 0.2, pm, -pm, 0.1, 20.0, 2000.0, 2050.0)
    assert ra1 < 3.0 < ra2
    assert dec1 > 0.2 > dec2


def test_pole_is_finite() -> None:
    """A star at the pole moves without producing NaN."""
    ra, dec = apply_space_motion(
        0.0, math.pi / 2, RADIANS_PER_ARCSEC, 0.0, 0.0, 0.0, 2000.0, 2100.0
    )
    assert math.isfinite(ra)
    assert math.isfinite(dec)
    assert dec < math.pi / 2
    assert dec == pytest.approx(math.pi / 2 - 100.0 * RADIANS_PER_ARCSEC, abs=_MAS)


def test_approaching_star_accelerates() -> None:
    """Perspective acceleration: an approaching nearby star moves further."""
    pm = 10.0 * RADIANS_PER_ARCSEC
    _, dec_rv = apply_space_motion(0.0, 0.0, 0.0, pm, 0.55, -110.0, 2000.0, 3000.0)
    _, dec_flat = apply_space_motion(0.0, 0.0, 0.0, pm, 0.55, 0.0, 2000.0, 3000.0)
    assert dec_rv > dec_flat


def test_sky_position_at_epoch() -> None:
    """at_epoch returns a moved copy tagged with the new epoch."""
    star = SkyPosition(6.75, -16.72, pm_ra=-0.546, pm_dec=-1.223, parallax=0.379, epoch=2000.0)
    moved = star.at_epoch(2020.0)
    assert moved.epoch == 2020.0
    assert star.epoch == 2000.0
    assert moved.pm_ra == star.pm_ra
    assert moved.dec == pytest.approx(-16.72 - 20 * 1.223 / 3600.0, abs=1e-6)
    assert moved.ra < star.ra
    assert 0.0 <= moved.ra < 24.0
