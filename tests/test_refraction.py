"""Tests for refraction constants, refraction displacement and airmass."""

from __future__ import annotations

import math

import erfa
import pytest

from observing_tools.astrometry.refraction import (
    airmass,
    refraction_coefficients,
    refraction_displacement,
)


@pytest.mark.parametrize(
    ('temperature', 'pressure', 'humidity', 'wavelength'),
    [
        (285.0, 1013.25, 0.2, 0.55),
        (273.15, 750.0, 0.0, 1.2),
        (300.0, 620.0, 0.8, 0.4),
        (280.0, 1000.0, 0.5, 2.0e5),
    ],
)
def test_coefficients_match_erfa_refco(
    temperature: float, pressure: float, humidity: float, wavelength: float
) -> None:
    """Optical and radio constants agree with ERFA refco (temperature in deg C)."""
    refa, refb = refraction_coefficients(temperature, pressure, humidity, wavelength)
    expected_a, expected_b = erfa.refco(pressure, temperature - 273.15, humidity, wavelength)
    assert (refa, refb) == (float(expected_a), float(expected_b))


def test_default_optical_constants_magnitude() -> None:
    """Sea-level optical refraction is about 58 arcsec at 45 deg."""
    refa, refb = refraction_coefficients(285.0, 1013.25, 0.2, 0.55)
    assert 2.6e-4 < refa < 2.9e-4
    assert refb < 0.0
    assert abs(refb) < refa / 100.0


def test_zero_pressure_disables_refraction() -> None:
    """Zero pressure yields exactly zero constants and displacement."""
    refa, refb = refraction_coefficients(285.0, 0.0, 0.5, 0.55)
    assert (refa, refb) == (0.0, 0.0)
    assert refraction_displacement(1.0, refa, refb) == 0.0


def test_displacement_formula() -> None:
    """At 45 deg tan Z = 1 so the displacement is A + B."""
    assert refraction_displacement(math.pi / 4, 3e-4, -3e-7) == pytest.approx(3e-4 - 3e-7)
    assert refraction_displacement(0.0, 3e-4, -3e-7) == 0.0


def test_airmass_values() -> None:
    """Airmass is 1 at the zenith and close to sec Z at moderate distances."""
    assert airmass(0.0) == 1.0
    assert airmass(math.radians(60.0)) == pytest.approx(1.9945, abs=1e-4)
    assert airmass(-0.5) == airmass(0.5)


def test_airmass_capped_below_horizon() -> None:
    """The zenith distance is capped so airmass stays finite past the horizon."""
    capped = airmass(1.52)
    assert math.isfinite(capped)
    assert airmass(1.6) == capped
    assert airmass(math.pi) == capped
    assert 10.0 < capped < 20.0
