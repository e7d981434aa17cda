"""Atmospheric refraction constants, refraction displacement and airmass.

The two-term model dZ = A tan Z + B tan^3 Z is calibrated against a full
ray-trace and is good to about 1 arcsec for zenith distances below 75 deg.
Beyond that it degrades quickly and it is meaningless at the horizon; callers
that need low-elevation accuracy must use a different model. The airmass
polynomial is similarly limited to zenith distances below about 87 deg.
"""

from __future__ import annotations

import math

import erfa

from observing_tools.constants import AIRMASS_MAX_ZD_RAD

_ZERO_CELSIUS_K = 273.15


def refraction_coefficients(
    temperature: float,
    pressure: float,
    humidity: float,
    wavelength: float,
) -> tuple[float, float]:
    """Refraction constants A and B for the tan Z + tan^3 Z model (radians).

    Evaluated by ERFA refco: refractivity follows Green (1987, Spherical
    Astronomy) with the Stone (1996) beta and an empirical radio humidity
    term. Inputs are clamped to the domain of the formulae. Zero pressure
    gives A = B = 0 exactly.

    Parameters:
        temperature: Ambient temperature at the observer (K).
        pressure: Pressure at the observer (mbar = hPa).
        humidity: Relative humidity (0-1).
        wavelength: Effective wavelength (microns); above 100 microns the
            radio formula is used.

    Returns:
        (refa, refb) in radians.
    """
    refa, refb = erfa.refco(pressure, temperature - _ZERO_CELSIUS_K, humidity, wavelength)
    return (float(refa), float(refb))


def refraction_displacement(zenith_distance: float, refa: float, refb: float) -> float:
    """Refraction in zenith distance, tan Z (A + B tan^2 Z), all in radians.

    Valid only below about 75 deg zenith distance.
    """
    tanz = math.tan(zenith_distance)
    return tanz * (refa + refb * tanz * tanz)


def airmass(zenith_distance: float) -> float:
    """Airmass for an observed zenith distance (radians), Hardie (1962).

    The zenith distance is capped at 1.52 rad (about 87 deg) so the result is
    finite (about 13) for any input, including targets below the horizon.
    """
    seczm1 = 1.0 / math.cos(min(AIRMASS_MAX_ZD_RAD, abs(zenith_distance))) - 1.0
    return 1.0 + seczm1 * (0.9981833 - seczm1 * (0.002875 + 0.0008083 * seczm1))
