"""Observation reduction: light-time corrected times and observed place.

The two public operations validate every input before any computation and
return named tuples that also unpack as plain 7-tuples and 6-tuples.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from observing_tools.astrometry.ephemeris import earth_state
from observing_tools.astrometry.observer import geodetic_to_geocentric, observer_pv_mean
from observing_tools.astrometry.precession import (
    local_apparent_sidereal_time,
    precession_nutation_matrix,
)
from observing_tools.astrometry.refraction import (
    airmass,
    refraction_coefficients,
    refraction_displacement,
)
from observing_tools.astrometry.topocentric import (
    apparent_to_observed,
    catalog_to_apparent,
    parallactic_angle,
)
from observing_tools.calendar_utils import julian_epoch
from observing_tools.constants import (
    AIRMASS_LIMIT_ZD_DEG,
    AU_LIGHT_TIME_S,
    AU_M,
    DEFAULT_WAVELENGTH_UM,
    DEGREES_PER_CIRCLE,
    MAX_WAVELENGTH_UM,
    RADIANS_PER_HOUR,
    REFRACTION_LIMIT_ZD_DEG,
    SECONDS_PER_DAY,
)
from observing_tools.errors import DomainLimitation
from observing_tools.models import (
    AtmosphericConditions,
    GeodeticSite,
    ObservedPlace,
    SkyPosition,
    TimeCorrection,
    check_range,
)
from observing_tools.time_utils import Time, TimeScale, tt_to_tdb, utc_to_tt
from observing_tools.vectors import add, dot, unit_vector

logger = logging.getLogger(__name__)

_AU_PER_DAY_TO_KM_S = AU_M / 1000.0 / SECONDS_PER_DAY
_LIGHT_DAYS_PER_AU = AU_LIGHT_TIME_S / SECONDS_PER_DAY


def correct_times(utc: float, site: GeodeticSite, target: SkyPosition) -> TimeCorrection:
    """Light-time corrected times and Earth-motion radial velocities.

    Inputs are already validated by their types.

    Parameters:
        utc: UTC of the observation as MJD.
        site: Observatory.
        target: Catalog position; moved to the epoch of utc before use.

    Returns:
        TimeCorrection.
    """
    utc_time = Time(utc, TimeScale.UTC)
    longitude = site.longitude_rad
    latitude = site.latitude_rad
    u_km, v_km = geodetic_to_geocentric(latitude, site.height)
    tt = utc_to_tt(utc_time)
    tdb = tt_to_tdb(tt, utc_time.day_fraction, longitude, u_km, v_km)

    # Earth centre relative to the Sun and the barycentre (AU, AU/day)
    earth = earth_state(tdb.mjd)

    # Observatory offset from Earth's centre, on the ephemeris axes
    last = local_apparent_sidereal_time(utc, tt.mjd, longitude)
    rnpb = precession_nutation_matrix(tdb.mjd)
    dpos, dvel = observer_pv_mean(latitude, site.height, last, rnpb)
    hpos = add(earth.helio_pos, dpos)
    hvel = add(earth.helio_vel, dvel)
    bpos = add(earth.bary_pos, dpos)
    bvel = add(earth.bary_vel, dvel)

    moved = target.at_epoch(julian_epoch(utc))
    targ = unit_vector(moved.ra_rad, moved.dec_rad)

    hcorr = dot(targ, hpos) * _LIGHT_DAYS_PER_AU
    bcorr = dot(targ, bpos) * _LIGHT_DAYS_PER_AU
    result = TimeCorrection(
        tt=tt.mjd,
        tdb=tdb.mjd,
        btdb=tdb.mjd + bcorr,
        hutc=utc + hcorr,
        htdb=tdb.mjd + hcorr,
        v_helio=-dot(targ, hvel) * _AU_PER_DAY_TO_KM_S,
        v_bary=-dot(targ, bvel) * _AU_PER_DAY_TO_KM_S,
    )
    logger.debug('time correction at UTC %.8f: %s', utc, result)
    return result


def time_correct(
    utc: float,
    longitude: float,
    latitude: float,
    height: float,
    ra: float,
    dec: float,
    pm_ra: float = 0.0,
    pm_dec: float = 0.0,
    epoch: float = 2000.0,
    parallax: float = 0.0,
    rv: float = 0.0,
) -> TimeCorrection:
    """TT, TDB and times corrected for light travel to the helio- and barycentre.

    Parameters:
        utc: UTC as MJD.
        longitude, latitude: Site, degrees, east positive.
        height: Site height above the reference spheroid (metres).
        ra, dec: Target at the catalog epoch (hours, degrees).
        pm_ra, pm_dec: Proper motions (arcsec/year; pm_ra is a true angle,
            not seconds of RA).
        epoch: Julian epoch of the catalog position.
        parallax: Parallax (arcsec).
        rv: Radial velocity (km/s).

    Returns:
        (tt, tdb, btdb, hutc, htdb, v_helio, v_bary) as a TimeCorrection.
        btdb is the TDB at which the light would have passed the barycentre;
        hutc and htdb are the UTC and TDB for the heliocentre. v_helio and
        v_bary are the apparent radial velocities (km/s) of the target owing
        to the observer's motion relative to the helio- and barycentres.

    Raises:
        RangeError: An input outside its valid range; names the field.
    """
    site = GeodeticSite(longitude, latitude, height)
    target = SkyPosition(ra, dec, pm_ra, pm_dec, parallax, rv, epoch)
    return correct_times(utc, site, target)


def observe(
    utc: float,
    site: GeodeticSite,
    target: SkyPosition,
    atmosphere: AtmosphericConditions,
    *,
    dut1: float = 0.0,
    xp: float = 0.0,
    yp: float = 0.0,
) -> ObservedPlace:
    """Observed airmass, altitude, azimuth, hour angle, parallactic angle, refraction.

    Inputs are already validated by their types.

    Parameters:
        utc: UTC as MJD.
        site: Observatory.
        target: Catalog position; moved to the epoch of utc before use.
        atmosphere: Conditions for refraction.
        dut1: UT1-UTC (seconds).
        xp, yp: Polar motion (radians).

    Returns:
        ObservedPlace.
    """
    tt = utc_to_tt(Time(utc, TimeScale.UTC))
    moved = target.at_epoch(julian_epoch(utc))
    ra_app, dec_app = catalog_to_apparent(moved.ra_rad, moved.dec_rad, moved.parallax, tt.mjd)
    topo = apparent_to_observed(ra_app, dec_app, utc, site, atmosphere, dut1=dut1, xp=xp, yp=yp)

    refa, refb = refraction_coefficients(
        atmosphere.temperature,
        atmosphere.pressure,
        atmosphere.humidity,
        atmosphere.wavelength,
    )
    zd = topo.zenith_distance
    delz = refraction_displacement(zd, refa, refb)

    pa = math.degrees(parallactic_angle(topo.hour_angle, topo.declination, site.latitude_rad))
    pa %= DEGREES_PER_CIRCLE
    if pa >= DEGREES_PER_CIRCLE:
        pa = 0.0

    place = ObservedPlace(
        airmass=airmass(zd),
        altitude=90.0 - math.degrees(zd),
        azimuth=math.degrees(topo.azimuth),
        hour_angle=topo.hour_angle / RADIANS_PER_HOUR,
        parallactic_angle=pa,
        refraction=math.degrees(delz),
    )
    for limitation in domain_limitations(place):
        logger.debug('%s', limitation.message)
    return place


def observed_place(
    utc: float,
    longitude: float,
    latitude: float,
    height: float,
    ra: float,
    dec: float,
    wave: float = DEFAULT_WAVELENGTH_UM,
    pm_ra: float = 0.0,
    pm_dec: float = 0.0,
    epoch: float = 2000.0,
    parallax: float = 0.0,
    rv: float = 0.0,
    *,
    atmosphere: AtmosphericConditions | None = None,
    dut1: float = 0.0,
    xp: float = 0.0,
    yp: float = 0.0,
) -> ObservedPlace:
    """Observing parameters of a catalog target at a site and instant.

    Parameters:
        utc: UTC as MJD.
        longitude, latitude: Site, degrees, east positive.
        height: Site height above the reference spheroid (metres).
        ra, dec: Target at the catalog epoch (hours, degrees).
        wave: Wavelength of observation (microns), 0 < wave <= 1e6. Overrides
            the wavelength of atmosphere.
        pm_ra, pm_dec: Proper motions (arcsec/year; pm_ra is a true angle).
        epoch: Julian epoch of the catalog position.
        parallax: Parallax (arcsec).
        rv: Radial velocity (km/s).
        atmosphere: Temperature, pressure, humidity and lapse rate; defaults
            to 285 K, 1013.25 mbar, 20% humidity. Pressure 0 disables refraction.
        dut1: UT1-UTC (seconds).
        xp, yp: Polar motion (radians).

    Returns:
        (airmass, altitude, azimuth, hour_angle, parallactic_angle, refraction)
        as an ObservedPlace: altitude and azimuth in degrees with azimuth
        North through East, hour angle in hours, parallactic angle of a slit
        in degrees [0, 360), refraction in degrees. Refraction is unreliable
        beyond 75 deg zenith distance and airmass beyond 87 deg; see
        domain_limitations().

    Raises:
        RangeError: An input outside its valid range; names the field.
    """
    site = GeodeticSite(longitude, latitude, height)
    target = SkyPosition(ra, dec, pm_ra, pm_dec, parallax, rv, epoch)
    check_range('wavelength', wave, 0.0, MAX_WAVELENGTH_UM, low_inclusive=False)
    if atmosphere is None:
        atmosphere = AtmosphericConditions(wavelength=wave)
    else:
        atmosphere = replace(atmosphere, wavelength=wave)
    return observe(utc, site, target, atmosphere, dut1=dut1, xp=xp, yp=yp)


def domain_limitations(place: ObservedPlace) -> tuple[DomainLimitation, ...]:
    """Advisories for models evaluated outside their calibrated range.

    Returns:
        Zero, one or two DomainLimitation records (refraction, airmass).
    """
    zd = place.zenith_distance
    found: list[DomainLimitation] = []
    if zd > REFRACTION_LIMIT_ZD_DEG:
        found.append(
            DomainLimitation(
                name='refraction',
                limit_deg=REFRACTION_LIMIT_ZD_DEG,
                value_deg=zd,
                message=(
                    f'zenith distance {zd:.2f} deg beyond the '
                    f'{REFRACTION_LIMIT_ZD_DEG:.0f} deg validity of the refraction model'
                ),
            )
        )
    if zd > AIRMASS_LIMIT_ZD_DEG:
        found.append(
            DomainLimitation(
                name='airmass',
                limit_deg=AIRMASS_LIMIT_ZD_DEG,
                value_deg=zd,
                message=(
                    f'zenith distance {zd:.2f} deg beyond the '
                    f'{AIRMASS_LIMIT_ZD_DEG:.0f} deg validity of the airmass model'
                ),
            )
        )
    return tuple(found)
