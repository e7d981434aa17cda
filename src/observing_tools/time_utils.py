"""Time scales UTC, TT and TDB (leap seconds from rms-julian, TDB-TT from ERFA)."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass

import erfa
import julian

from observing_tools.config import get_leapsecs_path, get_leapsecs_valid_until
from observing_tools.constants import (
    J2000_MJD,
    LEAPSECOND_TABLE_START_MJD,
    MJD_ZERO_JD,
    SECONDS_PER_DAY,
    TAI_MINUS_UTC_AT_J2000,
    TT_MINUS_TAI,
)

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


class TimeScale(enum.Enum):
    """Time scale tag of an MJD."""

    UTC = 'UTC'
    TT = 'TT'
    TDB = 'TDB'


@dataclass(frozen=True)
class Time:
    """A Modified Julian Date tagged with its time scale."""

    mjd: float
    scale: TimeScale

    def __post_init__(self) -> None:
        if not math.isfinite(self.mjd):
            raise ValueError(f'Time MJD must be finite, got {self.mjd!r}')

    @property
    def day_fraction(self) -> float:
        """Fraction of the day elapsed since 0h, in [0, 1)."""
        return self.mjd - math.floor(self.mjd)


def _ensure_leapsecs() -> None:
    """Load the leap-second table once per process.

    The SPICE UT model is used: before 1972 no rubber-second offsets are
    applied and after the last LSK entry the last offset is held, so values
    outside the table are approximations. A configured LSK that cannot
    be read falls back to rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is None:
        julian.load_lsk()
        _leapsecs_loaded = True
        return
    try:
        julian.load_lsk(path)
        _leapsecs_loaded = True
    except (OSError, KeyError, ValueError) as e:
        logger.info(
            'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
            path,
            e,
        )
        try:
            julian.load_lsk()
        except Exception as fallback_err:
            logger.error(
                'Fallback to rms-julian bundled LSK failed: %s',
                fallback_err,
                exc_info=True,
            )
            raise
        _leapsecs_loaded = True


def tai_minus_utc(utc_mjd: float) -> float:
    """TAI-UTC in seconds in force on the UTC day containing utc_mjd.

    Leap seconds take effect at the end of a UTC day, so the offset is constant
    across each day. Measured relative to 2000-01-01, where TAI-UTC = 32 s.
    Before 1972 the SPICE value of 9 s is returned and after the announced
    table the last offset is held; both are logged as warnings because the
    result is then only an approximation.

    Parameters:
        utc_mjd: UTC as MJD.

    Returns:
        TAI-UTC in seconds.
    """
    _ensure_leapsecs()
    if utc_mjd < LEAPSECOND_TABLE_START_MJD:
        logger.warning(
            'UTC MJD %.5f precedes the leap-second table (MJD %.1f); TAI-UTC is approximate',
            utc_mjd,
            LEAPSECOND_TABLE_START_MJD,
        )
    elif utc_mjd >= get_leapsecs_valid_until():
        logger.warning(
            'UTC MJD %.5f is past the announced leap seconds; holding the last TAI-UTC',
            utc_mjd,
        )
    day = math.floor(utc_mjd - J2000_MJD)
    elapsed = float(julian.tai_from_day_sec(day, 0.0)) - float(julian.tai_from_day_sec(0, 0.0))
    return TAI_MINUS_UTC_AT_J2000 + elapsed - day * SECONDS_PER_DAY


def tt_minus_utc(utc_mjd: float) -> float:
    """TT-UTC in seconds (32.184 s + TAI-UTC).

    Parameters:
        utc_mjd: UTC as MJD.

    Returns:
        TT-UTC in seconds.
    """
    return TT_MINUS_TAI + tai_minus_utc(utc_mjd)


dtt = tt_minus_utc


def tdb_minus_tt(
    tt_mjd: float,
    ut_fraction: float,
    longitude: float,
    u_km: float,
    v_km: float,
) -> float:
    """TDB-TT in seconds for an observer on the Earth (Fairhead & Bretagnon).

    Parameters:
        tt_mjd: TT (TDB is equally good) as MJD.
        ut_fraction: Universal time as a fraction of one day.
        longitude: East longitude of the observer (radians).
        u_km: Distance of the observer from Earth's spin axis (km).
        v_km: Distance of the observer north of the equatorial plane (km).

    Returns:
        TDB-TT in seconds (|value| < 2 ms).
    """
    return float(erfa.dtdb(MJD_ZERO_JD, tt_mjd, ut_fraction, longitude, u_km, v_km))


def _require_scale(time: Time, scale: TimeScale) -> None:
    if time.scale is not scale:
        raise ValueError(f'expected a {scale.value} time, got {time.scale.value}')


def utc_to_tt(utc: Time) -> Time:
    """Convert a UTC time to TT."""
    _require_scale(utc, TimeScale.UTC)
    return Time(utc.mjd + tt_minus_utc(utc.mjd) / SECONDS_PER_DAY, TimeScale.TT)


def tt_to_tdb(
    tt: Time,
    ut_fraction: float,
    longitude: float = 0.0,
    u_km: float = 0.0,
    v_km: float = 0.0,
) -> Time:
    """Convert a TT time to TDB for the given observer (geocentre by default)."""
    _require_scale(tt, TimeScale.TT)
    correction = tdb_minus_tt(tt.mjd, ut_fraction, longitude, u_km, v_km)
    return Time(tt.mjd + correction / SECONDS_PER_DAY, TimeScale.TDB)
