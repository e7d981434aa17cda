"""Configuration: leap-second table location from environment."""

import os
from pathlib import Path

from observing_tools.constants import LEAPSECOND_TABLE_VALID_UNTIL_MJD

# NAIF LSK names searched for under LEAPSECS_DIR, newest first.
LSK_NAMES = ('naif0012.tls', 'naif0011.tls', 'naif0010.tls', 'leapseconds.tls')


def get_leapsecs_dir() -> str | None:
    """Return directory to search for a NAIF LSK (LEAPSECS_DIR env var), or None.

    Returns:
        Path string, or None when the variable is unset or blank.
    """
    path = os.environ.get('LEAPSECS_DIR', '').strip()
    return path or None


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers JULIAN_LEAPSECS, then the first known .tls under LEAPSECS_DIR.
    None means rms-julian's bundled LSK is used.

    Returns:
        Path string to an LSK, or None.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    base = get_leapsecs_dir()
    if base is None:
        return None
    for name in LSK_NAMES:
        p = Path(base) / name
        if p.exists():
            return str(p)
    return None


def get_leapsecs_valid_until() -> float:
    """Return the UTC MJD up to which the leap-second table is known to be complete.

    Reads LEAPSECS_VALID_UNTIL (an MJD), for use with a newer LSK than the
    bundled one; falls back to LEAPSECOND_TABLE_VALID_UNTIL_MJD.

    Returns:
        MJD as a float.

    Raises:
        ValueError: LEAPSECS_VALID_UNTIL is set but is not a number.
    """
    value = os.environ.get('LEAPSECS_VALID_UNTIL', '').strip()
    if not value:
        return LEAPSECOND_TABLE_VALID_UNTIL_MJD
    return float(value)
