"""Astrometric transformation chain: ephemeris, frames, observer, refraction."""
