# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit catalog.

Named, physically parameterized orbit presets and a lookup that never
fails: unknown ids resolve to the default orbit.
"""
import logging
import math
import re
from dataclasses import dataclass, field

from .constants import calculate_orbital_period

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrbitType:
    """Immutable orbit preset for the satellite scene."""
    id: str
    name: str
    description: str
    inclination: float          # deg from the equatorial plane
    altitude_multiplier: float  # relative to BASE_ALTITUDE (scene only)
    altitude_km: float          # real-world altitude
    period: float               # s
    raan: float                 # deg
    ltan: str | None = field(default=None)  # "HH:MM", SSO presets only


_CLOCK_NUMBER = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def _parse_clock_part(text: str) -> float:
    # Plain decimal only; "inf", "nan", "1_2" and the like count as 0
    text = text.strip()
    if not _CLOCK_NUMBER.fullmatch(text):
        return 0.0
    value = float(text)
    # A long enough digit string still overflows to inf
    return value if math.isfinite(value) else 0.0


def ltan_to_raan(ltan: str) -> float:
    """
    Convert a Local Time of Ascending Node to RAAN in degrees.

    Local noon maps to 0° and every clock hour to 15° (360° / 24 h).
    Parsing is lenient: a missing minutes part counts as 0, and any part
    that is not a plain decimal number (including "inf" or "1_2") also
    counts as 0, so "xx:yy" yields -180°.

    Args:
        ltan: Local time as "HH:MM" (or "HH").

    Returns:
        RAAN in degrees.
    """
    parts = ltan.split(":")
    hours = _parse_clock_part(parts[0])
    minutes = _parse_clock_part(parts[1]) if len(parts) > 1 else 0.0
    ltan_hours = hours + minutes / 60.0
    return (ltan_hours - 12.0) * 15.0


def _sso(orbit_id: str, name: str, description: str, ltan: str) -> OrbitType:
    return OrbitType(
        id=orbit_id,
        name=name,
        description=description,
        inclination=98.0,
        altitude_multiplier=1.0,
        altitude_km=500.0,
        period=calculate_orbital_period(500.0),
        raan=ltan_to_raan(ltan),
        ltan=ltan,
    )


DEFAULT_ORBIT_TYPE = "dawn-dusk"

# Dawn-dusk SSO flies along the terminator
DEFAULT_ORBIT: OrbitType = _sso(
    DEFAULT_ORBIT_TYPE,
    "Dawn-Dusk SSO",
    "Flies along terminator. Optimal for thermal imaging.",
    "06:00",
)

ORBIT_TYPES: tuple[OrbitType, ...] = (
    DEFAULT_ORBIT,
    _sso(
        "sso-morning",
        "Mid-Morning SSO",
        "Standard Earth observation orbit. Good illumination.",
        "10:30",
    ),
    _sso(
        "sso-noon",
        "Noon-Midnight SSO",
        "Maximum illumination contrast. High thermal gradients.",
        "12:00",
    ),
    OrbitType(
        id="polar",
        name="Polar Orbit",
        description="Full Earth coverage. Variable lighting conditions.",
        inclination=90.0,
        altitude_multiplier=1.1,
        altitude_km=550.0,
        period=calculate_orbital_period(550.0),
        raan=0.0,
    ),
    OrbitType(
        id="iss",
        name="ISS Orbit",
        description="Common for CubeSat deployments. Covers ±51.6° latitude.",
        inclination=51.6,
        altitude_multiplier=0.84,
        altitude_km=420.0,
        period=calculate_orbital_period(420.0),
        raan=0.0,
    ),
    OrbitType(
        id="leo",
        name="Low Earth Orbit (LEO)",
        description="General purpose mid-inclination. Technology demos.",
        inclination=45.0,
        altitude_multiplier=0.9,
        altitude_km=450.0,
        period=calculate_orbital_period(450.0),
        raan=0.0,
    ),
    OrbitType(
        id="equatorial",
        name="Equatorial",
        description="Zero inclination. Equatorial region coverage only.",
        inclination=0.0,
        altitude_multiplier=1.0,
        altitude_km=500.0,
        period=calculate_orbital_period(500.0),
        raan=0.0,
    ),
)

_BY_ID: dict[str, OrbitType] = {orbit.id: orbit for orbit in ORBIT_TYPES}


def orbit_ids() -> list[str]:
    """Catalog ids in catalog order."""
    return [orbit.id for orbit in ORBIT_TYPES]


def get_orbit_by_id(orbit_id: str) -> OrbitType:
    """
    Look up an orbit preset by id.

    Never raises: an unknown id (e.g. a stale selection after the catalog
    changed) resolves to DEFAULT_ORBIT.

    Args:
        orbit_id: Catalog key.

    Returns:
        The matching OrbitType, or DEFAULT_ORBIT.
    """
    orbit = _BY_ID.get(orbit_id)
    if orbit is None:
        logger.debug(
            "Unknown orbit id %r, falling back to %r", orbit_id, DEFAULT_ORBIT_TYPE,
        )
        return DEFAULT_ORBIT
    return orbit
