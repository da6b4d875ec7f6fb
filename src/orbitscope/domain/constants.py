# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scene and physical constants.

Scene values are in rendering units (Earth radius = 1), not real-world
scale. Physical values are SI unless the name says otherwise.
No external dependencies beyond numpy.
"""
import numpy as np


# Scene units
EARTH_RADIUS: float = 1.0
BASE_ALTITUDE: float = 0.6          # exaggerated for visibility
ORBIT_RADIUS: float = EARTH_RADIUS + BASE_ALTITUDE
SUN_DISTANCE: float = 15.0          # compressed for framing
SUN_RADIUS: float = 1.5
SUN_COLOR: str = "#FFF5E0"

# Reference orbital period at 500 km (s)
ORBITAL_PERIOD: float = 5667.0

# Earth rotation
EARTH_SIDEREAL_DAY: float = 86164.0               # s, 23h 56m 4s
EARTH_INITIAL_ROTATION: float = -np.pi / 2        # prime meridian faces the Sun (+X)
EARTH_ROTATION_RATE: float = 2 * np.pi / EARTH_SIDEREAL_DAY  # rad/s

# Physical
EARTH_MU: float = 3.986004418e14    # m³/s², gravitational parameter
EARTH_RADIUS_KM: float = 6371.0
EARTH_RADIUS_M: float = EARTH_RADIUS_KM * 1000.0


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * np.pi / 180.0


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / np.pi


def _orbit_radius_m(altitude_km: float) -> float:
    r = (EARTH_RADIUS_KM + altitude_km) * 1000.0
    if r <= 0:
        raise ValueError(
            f"Orbit radius must be positive, got {r} m for altitude {altitude_km} km"
        )
    return r


def calculate_orbital_period(altitude_km: float) -> float:
    """
    Orbital period of a circular orbit from Kepler's third law.

        T = 2π · √(a³ / μ)

    Args:
        altitude_km: Altitude above the mean Earth radius (km).

    Returns:
        Period in seconds.

    Raises:
        ValueError: If the resulting orbit radius is not positive.
    """
    a = _orbit_radius_m(altitude_km)
    return float(2 * np.pi * np.sqrt(a**3 / EARTH_MU))


def calculate_orbital_velocity_km_s(altitude_km: float) -> float:
    """
    Circular orbital speed v = √(μ / r).

    Args:
        altitude_km: Altitude above the mean Earth radius (km).

    Returns:
        Speed in km/s.
    """
    r = _orbit_radius_m(altitude_km)
    return float(np.sqrt(EARTH_MU / r)) / 1000.0


# Altitude classes used by the catalog presets (km)
ORBIT_ALTITUDES: dict[str, float] = {
    "iss": 420.0,
    "leo": 450.0,
    "sso": 500.0,
    "polar": 550.0,
}

# Circular speeds for the altitude classes above (km/s)
ORBITAL_VELOCITIES: dict[str, float] = {
    key: calculate_orbital_velocity_km_s(alt) for key, alt in ORBIT_ALTITUDES.items()
}
