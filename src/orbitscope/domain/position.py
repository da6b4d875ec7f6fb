# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Satellite and Earth kinematics for the scene.

Pure functions from scalar simulation inputs (orbital angle, elapsed
time) to scene geometry. Circular orbits on an inclined plane rotated
about the north-pole (Y) axis by RAAN.

Coordinate system:
    X: toward the Sun
    Y: north pole
    Z: completes the right-handed system
"""
import numpy as np

from .constants import (
    BASE_ALTITUDE,
    EARTH_INITIAL_ROTATION,
    EARTH_RADIUS,
    EARTH_SIDEREAL_DAY,
    deg_to_rad,
)
from .orbits import OrbitType

Position3D = tuple[float, float, float]


def calculate_orbit_radius(orbit: OrbitType) -> float:
    """Orbital radius in scene units."""
    return EARTH_RADIUS + BASE_ALTITUDE * orbit.altitude_multiplier


def calculate_orbital_position(orbital_angle: float, orbit: OrbitType) -> Position3D:
    """
    Satellite position on an inclined, RAAN-rotated circular orbit.

    Args:
        orbital_angle: Angle along the orbit (radians). Any real value;
            the result is periodic in 2π.
        orbit: Orbit preset.

    Returns:
        (x, y, z) in scene units.
    """
    radius = calculate_orbit_radius(orbit)
    inc = deg_to_rad(orbit.inclination)
    raan = deg_to_rad(orbit.raan)

    cos_t = float(np.cos(orbital_angle))
    sin_t = float(np.sin(orbital_angle))

    # Orbital plane, before the RAAN rotation
    x_p = radius * cos_t
    y_p = radius * sin_t * float(np.sin(inc))
    z_p = radius * sin_t * float(np.cos(inc))

    cos_o = float(np.cos(raan))
    sin_o = float(np.sin(raan))

    x = x_p * cos_o + z_p * sin_o
    y = y_p
    z = -x_p * sin_o + z_p * cos_o

    return (x, y, z)


def calculate_orbit_path(orbit: OrbitType, segments: int = 128) -> list[Position3D]:
    """
    Sample one full revolution as a closed polyline.

    Returns segments + 1 points at evenly spaced angles over [0, 2π];
    the first and last points coincide.

    Raises:
        ValueError: If segments < 1.
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")

    angles = np.linspace(0.0, 2 * np.pi, segments + 1)
    return [calculate_orbital_position(float(angle), orbit) for angle in angles]


def calculate_earth_rotation(elapsed_time: float) -> float:
    """
    Earth rotation angle about Y for the given simulation time.

    Uses the sidereal day (23h 56m 4s). Not wrapped to [0, 2π).

    Args:
        elapsed_time: Simulation time (s).

    Returns:
        Rotation angle in radians.
    """
    return EARTH_INITIAL_ROTATION + (elapsed_time / EARTH_SIDEREAL_DAY) * 2 * np.pi


def calculate_orbital_angular_velocity(orbit: OrbitType) -> float:
    """
    Mean angular velocity 2π / period in rad/s.

    Raises:
        ValueError: If orbit.period <= 0 (malformed orbit definition).
    """
    if not orbit.period > 0:
        raise ValueError(
            f"Orbit '{orbit.id}' has non-positive period {orbit.period}"
        )
    return 2 * np.pi / orbit.period


def calculate_delta_angle(orbit: OrbitType, delta_time: float) -> float:
    """Orbital angle change over delta_time seconds; negative steps rewind."""
    return calculate_orbital_angular_velocity(orbit) * delta_time
