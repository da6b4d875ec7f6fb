# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
orbitscope

Kinematics for an interactive satellite-orbit viewer: orbit presets,
satellite position on inclined and RAAN-rotated circular orbits, closed
orbit paths for rendering, Earth rotation on a sidereal clock, and
orbital period and speed from Kepler's third law.
"""

from orbitscope.domain.constants import (
    BASE_ALTITUDE,
    EARTH_INITIAL_ROTATION,
    EARTH_MU,
    EARTH_RADIUS,
    EARTH_RADIUS_KM,
    EARTH_RADIUS_M,
    EARTH_ROTATION_RATE,
    EARTH_SIDEREAL_DAY,
    ORBIT_ALTITUDES,
    ORBIT_RADIUS,
    ORBITAL_PERIOD,
    ORBITAL_VELOCITIES,
    SUN_COLOR,
    SUN_DISTANCE,
    SUN_RADIUS,
    calculate_orbital_period,
    calculate_orbital_velocity_km_s,
    deg_to_rad,
    rad_to_deg,
)
from orbitscope.domain.orbits import (
    DEFAULT_ORBIT,
    DEFAULT_ORBIT_TYPE,
    ORBIT_TYPES,
    OrbitType,
    get_orbit_by_id,
    ltan_to_raan,
    orbit_ids,
)
from orbitscope.domain.position import (
    Position3D,
    calculate_delta_angle,
    calculate_earth_rotation,
    calculate_orbit_path,
    calculate_orbit_radius,
    calculate_orbital_angular_velocity,
    calculate_orbital_position,
)
from orbitscope.domain.simulation import (
    FrameSnapshot,
    SimulationState,
    advance,
    frame,
    reset,
    scrub,
    select_orbit,
    set_playing,
    set_time_scale,
)
from orbitscope.version import __version__

__all__ = [
    "BASE_ALTITUDE",
    "EARTH_INITIAL_ROTATION",
    "EARTH_MU",
    "EARTH_RADIUS",
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_M",
    "EARTH_ROTATION_RATE",
    "EARTH_SIDEREAL_DAY",
    "ORBIT_ALTITUDES",
    "ORBIT_RADIUS",
    "ORBITAL_PERIOD",
    "ORBITAL_VELOCITIES",
    "SUN_COLOR",
    "SUN_DISTANCE",
    "SUN_RADIUS",
    "calculate_orbital_period",
    "calculate_orbital_velocity_km_s",
    "deg_to_rad",
    "rad_to_deg",
    "DEFAULT_ORBIT",
    "DEFAULT_ORBIT_TYPE",
    "ORBIT_TYPES",
    "OrbitType",
    "get_orbit_by_id",
    "ltan_to_raan",
    "orbit_ids",
    "Position3D",
    "calculate_delta_angle",
    "calculate_earth_rotation",
    "calculate_orbit_path",
    "calculate_orbit_radius",
    "calculate_orbital_angular_velocity",
    "calculate_orbital_position",
    "FrameSnapshot",
    "SimulationState",
    "advance",
    "frame",
    "reset",
    "scrub",
    "select_orbit",
    "set_playing",
    "set_time_scale",
    "__version__",
]
