# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simulation clock and control state.

A single immutable SimulationState plus pure transition functions for
the per-frame driver (advance) and the user controls (play/pause,
scrubbing, time scale, attitude, orbit selection, reset). Each
transition returns a new state; nothing is retained between calls.
"""
from dataclasses import dataclass, replace

import numpy as np

from .orbits import DEFAULT_ORBIT_TYPE, OrbitType, get_orbit_by_id
from .position import (
    Position3D,
    calculate_delta_angle,
    calculate_earth_rotation,
    calculate_orbital_position,
)

TWO_PI = 2 * np.pi

DEFAULT_TIME_SCALE = 500.0
MIN_TIME_SCALE = 1.0
MAX_TIME_SCALE = 10_000.0

# Scrubber covers ±1 orbit around the pause position
SCRUBBER_ANGLE_RANGE = TWO_PI

ATTITUDE_LIMIT = np.pi


@dataclass(frozen=True)
class SimulationState:
    """Snapshot of the simulation clock, controls and satellite attitude."""
    is_playing: bool = True
    time_scale: float = DEFAULT_TIME_SCALE
    orbital_angle: float = 0.0      # rad, [0, 2π)
    elapsed_time: float = 0.0       # s
    orbit_type_id: str = DEFAULT_ORBIT_TYPE
    roll: float = 0.0               # rad
    pitch: float = 0.0              # rad
    yaw: float = 0.0                # rad
    pause_angle: float | None = None  # rad, scrubber anchor; None = current angle
    pause_time: float | None = None   # s, scrubber anchor; None = current time
    scrubber_offset: float = 0.0    # rad

    @property
    def orbit(self) -> OrbitType:
        return get_orbit_by_id(self.orbit_type_id)


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a renderer needs for one frame."""
    orbit: OrbitType
    satellite_position: Position3D
    earth_rotation: float


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def wrap_angle(angle: float) -> float:
    """Normalize an angle to [0, 2π)."""
    wrapped = float(np.mod(angle, TWO_PI))
    # np.mod can round tiny negative inputs up to exactly 2π
    return 0.0 if wrapped >= TWO_PI else wrapped


def advance(state: SimulationState, frame_delta: float) -> SimulationState:
    """
    Advance the clock by one rendered frame.

    Args:
        state: Current state.
        frame_delta: Real time since the previous frame (s).

    Returns:
        New state; unchanged when paused.
    """
    if not state.is_playing:
        return state

    scaled_delta = frame_delta * state.time_scale
    delta_angle = calculate_delta_angle(state.orbit, scaled_delta)
    return replace(
        state,
        orbital_angle=wrap_angle(state.orbital_angle + delta_angle),
        elapsed_time=state.elapsed_time + scaled_delta,
    )


def set_playing(state: SimulationState, playing: bool) -> SimulationState:
    """Start or pause playback; pausing anchors the scrubber at the current position."""
    if state.is_playing and not playing:
        return replace(
            state,
            is_playing=False,
            pause_angle=state.orbital_angle,
            pause_time=state.elapsed_time,
            scrubber_offset=0.0,
        )
    return replace(state, is_playing=playing)


def toggle_playing(state: SimulationState) -> SimulationState:
    return set_playing(state, not state.is_playing)


def scrub(state: SimulationState, angle_offset: float) -> SimulationState:
    """
    Move the satellite relative to where playback was paused.

    Without a recorded anchor (a state built already paused, or after
    reset) the current angle and time become the anchor, and the result
    records it so later offsets stay relative to the same point.

    The offset is clamped to ±SCRUBBER_ANGLE_RANGE and independent of
    time scale. Elapsed time follows from the orbit period and never
    goes below zero.

    Raises:
        ValueError: If the simulation is playing.
    """
    if state.is_playing:
        raise ValueError("Pause the simulation before scrubbing")

    pause_angle = state.orbital_angle if state.pause_angle is None else state.pause_angle
    pause_time = state.elapsed_time if state.pause_time is None else state.pause_time

    offset = _clamp(angle_offset, -SCRUBBER_ANGLE_RANGE, SCRUBBER_ANGLE_RANGE)
    delta_time = (offset / TWO_PI) * state.orbit.period
    return replace(
        state,
        pause_angle=pause_angle,
        pause_time=pause_time,
        scrubber_offset=offset,
        orbital_angle=wrap_angle(pause_angle + offset),
        elapsed_time=max(0.0, pause_time + delta_time),
    )


def set_time_scale(state: SimulationState, time_scale: float) -> SimulationState:
    """Set the speed multiplier, clamped to [MIN_TIME_SCALE, MAX_TIME_SCALE]."""
    if np.isnan(time_scale):
        raise ValueError("time scale must be a number, got nan")
    return replace(
        state, time_scale=_clamp(time_scale, MIN_TIME_SCALE, MAX_TIME_SCALE),
    )


def set_attitude(
    state: SimulationState,
    roll: float | None = None,
    pitch: float | None = None,
    yaw: float | None = None,
) -> SimulationState:
    """Set any of roll/pitch/yaw, each clamped to [-π, π]."""
    changes = {}
    for axis, value in (("roll", roll), ("pitch", pitch), ("yaw", yaw)):
        if value is not None:
            changes[axis] = _clamp(value, -ATTITUDE_LIMIT, ATTITUDE_LIMIT)
    return replace(state, **changes)


def reset_attitude(state: SimulationState) -> SimulationState:
    return replace(state, roll=0.0, pitch=0.0, yaw=0.0)


def select_orbit(state: SimulationState, orbit_id: str) -> SimulationState:
    """Select an orbit by id. Unknown ids resolve to the default on read."""
    return replace(state, orbit_type_id=orbit_id)


def reset(state: SimulationState) -> SimulationState:
    """
    Return to the start of the simulation.

    Clears attitude, time, orbital position and the scrubber. Keeps the
    time scale, the selected orbit and the play state.
    """
    return replace(
        state,
        roll=0.0,
        pitch=0.0,
        yaw=0.0,
        orbital_angle=0.0,
        elapsed_time=0.0,
        scrubber_offset=0.0,
        pause_angle=None,
        pause_time=None,
    )


def frame(state: SimulationState) -> FrameSnapshot:
    """Compute satellite position and Earth rotation for the current state."""
    orbit = state.orbit
    return FrameSnapshot(
        orbit=orbit,
        satellite_position=calculate_orbital_position(state.orbital_angle, orbit),
        earth_rotation=calculate_earth_rotation(state.elapsed_time),
    )
