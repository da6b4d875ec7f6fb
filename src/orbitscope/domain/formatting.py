# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Readout formatting for the simulation clock."""
import math
from decimal import ROUND_HALF_UP, Decimal

from .constants import rad_to_deg

_ONE_DECIMAL = Decimal("0.1")


def _fixed_1(value: float) -> str:
    # Half away from zero on the exact binary value: 1.25 -> "1.3", 0.15 -> "0.1".
    # Adding 0.0 folds -0.0 into 0.0.
    return str(Decimal(value + 0.0).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def format_time(seconds: float) -> str:
    """Format elapsed seconds as HH:MM:SS; negative times read as 00:00:00."""
    seconds = max(0.0, seconds)
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    return ":".join(f"{n:02d}" for n in (hours, minutes, secs))


def format_angle(radians: float) -> str:
    """Format an angle in radians as signed degrees, e.g. '+90.0°'."""
    degrees = rad_to_deg(radians)
    sign = "+" if degrees >= 0 else ""
    return f"{sign}{_fixed_1(degrees)}°"


def format_time_scale(scale: float) -> str:
    return f"{_fixed_1(scale)}x"
