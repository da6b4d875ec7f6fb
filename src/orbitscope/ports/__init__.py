# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for orbit path export.

Adapters implement this to write sampled orbit paths in various formats
(CSV, JSON).
"""
from typing import Protocol, runtime_checkable

from orbitscope.domain.orbits import OrbitType


@runtime_checkable
class OrbitPathExporter(Protocol):
    """Port for exporting a sampled orbit path to file."""

    def export(
        self,
        orbit: OrbitType,
        path: str,
        segments: int = 128,
    ) -> int:
        """
        Sample the orbit path and write it to a file.

        Args:
            orbit: Orbit preset to sample.
            path: Output file path.
            segments: Number of path segments; segments + 1 points are written.

        Returns:
            Number of points written.
        """
        ...
