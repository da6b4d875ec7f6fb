# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV orbit path exporter.

Writes one row per sampled path point in scene coordinates.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

import numpy as np

from orbitscope.ports import OrbitPathExporter
from orbitscope.domain.orbits import OrbitType
from orbitscope.domain.position import calculate_orbit_path

logger = logging.getLogger(__name__)

_HEADER = ['index', 'angle_rad', 'x', 'y', 'z']


class CsvOrbitPathExporter(OrbitPathExporter):
    """Exports an orbit path as CSV rows of (index, angle, x, y, z)."""

    def export(
        self,
        orbit: OrbitType,
        path: str,
        segments: int = 128,
    ) -> int:
        points = calculate_orbit_path(orbit, segments)
        angles = np.linspace(0.0, 2 * np.pi, segments + 1)

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for index, (angle, (x, y, z)) in enumerate(zip(angles, points)):
                writer.writerow([
                    index,
                    f'{angle:.6f}',
                    f'{x:.6f}',
                    f'{y:.6f}',
                    f'{z:.6f}',
                ])

        logger.info("Wrote %d path points for %s to %s", len(points), orbit.id, path)
        return len(points)
