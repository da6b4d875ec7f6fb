# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON adapters for orbit paths and the orbit catalog.
"""
import json
import logging
from dataclasses import asdict
from typing import Any

from orbitscope.ports import OrbitPathExporter
from orbitscope.domain.orbits import ORBIT_TYPES, OrbitType
from orbitscope.domain.position import calculate_orbit_path

logger = logging.getLogger(__name__)


def _write_json(data: Any, path: str) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


class JsonOrbitPathExporter(OrbitPathExporter):
    """Exports an orbit path with its orbit parameters as JSON."""

    def export(
        self,
        orbit: OrbitType,
        path: str,
        segments: int = 128,
    ) -> int:
        points = calculate_orbit_path(orbit, segments)
        _write_json({
            'orbit': asdict(orbit),
            'segments': segments,
            'points': [list(p) for p in points],
        }, path)
        logger.info("Wrote %d path points for %s to %s", len(points), orbit.id, path)
        return len(points)


def write_catalog(path: str) -> int:
    """Write every orbit preset to a JSON list. Returns the preset count."""
    _write_json([asdict(orbit) for orbit in ORBIT_TYPES], path)
    logger.info("Wrote %d orbit presets to %s", len(ORBIT_TYPES), path)
    return len(ORBIT_TYPES)
