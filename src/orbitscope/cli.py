# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the orbit kinematics.

Usage:
    # List orbit presets
    orbitscope --list

    # Satellite position at 90° on the ISS orbit
    orbitscope --orbit iss --angle 90

    # Export the sampled orbit path
    orbitscope --orbit polar --export-csv polar.csv --segments 256
    orbitscope --orbit polar --export-json polar.json
    orbitscope --export-catalog orbits.json

    # Run the frame loop headless for one simulated hour
    orbitscope --orbit sso-morning --simulate 7.2 --time-scale 500 --fps 60
"""
import argparse
import logging
import math
import sys

from orbitscope.domain.constants import deg_to_rad, rad_to_deg
from orbitscope.domain.formatting import format_angle, format_time, format_time_scale
from orbitscope.domain.orbits import (
    DEFAULT_ORBIT_TYPE,
    ORBIT_TYPES,
    get_orbit_by_id,
    orbit_ids,
)
from orbitscope.domain.position import calculate_orbital_position
from orbitscope.domain.simulation import (
    SimulationState,
    advance,
    frame,
    set_time_scale,
)
from orbitscope.adapters.csv_exporter import CsvOrbitPathExporter
from orbitscope.adapters.json_io import JsonOrbitPathExporter, write_catalog

logger = logging.getLogger(__name__)


def print_catalog() -> None:
    """Print one line per orbit preset."""
    print(f"{'id':<12} {'name':<24} {'inc':>6} {'alt km':>7} {'period min':>11} {'raan':>7}")
    for orbit in ORBIT_TYPES:
        print(
            f"{orbit.id:<12} {orbit.name:<24} {orbit.inclination:>6.1f} "
            f"{orbit.altitude_km:>7.0f} {orbit.period / 60:>11.2f} {orbit.raan:>7.1f}"
        )


def run_simulation(
    state: SimulationState,
    duration_s: float,
    fps: float,
    report_every: int | None = None,
) -> SimulationState:
    """
    Drive the frame loop headlessly for duration_s of real time.

    Prints a readout every report_every frames (default: once per
    simulated real second) and once at the end.
    """
    if not (math.isfinite(fps) and fps > 0):
        raise ValueError(f"fps must be positive and finite, got {fps}")
    if not (math.isfinite(duration_s) and duration_s >= 0):
        raise ValueError(f"duration must be non-negative and finite, got {duration_s}")

    frame_delta = 1.0 / fps
    num_frames = int(round(duration_s * fps))
    if report_every is None:
        report_every = max(1, int(round(fps)))

    logger.debug("Simulating %d frames at %.1f fps", num_frames, fps)
    for i in range(1, num_frames + 1):
        state = advance(state, frame_delta)
        if i % report_every == 0 or i == num_frames:
            _print_readout(state)
    return state


def _print_readout(state: SimulationState) -> None:
    snapshot = frame(state)
    x, y, z = snapshot.satellite_position
    print(
        f"t={format_time(state.elapsed_time)} "
        f"angle={format_angle(state.orbital_angle)} "
        f"scale={format_time_scale(state.time_scale)} "
        f"earth={format_angle(snapshot.earth_rotation)} "
        f"pos=({x:.4f}, {y:.4f}, {z:.4f})"
    )


def main():
    parser = argparse.ArgumentParser(
        description="Satellite orbit kinematics: positions, paths and a headless frame loop"
    )
    parser.add_argument(
        '--list', action='store_true', default=False,
        help="List the orbit presets and exit"
    )
    parser.add_argument(
        '--orbit', default=DEFAULT_ORBIT_TYPE,
        help=f"Orbit preset id ({', '.join(orbit_ids())}; default: {DEFAULT_ORBIT_TYPE})"
    )
    parser.add_argument(
        '--angle', type=float,
        help="Print the satellite position at this orbital angle (degrees)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--segments', type=int, default=128,
        help="Orbit path segments (default: 128)"
    )
    export_group.add_argument('--export-csv', help="Export the orbit path to CSV")
    export_group.add_argument('--export-json', help="Export the orbit path to JSON")
    export_group.add_argument('--export-catalog', help="Export all orbit presets to JSON")

    sim_group = parser.add_argument_group('simulation')
    sim_group.add_argument(
        '--simulate', type=float,
        help="Run the frame loop for this many seconds of real time"
    )
    sim_group.add_argument(
        '--time-scale', type=float, default=500.0,
        help="Simulation speed multiplier, 1 to 10000 (default: 500)"
    )
    sim_group.add_argument(
        '--fps', type=float, default=60.0,
        help="Frames per second for --simulate (default: 60)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print_catalog()
        return

    if args.orbit not in orbit_ids():
        print(
            f"Unknown orbit '{args.orbit}', using {DEFAULT_ORBIT_TYPE}",
            file=sys.stderr,
        )
    orbit = get_orbit_by_id(args.orbit)

    try:
        if args.angle is not None:
            x, y, z = calculate_orbital_position(deg_to_rad(args.angle), orbit)
            print(f"{orbit.id} @ {args.angle:.1f}°: x={x:.6f} y={y:.6f} z={z:.6f}")

        if args.export_csv:
            n = CsvOrbitPathExporter().export(orbit, args.export_csv, args.segments)
            print(f"Exported {n} path points to {args.export_csv}")

        if args.export_json:
            n = JsonOrbitPathExporter().export(orbit, args.export_json, args.segments)
            print(f"Exported {n} path points to {args.export_json}")

        if args.export_catalog:
            n = write_catalog(args.export_catalog)
            print(f"Exported {n} orbit presets to {args.export_catalog}")

        if args.simulate is not None:
            state = set_time_scale(
                SimulationState(orbit_type_id=orbit.id), args.time_scale,
            )
            final = run_simulation(state, args.simulate, args.fps)
            print(
                f"Simulated {format_time(final.elapsed_time)} "
                f"({rad_to_deg(final.orbital_angle):.1f}° along {orbit.id})"
            )

    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
