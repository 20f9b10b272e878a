"""Compute exit points from a JSON description of a jump and its wind profile.

Command-line front end for checking calculations outside any UI.

Input file format:
    {
        "parameters": {"jump_altitude": 4000, ..., "landing_zone": {"lat": 61.78, "lon": 22.72}},
        "weather": [{"altitude": 0, "direction": 270, "speed": 5}, ...],
        "profiles": [{"id": "tandem", "name": "Tandem", "overrides": {...}}]   (optional)
    }

Run: exitpoint-planner jump.json [--json]
     python -m exitpoint_planner.cli jump.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from exitpoint_planner.exceptions import ExitPointError
from exitpoint_planner.model.exit_point import ExitCalculationResult
from exitpoint_planner.model.forecast import ForecastData
from exitpoint_planner.model.jump_parameters import JumpParameters
from exitpoint_planner.model.profile import JumpProfile
from exitpoint_planner.solver.exit_point import build_flight_path, calculate_exit_points
from exitpoint_planner.solver.profiles import calculate_for_profiles

logger = logging.getLogger(__name__)


def load_request(path: Path) -> tuple[JumpParameters, list[ForecastData], list[JumpProfile]]:
    """Parse the input file into parameters, weather samples and profiles.

    Raises:
        OSError: If the file cannot be read.
        ValueError: On invalid JSON or out-of-range coordinates.
        KeyError: If "parameters" or a required sample field is missing.
        TypeError: On unknown parameter names.
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)

    params = JumpParameters.from_dict(data["parameters"])
    weather = [ForecastData.from_dict(sample) for sample in data.get("weather", [])]
    profiles = [
        JumpProfile(
            id=p["id"],
            name=p.get("name", p["id"]),
            enabled=p.get("enabled", True),
            overrides=p.get("overrides", {}),
        )
        for p in data.get("profiles", [])
    ]
    return params, weather, profiles


def format_result(result: ExitCalculationResult) -> str:
    """Human-readable summary of one calculation."""
    lines = [
        f"Aircraft heading: {result.aircraft_heading:.0f}°",
        f"Optimal exit point: {result.optimal_exit_point.lat:.6f}, {result.optimal_exit_point.lon:.6f}",
        f"Safety radius: {result.safety_radius:.0f}m",
    ]
    for exit_point in result.exit_points:
        lines.append(
            f"  Group {exit_point.group_number}: {exit_point.location.lat:.6f}, {exit_point.location.lon:.6f}"
        )
    flight_path = build_flight_path(result)
    if flight_path is not None:
        start, end = flight_path[0], flight_path[-1]
        lines.append(f"Jump run: {start.lat:.6f}, {start.lon:.6f} -> {end.lat:.6f}, {end.lon:.6f}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute parachute exit points from a JSON request.")
    parser.add_argument("request", type=Path, help="JSON file with parameters and weather")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        params, weather, profiles = load_request(args.request)
    except (OSError, KeyError, TypeError, ValueError) as e:
        # json.JSONDecodeError and LatLon range errors are ValueErrors
        logger.error(f"Invalid request {args.request}: {e!r}")
        return 1

    try:
        if not profiles:
            result = calculate_exit_points(params, weather)
            print(json.dumps(result.to_dict(), indent=2) if args.json else format_result(result))
            return 0

        results = calculate_for_profiles(params, profiles, weather)
    except ExitPointError as e:
        logger.error(f"Calculation failed: {e}")
        return 1

    if args.json:
        payload = {
            r.profile_id: r.calculation.to_dict() if r.ok else {"error": r.error} for r in results
        }
        print(json.dumps(payload, indent=2))
    else:
        for r in results:
            print(f"== {r.profile.name}")
            print(format_result(r.calculation) if r.ok else f"Error: {r.error}")
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
