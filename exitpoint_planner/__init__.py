"""Exit Point Planner - Where to leave the aircraft so the load lands on target.

Computes parachute exit points from a wind profile and jump parameters:
- Wind drift integration through freefall and canopy flight
- Optimal exit point from passive drift
- Automatic headwind jump run with wind-corrected group spacing
- Safety radius from canopy performance

Modules:
    core: Vector math, geodesy, weather interpolation, drift integration
    model: Data structures (LatLon, ForecastData, JumpParameters, results)
    solver: Exit point solver and multi-profile runner

Example:
    from exitpoint_planner import ForecastData, JumpParameters, LatLon, calculate_exit_points

    params = JumpParameters(landing_zone=LatLon(lat=61.78, lon=22.72))
    weather = [ForecastData(altitude=0, direction=270, speed=5), ForecastData(altitude=4000, direction=280, speed=20)]
    result = calculate_exit_points(params, weather)
"""

from exitpoint_planner.exceptions import (
    ExitPointError,
    InvalidJumpParametersError,
    InvalidProfileError,
    InvalidWeatherDataError,
    MissingWeatherDataError,
    NoEnabledProfilesError,
)
from exitpoint_planner.model import (
    ExitCalculationResult,
    ExitPoint,
    ForecastData,
    JumpParameters,
    JumpProfile,
    LatLon,
    ProfileResult,
)
from exitpoint_planner.solver import calculate_exit_points, calculate_for_profiles

__all__ = [
    "calculate_exit_points",
    "calculate_for_profiles",
    "LatLon",
    "ForecastData",
    "JumpParameters",
    "ExitPoint",
    "ExitCalculationResult",
    "JumpProfile",
    "ProfileResult",
    "ExitPointError",
    "InvalidJumpParametersError",
    "InvalidProfileError",
    "MissingWeatherDataError",
    "InvalidWeatherDataError",
    "NoEnabledProfilesError",
]
