"""Exit point solver and multi-profile runner.

- calculate_exit_points: Single-load calculation (the core entry point)
- calculate_for_profiles: Concurrent calculation for several jump profiles
"""

from exitpoint_planner.solver.exit_point import (
    build_flight_path,
    calculate_exit_points,
    can_reach_landing_zone,
    validate_jump_parameters,
)
from exitpoint_planner.solver.profiles import (
    calculate_for_profile,
    calculate_for_profiles,
    create_default_profiles,
)

__all__ = [
    "calculate_exit_points",
    "validate_jump_parameters",
    "can_reach_landing_zone",
    "build_flight_path",
    "calculate_for_profile",
    "calculate_for_profiles",
    "create_default_profiles",
]
