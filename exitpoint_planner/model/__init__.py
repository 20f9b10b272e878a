"""Data model classes for exit point calculations.

All entities are immutable values created per calculation:
- LatLon: Geographic coordinate (landing zone, exit points)
- ForecastData: One sample of the vertical wind profile
- JumpParameters: User-entered description of the jump load
- ExitPoint: Exit coordinate for one group
- ExitCalculationResult: Complete solver output
- JumpProfile / ProfileResult: Multi-profile presets and their outcomes
- ValidationMessage: Rejected-parameter explanations
"""

from exitpoint_planner.model.exit_point import ExitCalculationResult, ExitPoint
from exitpoint_planner.model.forecast import ForecastData
from exitpoint_planner.model.jump_parameters import JumpParameters
from exitpoint_planner.model.lat_lon import LatLon
from exitpoint_planner.model.message import ValidationMessage
from exitpoint_planner.model.profile import JumpProfile, ProfileResult

__all__ = [
    "LatLon",
    "ForecastData",
    "JumpParameters",
    "ExitPoint",
    "ExitCalculationResult",
    "JumpProfile",
    "ProfileResult",
    "ValidationMessage",
]
