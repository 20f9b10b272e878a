"""Core calculation building blocks.

This module provides the mathematical backbone for exit point planning:
- Vector2D and wind conversions (meteorological "from" convention)
- GeoCalculator: Geodesic calculations (distances, bearings, destinations)
- Weather profile interpolation (linear speed, circular direction)
- Wind drift integration (Simpson's rule freefall, accumulated canopy drift)
- Ground wind warnings
"""

from exitpoint_planner.core.geo_calculator import GeoCalculator
from exitpoint_planner.core.vector import Vector2D, vector_to_wind, wind_to_vector
from exitpoint_planner.core.weather_profile import interpolate_weather_data
from exitpoint_planner.core.wind_drift import (
    DriftResult,
    TotalDrift,
    calculate_canopy_drift,
    calculate_freefall_drift,
    calculate_total_drift,
)

__all__ = [
    # Vector math
    "Vector2D",
    "wind_to_vector",
    "vector_to_wind",
    # Geo calculator
    "GeoCalculator",
    # Weather
    "interpolate_weather_data",
    # Drift
    "DriftResult",
    "TotalDrift",
    "calculate_freefall_drift",
    "calculate_canopy_drift",
    "calculate_total_drift",
]
