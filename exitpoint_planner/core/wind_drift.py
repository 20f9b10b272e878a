"""Wind drift integration for freefall and canopy flight.

Two deliberately different integration schemes:
- Freefall: Simpson's rule over 100m altitude slices (weights 1-4-2-...-4-1)
- Canopy: plain accumulation over 50m slices of (canopy airspeed + wind)

Both assume a constant vertical speed, so altitude maps linearly to time.
A canopy airspeed of 0 turns the canopy integrator into pure wind drift,
which is how the solver models a jumper who does nothing but drift.

All functions are pure: no shared state, safe to call from several threads.
"""

import logging
from dataclasses import dataclass
from math import ceil, sqrt
from typing import Sequence

import numpy as np

from exitpoint_planner.constants import DriftConfig
from exitpoint_planner.core.vector import Vector2D, heading_unit_vector, wind_to_vector
from exitpoint_planner.core.weather_profile import interpolate_weather_data
from exitpoint_planner.model.forecast import ForecastData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DriftResult:
    """Displacement accumulated over one flight phase.

    Attributes:
        horizontal_distance: Magnitude of drift_vector in meters
        drift_vector: East/north displacement in meters
        time_in_air: Duration of the phase in seconds
    """

    horizontal_distance: float
    drift_vector: Vector2D
    time_in_air: float

    @classmethod
    def zero(cls) -> "DriftResult":
        return cls(horizontal_distance=0.0, drift_vector=Vector2D.zero(), time_in_air=0.0)


@dataclass(frozen=True)
class TotalDrift:
    """Freefall and canopy drift plus their sum.

    Attributes:
        freefall: Drift from exit to canopy opening
        canopy: Drift from canopy opening to the end altitude
        total: freefall.drift_vector + canopy.drift_vector
    """

    freefall: DriftResult
    canopy: DriftResult
    total: Vector2D


def calculate_canopy_air_speed(descent_rate: float, glide_ratio: float) -> float:
    """Canopy airspeed from descent rate and glide ratio.

    Vertical component = descent rate, horizontal = descent rate * glide ratio.

    Example:
        calculate_canopy_air_speed(descent_rate=6, glide_ratio=2.5)  # ~16.2 m/s
    """
    return descent_rate * sqrt(1 + glide_ratio * glide_ratio)


def simpson_weights(num_steps: int) -> np.ndarray:
    """Simpson's rule coefficients for num_steps + 1 samples.

    1 at both ends, 4 at odd and 2 at even interior indices.
    """
    weights = np.full(num_steps + 1, DriftConfig.SIMPSON_EVEN_WEIGHT)
    weights[1::2] = DriftConfig.SIMPSON_ODD_WEIGHT
    weights[0] = DriftConfig.SIMPSON_END_WEIGHT
    weights[-1] = DriftConfig.SIMPSON_END_WEIGHT
    return weights


def _sample_altitudes(start_altitude: float, altitude_difference: float, step_m: float) -> tuple[np.ndarray, float]:
    """Split a descent into equal slices no taller than step_m.

    Returns:
        Tuple (altitudes, step_size): num_steps + 1 altitudes from start downward.
    """
    num_steps = ceil(altitude_difference / step_m)
    step_size = altitude_difference / num_steps
    altitudes = start_altitude - np.arange(num_steps + 1) * step_size
    return altitudes, step_size


def _wind_vectors(weather: Sequence[ForecastData], altitudes: np.ndarray) -> np.ndarray:
    """Interpolated wind velocity at each altitude as an (n, 2) array."""
    vectors = np.empty((len(altitudes), 2))
    for i, altitude in enumerate(altitudes):
        wind = interpolate_weather_data(weather, float(altitude))
        vector = wind_to_vector(wind.direction, wind.speed)
        vectors[i] = (vector.x, vector.y)
    return vectors


def _to_result(drift: np.ndarray, time_in_air: float) -> DriftResult:
    drift_vector = Vector2D(float(drift[0]), float(drift[1]))
    return DriftResult(
        horizontal_distance=drift_vector.magnitude,
        drift_vector=drift_vector,
        time_in_air=time_in_air,
    )


def calculate_freefall_drift(
    weather: Sequence[ForecastData],
    start_altitude: float,
    end_altitude: float,
    freefall_speed: float,
) -> DriftResult:
    """Integrate wind drift during freefall with Simpson's rule.

    Args:
        weather: Wind profile sorted ascending by altitude
        start_altitude: Exit altitude (m AGL)
        end_altitude: Canopy opening altitude (m AGL)
        freefall_speed: Constant vertical speed (m/s)

    Returns:
        DriftResult. An empty altitude range gives zero drift and zero time.
    """
    altitude_difference = start_altitude - end_altitude
    if altitude_difference <= 0:
        return DriftResult.zero()

    time_in_air = altitude_difference / freefall_speed
    altitudes, step_size = _sample_altitudes(start_altitude, altitude_difference, DriftConfig.FREEFALL_STEP_M)
    winds = _wind_vectors(weather, altitudes)

    step_duration = step_size / freefall_speed
    weights = simpson_weights(len(altitudes) - 1)
    drift = (weights @ winds) * step_duration / DriftConfig.SIMPSON_DIVISOR

    result = _to_result(drift, time_in_air)
    logger.debug(
        f"Freefall drift {start_altitude:.0f}m -> {end_altitude:.0f}m: "
        f"{result.horizontal_distance:.0f}m in {time_in_air:.1f}s ({len(altitudes)} samples)"
    )
    return result


def calculate_canopy_drift(
    weather: Sequence[ForecastData],
    start_altitude: float,
    target_altitude: float,
    canopy_air_speed: float,
    descent_rate: float,
    glide_ratio: float,
    desired_direction: float,
) -> DriftResult:
    """Integrate ground track under canopy.

    The canopy flies a fixed airspeed vector toward desired_direction for the
    whole descent; the wind at each 50m slice is added to it.

    Args:
        weather: Wind profile sorted ascending by altitude
        start_altitude: Opening altitude (m AGL)
        target_altitude: Altitude where integration stops (m AGL)
        canopy_air_speed: Horizontal canopy airspeed (m/s), 0 for pure wind drift
        descent_rate: Vertical speed under canopy (m/s)
        glide_ratio: Canopy glide ratio; unused by the constant-airspeed model
        desired_direction: Compass heading the canopy flies toward (deg)

    Returns:
        DriftResult. An empty altitude range gives zero drift and zero time.
    """
    altitude_difference = start_altitude - target_altitude
    if altitude_difference <= 0:
        return DriftResult.zero()

    canopy_vector = heading_unit_vector(desired_direction).scale(canopy_air_speed)
    time_in_air = altitude_difference / descent_rate
    altitudes, step_size = _sample_altitudes(start_altitude, altitude_difference, DriftConfig.CANOPY_STEP_M)

    ground_vectors = _wind_vectors(weather, altitudes) + (canopy_vector.x, canopy_vector.y)
    step_duration = step_size / descent_rate
    drift = ground_vectors.sum(axis=0) * step_duration

    result = _to_result(drift, time_in_air)
    logger.debug(
        f"Canopy drift {start_altitude:.0f}m -> {target_altitude:.0f}m at {canopy_air_speed:.1f}m/s "
        f"toward {desired_direction:.0f}°: {result.horizontal_distance:.0f}m in {time_in_air:.1f}s"
    )
    return result


def calculate_total_drift(
    weather: Sequence[ForecastData],
    exit_altitude: float,
    opening_altitude: float,
    landing_altitude: float,
    freefall_speed: float,
    canopy_air_speed: float,
    canopy_descent_rate: float,
    glide_ratio: float,
    canopy_direction: float,
) -> TotalDrift:
    """Freefall drift (exit -> opening) plus canopy drift (opening -> landing_altitude)."""
    freefall = calculate_freefall_drift(
        weather=weather,
        start_altitude=exit_altitude,
        end_altitude=opening_altitude,
        freefall_speed=freefall_speed,
    )
    canopy = calculate_canopy_drift(
        weather=weather,
        start_altitude=opening_altitude,
        target_altitude=landing_altitude,
        canopy_air_speed=canopy_air_speed,
        descent_rate=canopy_descent_rate,
        glide_ratio=glide_ratio,
        desired_direction=canopy_direction,
    )
    return TotalDrift(freefall=freefall, canopy=canopy, total=freefall.drift_vector + canopy.drift_vector)
