"""Weather profile interpolation.

Produces a synthetic ForecastData sample at any altitude from a profile
sorted ascending by altitude:
- Outside the sampled range the nearest boundary sample is reused (no extrapolation)
- Speed, gust speed and temperature interpolate linearly
- Direction interpolates circularly along the shorter arc (350° -> 10° passes 0°)
"""

from bisect import bisect_right
from typing import Optional, Sequence

from exitpoint_planner.core.vector import normalize_angle
from exitpoint_planner.exceptions import InvalidWeatherDataError, MissingWeatherDataError
from exitpoint_planner.model.forecast import ForecastData


def interpolate_linear(a: float, b: float, ratio: float) -> float:
    return a + (b - a) * ratio


def interpolate_circular(a_deg: float, b_deg: float, ratio: float) -> float:
    """Interpolate between two bearings along the shorter arc.

    Args:
        a_deg: Bearing at ratio 0
        b_deg: Bearing at ratio 1
        ratio: Interpolation weight (0-1)

    Returns:
        Interpolated bearing in [0, 360).
    """
    a = normalize_angle(a_deg)
    b = normalize_angle(b_deg)
    diff = (b - a + 180) % 360 - 180
    return normalize_angle(a + diff * ratio)


def _interpolate_optional(a: Optional[float], b: Optional[float], ratio: float) -> Optional[float]:
    if a is None or b is None:
        return None
    return interpolate_linear(a, b, ratio)


def check_weather_profile(data: Optional[Sequence[ForecastData]]) -> None:
    """Reject profiles the interpolator cannot work with.

    Raises:
        MissingWeatherDataError: If data is None or empty.
        InvalidWeatherDataError: If altitudes are not strictly ascending.
    """
    if not data:
        raise MissingWeatherDataError()
    for lower, upper in zip(data, data[1:]):
        if upper.altitude <= lower.altitude:
            raise InvalidWeatherDataError(
                f"Weather data must be sorted by strictly ascending altitude "
                f"({lower.altitude:g}m is followed by {upper.altitude:g}m)"
            )


def interpolate_weather_data(data: Sequence[ForecastData], target_altitude: float) -> ForecastData:
    """Interpolate the weather profile at an arbitrary altitude.

    Args:
        data: Samples sorted ascending by altitude (unique altitudes)
        target_altitude: Query altitude in meters AGL

    Returns:
        ForecastData at target_altitude. Optional fields are set only when
        both bracketing samples carry them.

    Raises:
        MissingWeatherDataError: If data is empty.
    """
    if not data:
        raise MissingWeatherDataError()

    lowest, highest = data[0], data[-1]
    if target_altitude <= lowest.altitude:
        return lowest.at_altitude(target_altitude)
    if target_altitude >= highest.altitude:
        return highest.at_altitude(target_altitude)

    # lower.altitude <= target < upper.altitude
    lower_index = bisect_right([sample.altitude for sample in data], target_altitude) - 1
    lower = data[lower_index]
    upper = data[lower_index + 1]
    ratio = (target_altitude - lower.altitude) / (upper.altitude - lower.altitude)

    return ForecastData(
        altitude=target_altitude,
        direction=interpolate_circular(lower.direction, upper.direction, ratio),
        speed=interpolate_linear(lower.speed, upper.speed, ratio),
        gust_speed=_interpolate_optional(lower.gust_speed, upper.gust_speed, ratio),
        temperature=_interpolate_optional(lower.temperature, upper.temperature, ratio),
    )
