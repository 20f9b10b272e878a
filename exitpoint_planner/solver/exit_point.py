"""Exit point solver - optimal exit point, heading, group layout, safety radius.

The calculation:
1. Validate parameters (fail fast, first violated rule wins) and weather
2. Passive drift = freefall (jump -> opening) + zero-airspeed canopy drift
   (opening -> setup); the optimal exit point is the landing zone moved by
   the negated passive drift
3. Heading = explicit flight direction, or into the wind at jump altitude
4. Groups are spaced by ground speed x time between groups along the heading,
   centered on the optimal point (offset mode) or on its projection onto
   the line through the landing zone (overhead mode)
5. Safety radius = 70% of the canopy range between opening and setup altitude
"""

import logging
from typing import Optional, Sequence

from exitpoint_planner.constants import SafetyConfig
from exitpoint_planner.core.geo_calculator import GeoCalculator
from exitpoint_planner.core.vector import Vector2D, heading_unit_vector, wind_to_vector
from exitpoint_planner.core.weather_profile import check_weather_profile, interpolate_weather_data
from exitpoint_planner.core.wind_drift import (
    TotalDrift,
    calculate_canopy_air_speed,
    calculate_freefall_drift,
    calculate_total_drift,
)
from exitpoint_planner.exceptions import InvalidJumpParametersError
from exitpoint_planner.model.exit_point import ExitCalculationResult, ExitPoint
from exitpoint_planner.model.forecast import ForecastData
from exitpoint_planner.model.jump_parameters import JumpParameters
from exitpoint_planner.model.lat_lon import LatLon
from exitpoint_planner.validators import first_validation_message

logger = logging.getLogger(__name__)


def validate_jump_parameters(params: JumpParameters) -> None:
    """Raise for the first violated physical-consistency rule.

    Raises:
        InvalidJumpParametersError: Carrying the ValidationMessage of the rule.
    """
    message = first_validation_message(params)
    if message is not None:
        logger.warning(f"Rejected jump parameters ({message.field}): {message.message}")
        raise InvalidJumpParametersError(message)


def compute_passive_drift(params: JumpParameters, weather: Sequence[ForecastData]) -> TotalDrift:
    """Drift of a jumper who exits and never steers until setup altitude.

    The canopy phase uses zero airspeed, so its direction is irrelevant.
    """
    return calculate_total_drift(
        weather=weather,
        exit_altitude=params.jump_altitude,
        opening_altitude=params.opening_altitude,
        landing_altitude=params.setup_altitude,
        freefall_speed=params.freefall_speed,
        canopy_air_speed=0.0,
        canopy_descent_rate=params.canopy_descent_rate,
        glide_ratio=params.glide_ratio,
        canopy_direction=0.0,
    )


def calculate_optimal_exit_point(params: JumpParameters, weather: Sequence[ForecastData]) -> LatLon:
    """Exit point from which passive drift alone reaches the landing zone."""
    drift = compute_passive_drift(params, weather)
    logger.debug(
        f"Passive drift: freefall {drift.freefall.horizontal_distance:.0f}m, "
        f"canopy {drift.canopy.horizontal_distance:.0f}m, total {drift.total.magnitude:.0f}m"
    )
    return GeoCalculator.move_point(params.landing_zone, -drift.total)


def calculate_aircraft_heading(
    weather: Sequence[ForecastData],
    jump_altitude: float,
    flight_direction: Optional[float] = None,
) -> float:
    """Jump run heading.

    An explicit flight direction is used verbatim. Otherwise the aircraft
    flies toward where the wind at jump altitude comes from (headwind).
    """
    if flight_direction is not None:
        return flight_direction
    return interpolate_weather_data(weather, jump_altitude).direction


def calculate_ground_speed(aircraft_speed: float, wind: Vector2D, heading: float) -> float:
    """Aircraft ground speed along the heading; tailwind adds, headwind subtracts."""
    return aircraft_speed + wind.dot(heading_unit_vector(heading))


def calculate_group_center(params: JumpParameters, optimal_exit: LatLon, heading: float) -> LatLon:
    """Point the exit groups are centered on.

    Offset mode: the optimal exit point itself.
    Overhead mode: the optimal exit point projected onto the line through the
    landing zone along the heading (nearest point of the flight line).
    """
    if not params.flight_over_landing_zone:
        return optimal_exit

    heading_vector = heading_unit_vector(heading)
    to_optimal = GeoCalculator.points_to_vector(params.landing_zone, optimal_exit)
    along_track = heading_vector.scale(to_optimal.dot(heading_vector))
    return GeoCalculator.move_point(params.landing_zone, along_track)


def layout_exit_points(
    center: LatLon,
    heading: float,
    spacing_distance: float,
    number_of_groups: int,
) -> tuple[ExitPoint, ...]:
    """Place groups symmetrically along the heading around the center.

    Group i (0-based) sits (i - number_of_groups // 2) * spacing ahead of the
    center, so group 1 exits first and a single group sits on the center.
    """
    heading_vector = heading_unit_vector(heading)
    half_groups = number_of_groups // 2
    return tuple(
        ExitPoint(
            location=GeoCalculator.move_point(center, heading_vector.scale((i - half_groups) * spacing_distance)),
            group_number=i + 1,
        )
        for i in range(number_of_groups)
    )


def calculate_safety_radius(params: JumpParameters) -> float:
    """70% of the distance the canopy can fly between opening and setup altitude."""
    canopy_air_speed = calculate_canopy_air_speed(
        descent_rate=params.canopy_descent_rate,
        glide_ratio=params.glide_ratio,
    )
    max_canopy_distance = canopy_air_speed * (params.canopy_altitude_range / params.canopy_descent_rate)
    return SafetyConfig.SAFETY_RADIUS_MARGIN * max_canopy_distance


def calculate_exit_points(params: JumpParameters, weather: Sequence[ForecastData]) -> ExitCalculationResult:
    """Calculate exit points for a jump load.

    Args:
        params: Jump parameters (validated here, no partial results on failure)
        weather: Wind profile sorted ascending by altitude

    Returns:
        ExitCalculationResult with optimal point, group exits, safety radius and heading.

    Raises:
        InvalidJumpParametersError: If a parameter rule is violated.
        MissingWeatherDataError: If weather is empty or None.
        InvalidWeatherDataError: If weather altitudes are not strictly ascending.
    """
    validate_jump_parameters(params)
    check_weather_profile(weather)

    optimal_exit = calculate_optimal_exit_point(params, weather)
    heading = calculate_aircraft_heading(weather, params.jump_altitude, params.flight_direction)

    wind_at_exit = interpolate_weather_data(weather, params.jump_altitude)
    ground_speed = calculate_ground_speed(
        aircraft_speed=params.aircraft_speed,
        wind=wind_to_vector(wind_at_exit.direction, wind_at_exit.speed),
        heading=heading,
    )
    spacing_distance = ground_speed * params.time_between_groups

    center = calculate_group_center(params, optimal_exit, heading)
    # Validated as a whole number; a float like 3.0 still needs int() for range()
    exit_points = layout_exit_points(center, heading, spacing_distance, int(params.number_of_groups))
    safety_radius = calculate_safety_radius(params)

    logger.info(
        f"Exit points calculated: heading={heading:.0f}°, ground speed={ground_speed:.1f}m/s, "
        f"spacing={spacing_distance:.0f}m, groups={params.number_of_groups}, "
        f"optimal exit {GeoCalculator.calculate_distance(params.landing_zone, optimal_exit):.0f}m from landing zone"
    )
    return ExitCalculationResult(
        optimal_exit_point=optimal_exit,
        exit_points=exit_points,
        safety_radius=safety_radius,
        aircraft_heading=heading,
    )


def can_reach_landing_zone(
    exit_point: LatLon,
    params: JumpParameters,
    weather: Sequence[ForecastData],
) -> bool:
    """Whether a jumper exiting here can still fly the canopy to the landing zone.

    Freefall drift is applied first; the remaining distance must be within 90%
    of the still-air canopy range between opening and setup altitude.
    """
    freefall = calculate_freefall_drift(
        weather=weather,
        start_altitude=params.jump_altitude,
        end_altitude=params.opening_altitude,
        freefall_speed=params.freefall_speed,
    )
    opening_position = GeoCalculator.move_point(exit_point, freefall.drift_vector)
    distance_to_target = GeoCalculator.calculate_distance(opening_position, params.landing_zone)

    max_canopy_range = params.canopy_air_speed * (params.canopy_altitude_range / params.canopy_descent_rate)
    return distance_to_target <= max_canopy_range * SafetyConfig.REACHABILITY_MARGIN


def build_flight_path(
    result: ExitCalculationResult,
    extend_distance_m: float = SafetyConfig.FLIGHT_PATH_EXTENSION_M,
) -> Optional[list[LatLon]]:
    """Jump run polyline: the group exits extended before and after along the heading.

    Returns:
        [start, exit 1, ..., exit n, end], or None with fewer than two groups.
    """
    points = [ep.location for ep in result.exit_points]
    if len(points) < 2:
        return None

    heading = result.aircraft_heading
    start = GeoCalculator.get_destination_point(points[0], distance=extend_distance_m, bearing=heading + 180)
    end = GeoCalculator.get_destination_point(points[-1], distance=extend_distance_m, bearing=heading)
    return [start, *points, end]
