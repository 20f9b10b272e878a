"""Tests for the exit point solver.

Tests: calculate_exit_points and its building blocks (heading, ground speed,
group layout, safety radius), reachability and the jump run polyline.
Focus: Wind-corrected spacing, group order along the heading, overhead mode

Note: Fixtures are defined in conftest.py (base_params, wind profiles).
With the north_wind fixture the wind at 4000m is 20 m/s from 0°, so the
automatic heading is 0° and the ground speed is 50 - 20 = 30 m/s.
"""

import logging
from math import sqrt

import pytest

from exitpoint_planner.core.geo_calculator import GeoCalculator
from exitpoint_planner.core.vector import Vector2D, heading_unit_vector
from exitpoint_planner.exceptions import (
    InvalidJumpParametersError,
    InvalidWeatherDataError,
    MissingWeatherDataError,
)
from exitpoint_planner.model.forecast import ForecastData
from exitpoint_planner.model.jump_parameters import JumpParameters
from exitpoint_planner.model.lat_lon import LatLon
from exitpoint_planner.model.message import JumpBelowOpeningMessage
from exitpoint_planner.solver.exit_point import (
    build_flight_path,
    calculate_aircraft_heading,
    calculate_exit_points,
    calculate_ground_speed,
    calculate_safety_radius,
    can_reach_landing_zone,
    compute_passive_drift,
    layout_exit_points,
)


def along_track(origin: LatLon, point: LatLon, heading: float) -> float:
    """Signed distance of point ahead of origin along the heading (m)."""
    return GeoCalculator.points_to_vector(origin, point).dot(heading_unit_vector(heading))


# =============================================================================
# BUILDING BLOCKS
# =============================================================================


class TestAircraftHeading:
    def test_automatic_heading_faces_wind(self, north_wind: list[ForecastData]) -> None:
        assert calculate_aircraft_heading(north_wind, jump_altitude=4000.0) == pytest.approx(0.0)

    def test_automatic_heading_south_wind(self, south_wind: list[ForecastData]) -> None:
        assert calculate_aircraft_heading(south_wind, jump_altitude=4000.0) == pytest.approx(180.0)

    def test_explicit_heading_used_verbatim(self, north_wind: list[ForecastData]) -> None:
        assert calculate_aircraft_heading(north_wind, jump_altitude=4000.0, flight_direction=123.0) == 123.0


class TestGroundSpeed:
    def test_headwind_subtracts(self) -> None:
        wind = Vector2D(0.0, -20.0)  # blowing south
        assert calculate_ground_speed(50.0, wind, heading=0.0) == pytest.approx(30.0)

    def test_tailwind_adds(self) -> None:
        wind = Vector2D(0.0, 20.0)  # blowing north
        assert calculate_ground_speed(50.0, wind, heading=0.0) == pytest.approx(70.0)

    def test_crosswind_has_no_effect(self) -> None:
        assert calculate_ground_speed(50.0, Vector2D(15.0, 0.0), heading=0.0) == pytest.approx(50.0)


class TestLayoutExitPoints:
    def test_odd_groups_centered(self, landing_zone: LatLon) -> None:
        points = layout_exit_points(landing_zone, heading=90.0, spacing_distance=200.0, number_of_groups=3)
        offsets = [along_track(landing_zone, p.location, 90.0) for p in points]
        assert offsets == pytest.approx([-200.0, 0.0, 200.0], abs=1e-6)
        assert [p.group_number for p in points] == [1, 2, 3]

    def test_even_groups_skew_back(self, landing_zone: LatLon) -> None:
        """Four groups sit at offsets -2, -1, 0, +1 spacings."""
        points = layout_exit_points(landing_zone, heading=0.0, spacing_distance=100.0, number_of_groups=4)
        offsets = [along_track(landing_zone, p.location, 0.0) for p in points]
        assert offsets == pytest.approx([-200.0, -100.0, 0.0, 100.0], abs=1e-6)


class TestSafetyRadius:
    def test_seventy_percent_of_canopy_range(self, base_params: JumpParameters) -> None:
        """16.16 m/s canopy airspeed for 150s (900m at 6 m/s), times 0.7."""
        expected = 0.7 * 6.0 * sqrt(1 + 2.5**2) * 150.0
        assert calculate_safety_radius(base_params) == pytest.approx(expected)
        assert 1690 < calculate_safety_radius(base_params) < 1700

    def test_independent_of_jump_altitude(self, base_params: JumpParameters) -> None:
        higher = base_params.with_overrides(jump_altitude=5000.0)
        assert calculate_safety_radius(higher) == calculate_safety_radius(base_params)


class TestPassiveDrift:
    def test_freefall_plus_wind_only_canopy(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        """Freefall at a mean 17.5 m/s for 3000/55 s, canopy at a mean 12.75 m/s over 19 samples."""
        drift = compute_passive_drift(base_params, north_wind)
        assert drift.freefall.horizontal_distance == pytest.approx(17.5 * 3000.0 / 55.0)
        assert drift.canopy.horizontal_distance == pytest.approx(12.75 * 19 * 50.0 / 6.0)
        assert drift.total.y < 0


# =============================================================================
# FULL CALCULATION
# =============================================================================


class TestCalculateExitPoints:
    """calculate_exit_points - end-to-end solver."""

    def test_headwind_run(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        result = calculate_exit_points(base_params, north_wind)
        assert result.aircraft_heading == pytest.approx(0.0)
        assert result.number_of_groups == 3
        # Wind pushes jumpers south, so they exit north of the landing zone
        assert result.optimal_exit_point.lat > base_params.landing_zone.lat
        distance = base_params.landing_zone.distance_to(result.optimal_exit_point)
        assert distance == pytest.approx(17.5 * 3000.0 / 55.0 + 12.75 * 19 * 50.0 / 6.0, abs=0.01)

    def test_groups_ordered_along_heading(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        """Group 1 exits first, so it is furthest back along the jump run."""
        result = calculate_exit_points(base_params, north_wind)
        offsets = [
            along_track(result.optimal_exit_point, ep.location, result.aircraft_heading) for ep in result.exit_points
        ]
        assert offsets == sorted(offsets)
        assert [ep.group_number for ep in result.exit_points] == [1, 2, 3]

    def test_spacing_uses_ground_speed(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        """30 m/s ground speed x 6s = 180m between groups."""
        result = calculate_exit_points(base_params, north_wind)
        first, middle, last = (ep.location for ep in result.exit_points)
        assert first.distance_to(middle) == pytest.approx(180.0, abs=1e-6)
        assert middle.distance_to(last) == pytest.approx(180.0, abs=1e-6)
        assert middle.distance_to(result.optimal_exit_point) == pytest.approx(0.0, abs=1e-6)

    def test_tailwind_spreads_groups(self, base_params: JumpParameters, south_wind: list[ForecastData]) -> None:
        """Flying north with a south wind: 70 m/s x 6s = 420m; headwind run gives 180m."""
        tailwind = calculate_exit_points(base_params.with_overrides(flight_direction=0.0), south_wind)
        headwind = calculate_exit_points(base_params, south_wind)
        tail_points = [ep.location for ep in tailwind.exit_points]
        head_points = [ep.location for ep in headwind.exit_points]
        assert headwind.aircraft_heading == pytest.approx(180.0)
        assert tail_points[0].distance_to(tail_points[1]) == pytest.approx(420.0, abs=1e-6)
        assert head_points[0].distance_to(head_points[1]) == pytest.approx(180.0, abs=1e-6)

    def test_single_group_at_optimal_point(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        result = calculate_exit_points(base_params.with_overrides(number_of_groups=1), north_wind)
        assert len(result.exit_points) == 1
        assert result.exit_points[0].location == result.optimal_exit_point

    def test_calm_exits_over_landing_zone(self, base_params: JumpParameters, calm: list[ForecastData]) -> None:
        result = calculate_exit_points(base_params, calm)
        assert result.optimal_exit_point == base_params.landing_zone
        # No wind: 50 m/s x 6s
        points = [ep.location for ep in result.exit_points]
        assert points[0].distance_to(points[1]) == pytest.approx(300.0, abs=1e-6)

    def test_safety_radius_in_result(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        result = calculate_exit_points(base_params, north_wind)
        assert result.safety_radius == pytest.approx(calculate_safety_radius(base_params))

    def test_logs_summary(
        self, base_params: JumpParameters, north_wind: list[ForecastData], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="exitpoint_planner"):
            calculate_exit_points(base_params, north_wind)
        assert "Exit points calculated" in caplog.text


class TestOverheadMode:
    """flight_over_landing_zone - groups centered on the line through the landing zone."""

    def test_crosswind_run_passes_over_landing_zone(
        self, base_params: JumpParameters, north_wind: list[ForecastData]
    ) -> None:
        """Flying east with a north wind: the optimal point projects onto the landing zone."""
        params = base_params.with_overrides(flight_over_landing_zone=True, flight_direction=90.0)
        result = calculate_exit_points(params, north_wind)
        middle = result.exit_points[1].location
        assert middle.distance_to(params.landing_zone) < 1.0
        # Optimal point itself stays upwind
        assert result.optimal_exit_point.lat > params.landing_zone.lat

    def test_headwind_run_keeps_optimal_point(
        self, base_params: JumpParameters, north_wind: list[ForecastData]
    ) -> None:
        """Optimal point already lies on the northbound line through the landing zone."""
        params = base_params.with_overrides(flight_over_landing_zone=True)
        result = calculate_exit_points(params, north_wind)
        assert result.exit_points[1].location.distance_to(result.optimal_exit_point) < 1.0


class TestCalculationErrors:
    def test_invalid_parameters_raise(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        with pytest.raises(InvalidJumpParametersError) as exc_info:
            calculate_exit_points(base_params.with_overrides(jump_altitude=900.0), north_wind)
        assert isinstance(exc_info.value.validation, JumpBelowOpeningMessage)
        assert exc_info.value.field == "jump_altitude"

    def test_missing_landing_zone(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        with pytest.raises(InvalidJumpParametersError, match="Landing zone coordinates are required"):
            calculate_exit_points(base_params.with_overrides(landing_zone=None), north_wind)

    def test_fractional_group_count(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        with pytest.raises(InvalidJumpParametersError, match="whole number") as exc_info:
            calculate_exit_points(base_params.with_overrides(number_of_groups=2.5), north_wind)
        assert exc_info.value.field == "number_of_groups"

    def test_whole_float_group_count(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        """3.0 groups (as decoded from JSON) lays out three groups."""
        result = calculate_exit_points(base_params.with_overrides(number_of_groups=3.0), north_wind)
        assert [ep.group_number for ep in result.exit_points] == [1, 2, 3]

    def test_group_count_from_json_float(self, north_wind: list[ForecastData]) -> None:
        params = JumpParameters.from_dict(
            {"number_of_groups": 3.0, "landing_zone": {"lat": 60.0, "lon": 25.0}, "opening_altitude": 1000.0}
        )
        assert calculate_exit_points(params, north_wind).number_of_groups == 3

    def test_empty_weather(self, base_params: JumpParameters) -> None:
        with pytest.raises(MissingWeatherDataError):
            calculate_exit_points(base_params, [])

    def test_parameters_checked_before_weather(self, base_params: JumpParameters) -> None:
        with pytest.raises(InvalidJumpParametersError):
            calculate_exit_points(base_params.with_overrides(aircraft_speed=0.0), [])

    def test_unsorted_weather(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        with pytest.raises(InvalidWeatherDataError):
            calculate_exit_points(base_params, list(reversed(north_wind)))

    def test_rejection_is_logged(
        self, base_params: JumpParameters, north_wind: list[ForecastData], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="exitpoint_planner"):
            with pytest.raises(InvalidJumpParametersError):
                calculate_exit_points(base_params.with_overrides(glide_ratio=-1.0), north_wind)
        assert "glide_ratio" in caplog.text


# =============================================================================
# REACHABILITY AND FLIGHT PATH
# =============================================================================


class TestCanReachLandingZone:
    def test_optimal_exit_is_reachable(
        self, base_params: JumpParameters, light_west_wind: list[ForecastData]
    ) -> None:
        result = calculate_exit_points(base_params, light_west_wind)
        assert can_reach_landing_zone(result.optimal_exit_point, base_params, light_west_wind)

    def test_far_exit_is_unreachable(self, base_params: JumpParameters, light_west_wind: list[ForecastData]) -> None:
        far_away = GeoCalculator.get_destination_point(base_params.landing_zone, distance=10_000.0, bearing=0.0)
        assert not can_reach_landing_zone(far_away, base_params, light_west_wind)


class TestBuildFlightPath:
    def test_extends_beyond_first_and_last_group(
        self, base_params: JumpParameters, north_wind: list[ForecastData]
    ) -> None:
        result = calculate_exit_points(base_params, north_wind)
        path = build_flight_path(result)
        assert len(path) == 5
        assert path[1:4] == [ep.location for ep in result.exit_points]
        assert path[0].distance_to(path[1]) == pytest.approx(1000.0, abs=1e-6)
        assert path[-1].distance_to(path[-2]) == pytest.approx(1000.0, abs=1e-6)
        # Heading north: the run starts south of the first group
        assert path[0].lat < path[1].lat < path[-1].lat

    def test_custom_extension(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        result = calculate_exit_points(base_params, north_wind)
        path = build_flight_path(result, extend_distance_m=250.0)
        assert path[0].distance_to(path[1]) == pytest.approx(250.0, abs=1e-6)

    def test_single_group_has_no_path(self, base_params: JumpParameters, north_wind: list[ForecastData]) -> None:
        result = calculate_exit_points(base_params.with_overrides(number_of_groups=1), north_wind)
        assert build_flight_path(result) is None
