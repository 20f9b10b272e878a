"""Tests for weather profile interpolation.

Tests: interpolate_weather_data, interpolate_circular, check_weather_profile
Focus: Clamping outside the sampled range and shortest-arc direction blending
"""

import pytest
from hypothesis import given, strategies as st

from exitpoint_planner.core.weather_profile import (
    check_weather_profile,
    interpolate_circular,
    interpolate_linear,
    interpolate_weather_data,
)
from exitpoint_planner.exceptions import InvalidWeatherDataError, MissingWeatherDataError
from exitpoint_planner.model.forecast import ForecastData

PROFILE = [
    ForecastData(altitude=0.0, direction=350.0, speed=4.0, gust_speed=7.0, temperature=15.0),
    ForecastData(altitude=1000.0, direction=10.0, speed=12.0, gust_speed=15.0, temperature=9.0),
    ForecastData(altitude=3000.0, direction=90.0, speed=20.0, temperature=-3.0),
]


class TestInterpolateCircular:
    """Direction blending along the shorter arc."""

    def test_crosses_north(self) -> None:
        """Halfway between 350° and 10° is 0°, not 180°."""
        assert interpolate_circular(350.0, 10.0, 0.5) == pytest.approx(0.0, abs=1e-9)

    def test_crosses_north_backwards(self) -> None:
        assert interpolate_circular(10.0, 350.0, 0.25) == pytest.approx(5.0)

    def test_plain_interpolation(self) -> None:
        assert interpolate_circular(90.0, 180.0, 0.5) == pytest.approx(135.0)

    def test_result_in_range(self) -> None:
        assert 0 <= interpolate_circular(350.0, 10.0, 0.25) < 360

    def test_linear(self) -> None:
        assert interpolate_linear(4.0, 12.0, 0.25) == pytest.approx(6.0)


class TestInterpolateWeatherData:
    """Synthetic ForecastData at any altitude."""

    def test_exact_sample_altitude(self) -> None:
        sample = interpolate_weather_data(PROFILE, 1000.0)
        assert sample.speed == pytest.approx(12.0)
        assert sample.direction == pytest.approx(10.0)

    def test_midpoint_wraps_direction(self) -> None:
        """500m lies halfway between 350° and 10°."""
        sample = interpolate_weather_data(PROFILE, 500.0)
        assert sample.altitude == 500.0
        assert sample.direction == pytest.approx(0.0, abs=1e-9)
        assert sample.speed == pytest.approx(8.0)
        assert sample.gust_speed == pytest.approx(11.0)
        assert sample.temperature == pytest.approx(12.0)

    def test_optional_field_missing_on_one_side(self) -> None:
        """Gust speed is only interpolated when both neighbours have it."""
        sample = interpolate_weather_data(PROFILE, 2000.0)
        assert sample.gust_speed is None
        assert sample.temperature == pytest.approx(3.0)
        assert sample.direction == pytest.approx(50.0)

    def test_clamps_below_lowest_sample(self) -> None:
        sample = interpolate_weather_data(PROFILE, -50.0)
        assert sample.altitude == -50.0
        assert sample.speed == 4.0
        assert sample.direction == 350.0

    def test_clamps_above_highest_sample(self) -> None:
        """No extrapolation: the top sample is reused at any higher altitude."""
        sample = interpolate_weather_data(PROFILE, 6000.0)
        assert sample.altitude == 6000.0
        assert sample.speed == 20.0
        assert sample.direction == 90.0
        assert sample.temperature == -3.0

    def test_single_sample_profile(self) -> None:
        profile = [ForecastData(altitude=1000.0, direction=200.0, speed=6.0)]
        assert interpolate_weather_data(profile, 0.0).speed == 6.0
        assert interpolate_weather_data(profile, 4000.0).direction == 200.0

    def test_empty_profile_raises(self) -> None:
        with pytest.raises(MissingWeatherDataError):
            interpolate_weather_data([], 1000.0)

    @given(altitude=st.floats(min_value=-1000.0, max_value=10_000.0, allow_nan=False))
    def test_speed_stays_within_sampled_bounds(self, altitude: float) -> None:
        sample = interpolate_weather_data(PROFILE, altitude)
        assert 4.0 - 1e-9 <= sample.speed <= 20.0 + 1e-9
        assert 0 <= sample.direction < 360
        assert sample.altitude == altitude


class TestCheckWeatherProfile:
    """Profile shape checks run before any calculation."""

    def test_valid_profile_passes(self) -> None:
        check_weather_profile(PROFILE)

    @pytest.mark.parametrize("data", [None, []])
    def test_missing_profile(self, data) -> None:
        with pytest.raises(MissingWeatherDataError, match="No weather data available for calculations"):
            check_weather_profile(data)

    def test_unsorted_profile(self) -> None:
        with pytest.raises(InvalidWeatherDataError, match="ascending"):
            check_weather_profile(list(reversed(PROFILE)))

    def test_duplicate_altitude(self) -> None:
        profile = [
            ForecastData(altitude=0.0, direction=0.0, speed=1.0),
            ForecastData(altitude=0.0, direction=0.0, speed=2.0),
        ]
        with pytest.raises(InvalidWeatherDataError):
            check_weather_profile(profile)
