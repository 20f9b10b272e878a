"""Shared pytest fixtures for exitpoint_planner tests.

Provides reusable jump parameters and wind profiles. All fixtures use
explicit values with documented rationale.

COORDINATE SYSTEM:
    Tests use a landing zone at 60°N 25°E (southern Finland). Neither
    coordinate is zero, so the landing zone passes validation, and at 60°N
    one degree of longitude is half a degree of latitude in meters, which
    makes east/west mistakes obvious.
"""

import pytest

from exitpoint_planner.model.forecast import ForecastData
from exitpoint_planner.model.jump_parameters import JumpParameters
from exitpoint_planner.model.lat_lon import LatLon

LANDING_ZONE = LatLon(lat=60.0, lon=25.0)


def uniform_profile(direction: float, speed: float) -> list[ForecastData]:
    """Same wind at every sampled altitude from the ground to 5000m."""
    return [
        ForecastData(altitude=altitude, direction=direction, speed=speed, temperature=15.0 - altitude / 200)
        for altitude in (0.0, 1000.0, 2000.0, 4000.0, 5000.0)
    ]


def layered_profile(direction: float) -> list[ForecastData]:
    """Wind from one direction, strengthening with altitude (10 -> 15 -> 20 m/s)."""
    return [
        ForecastData(altitude=0.0, direction=direction, speed=10.0, temperature=15.0),
        ForecastData(altitude=1000.0, direction=direction, speed=15.0, temperature=10.0),
        ForecastData(altitude=4000.0, direction=direction, speed=20.0, temperature=0.0),
    ]


# =============================================================================
# PARAMETER FIXTURES
# =============================================================================


@pytest.fixture
def landing_zone() -> LatLon:
    return LANDING_ZONE


@pytest.fixture
def base_params() -> JumpParameters:
    """Three groups, 50 m/s aircraft, 6s apart, automatic headwind, offset mode.

    With a 20 m/s headwind at 4000m the ground speed is 30 m/s, so groups
    are 180m apart.
    """
    return JumpParameters(
        jump_altitude=4000.0,
        opening_altitude=1000.0,
        setup_altitude=100.0,
        aircraft_speed=50.0,
        freefall_speed=55.0,
        canopy_descent_rate=6.0,
        glide_ratio=2.5,
        number_of_groups=3,
        time_between_groups=6.0,
        landing_zone=LANDING_ZONE,
        flight_direction=None,
        flight_over_landing_zone=False,
    )


# =============================================================================
# WEATHER FIXTURES
# =============================================================================


@pytest.fixture
def north_wind() -> list[ForecastData]:
    """Wind from the north (0°), 20 m/s at jump altitude."""
    return layered_profile(direction=0.0)


@pytest.fixture
def south_wind() -> list[ForecastData]:
    """Wind from the south (180°), 20 m/s at jump altitude."""
    return layered_profile(direction=180.0)


@pytest.fixture
def calm() -> list[ForecastData]:
    """No wind at any altitude."""
    return uniform_profile(direction=0.0, speed=0.0)


@pytest.fixture
def west_wind_10() -> list[ForecastData]:
    """Uniform 10 m/s wind from the west (blows toward the east)."""
    return uniform_profile(direction=270.0, speed=10.0)


@pytest.fixture
def light_west_wind() -> list[ForecastData]:
    """Uniform 5 m/s wind from the west, well within canopy range."""
    return uniform_profile(direction=270.0, speed=5.0)
