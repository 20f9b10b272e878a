"""Multi-profile exit point calculation.

Runs the solver once per enabled JumpProfile on the same weather profile.
Calculations share no state, so they run concurrently on a thread pool.
A failing profile is reported in its ProfileResult instead of aborting the
others; only problems common to all profiles (no weather, nothing enabled)
are raised.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from exitpoint_planner.constants import ProfileConfig
from exitpoint_planner.core.weather_profile import check_weather_profile
from exitpoint_planner.exceptions import ExitPointError, NoEnabledProfilesError
from exitpoint_planner.model.forecast import ForecastData
from exitpoint_planner.model.jump_parameters import JumpParameters
from exitpoint_planner.model.profile import JumpProfile, ProfileResult
from exitpoint_planner.solver.exit_point import calculate_exit_points

logger = logging.getLogger(__name__)


def create_default_profiles() -> list[JumpProfile]:
    """Sport (enabled), Tandem and Student presets."""
    return [
        JumpProfile(
            id=profile_id,
            name=preset["name"],
            enabled=preset["enabled"],
            overrides=dict(preset["overrides"]),
        )
        for profile_id, preset in ProfileConfig.PRESETS.items()
    ]


def calculate_for_profile(
    common: JumpParameters,
    profile: JumpProfile,
    weather: Sequence[ForecastData],
) -> ProfileResult:
    """Calculate one profile, capturing calculation errors in the result."""
    try:
        calculation = calculate_exit_points(profile.apply_to(common), weather)
    except ExitPointError as e:
        logger.warning(f"Calculation failed for profile '{profile.name}': {e}")
        return ProfileResult(profile_id=profile.id, profile=profile, error=str(e))
    return ProfileResult(profile_id=profile.id, profile=profile, calculation=calculation)


def calculate_for_profiles(
    common: JumpParameters,
    profiles: Sequence[JumpProfile],
    weather: Sequence[ForecastData],
    max_workers: Optional[int] = None,
) -> list[ProfileResult]:
    """Calculate every enabled profile concurrently.

    Args:
        common: Load-wide parameters (landing zone, heading, groups, ...)
        profiles: Profiles to consider; disabled ones are skipped
        weather: Wind profile shared by all calculations
        max_workers: Thread pool size (default: one per enabled profile)

    Returns:
        One ProfileResult per enabled profile, in input order.

    Raises:
        MissingWeatherDataError: If weather is empty or None.
        InvalidWeatherDataError: If weather altitudes are not strictly ascending.
        NoEnabledProfilesError: If no profile is enabled.
    """
    check_weather_profile(weather)

    enabled = [profile for profile in profiles if profile.enabled]
    if not enabled:
        raise NoEnabledProfilesError()

    with ThreadPoolExecutor(max_workers=max_workers or len(enabled)) as executor:
        results = list(executor.map(lambda profile: calculate_for_profile(common, profile, weather), enabled))

    failed = [r for r in results if not r.ok]
    if failed:
        logger.warning(f"Failed to calculate for {len(failed)} profile(s)")
    logger.info(f"Calculated {len(results) - len(failed)}/{len(results)} profile(s)")
    return results
