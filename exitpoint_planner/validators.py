"""Validators - Physical-consistency rules for jump parameters.

Validators return Optional[ValidationMessage]:
- None if valid
- A ValidationMessage if invalid (the solver raises it, a UI may display it)

Design Principles:
- One function per rule, evaluated in a fixed order
- No clamping: an invalid value is always reported, never corrected
- NaN and infinities are rejected before any ordering rule runs
"""

from typing import Iterator, Optional

import numpy as np

from exitpoint_planner.model.jump_parameters import JumpParameters
from exitpoint_planner.model.message import (
    InvalidGroupCountMessage,
    JumpBelowOpeningMessage,
    MissingLandingZoneMessage,
    NegativeGlideRatioMessage,
    NegativeGroupIntervalMessage,
    NegativeSetupAltitudeMessage,
    NonFiniteValueMessage,
    NonIntegerGroupCountMessage,
    NonPositiveSpeedMessage,
    OpeningAltitudeNotPositiveMessage,
    SetupAboveOpeningMessage,
    ValidationMessage,
)

NUMERIC_FIELDS = (
    "jump_altitude",
    "aircraft_speed",
    "freefall_speed",
    "opening_altitude",
    "canopy_descent_rate",
    "glide_ratio",
    "setup_altitude",
    "number_of_groups",
    "time_between_groups",
)


def validate_finite_values(params: JumpParameters) -> Optional[ValidationMessage]:
    """All numeric fields (and an explicit heading) must be finite."""
    for name in NUMERIC_FIELDS:
        value = getattr(params, name)
        if not np.isfinite(value):
            return NonFiniteValueMessage(field_name=name, value=value)
    if params.flight_direction is not None and not np.isfinite(params.flight_direction):
        return NonFiniteValueMessage(field_name="flight_direction", value=params.flight_direction)
    return None


def validate_jump_above_opening(params: JumpParameters) -> Optional[ValidationMessage]:
    if params.jump_altitude <= params.opening_altitude:
        return JumpBelowOpeningMessage(
            jump_altitude_m=params.jump_altitude,
            opening_altitude_m=params.opening_altitude,
        )
    return None


def validate_opening_altitude(params: JumpParameters) -> Optional[ValidationMessage]:
    if params.opening_altitude <= 0:
        return OpeningAltitudeNotPositiveMessage(opening_altitude_m=params.opening_altitude)
    return None


def validate_setup_altitude(params: JumpParameters) -> Optional[ValidationMessage]:
    """Setup altitude must lie in [0, opening_altitude)."""
    if params.setup_altitude < 0:
        return NegativeSetupAltitudeMessage(setup_altitude_m=params.setup_altitude)
    if params.setup_altitude >= params.opening_altitude:
        return SetupAboveOpeningMessage(
            setup_altitude_m=params.setup_altitude,
            opening_altitude_m=params.opening_altitude,
        )
    return None


def validate_speeds(params: JumpParameters) -> Optional[ValidationMessage]:
    """Aircraft speed, freefall speed and canopy descent rate must be positive."""
    for field_name, label in (
        ("aircraft_speed", "Aircraft speed"),
        ("freefall_speed", "Freefall speed"),
        ("canopy_descent_rate", "Canopy descent rate"),
    ):
        value = getattr(params, field_name)
        if value <= 0:
            return NonPositiveSpeedMessage(field_name=field_name, label=label, value_ms=value)
    return None


def validate_glide_ratio(params: JumpParameters) -> Optional[ValidationMessage]:
    if params.glide_ratio < 0:
        return NegativeGlideRatioMessage(glide_ratio=params.glide_ratio)
    return None


def validate_groups(params: JumpParameters) -> Optional[ValidationMessage]:
    """A whole number of groups, at least one, non-negative time between groups."""
    if not float(params.number_of_groups).is_integer():
        return NonIntegerGroupCountMessage(number_of_groups=params.number_of_groups)
    if params.number_of_groups <= 0:
        return InvalidGroupCountMessage(number_of_groups=params.number_of_groups)
    if params.time_between_groups < 0:
        return NegativeGroupIntervalMessage(time_between_groups_s=params.time_between_groups)
    return None


def validate_landing_zone(params: JumpParameters) -> Optional[ValidationMessage]:
    """Landing zone must be set; a zero latitude or longitude counts as unset."""
    landing_zone = params.landing_zone
    if landing_zone is None or not landing_zone.lat or not landing_zone.lon:
        return MissingLandingZoneMessage()
    return None


VALIDATORS = (
    validate_finite_values,
    validate_jump_above_opening,
    validate_opening_altitude,
    validate_setup_altitude,
    validate_speeds,
    validate_glide_ratio,
    validate_groups,
    validate_landing_zone,
)


def iter_validation_messages(params: JumpParameters) -> Iterator[ValidationMessage]:
    """Yield the message of every failing rule, in rule order."""
    for validator in VALIDATORS:
        message = validator(params)
        if message is not None:
            yield message


def first_validation_message(params: JumpParameters) -> Optional[ValidationMessage]:
    """Return the first failing rule's message, or None if params are valid."""
    return next(iter_validation_messages(params), None)
