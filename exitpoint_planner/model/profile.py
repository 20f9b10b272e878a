"""JumpProfile - A named set of per-jumper parameter overrides.

One aircraft load often carries jumpers with different canopies and opening
altitudes (sport, tandem, student). The load-wide parameters (landing zone,
heading, groups) are shared; each profile overrides the rest.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from exitpoint_planner.constants import ProfileConfig
from exitpoint_planner.exceptions import InvalidProfileError
from exitpoint_planner.model.exit_point import ExitCalculationResult
from exitpoint_planner.model.jump_parameters import JumpParameters


@dataclass(frozen=True)
class JumpProfile:
    """Per-jumper parameter preset.

    Attributes:
        id: Stable identifier (e.g. "sport_jumpers")
        name: Display name (e.g. "Sport")
        enabled: Whether the profile takes part in multi-profile calculations
        overrides: Per-jumper JumpParameters values (ProfileConfig.PROFILE_FIELDS) replacing the common ones
    """

    id: str
    name: str
    enabled: bool = True
    overrides: Mapping[str, Any] = field(default_factory=dict)

    def apply_to(self, common: JumpParameters) -> JumpParameters:
        """Merge this profile's overrides on top of the common parameters.

        Raises:
            InvalidProfileError: If an override is not one of ProfileConfig.PROFILE_FIELDS.
        """
        unknown = set(self.overrides) - set(ProfileConfig.PROFILE_FIELDS)
        if unknown:
            raise InvalidProfileError(
                f"Profile '{self.name}' cannot override {', '.join(sorted(unknown))}"
            )
        return common.with_overrides(**dict(self.overrides))


@dataclass(frozen=True)
class ProfileResult:
    """Outcome of one profile's calculation.

    Exactly one of `calculation` and `error` is set.

    Attributes:
        profile_id: JumpProfile.id this result belongs to
        profile: The profile that was calculated
        calculation: Result on success
        error: User-facing error message on failure
    """

    profile_id: str
    profile: JumpProfile
    calculation: Optional[ExitCalculationResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
