"""Message - Validation messages for rejected jump parameters.

Every physical-consistency rule has its own message class so callers can
branch on the type (or on `field`) and show `message` to the user as-is.

Design Principles:
- Messages store the offending values, text is computed as a property
- One class per rule, text is stable for the same input
- Messages are plain values; raising is the solver's decision
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationMessage(ABC):
    """Abstract base class for jump parameter validation failures."""

    @property
    @abstractmethod
    def field(self) -> str:
        """Name of the JumpParameters field that violates the rule."""
        raise NotImplementedError

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable explanation for the end user."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class NonFiniteValueMessage(ValidationMessage):
    """A numeric parameter is NaN or infinite."""

    field_name: str
    value: float

    @property
    def field(self) -> str:
        return self.field_name

    @property
    def message(self) -> str:
        return f"{self.field_name.replace('_', ' ').capitalize()} must be a finite number (got {self.value})"


@dataclass(frozen=True)
class JumpBelowOpeningMessage(ValidationMessage):
    """Exit altitude is not above the opening altitude."""

    jump_altitude_m: float
    opening_altitude_m: float

    @property
    def field(self) -> str:
        return "jump_altitude"

    @property
    def message(self) -> str:
        return (
            f"Jump altitude ({self.jump_altitude_m:.0f}m) must be higher than "
            f"opening altitude ({self.opening_altitude_m:.0f}m)"
        )


@dataclass(frozen=True)
class OpeningAltitudeNotPositiveMessage(ValidationMessage):
    """Canopy would open at or below ground level."""

    opening_altitude_m: float

    @property
    def field(self) -> str:
        return "opening_altitude"

    @property
    def message(self) -> str:
        return f"Opening altitude must be greater than 0m (got {self.opening_altitude_m:.0f}m)"


@dataclass(frozen=True)
class NegativeSetupAltitudeMessage(ValidationMessage):
    """Landing pattern setup altitude below ground level."""

    setup_altitude_m: float

    @property
    def field(self) -> str:
        return "setup_altitude"

    @property
    def message(self) -> str:
        return f"Setup altitude cannot be negative (got {self.setup_altitude_m:.0f}m)"


@dataclass(frozen=True)
class SetupAboveOpeningMessage(ValidationMessage):
    """Landing pattern would start before the canopy is open."""

    setup_altitude_m: float
    opening_altitude_m: float

    @property
    def field(self) -> str:
        return "setup_altitude"

    @property
    def message(self) -> str:
        return (
            f"Setup altitude ({self.setup_altitude_m:.0f}m) must be lower than "
            f"opening altitude ({self.opening_altitude_m:.0f}m)"
        )


@dataclass(frozen=True)
class NonPositiveSpeedMessage(ValidationMessage):
    """A speed or rate that must be strictly positive is not.

    Attributes:
        field_name: JumpParameters field, e.g. "aircraft_speed"
        label: User-facing name, e.g. "Aircraft speed"
        value_ms: Rejected value in m/s
    """

    field_name: str
    label: str
    value_ms: float

    @property
    def field(self) -> str:
        return self.field_name

    @property
    def message(self) -> str:
        return f"{self.label} must be greater than 0 m/s (got {self.value_ms:g} m/s)"


@dataclass(frozen=True)
class NegativeGlideRatioMessage(ValidationMessage):
    """Glide ratio below zero."""

    glide_ratio: float

    @property
    def field(self) -> str:
        return "glide_ratio"

    @property
    def message(self) -> str:
        return f"Glide ratio cannot be negative (got {self.glide_ratio:g})"


@dataclass(frozen=True)
class InvalidGroupCountMessage(ValidationMessage):
    """No groups to place on the jump run."""

    number_of_groups: int

    @property
    def field(self) -> str:
        return "number_of_groups"

    @property
    def message(self) -> str:
        return f"Number of groups must be at least 1 (got {self.number_of_groups})"


@dataclass(frozen=True)
class NonIntegerGroupCountMessage(ValidationMessage):
    """Fractional number of groups."""

    number_of_groups: float

    @property
    def field(self) -> str:
        return "number_of_groups"

    @property
    def message(self) -> str:
        return f"Number of groups must be a whole number (got {self.number_of_groups:g})"


@dataclass(frozen=True)
class NegativeGroupIntervalMessage(ValidationMessage):
    """Negative time between group exits."""

    time_between_groups_s: float

    @property
    def field(self) -> str:
        return "time_between_groups"

    @property
    def message(self) -> str:
        return f"Time between groups cannot be negative (got {self.time_between_groups_s:g}s)"


@dataclass(frozen=True)
class MissingLandingZoneMessage(ValidationMessage):
    """Landing zone not set."""

    @property
    def field(self) -> str:
        return "landing_zone"

    @property
    def message(self) -> str:
        return "Landing zone coordinates are required"
