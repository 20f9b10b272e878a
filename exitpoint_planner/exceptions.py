"""Exceptions raised by the exit point calculation core.

All errors derive from ExitPointError (itself a ValueError) so callers can
catch the whole family at once. Messages are phrased for the end user.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exitpoint_planner.model.message import ValidationMessage


class ExitPointError(ValueError):
    """Base exception for exit point calculation errors."""


class InvalidJumpParametersError(ExitPointError):
    """Raised when jump parameters violate a physical-consistency rule.

    Attributes:
        validation: The ValidationMessage describing the violated rule
    """

    def __init__(self, validation: "ValidationMessage") -> None:
        super().__init__(validation.message)
        self.validation = validation

    @property
    def field(self) -> str:
        """Name of the offending JumpParameters field."""
        return self.validation.field


class MissingWeatherDataError(ExitPointError):
    """Raised when the weather profile is empty or absent."""

    def __init__(self, message: str = "No weather data available for calculations") -> None:
        super().__init__(message)


class InvalidWeatherDataError(ExitPointError):
    """Raised when weather samples are not strictly ascending by altitude."""


class NoEnabledProfilesError(ExitPointError):
    """Raised when a multi-profile calculation has nothing to calculate."""

    def __init__(self, message: str = "Please enable at least one profile") -> None:
        super().__init__(message)


class InvalidProfileError(ExitPointError):
    """Raised when a jump profile overrides a field profiles may not set."""
