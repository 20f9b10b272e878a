"""Ground wind warnings against student and sport jumper limits.

Only samples below the ground-wind altitude (50m AGL) are judged; upper
winds affect the exit point but not whether jumping is allowed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from exitpoint_planner.constants import WindWarningConfig
from exitpoint_planner.model.forecast import ForecastData


class WindWarningLevel(Enum):
    """Severity of a ground wind sample."""

    SUCCESS = "success"  # Below student limit
    WARNING = "warning"  # At or above student limit
    ERROR = "error"  # At or above sport limit
    DEFAULT = "default"  # Not a ground wind sample


@dataclass(frozen=True)
class WindLimits:
    """Maximum ground wind (m/s) per jumper category."""

    student_limit: float = WindWarningConfig.STUDENT_WIND_LIMIT_MS
    sport_limit: float = WindWarningConfig.SPORT_WIND_LIMIT_MS


@dataclass(frozen=True)
class WindWarningSummary:
    """Whether any ground wind sample exceeds each limit."""

    has_high: bool
    has_moderate: bool


_LABELS = {
    WindWarningLevel.ERROR: "High",
    WindWarningLevel.WARNING: "Moderate",
    WindWarningLevel.SUCCESS: "OK",
    WindWarningLevel.DEFAULT: "-",
}


def _is_ground_wind(altitude: float) -> bool:
    return altitude < WindWarningConfig.GROUND_WIND_MAX_ALTITUDE_M


def _effective_speed(speed: float, gust_speed: Optional[float]) -> float:
    return max(speed, gust_speed or 0.0)


def get_wind_warning_level(
    speed: float,
    gust_speed: Optional[float],
    altitude: float,
    limits: WindLimits = WindLimits(),
) -> WindWarningLevel:
    """Classify one wind sample; gusts count when stronger than the mean wind."""
    if not _is_ground_wind(altitude):
        return WindWarningLevel.DEFAULT

    max_speed = _effective_speed(speed, gust_speed)
    if max_speed >= limits.sport_limit:
        return WindWarningLevel.ERROR
    if max_speed >= limits.student_limit:
        return WindWarningLevel.WARNING
    return WindWarningLevel.SUCCESS


def get_wind_warning_label(level: WindWarningLevel) -> str:
    return _LABELS[level]


def has_wind_warnings(samples: Iterable[ForecastData], limits: WindLimits = WindLimits()) -> WindWarningSummary:
    """Summarize ground wind warnings over a whole profile."""
    ground_speeds = [
        _effective_speed(sample.speed, sample.gust_speed) for sample in samples if _is_ground_wind(sample.altitude)
    ]
    return WindWarningSummary(
        has_high=any(s >= limits.sport_limit for s in ground_speeds),
        has_moderate=any(s >= limits.student_limit for s in ground_speeds),
    )
