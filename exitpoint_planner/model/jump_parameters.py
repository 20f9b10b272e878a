"""JumpParameters - User-entered description of one jump load.

All altitudes are meters above ground level, all speeds m/s, all times
seconds. The dataclass does not validate physical consistency; that is the
job of exitpoint_planner.validators, which the solver runs before every
calculation.
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, Optional

from exitpoint_planner.constants import JumpDefaults
from exitpoint_planner.model.lat_lon import LatLon


@dataclass(frozen=True)
class JumpParameters:
    """Parameters for a single exit point calculation.

    Attributes:
        jump_altitude: Exit altitude (m AGL)
        aircraft_speed: Aircraft true airspeed at exit (m/s)
        freefall_speed: Constant vertical freefall speed (m/s)
        opening_altitude: Canopy opening altitude (m AGL)
        canopy_descent_rate: Vertical speed under canopy (m/s)
        glide_ratio: Horizontal distance per unit of altitude lost under canopy
        setup_altitude: Altitude where the landing pattern starts (m AGL)
        number_of_groups: Number of groups exiting on this pass
        time_between_groups: Seconds between consecutive group exits
        landing_zone: Target landing coordinate
        flight_direction: Explicit aircraft heading in degrees, None for automatic headwind
        flight_over_landing_zone: Fly the jump run through the landing zone (overhead mode)
        jump_time: Planned time of the jump (informational)

    Example:
        params = JumpParameters(landing_zone=LatLon(lat=61.78, lon=22.72))
    """

    jump_altitude: float = JumpDefaults.JUMP_ALTITUDE_M
    aircraft_speed: float = JumpDefaults.AIRCRAFT_SPEED_MS
    freefall_speed: float = JumpDefaults.FREEFALL_SPEED_MS
    opening_altitude: float = JumpDefaults.OPENING_ALTITUDE_M
    canopy_descent_rate: float = JumpDefaults.CANOPY_DESCENT_RATE_MS
    glide_ratio: float = JumpDefaults.GLIDE_RATIO
    setup_altitude: float = JumpDefaults.SETUP_ALTITUDE_M
    number_of_groups: int = JumpDefaults.NUMBER_OF_GROUPS
    time_between_groups: float = JumpDefaults.TIME_BETWEEN_GROUPS_S
    landing_zone: Optional[LatLon] = None
    flight_direction: Optional[float] = None
    flight_over_landing_zone: bool = False
    jump_time: Optional[datetime] = None

    @property
    def canopy_air_speed(self) -> float:
        """Canopy airspeed: hypotenuse of descent rate and glide speed (m/s)."""
        from exitpoint_planner.core.wind_drift import calculate_canopy_air_speed

        return calculate_canopy_air_speed(descent_rate=self.canopy_descent_rate, glide_ratio=self.glide_ratio)

    @property
    def canopy_altitude_range(self) -> float:
        """Altitude flown under canopy before the landing pattern (m)."""
        return self.opening_altitude - self.setup_altitude

    def with_overrides(self, **overrides: Any) -> "JumpParameters":
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: If an override names a field JumpParameters does not have.
        """
        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: dict) -> "JumpParameters":
        """Build from a plain dict (JSON input).

        The landing zone is given as {"lat": ..., "lon": ...}; jump_time as an
        ISO 8601 string. A whole-number float group count (3.0) becomes an
        int; fractional counts are left for the validators to reject.
        Unknown keys raise TypeError.
        """
        kwargs = dict(data)
        groups = kwargs.get("number_of_groups")
        if isinstance(groups, float) and groups.is_integer():
            kwargs["number_of_groups"] = int(groups)
        if kwargs.get("landing_zone") is not None:
            kwargs["landing_zone"] = LatLon(**kwargs["landing_zone"])
        if isinstance(kwargs.get("jump_time"), str):
            kwargs["jump_time"] = datetime.fromisoformat(kwargs["jump_time"])
        known = {f.name for f in fields(cls)}
        unknown = set(kwargs) - known
        if unknown:
            raise TypeError(f"Unknown jump parameter(s): {sorted(unknown)}")
        return cls(**kwargs)
