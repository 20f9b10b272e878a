"""Exit point results - What the solver hands back to the caller.

ExitCalculationResult is an immutable value: the caller renders it (map
markers, safety circle, group table) and may compute it again at will.
"""

from dataclasses import dataclass

from exitpoint_planner.model.lat_lon import LatLon


@dataclass(frozen=True)
class ExitPoint:
    """Exit coordinate for one jump group.

    Attributes:
        location: Where the group should leave the aircraft
        group_number: 1-based position in the exit order
    """

    location: LatLon
    group_number: int

    def __post_init__(self) -> None:
        if self.group_number < 1:
            raise ValueError(f"group_number must be >= 1, got {self.group_number}")


@dataclass(frozen=True)
class ExitCalculationResult:
    """Complete result of an exit point calculation.

    Attributes:
        optimal_exit_point: Exit position from which passive wind drift alone
            carries a jumper to the landing zone
        exit_points: One ExitPoint per group, ordered along the aircraft heading
        safety_radius: Radius in meters around the exit point from which the
            landing zone can reliably be reached under canopy
        aircraft_heading: Jump run heading in degrees (0-360)
    """

    optimal_exit_point: LatLon
    exit_points: tuple[ExitPoint, ...]
    safety_radius: float
    aircraft_heading: float

    @property
    def number_of_groups(self) -> int:
        return len(self.exit_points)

    def to_dict(self) -> dict:
        """Plain-dict form for JSON output."""
        return {
            "optimal_exit_point": {"lat": self.optimal_exit_point.lat, "lon": self.optimal_exit_point.lon},
            "exit_points": [
                {"group_number": ep.group_number, "lat": ep.location.lat, "lon": ep.location.lon}
                for ep in self.exit_points
            ],
            "safety_radius": self.safety_radius,
            "aircraft_heading": self.aircraft_heading,
        }
