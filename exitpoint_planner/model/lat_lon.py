"""LatLon - Geographic coordinate used for landing zones and exit points.

Every location that leaves the core (optimal exit point, group exit points,
flight path) is a LatLon. Displacements in meters are Vector2D, never LatLon.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class LatLon:
    """A WGS84 coordinate in decimal degrees.

    Attributes:
        lat: Latitude in decimal degrees (-90 to 90)
        lon: Longitude in decimal degrees (-180 to 180)

    Example:
        landing_zone = LatLon(lat=61.7807, lon=22.7221)
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if np.isnan(self.lat) or np.isnan(self.lon):
            raise ValueError(f"LatLon cannot contain NaN (lat={self.lat}, lon={self.lon})")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude {self.lat} outside [-90, 90]")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude {self.lon} outside [-180, 180]")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.lon, self.lat)

    def distance_to(self, other: "LatLon") -> float:
        """Great-circle distance to another coordinate in meters."""
        from exitpoint_planner.core.geo_calculator import GeoCalculator

        return GeoCalculator.calculate_distance(self, other)

    def __repr__(self) -> str:
        return f"LatLon(lat={self.lat:.6f}, lon={self.lon:.6f})"
