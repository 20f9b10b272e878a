"""Geodesic calculations bridging coordinates and local meter vectors.

Provides geographic helper functions for exit point planning:
- Distance calculation (Haversine formula)
- Bearing calculation (initial great-circle heading between points)
- Destination calculation (endpoint from start, bearing, distance)
- Vector <-> coordinate conversion (move_point / points_to_vector)

A single spherical Earth model (R = 6,371 km) is used for every operation:
distance and bearing are both great-circle quantities, and destinations
solve the direct problem on the same sphere. move_point and
points_to_vector are therefore exact inverses up to float rounding.
"""

from math import asin, atan2, cos, degrees, radians, sin, sqrt

from exitpoint_planner.constants import GeoConfig
from exitpoint_planner.core.vector import Vector2D, normalize_angle
from exitpoint_planner.model.lat_lon import LatLon

EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    All methods use a spherical Earth model (R = 6,371 km).
    Coordinates are in decimal degrees (WGS84).
    Bearings are in degrees clockwise from North (0-360).
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Great-circle distance on the 6371km sphere (Haversine formula).

        Raw-float form behind calculate_distance, LatLon.distance_to and
        points_to_vector; the solver's landing-zone distances all end up here.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def initial_bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate initial great-circle bearing from point 1 to point 2.

        Returns:
            Bearing in degrees (0-360, clockwise from North). Identical points give 0.
        """
        lat1_rad, lat2_rad = radians(lat1), radians(lat2)
        dlon = radians(lon2 - lon1)
        y = sin(dlon) * cos(lat2_rad)
        x = cos(lat1_rad) * sin(lat2_rad) - sin(lat1_rad) * cos(lat2_rad) * cos(dlon)
        return normalize_angle(degrees(atan2(y, x)))

    @staticmethod
    def destination(
        lat: float,
        lon: float,
        bearing_deg: float,
        distance_m: float,
    ) -> tuple[float, float]:
        """Calculate destination point given start, bearing, and distance.

        Args:
            lat: Latitude of start point (decimal degrees)
            lon: Longitude of start point (decimal degrees)
            bearing_deg: Bearing in degrees (clockwise from North)
            distance_m: Distance to travel in meters

        Returns:
            Tuple (lat, lon) of destination point, longitude wrapped to [-180, 180).
        """
        brng = radians(bearing_deg)
        lat1 = radians(lat)
        lon1 = radians(lon)
        d_R = distance_m / EARTH_RADIUS_M

        lat2 = asin(sin(lat1) * cos(d_R) + cos(lat1) * sin(d_R) * cos(brng))
        lon2 = lon1 + atan2(
            sin(brng) * sin(d_R) * cos(lat1),
            cos(d_R) - sin(lat1) * sin(lat2),
        )
        lon2_deg = (degrees(lon2) + 540) % 360 - 180
        return degrees(lat2), lon2_deg

    @staticmethod
    def calculate_distance(a: LatLon, b: LatLon) -> float:
        """Great-circle distance between two coordinates in meters."""
        return GeoCalculator.haversine_distance_m(lat1=a.lat, lon1=a.lon, lat2=b.lat, lon2=b.lon)

    @staticmethod
    def calculate_bearing(a: LatLon, b: LatLon) -> float:
        """Initial great-circle bearing from a to b (0-360)."""
        return GeoCalculator.initial_bearing_deg(lat1=a.lat, lon1=a.lon, lat2=b.lat, lon2=b.lon)

    @staticmethod
    def get_destination_point(origin: LatLon, distance: float, bearing: float) -> LatLon:
        """Project a point a given distance (m) along a bearing (deg)."""
        lat, lon = GeoCalculator.destination(
            lat=origin.lat,
            lon=origin.lon,
            bearing_deg=bearing,
            distance_m=distance,
        )
        return LatLon(lat=lat, lon=lon)

    @staticmethod
    def move_point(origin: LatLon, vector: Vector2D) -> LatLon:
        """Displace a coordinate by an east/north vector in meters.

        This is the only place a meter vector becomes a lat/lon delta.
        The zero vector returns the origin unchanged.

        Example:
            exit_point = GeoCalculator.move_point(
                LatLon(lat=61.7807, lon=22.7221),
                Vector2D(x=1000, y=-500),  # 1km east, 500m south
            )
        """
        distance = vector.magnitude
        if distance == 0:
            return origin
        return GeoCalculator.get_destination_point(origin, distance=distance, bearing=vector.bearing_deg)

    @staticmethod
    def points_to_vector(a: LatLon, b: LatLon) -> Vector2D:
        """Resolve the displacement from a to b into east/north meters."""
        distance = GeoCalculator.calculate_distance(a, b)
        bearing = radians(GeoCalculator.calculate_bearing(a, b))
        return Vector2D(distance * sin(bearing), distance * cos(bearing))
