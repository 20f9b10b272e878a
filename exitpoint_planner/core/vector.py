"""2D vector math for wind and drift calculations.

Vectors live in a local east/north plane measured in meters (displacement)
or m/s (velocity):
- x: East component (positive = East)
- y: North component (positive = North)

Wind uses the meteorological convention: direction is where the wind comes
FROM, so a 0° wind blows toward the south. Bearings are degrees clockwise
from North.
"""

from dataclasses import dataclass
from math import atan2, cos, degrees, radians, sin, sqrt

from exitpoint_planner.constants import GeoConfig


def normalize_angle(angle_deg: float) -> float:
    """Wrap an angle into [0, 360).

    Float modulo can return exactly 360.0 for tiny negative inputs; that case
    folds back to 0.0.
    """
    wrapped = angle_deg % GeoConfig.FULL_CIRCLE_DEG
    return 0.0 if wrapped >= GeoConfig.FULL_CIRCLE_DEG else wrapped


@dataclass(frozen=True)
class Vector2D:
    """Planar east/north vector.

    Attributes:
        x: East component
        y: North component
    """

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def scale(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    @property
    def magnitude(self) -> float:
        return sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> "Vector2D":
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude
        if mag == 0:
            return Vector2D(0.0, 0.0)
        return self.scale(1 / mag)

    @property
    def bearing_deg(self) -> float:
        """Compass bearing the vector points toward (0-360, clockwise from North)."""
        return normalize_angle(degrees(atan2(self.x, self.y)))

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)


def heading_unit_vector(heading_deg: float) -> Vector2D:
    """Unit vector pointing toward a compass heading."""
    rad = radians(heading_deg)
    return Vector2D(sin(rad), cos(rad))


def wind_to_vector(direction: float, speed: float) -> Vector2D:
    """Convert meteorological wind to the velocity vector the air moves with.

    The wind blows toward direction + 180°.

    Args:
        direction: Degrees the wind comes FROM
        speed: Wind speed

    Returns:
        Vector2D pointing where the wind is going, magnitude = speed.
    """
    rad = radians(direction + 180)
    return Vector2D(speed * sin(rad), speed * cos(rad))


def vector_to_wind(vector: Vector2D) -> tuple[float, float]:
    """Convert a velocity vector back to meteorological (direction, speed).

    The zero vector maps to (0.0, 0.0).

    Returns:
        Tuple (direction_deg, speed) with direction in [0, 360).
    """
    speed = vector.magnitude
    if speed == 0:
        return 0.0, 0.0
    going_to = degrees(atan2(vector.x, vector.y))
    return normalize_angle(going_to + 180), speed


def add_vectors(a: Vector2D, b: Vector2D) -> Vector2D:
    return a + b


def subtract_vectors(a: Vector2D, b: Vector2D) -> Vector2D:
    """Return a - b."""
    return a - b


def scale_vector(vector: Vector2D, scalar: float) -> Vector2D:
    return vector.scale(scalar)


def vector_magnitude(vector: Vector2D) -> float:
    return vector.magnitude


def normalize_vector(vector: Vector2D) -> Vector2D:
    return vector.normalized()
