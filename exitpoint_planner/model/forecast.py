"""ForecastData - One weather sample of a vertical wind profile.

A profile is a list of ForecastData sorted ascending by altitude. The
weather service that produces it lives outside this package; values arrive
already converted to meters AGL and m/s.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class ForecastData:
    """Wind (and optionally temperature) at a single altitude.

    Attributes:
        altitude: Meters above ground level
        direction: Meteorological wind direction in degrees (where the wind comes FROM)
        speed: Wind speed in m/s
        gust_speed: Gust speed in m/s, if the model provides it
        temperature: Air temperature in °C, if the model provides it
    """

    altitude: float
    direction: float
    speed: float
    gust_speed: Optional[float] = None
    temperature: Optional[float] = None

    def at_altitude(self, altitude: float) -> "ForecastData":
        """Return a copy of this sample relabelled to another altitude."""
        return replace(self, altitude=altitude)

    @classmethod
    def from_dict(cls, data: dict) -> "ForecastData":
        """Build from a plain dict (JSON input), accepting camelCase gust key."""
        gust = data.get("gust_speed", data.get("gustSpeed"))
        return cls(
            altitude=float(data["altitude"]),
            direction=float(data["direction"]),
            speed=float(data["speed"]),
            gust_speed=None if gust is None else float(gust),
            temperature=None if data.get("temperature") is None else float(data["temperature"]),
        )
