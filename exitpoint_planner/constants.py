"""Configuration constants for the Exit Point Planner.

All tunable parameters are centralized here for easy tuning.

Classes:
    GeoConfig: Earth model used by every geodesic calculation
    DriftConfig: Integration step sizes for freefall and canopy drift
    SafetyConfig: Safety margins and flight path extension
    WindWarningConfig: Ground wind limits for student and sport jumpers
    JumpDefaults: Default jump parameters (sport jumper, 4000m exit)
    ProfileConfig: Preset jump profiles (sport, tandem, student)
"""


class GeoConfig:
    """Earth model for geodesic calculations."""

    # Mean Earth radius in meters (WGS84 spherical approximation)
    EARTH_RADIUS_M = 6_371_000

    # Degrees in a full circle, used for bearing normalization
    FULL_CIRCLE_DEG = 360.0


class DriftConfig:
    """Numerical integration parameters for wind drift.

    Freefall uses Simpson's rule over 100m slices, canopy uses plain
    accumulation over 50m slices.
    """

    FREEFALL_STEP_M = 100
    CANOPY_STEP_M = 50

    # Simpson's rule weights: ends, odd interior, even interior, divisor
    SIMPSON_END_WEIGHT = 1.0
    SIMPSON_ODD_WEIGHT = 4.0
    SIMPSON_EVEN_WEIGHT = 2.0
    SIMPSON_DIVISOR = 3.0


class SafetyConfig:
    """Safety margins applied to theoretical canopy range."""

    # Fraction of max glide distance considered reliably reachable
    SAFETY_RADIUS_MARGIN = 0.7

    # Fraction of canopy range used for the reachability check
    REACHABILITY_MARGIN = 0.9

    # Flight path drawn 1km before the first and after the last exit
    FLIGHT_PATH_EXTENSION_M = 1000.0


class WindWarningConfig:
    """Ground wind limits (m/s)."""

    # Only winds sampled below this altitude (m AGL) count as ground wind
    GROUND_WIND_MAX_ALTITUDE_M = 50.0

    STUDENT_WIND_LIMIT_MS = 8.0
    SPORT_WIND_LIMIT_MS = 11.0


class JumpDefaults:
    """Default jump parameters for a sport load."""

    JUMP_ALTITUDE_M = 4000.0
    AIRCRAFT_SPEED_MS = 36.0  # 130 km/h
    FREEFALL_SPEED_MS = 55.56  # 200 km/h
    OPENING_ALTITUDE_M = 800.0
    CANOPY_DESCENT_RATE_MS = 6.0
    GLIDE_RATIO = 2.5  # ~16.1 m/s canopy airspeed at 6 m/s descent
    SETUP_ALTITUDE_M = 100.0
    NUMBER_OF_GROUPS = 5
    TIME_BETWEEN_GROUPS_S = 10.0


class ProfileConfig:
    """Preset jump profiles.

    Each preset overrides the per-jumper fields of the common parameters.
    Fields not listed fall back to the common (load-wide) values.
    """

    PRESETS = {
        "sport_jumpers": {
            "name": "Sport",
            "enabled": True,
            "overrides": {
                "jump_altitude": 4000.0,
                "aircraft_speed": 36.0,
                "freefall_speed": 55.56,
                "opening_altitude": 800.0,
                "canopy_descent_rate": 6.0,
                "glide_ratio": 2.5,
                "setup_altitude": 100.0,
            },
        },
        "tandem": {
            "name": "Tandem",
            "enabled": False,
            "overrides": {
                "jump_altitude": 4000.0,
                "aircraft_speed": 36.0,
                "freefall_speed": 50.0,
                "opening_altitude": 1200.0,
                "canopy_descent_rate": 4.0,
                "glide_ratio": 2.0,
                "setup_altitude": 100.0,
            },
        },
        "student": {
            "name": "Student",
            "enabled": False,
            "overrides": {
                "jump_altitude": 4000.0,
                "aircraft_speed": 36.0,
                "freefall_speed": 55.56,
                "opening_altitude": 1400.0,
                "canopy_descent_rate": 5.0,
                "glide_ratio": 2.2,
                "setup_altitude": 100.0,
            },
        },
    }

    # Fields a profile is allowed to override
    PROFILE_FIELDS = (
        "jump_altitude",
        "aircraft_speed",
        "freefall_speed",
        "opening_altitude",
        "canopy_descent_rate",
        "glide_ratio",
        "setup_altitude",
    )
    assert set().union(*(p["overrides"] for p in PRESETS.values())) <= set(PROFILE_FIELDS)
