# Angle, compass text and coordinate helpers shared by the site model and the rule engines.

from .angles import (
    normalize_bearing, clockwise_difference, is_major_arc, sweep_flag,
    angular_distance, bearing_to_planar_radians, planar_radians_to_bearing
)
from .directions import parse_direction_text, bearing_to_compass_point
from .coordinates import CoordinateCalculations

__all__ = [
    "normalize_bearing",
    "clockwise_difference",
    "is_major_arc",
    "sweep_flag",
    "angular_distance",
    "bearing_to_planar_radians",
    "planar_radians_to_bearing",
    "parse_direction_text",
    "bearing_to_compass_point",
    "CoordinateCalculations"
]
