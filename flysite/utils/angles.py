# flysite/utils/angles.py
"""
Compass bearing arithmetic. Bearings are degrees clockwise from north;
planar angles are radians from east, increasing towards +y on a y-down
screen, which is the convention SVG and atan2 on pointer offsets use.

These are total functions over the reals. Logging is omitted here as they
are called once per pointer event.
"""
import math

from ..constants.compass import CompassConstants

FULL_CIRCLE = CompassConstants.FULL_CIRCLE_DEG

def normalize_bearing(bearing: float) -> float:
    """Folds any angle in degrees into [0, 360)."""
    deg = math.fmod(bearing, FULL_CIRCLE)
    if deg < 0:
        deg += FULL_CIRCLE
    # fmod of a tiny negative can round back up to 360.0
    if deg >= FULL_CIRCLE:
        deg -= FULL_CIRCLE
    return deg + 0.0

def clockwise_difference(a: float, b: float) -> float:
    """Clockwise rotation from bearing a to bearing b, in [0, 360)."""
    if a == b:
        return 0.0
    return normalize_bearing(math.fmod(b - a, FULL_CIRCLE) + FULL_CIRCLE)

def is_major_arc(a: float, b: float) -> bool:
    """True when the clockwise arc from a to b is the long way round."""
    return clockwise_difference(a, b) > CompassConstants.HALF_CIRCLE_DEG

def sweep_flag() -> int:
    """SVG sweep flag. Ranges are always drawn clockwise."""
    return 1

def angular_distance(a: float, b: float) -> float:
    """Smallest unsigned separation between two bearings, in [0, 180]."""
    diff = clockwise_difference(a, b)
    return min(diff, FULL_CIRCLE - diff) if diff else 0.0

def bearing_to_planar_radians(bearing: float) -> float:
    """Compass bearing to planar radians; bearing 0 (north) points up."""
    return (bearing - CompassConstants.PLANAR_OFFSET_DEG) * (math.pi / 180)

def planar_radians_to_bearing(radians: float) -> float:
    """Planar radians back to a compass bearing in [0, 360)."""
    deg = (radians * 180 / math.pi) + CompassConstants.PLANAR_OFFSET_DEG
    return normalize_bearing(deg)
