# flysite/utils/directions.py
"""
Conversion between compass point text ("SSW-WSW", "O, W") and bearings,
as found in DHV and ParaglidingEarth site listings.
"""
import re
from typing import List

from ..constants.compass import CompassConstants
from .angles import normalize_bearing

_SPLIT_RE = re.compile('[' + re.escape(CompassConstants.TEXT_SEPARATORS) + ']')

def parse_direction_text(text: str) -> List[float]:
    """
    Converts compass point text into bearings, in the order they appear.
    Unknown tokens are skipped rather than rejected.
    """
    degrees = []
    for part in _SPLIT_RE.split(text or ''):
        part = part.strip().upper()
        if not part:
            continue
        if part in CompassConstants.POINTS:
            degrees.append(CompassConstants.POINTS[part])
    return degrees

def bearing_to_compass_point(bearing: float) -> str:
    """Returns the nearest 16-point compass name for a bearing."""
    names = CompassConstants.POINT_NAMES
    step = CompassConstants.FULL_CIRCLE_DEG / len(names)
    index = int((normalize_bearing(bearing) + step / 2) // step) % len(names)
    return names[index]
