# flysite/site_model/direction_range.py
"""
Geometry of a launch's wind-direction arc: what a compass-rose widget needs
to draw it and how a dragged endpoint turns back into a new range.

Coordinates are planar with y pointing down, so a point at bearing 0 sits
directly above the centre.
"""
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, Union

from ..constants.compass import CompassConstants
from ..utils.angles import (
    bearing_to_planar_radians, clockwise_difference, is_major_arc,
    normalize_bearing, planar_radians_to_bearing, sweep_flag
)
from .data_models import DirectionRange

Point = Tuple[float, float]

class Endpoint(Enum):
    START = "start"
    STOP = "stop"

@dataclass(frozen=True)
class ArcFlags:
    """SVG arc flags. Ranges are never counter-clockwise."""
    is_major_arc: bool
    clockwise: bool = True

    @property
    def large_arc_flag(self) -> int:
        return 1 if self.is_major_arc else 0

    @property
    def sweep_flag(self) -> int:
        return 1 if self.clockwise else 0

@dataclass(frozen=True)
class EndpointPositions:
    start_point: Point
    stop_point: Point

def arc_flags(direction: DirectionRange) -> ArcFlags:
    return ArcFlags(
        is_major_arc=is_major_arc(direction.start_bearing, direction.stop_bearing),
        clockwise=sweep_flag() == 1,
    )

def planar_point(bearing: float, radius: float, center: Point = (0.0, 0.0)) -> Point:
    """The point at `radius` from `center` in the direction of `bearing`."""
    rad = bearing_to_planar_radians(bearing)
    return (center[0] + radius * math.cos(rad), center[1] + radius * math.sin(rad))

def endpoint_planar_position(direction: DirectionRange, radius: float, center: Point = (0.0, 0.0)) -> EndpointPositions:
    return EndpointPositions(
        start_point=planar_point(direction.start_bearing, radius, center),
        stop_point=planar_point(direction.stop_bearing, radius, center),
    )

def update_from_pointer_angle(direction: DirectionRange, which: Union[Endpoint, str], new_bearing: float) -> DirectionRange:
    """
    Replaces the dragged endpoint and leaves the other one alone.

    Dragging through the opposite endpoint is allowed; the result may be a
    tiny, zero-width or nearly full arc. Nothing is clamped or rejected.
    """
    which = Endpoint(which)
    if which is Endpoint.START:
        return replace(direction, start_bearing=new_bearing)
    return replace(direction, stop_bearing=new_bearing)

def pointer_to_bearing(dx: float, dy: float) -> float:
    """Bearing of a pointer offset (dx, dy) from the compass centre, y down."""
    return planar_radians_to_bearing(math.atan2(dy, dx))

def arc_path(direction: DirectionRange, radius: float, center: Point = (0.0, 0.0)) -> str:
    """SVG path data for the filled wedge from the centre out to the arc."""
    ends = endpoint_planar_position(direction, radius, center)
    flags = arc_flags(direction)
    cx, cy = center
    sx, sy = ends.start_point
    ex, ey = ends.stop_point
    return (
        f"M {cx:g} {cy:g} L {sx:.3f} {sy:.3f} "
        f"A {radius:g} {radius:g} 0 {flags.large_arc_flag} {flags.sweep_flag} {ex:.3f} {ey:.3f} Z"
    )

def span(direction: DirectionRange) -> float:
    """
    Width of the arc in degrees. Matches clockwise_difference for bearings
    in [0, 360), but keeps a literal 0 -> 360 entry as the full circle.
    """
    start, stop = direction.start_bearing, direction.stop_bearing
    if start <= stop:
        return stop - start
    return CompassConstants.FULL_CIRCLE_DEG - start + stop

def contains(direction: DirectionRange, bearing: float) -> bool:
    """Whether a wind bearing lies on the arc, endpoints included."""
    bearing = normalize_bearing(bearing)
    start, stop = direction.start_bearing, direction.stop_bearing
    if start <= stop:
        return start <= bearing <= stop
    return bearing >= start or bearing <= stop

def center_bearing(direction: DirectionRange) -> float:
    """Bearing halfway along the clockwise arc."""
    start, stop = direction.start_bearing, direction.stop_bearing
    if start <= stop:
        return (start + stop) / 2.0
    return normalize_bearing((start + stop + CompassConstants.FULL_CIRCLE_DEG) / 2.0)

def is_zero_width(direction: DirectionRange) -> bool:
    """True for start == stop. Reported, never rejected."""
    return clockwise_difference(direction.start_bearing, direction.stop_bearing) == 0 and span(direction) == 0
