"""
flysite - Site Model
Launches, landings and their wind-direction arcs, with the geometry
needed to draw and edit those arcs on a compass rose.
"""

from .data_models import Coordinate, Location, DirectionRange, SiteType, Launch, Landing, Site
from .direction_range import (
    Endpoint, ArcFlags, EndpointPositions, arc_flags, endpoint_planar_position,
    update_from_pointer_angle, pointer_to_bearing, arc_path
)
from .topology import (
    add_launch, remove_launch, update_launch,
    add_landing, remove_landing, update_landing,
    coincident_launches, coincident_landings
)
from .editor import SiteEditor

__all__ = [
    "Coordinate",
    "Location",
    "DirectionRange",
    "SiteType",
    "Launch",
    "Landing",
    "Site",
    "Endpoint",
    "ArcFlags",
    "EndpointPositions",
    "arc_flags",
    "endpoint_planar_position",
    "update_from_pointer_angle",
    "pointer_to_bearing",
    "arc_path",
    "add_launch",
    "remove_launch",
    "update_launch",
    "add_landing",
    "remove_landing",
    "update_landing",
    "coincident_launches",
    "coincident_landings",
    "SiteEditor"
]
