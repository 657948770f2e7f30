# flysite/site_model/data_models.py
"""
Defines the core data structures of a paragliding site: coordinates,
locations, launch wind-direction ranges, launches, landings and sites.

Every structure is a frozen dataclass. Edits produce new values, so a Site
can be handed to concurrent readers without locking. The dictionary codec
at the bottom of each class follows the shape of the site API records
(direction_degrees_start, direction_degrees_stop, site_type "Hang"...).
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..exceptions import InvalidSiteDataError

def _require(data: Dict[str, Any], key: str, record: str) -> Any:
    if not isinstance(data, dict):
        raise InvalidSiteDataError(f"{record} record must be a mapping, got {type(data).__name__}")
    if key not in data:
        raise InvalidSiteDataError(f"{record} record is missing '{key}'")
    return data[key]

def _number(value: Any, key: str, record: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidSiteDataError(f"{record} field '{key}' is not a number: {value!r}") from None

def _elevation(data: Dict[str, Any], record: str) -> float:
    value = _number(data.get("elevation", 0.0) or 0.0, "elevation", record)
    if value < 0:
        raise InvalidSiteDataError(f"{record} elevation must be non-negative, got {value}")
    return value

class SiteType(Enum):
    """How a pilot gets airborne from a launch. Descriptive only."""
    HANG = "Hang"
    WINCH = "Winch"

    @classmethod
    def parse(cls, value: Any) -> "SiteType":
        if isinstance(value, cls):
            return value
        for member in cls:
            if str(value).lower() in (member.value.lower(), member.name.lower()):
                return member
        raise InvalidSiteDataError(f"Unknown site type: {value!r}")

@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point. Compare with a tolerance, never with ==."""
    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def format(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"

@dataclass(frozen=True)
class Location:
    """A coordinate with a display name and optional country code."""
    coordinate: Coordinate
    name: str = ""
    country: Optional[str] = None

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    def to_dict(self) -> Dict[str, Any]:
        return {
            "latitude": self.coordinate.latitude,
            "longitude": self.coordinate.longitude,
            "name": self.name,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        lat = _number(_require(data, "latitude", "location"), "latitude", "location")
        lon = _number(_require(data, "longitude", "location"), "longitude", "location")
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            raise InvalidSiteDataError(f"location coordinate out of range: ({lat}, {lon})")
        return cls(
            coordinate=Coordinate(latitude=lat, longitude=lon),
            name=data.get("name") or "",
            country=data.get("country") or None,
        )

@dataclass(frozen=True)
class DirectionRange:
    """
    The clockwise arc of acceptable wind bearings, from start_bearing round
    to stop_bearing, wrapping through north when stop < start.

    No validation happens here: a zero-width arc (start == stop) or a
    0 -> 360 full circle are stored exactly as the operator entered them.
    """
    start_bearing: float
    stop_bearing: float

@dataclass(frozen=True)
class Launch:
    """A take-off point with its acceptable wind arc."""
    location: Location
    elevation: float = 0.0
    direction: DirectionRange = field(default_factory=lambda: DirectionRange(0.0, 360.0))
    site_type: SiteType = SiteType.HANG

    @property
    def coordinate(self) -> Coordinate:
        return self.location.coordinate

    def with_direction(self, direction: DirectionRange) -> "Launch":
        return replace(self, direction=direction)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location.to_dict(),
            "direction_degrees_start": self.direction.start_bearing,
            "direction_degrees_stop": self.direction.stop_bearing,
            "elevation": self.elevation,
            "site_type": self.site_type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Launch":
        start = _number(_require(data, "direction_degrees_start", "launch"), "direction_degrees_start", "launch")
        stop = _number(_require(data, "direction_degrees_stop", "launch"), "direction_degrees_stop", "launch")
        return cls(
            location=Location.from_dict(_require(data, "location", "launch")),
            elevation=_elevation(data, "launch"),
            direction=DirectionRange(start_bearing=start, stop_bearing=stop),
            site_type=SiteType.parse(data.get("site_type", SiteType.HANG)),
        )

@dataclass(frozen=True)
class Landing:
    """A landing field. Landings carry no direction constraint."""
    location: Location
    elevation: float = 0.0

    @property
    def coordinate(self) -> Coordinate:
        return self.location.coordinate

    def to_dict(self) -> Dict[str, Any]:
        return {"location": self.location.to_dict(), "elevation": self.elevation}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Landing":
        return cls(
            location=Location.from_dict(_require(data, "location", "landing")),
            elevation=_elevation(data, "landing"),
        )

@dataclass(frozen=True)
class Site:
    """
    The unit of editing: an ordered set of launches and landings owned by
    this site alone. An empty site is valid but gives nothing to evaluate.
    """
    name: str
    country: Optional[str] = None
    launches: Tuple[Launch, ...] = ()
    landings: Tuple[Landing, ...] = ()

    def __post_init__(self):
        # Accept lists from callers; store tuples so the value stays hashable
        object.__setattr__(self, "launches", tuple(self.launches))
        object.__setattr__(self, "landings", tuple(self.landings))

    @property
    def is_actionable(self) -> bool:
        return bool(self.launches)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "country": self.country,
            "launches": [launch.to_dict() for launch in self.launches],
            "landings": [landing.to_dict() for landing in self.landings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Site":
        return cls(
            name=_require(data, "name", "site"),
            country=data.get("country") or None,
            launches=tuple(Launch.from_dict(item) for item in data.get("launches") or []),
            landings=tuple(Landing.from_dict(item) for item in data.get("landings") or []),
        )
