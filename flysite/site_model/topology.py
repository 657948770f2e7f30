# flysite/site_model/topology.py
"""
Structural edits on a Site and the coincident-location relationships
between its launches and landings.

Every function returns a new Site. Indices are positional: an index read
before an add or remove on the same collection must not be reused after it.
"""
import logging
import operator
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple

from ..constants.compass import GeoConstants
from ..exceptions import IndexOutOfRange
from ..utils.coordinates import CoordinateCalculations
from .data_models import Coordinate, DirectionRange, Landing, Launch, Location, Site, SiteType

logger = logging.getLogger(__name__)

def _check_index(items: Sequence, index: int, collection: str) -> int:
    # Negative indices are stale by definition, not "from the end"
    if isinstance(index, bool):
        raise IndexOutOfRange(collection, index, len(items))
    try:
        position = operator.index(index)
    except TypeError:
        raise IndexOutOfRange(collection, index, len(items)) from None
    if not 0 <= position < len(items):
        raise IndexOutOfRange(collection, index, len(items))
    return position

def _without(items: Tuple, index: int) -> Tuple:
    return items[:index] + items[index + 1:]

def _replaced(items: Tuple, index: int, item) -> Tuple:
    return items[:index] + (item,) + items[index + 1:]

# --- Launches ---

def add_launch(site: Site, launch: Launch) -> Site:
    return replace(site, launches=site.launches + (launch,))

def remove_launch(site: Site, index: int) -> Site:
    index = _check_index(site.launches, index, "launch")
    return replace(site, launches=_without(site.launches, index))

def update_launch(site: Site, index: int, new_launch: Launch) -> Site:
    index = _check_index(site.launches, index, "launch")
    return replace(site, launches=_replaced(site.launches, index, new_launch))

# --- Landings ---

def add_landing(site: Site, landing: Landing) -> Site:
    return replace(site, landings=site.landings + (landing,))

def remove_landing(site: Site, index: int) -> Site:
    index = _check_index(site.landings, index, "landing")
    return replace(site, landings=_without(site.landings, index))

def update_landing(site: Site, index: int, new_landing: Landing) -> Site:
    index = _check_index(site.landings, index, "landing")
    return replace(site, landings=_replaced(site.landings, index, new_landing))

# --- Coincidence ---

def coincident_launches(site: Site, tolerance: float = GeoConstants.DEFAULT_COINCIDENCE_TOLERANCE_DEG) -> List[Tuple[Launch, bool]]:
    """
    Pairs each launch with True when some landing lies within `tolerance`
    degrees of it in both latitude and longitude.
    """
    flags = CoordinateCalculations.any_match(
        [l.coordinate.as_tuple() for l in site.launches],
        [l.coordinate.as_tuple() for l in site.landings],
        tolerance,
    )
    return list(zip(site.launches, flags))

def coincident_landings(site: Site, tolerance: float = GeoConstants.DEFAULT_COINCIDENCE_TOLERANCE_DEG) -> List[Tuple[Landing, bool]]:
    flags = CoordinateCalculations.any_match(
        [l.coordinate.as_tuple() for l in site.landings],
        [l.coordinate.as_tuple() for l in site.launches],
        tolerance,
    )
    return list(zip(site.landings, flags))

# --- Editor defaults ---

def _default_location(first: Optional[Coordinate], country: Optional[str], fallback: Tuple[float, float]) -> Location:
    coordinate = first if first is not None else Coordinate(*fallback)
    return Location(coordinate=coordinate, name="", country=country)

def new_launch(site: Site,
               fallback: Tuple[float, float] = (GeoConstants.DEFAULT_LATITUDE, GeoConstants.DEFAULT_LONGITUDE),
               direction: Tuple[float, float] = (0.0, 360.0),
               site_type: SiteType = SiteType.HANG) -> Launch:
    """
    The blank launch an operator starts from: placed on the site's first
    launch (or the fallback point), open to every direction.
    """
    first = site.launches[0].coordinate if site.launches else None
    return Launch(
        location=_default_location(first, site.country, fallback),
        elevation=0.0,
        direction=DirectionRange(*direction),
        site_type=site_type,
    )

def new_landing(site: Site,
                fallback: Tuple[float, float] = (GeoConstants.DEFAULT_LATITUDE, GeoConstants.DEFAULT_LONGITUDE)) -> Landing:
    first = site.landings[0].coordinate if site.landings else None
    return Landing(location=_default_location(first, site.country, fallback), elevation=0.0)

# --- Site level queries ---

def site_launch_kind(site: Site) -> str:
    """'winch', 'hang', 'both' or 'none', used to pick a map marker."""
    types = {launch.site_type for launch in site.launches}
    has_winch = SiteType.WINCH in types
    has_hang = SiteType.HANG in types
    if has_winch and has_hang:
        return "both"
    if has_winch:
        return "winch"
    if has_hang:
        return "hang"
    return "none"

def site_anchor(site: Site) -> Optional[Coordinate]:
    """Representative point of a site: its first launch, else its first landing."""
    if site.launches:
        return site.launches[0].coordinate
    if site.landings:
        return site.landings[0].coordinate
    return None

def sites_within_radius(sites: Iterable[Site], center: Coordinate, radius_km: float) -> List[Site]:
    """Sites whose anchor lies within radius_km of center. Sites without any point are skipped."""
    nearby = []
    for site in sites:
        anchor = site_anchor(site)
        if anchor is None:
            continue
        distance = CoordinateCalculations.distance_km(center.latitude, center.longitude, anchor.latitude, anchor.longitude)
        if distance <= radius_km:
            nearby.append(site)
    logger.debug(f"{len(nearby)} sites within {radius_km} km of ({center.format()})")
    return nearby
