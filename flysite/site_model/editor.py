# flysite/site_model/editor.py
"""
The mutable owner of a site being edited.

Records live in an arena keyed by generated handles, and display order is
kept as a separate list of handles. A handle stays valid across unrelated
adds and removes, unlike a positional index. Not thread-safe: one editor
per editing session.
"""
import logging
import uuid
from typing import Dict, List, Optional, Tuple, Union

from ..constants.compass import GeoConstants
from ..exceptions import StaleHandleError
from .data_models import DirectionRange, Landing, Launch, Site, SiteType
from .direction_range import Endpoint, update_from_pointer_angle
from . import topology

logger = logging.getLogger(__name__)

class SiteEditor:
    """Stable-handle editing session over a single Site."""

    def __init__(self, name: str, country: Optional[str] = None,
                 tolerance: float = GeoConstants.DEFAULT_COINCIDENCE_TOLERANCE_DEG,
                 fallback: Tuple[float, float] = (GeoConstants.DEFAULT_LATITUDE, GeoConstants.DEFAULT_LONGITUDE),
                 default_direction: Tuple[float, float] = (0.0, 360.0),
                 default_site_type: SiteType = SiteType.HANG):
        self.name = name
        self.country = country
        self.tolerance = tolerance
        self.fallback = fallback
        self.default_direction = default_direction
        self.default_site_type = default_site_type
        self._launches: Dict[str, Launch] = {}
        self._landings: Dict[str, Landing] = {}
        self._launch_order: List[str] = []
        self._landing_order: List[str] = []

    @classmethod
    def from_site(cls, site: Site, **kwargs) -> "SiteEditor":
        editor = cls(site.name, site.country, **kwargs)
        for launch in site.launches:
            editor.add_launch(launch)
        for landing in site.landings:
            editor.add_landing(landing)
        logger.info(f"Editing site '{site.name}': {len(site.launches)} launches, {len(site.landings)} landings.")
        return editor

    @staticmethod
    def _new_handle() -> str:
        return uuid.uuid4().hex

    # --- Launches ---

    @property
    def launch_handles(self) -> Tuple[str, ...]:
        return tuple(self._launch_order)

    def launch(self, handle: str) -> Launch:
        try:
            return self._launches[handle]
        except KeyError:
            raise StaleHandleError("launch", handle) from None

    def add_launch(self, launch: Optional[Launch] = None) -> str:
        """Appends a launch (a blank default one if none is given) and returns its handle."""
        if launch is None:
            launch = topology.new_launch(self.snapshot(), self.fallback, self.default_direction, self.default_site_type)
        handle = self._new_handle()
        self._launches[handle] = launch
        self._launch_order.append(handle)
        logger.debug(f"Added launch {handle} to '{self.name}'")
        return handle

    def update_launch(self, handle: str, launch: Launch) -> None:
        self.launch(handle)
        self._launches[handle] = launch

    def drag_launch_direction(self, handle: str, which: Union[Endpoint, str], new_bearing: float) -> DirectionRange:
        """Applies one pointer-drag update to a launch's range and returns the new range."""
        current = self.launch(handle)
        direction = update_from_pointer_angle(current.direction, which, new_bearing)
        self._launches[handle] = current.with_direction(direction)
        return direction

    def remove_launch(self, handle: str) -> Launch:
        launch = self.launch(handle)
        del self._launches[handle]
        self._launch_order.remove(handle)
        logger.debug(f"Removed launch {handle} from '{self.name}'")
        return launch

    # --- Landings ---

    @property
    def landing_handles(self) -> Tuple[str, ...]:
        return tuple(self._landing_order)

    def landing(self, handle: str) -> Landing:
        try:
            return self._landings[handle]
        except KeyError:
            raise StaleHandleError("landing", handle) from None

    def add_landing(self, landing: Optional[Landing] = None) -> str:
        if landing is None:
            landing = topology.new_landing(self.snapshot(), self.fallback)
        handle = self._new_handle()
        self._landings[handle] = landing
        self._landing_order.append(handle)
        logger.debug(f"Added landing {handle} to '{self.name}'")
        return handle

    def update_landing(self, handle: str, landing: Landing) -> None:
        self.landing(handle)
        self._landings[handle] = landing

    def remove_landing(self, handle: str) -> Landing:
        landing = self.landing(handle)
        del self._landings[handle]
        self._landing_order.remove(handle)
        logger.debug(f"Removed landing {handle} from '{self.name}'")
        return landing

    # --- Queries ---

    def index_of(self, handle: str) -> int:
        """Current display position of a launch or landing handle."""
        if handle in self._launches:
            return self._launch_order.index(handle)
        if handle in self._landings:
            return self._landing_order.index(handle)
        raise StaleHandleError("launch or landing", handle)

    def coincident_launch_handles(self) -> Dict[str, bool]:
        """Coincidence flags keyed by launch handle, recomputed on every call."""
        pairs = topology.coincident_launches(self.snapshot(), self.tolerance)
        return {handle: flag for handle, (_, flag) in zip(self._launch_order, pairs)}

    def coincident_landing_handles(self) -> Dict[str, bool]:
        pairs = topology.coincident_landings(self.snapshot(), self.tolerance)
        return {handle: flag for handle, (_, flag) in zip(self._landing_order, pairs)}

    def snapshot(self) -> Site:
        """An immutable Site reflecting the current edit state."""
        return Site(
            name=self.name,
            country=self.country,
            launches=tuple(self._launches[h] for h in self._launch_order),
            landings=tuple(self._landings[h] for h in self._landing_order),
        )
