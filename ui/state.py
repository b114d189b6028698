import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from utils.geo import Bounds

logger = logging.getLogger(__name__)


class ActiveView(Enum):
    NO_CITY = "no_city"
    CITY_ONLY = "city_only"
    CITY_AND_AREA = "city_and_area"


@dataclass
class SelectionState:
    city: Optional[str] = None
    area: Optional[str] = None
    map_bounds: Optional[Bounds] = None  # dernière vue de la carte, sans anti-rebond
    settled_bounds: Optional[Bounds] = None  # vue utilisée par les graphiques
    zoom_reset: int = 0
    reset_center: Optional[Tuple[float, float]] = None

    @property
    def view(self) -> ActiveView:
        if not self.city:
            return ActiveView.NO_CITY
        if not self.area:
            return ActiveView.CITY_ONLY
        return ActiveView.CITY_AND_AREA

    def _clear_bounds(self) -> None:
        self.map_bounds = None
        self.settled_bounds = None
        self.zoom_reset = 0
        self.reset_center = None

    def select_city(self, city: Optional[str]) -> bool:
        """Returns True when the selection actually changed."""
        city = city or None
        if city == self.city:
            return False
        self.city = city
        self.area = None
        self._clear_bounds()
        return True

    def select_area(self, area: Optional[str]) -> bool:
        area = area or None
        if area == self.area:
            return False
        if area and not self.city:
            logger.debug("Area %r selected without a city, ignored", area)
            return False
        self.area = area
        self._clear_bounds()
        return True

    def set_bounds(self, bounds: Optional[Bounds]) -> bool:
        if self.view is ActiveView.NO_CITY:
            logger.debug("Map bounds received before any city, ignored")
            return False
        if bounds is None or bounds == self.map_bounds:
            return False
        self.map_bounds = bounds
        return True

    def settle_bounds(self, bounds: Bounds) -> bool:
        if self.view is ActiveView.NO_CITY:
            return False
        self.settled_bounds = bounds
        return True

    def request_zoom_reset(self) -> None:
        """Re-center on the current view at the reset zoom level."""
        b = self.map_bounds
        if b is not None:
            self.reset_center = ((b.north + b.south) / 2, (b.east + b.west) / 2)
        self.zoom_reset += 1
