from functools import lru_cache
from typing import Dict, List, Optional

import pandas as pd

from config import SETTINGS, Settings
from core.areas import filter_by_area
from core.listings import CityDataset
from services.aggregations import host_concentration, price_distribution, room_type_counts
from ui.state import ActiveView, SelectionState
from utils.geo import compute_extent, filter_by_bounds


class DashboardService:
    """Read-only queries over the loaded cities, driven by a session's SelectionState."""

    def __init__(self, cities: Dict[str, CityDataset], settings: Settings = SETTINGS):
        self.cities = cities
        self.settings = settings
        self._area_cache = lru_cache(maxsize=128)(self._filter_area)

    def city_options(self) -> List[str]:
        return list(self.cities.keys())

    def area_options(self, city: Optional[str]) -> List[str]:
        if not city or city not in self.cities:
            return []
        return list(self.cities[city].area_keys)

    def city_listings(self, city: str) -> pd.DataFrame:
        return self.cities[city].listings

    def _filter_area(self, city: str, area: str) -> pd.DataFrame:
        return filter_by_area(self.city_listings(city), area)

    def area_listings(self, city: str, area: str) -> pd.DataFrame:
        return self._area_cache(city, area)

    def scope_listings(self, state: SelectionState) -> Optional[pd.DataFrame]:
        """City or area listings, before any viewport filtering. None without a city."""
        view = state.view
        if view is ActiveView.NO_CITY or state.city not in self.cities:
            return None
        if view is ActiveView.CITY_ONLY:
            return self.city_listings(state.city)
        return self.area_listings(state.city, state.area)

    def chart_listings(self, state: SelectionState) -> Optional[pd.DataFrame]:
        """
        Listings the charts are computed on.
        A whole city ignores the viewport; an area is refined by the settled
        (debounced) map bounds once one arrived.
        """
        listings = self.scope_listings(state)
        if listings is None:
            return None
        if state.view is ActiveView.CITY_AND_AREA and state.settled_bounds is not None:
            return filter_by_bounds(listings, state.settled_bounds)
        return listings

    def bounded_listings(self, state: SelectionState) -> Optional[pd.DataFrame]:
        """Listings inside the current viewport, for the summary panel."""
        listings = self.scope_listings(state)
        if listings is None:
            return None
        if state.map_bounds is not None:
            return filter_by_bounds(listings, state.map_bounds)
        return listings

    def map_extent(self, state: SelectionState):
        listings = self.scope_listings(state)
        if listings is None:
            return None
        return compute_extent(listings)

    def price_distribution(self, state: SelectionState) -> Optional[pd.DataFrame]:
        listings = self.chart_listings(state)
        if listings is None:
            return None
        return price_distribution(listings, self.settings.OUTLIER_IQR_MULTIPLIER)

    def host_concentration(self, state: SelectionState) -> Optional[pd.DataFrame]:
        listings = self.chart_listings(state)
        if listings is None:
            return None
        return host_concentration(listings)

    def room_summary(self, state: SelectionState) -> Optional[pd.DataFrame]:
        listings = self.bounded_listings(state)
        if listings is None:
            return None
        return room_type_counts(listings)
