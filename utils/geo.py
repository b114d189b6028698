from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class Bounds:
    north: float
    south: float
    east: float
    west: float

    def normalized(self) -> "Bounds":
        """Same rectangle with north >= south and east >= west."""
        return Bounds(
            north=max(self.north, self.south),
            south=min(self.north, self.south),
            east=max(self.east, self.west),
            west=min(self.east, self.west),
        )

    @classmethod
    def from_leaflet(cls, payload: Optional[Dict[str, Any]]) -> Optional["Bounds"]:
        """Convert the `bounds` dict returned by st_folium (Leaflet LatLngBounds)."""
        if not payload:
            return None
        sw = payload.get("_southWest") or {}
        ne = payload.get("_northEast") or {}
        values = [ne.get("lat"), sw.get("lat"), ne.get("lng"), sw.get("lng")]
        if any(v is None for v in values):
            return None
        north, south, east, west = (float(v) for v in values)
        return cls(north=north, south=south, east=east, west=west)


def filter_by_bounds(df: pd.DataFrame, bounds: Bounds) -> pd.DataFrame:
    """Rows whose coordinates fall inside the rectangle (edges included)."""
    b = bounds.normalized()
    mask = (
        df["latitude"].between(b.south, b.north)
        & df["longitude"].between(b.west, b.east)
    )
    return df[mask]


def compute_extent(df: pd.DataFrame) -> Optional[Dict[str, List[float]]]:
    """Returns {"lng": [min, max], "lat": [min, max]} to fit the map viewport."""
    if df.empty:
        return None
    return {
        "lng": [float(df["longitude"].min()), float(df["longitude"].max())],
        "lat": [float(df["latitude"].min()), float(df["latitude"].max())],
    }


def extent_center(extent: Optional[Dict[str, List[float]]], default=(20.0, 0.0)):
    """(lat, lon) at the middle of an extent."""
    if not extent:
        return default
    lat = float(np.mean(extent["lat"]))
    lon = float(np.mean(extent["lng"]))
    return lat, lon
