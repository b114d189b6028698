# core/areas.py
from typing import List

import pandas as pd


def resolve_area_keys(listings: pd.DataFrame) -> List[str]:
    """
    Area options for a city.
    Cities publishing neighbourhood groups (e.g. NYC boroughs) are split by group,
    the others by neighbourhood. Keys keep their order of first appearance.
    """
    groups = listings.get("neighbourhood_group")
    if groups is not None and groups.notna().any():
        keys = groups
    else:
        keys = listings["neighbourhood"]
    keys = keys.dropna().astype(str)
    return [k for k in keys.unique().tolist() if k.strip()]


def filter_by_area(listings: pd.DataFrame, area: str) -> pd.DataFrame:
    """Listings whose neighbourhood OR neighbourhood group equals `area`."""
    mask = (listings["neighbourhood"] == area).fillna(False)
    if "neighbourhood_group" in listings.columns:
        mask = mask | (listings["neighbourhood_group"] == area).fillna(False)
    return listings[mask.astype(bool)]
