# services/aggregations.py
from __future__ import annotations

import pandas as pd


def price_threshold(prices: pd.Series, multiplier: float = 1.5) -> float:
    """Tukey's upper fence: Q3 + multiplier * IQR (linear interpolated quantiles)."""
    q1, q3 = prices.quantile([0.25, 0.75]).tolist()
    return multiplier * (q3 - q1) + q3


def trim_price_outliers(listings: pd.DataFrame, multiplier: float = 1.5) -> pd.DataFrame:
    """
    Drops the right tail of the price distribution.
    Only prices strictly below the upper fence are kept; there is no lower fence.
    """
    if listings.empty:
        return listings
    threshold = price_threshold(listings["price"], multiplier)
    return listings[listings["price"] < threshold]


def price_distribution(listings: pd.DataFrame, multiplier: float = 1.5) -> pd.DataFrame:
    """Price/room type pairs feeding the density chart."""
    trimmed = trim_price_outliers(listings, multiplier)
    return trimmed[["price", "room_type"]].reset_index(drop=True)


def host_concentration(listings: pd.DataFrame) -> pd.DataFrame:
    """
    How many hosts own n listings, for n > 1.
    Returns columns `n` (listings per host) and `host_count`.
    """
    if listings.empty:
        return pd.DataFrame({"n": pd.Series(dtype="int64"), "host_count": pd.Series(dtype="int64")})

    per_host = (
        listings.groupby(["host_id", "host_name"], dropna=False)["id"]
        .nunique()
        .rename("n")
    )
    counts = (
        per_host.value_counts()
        .rename_axis("n")
        .reset_index(name="host_count")
    )
    counts = counts[counts["n"] > 1]
    return counts.sort_values("n").reset_index(drop=True).astype("int64")


def room_type_counts(listings: pd.DataFrame) -> pd.DataFrame:
    """Listing count per room type, for the summary panel."""
    counts = (
        listings.groupby("room_type")
        .size()
        .reset_index(name="Quantity")
        .rename(columns={"room_type": "Room Type"})
    )
    return counts
