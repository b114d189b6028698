# core/listings.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from core.areas import resolve_area_keys

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    "id",
    "host_id",
    "host_name",
    "room_type",
    "price",
    "latitude",
    "longitude",
    "neighbourhood",
]
OPTIONAL_COLUMNS = ["neighbourhood_group"]


class DatasetError(RuntimeError):
    """Raised when the listing files cannot be turned into city datasets."""


@dataclass(frozen=True)
class CityDataset:
    name: str
    listings: pd.DataFrame = field(repr=False)
    area_keys: List[str] = field(default_factory=list)

    @classmethod
    def from_listings(cls, name: str, listings: pd.DataFrame) -> "CityDataset":
        # découpage en zones décidé une seule fois par ville
        return cls(
            name=name,
            listings=listings,
            area_keys=resolve_area_keys(listings),
        )

    def __len__(self) -> int:
        return len(self.listings)


def _clean_price(series: pd.Series) -> pd.Series:
    # "$1,250.00" dans les exports détaillés, nombres simples dans les résumés
    if series.dtype == object:
        series = series.astype(str).str.replace(r"[$,\s]", "", regex=True)
    return pd.to_numeric(series, errors="coerce")


def _prepare_listings(df: pd.DataFrame, source: str) -> pd.DataFrame:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise DatasetError(f"{source}: missing required columns {', '.join(missing)}")

    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    out = df[REQUIRED_COLUMNS + OPTIONAL_COLUMNS].copy()
    out["latitude"] = pd.to_numeric(out["latitude"], errors="coerce")
    out["longitude"] = pd.to_numeric(out["longitude"], errors="coerce")
    out["price"] = _clean_price(out["price"])
    for col in ["neighbourhood", "neighbourhood_group"]:
        out[col] = out[col].astype("string").str.strip().replace("", pd.NA)

    n_before = len(out)
    out = out.dropna(subset=["latitude", "longitude", "price"])
    out = out[out["price"] >= 0]
    dropped = n_before - len(out)
    if dropped:
        logger.warning("%s: dropped %d rows without coordinates or a valid price", source, dropped)

    return out.reset_index(drop=True)


def load_city_file(path: Union[str, Path]) -> CityDataset:
    """Load one listing CSV as a city dataset keyed by the uppercase file stem."""
    path = Path(path)
    try:
        raw = pd.read_csv(path, low_memory=False)
    except (OSError, ValueError) as e:
        raise DatasetError(f"{path.name}: cannot parse listing file ({e})") from e

    listings = _prepare_listings(raw, path.name)
    name = path.stem.upper()
    dataset = CityDataset.from_listings(name, listings)
    logger.info("Loaded %s: %d listings, %d areas", name, len(dataset), len(dataset.area_keys))
    return dataset


def load_cities(data_dir: Union[str, Path]) -> Dict[str, CityDataset]:
    """
    Load every *.csv file of `data_dir`.
    Returns a mapping uppercase city name -> CityDataset, in file name order.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DatasetError(f"Data directory not found: {data_dir}")

    files = sorted(p for p in data_dir.iterdir() if p.suffix.lower() == ".csv")
    if not files:
        raise DatasetError(f"No listing CSV files in {data_dir}")

    cities: Dict[str, CityDataset] = {}
    for f in files:
        dataset = load_city_file(f)
        cities[dataset.name] = dataset
    return cities
