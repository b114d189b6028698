"""
Shared fixtures for the dashboard test suite.

Provides:
- a small NYC-like listings frame (neighbourhood groups present)
- the same frame as a CityDataset and a DashboardService
- a temp data directory with listing CSV files
"""

import pandas as pd
import pytest

from core.listings import CityDataset
from services.dashboard_service import DashboardService
from utils.geo import Bounds

COLUMNS = [
    "id", "host_id", "host_name", "room_type", "price",
    "latitude", "longitude", "neighbourhood", "neighbourhood_group",
]

ROWS = [
    (1, 10, "Ann", "Entire home/apt", 100.0, 40.70, -74.00, "Chelsea", "Manhattan"),
    (2, 10, "Ann", "Entire home/apt", 120.0, 40.71, -74.01, "Chelsea", "Manhattan"),
    (3, 10, "Ann", "Private room", 80.0, 40.72, -73.99, "Harlem", "Manhattan"),
    (4, 20, "Bob", "Private room", 60.0, 40.65, -73.95, "Williamsburg", "Brooklyn"),
    (5, 20, "Bob", "Private room", 65.0, 40.66, -73.96, "Williamsburg", "Brooklyn"),
    (6, 30, "Cat", "Shared room", 40.0, 40.67, -73.94, "Bushwick", "Brooklyn"),
    (7, 40, "Dan", "Entire home/apt", 150.0, 40.75, -73.85, "Astoria", "Queens"),
    (8, 50, "Eve", "Entire home/apt", 900.0, 40.76, -73.86, "Astoria", "Queens"),
]


@pytest.fixture
def listings_df() -> pd.DataFrame:
    return pd.DataFrame(ROWS, columns=COLUMNS)


@pytest.fixture
def nyc(listings_df) -> CityDataset:
    return CityDataset.from_listings("NYC", listings_df)


@pytest.fixture
def service(nyc) -> DashboardService:
    return DashboardService({"NYC": nyc})


@pytest.fixture
def brooklyn_bounds() -> Bounds:
    # covers listings 1, 4, 5, 6
    return Bounds(north=40.70, south=40.60, east=-73.90, west=-74.00)


@pytest.fixture
def data_dir(tmp_path, listings_df):
    """Two cities: one with neighbourhood groups, one without the column at all."""
    listings_df.to_csv(tmp_path / "new-york.csv", index=False)
    amsterdam = listings_df.drop(columns=["neighbourhood_group"]).copy()
    amsterdam["neighbourhood"] = ["Centrum", "Centrum", "Noord", "Noord", "Oost", "Oost", "West", "West"]
    amsterdam.to_csv(tmp_path / "amsterdam.csv", index=False)
    (tmp_path / "README.txt").write_text("not a listing file")
    return tmp_path
