"""
Tests for core/areas.py

Covers:
- area keys are groups when any group exists, neighbourhoods otherwise
- no empty or missing key is ever offered
- the area filter matches either field and is idempotent
"""

import pandas as pd

from core.areas import filter_by_area, resolve_area_keys


class TestResolveAreaKeys:

    def test_groups_win_when_present(self, listings_df):
        assert resolve_area_keys(listings_df) == ["Manhattan", "Brooklyn", "Queens"]

    def test_neighbourhoods_when_groups_all_missing(self, listings_df):
        listings_df["neighbourhood_group"] = None
        assert resolve_area_keys(listings_df) == [
            "Chelsea", "Harlem", "Williamsburg", "Bushwick", "Astoria",
        ]

    def test_single_group_value_is_enough(self, listings_df):
        listings_df["neighbourhood_group"] = None
        listings_df.loc[3, "neighbourhood_group"] = "Brooklyn"
        assert resolve_area_keys(listings_df) == ["Brooklyn"]

    def test_never_offers_empty_keys(self, listings_df):
        listings_df["neighbourhood_group"] = None
        listings_df.loc[0, "neighbourhood"] = "  "
        keys = resolve_area_keys(listings_df)
        assert all(k.strip() for k in keys)

    def test_empty_dataset_has_no_keys(self, listings_df):
        assert resolve_area_keys(listings_df.iloc[0:0]) == []

    def test_non_empty_dataset_has_keys(self, listings_df):
        assert resolve_area_keys(listings_df.iloc[:1]) == ["Manhattan"]


class TestFilterByArea:

    def test_matches_group(self, listings_df):
        out = filter_by_area(listings_df, "Brooklyn")
        assert out["id"].tolist() == [4, 5, 6]

    def test_matches_neighbourhood_even_when_groups_exist(self, listings_df):
        out = filter_by_area(listings_df, "Astoria")
        assert out["id"].tolist() == [7, 8]

    def test_unknown_key_is_empty(self, listings_df):
        assert filter_by_area(listings_df, "Nowhere").empty

    def test_idempotent(self, listings_df):
        once = filter_by_area(listings_df, "Manhattan")
        twice = filter_by_area(once, "Manhattan")
        pd.testing.assert_frame_equal(once, twice)

    def test_missing_groups_do_not_match(self, listings_df):
        listings_df["neighbourhood_group"] = pd.Series([pd.NA] * len(listings_df), dtype="string")
        out = filter_by_area(listings_df, "Chelsea")
        assert out["id"].tolist() == [1, 2]
