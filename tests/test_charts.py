"""
Tests for ui/components/charts.py (plotly figures only, no Streamlit server).
"""

import plotly.graph_objects as go

from config import THEME
from services.aggregations import host_concentration, price_distribution
from ui.components.charts import (
    empty_figure,
    host_concentration_figure,
    price_density_figure,
)


def _annotation(fig: go.Figure) -> str:
    return fig.layout.annotations[0].text


class TestPriceDensityFigure:

    def test_one_curve_per_room_type(self, listings_df):
        fig = price_density_figure(price_distribution(listings_df))
        # "Shared room" has a single price, no density for it
        assert [t.name for t in fig.data] == ["Entire home/apt", "Private room"]

    def test_curves_use_room_colors(self, listings_df):
        fig = price_density_figure(price_distribution(listings_df))
        colors = [t.marker.color for t in fig.data]
        assert colors == [THEME.room_color("Entire home/apt"), THEME.room_color("Private room")]

    def test_axis_titles(self, listings_df):
        fig = price_density_figure(price_distribution(listings_df))
        assert fig.layout.xaxis.title.text == "Price"
        assert fig.layout.yaxis.title.text == "Kernel Density Estimation"

    def test_no_data(self):
        assert "No listings" in _annotation(price_density_figure(None))

    def test_not_enough_spread(self, listings_df):
        fig = price_density_figure(price_distribution(listings_df.iloc[[0, 3, 5]]))
        assert len(fig.data) == 0
        assert "Not enough" in _annotation(fig)


class TestHostConcentrationFigure:

    def test_bar_and_points(self, listings_df):
        fig = host_concentration_figure(host_concentration(listings_df))
        bar, points = fig.data
        assert isinstance(bar, go.Bar)
        assert bar.orientation == "h"
        assert list(bar.y) == [2, 3]
        assert list(points.x) == [1, 1]
        assert points.text[0] == "# Listings: 2<br># Hosts: 1"

    def test_empty(self, listings_df):
        fig = host_concentration_figure(host_concentration(listings_df.iloc[0:0]))
        assert len(fig.data) == 0
        assert "more than one listing" in _annotation(fig)


def test_empty_figure_hides_axes():
    fig = empty_figure("nothing")
    assert fig.layout.xaxis.visible is False
    assert _annotation(fig) == "nothing"
