# ui/components/charts.py
from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.figure_factory as ff
import plotly.graph_objects as go

from config import THEME, Theme


def _apply_theme(fig: go.Figure, theme: Theme, x_title: str, y_title: str) -> go.Figure:
    fig.update_layout(
        template="plotly_white",
        showlegend=False,
        margin=dict(l=40, r=10, t=20, b=40),
        font=dict(family=theme.FONT_FAMILY),
        height=380,
    )
    fig.update_xaxes(title_text=x_title, title_font=dict(color=theme.AXIS_COLOR))
    fig.update_yaxes(title_text=y_title, title_font=dict(color=theme.AXIS_COLOR))
    return fig


def empty_figure(message: str, theme: Theme = THEME) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, showarrow=False, xref="paper", yref="paper", x=0.5, y=0.5)
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(template="plotly_white", font=dict(family=theme.FONT_FAMILY), height=380)
    return fig


def price_density_figure(prices: Optional[pd.DataFrame], theme: Theme = THEME) -> go.Figure:
    """Kernel density of prices, one curve per room type."""
    if prices is None or prices.empty:
        return empty_figure("No listings in view", theme)

    hist_data, labels, colors = [], [], []
    for room_type, grp in prices.groupby("room_type", sort=True):
        values = grp["price"].astype(float)
        # une KDE demande au moins deux valeurs distinctes
        if values.nunique() < 2:
            continue
        hist_data.append(values.tolist())
        labels.append(str(room_type))
        colors.append(theme.room_color(room_type))

    if not hist_data:
        return empty_figure("Not enough listings for a density estimate", theme)

    fig = ff.create_distplot(
        hist_data,
        labels,
        colors=colors,
        curve_type="kde",
        show_hist=False,
        show_rug=False,
    )
    for trace in fig.data:
        trace.update(fill="tozeroy", opacity=0.6, hoverinfo="skip")
    return _apply_theme(fig, theme, "Price", "Kernel Density Estimation")


def host_concentration_figure(hosts: Optional[pd.DataFrame], theme: Theme = THEME) -> go.Figure:
    """Horizontal bars + points: how many hosts own n listings."""
    if hosts is None or hosts.empty:
        return empty_figure("No host owns more than one listing here", theme)

    text = [f"# Listings: {n}<br># Hosts: {c}" for n, c in zip(hosts["n"], hosts["host_count"])]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=hosts["host_count"],
        y=hosts["n"],
        orientation="h",
        width=0.1,
        marker_color=theme.HOST_BAR_COLOR,
        opacity=0.6,
        hoverinfo="skip",
    ))
    fig.add_trace(go.Scatter(
        x=hosts["host_count"],
        y=hosts["n"],
        mode="markers",
        marker=dict(size=9, color=theme.HOST_POINT_COLOR),
        text=text,
        hoverinfo="text",
    ))
    return _apply_theme(fig, theme, "# Hosts with y listings", "# Listings")
