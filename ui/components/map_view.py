import folium
import pandas as pd
from streamlit_folium import st_folium

from config import SETTINGS, THEME, Settings, Theme
from ui.state import ActiveView, SelectionState
from utils.geo import Bounds, extent_center


def _legend_html(theme: Theme) -> str:
    rows = "".join(
        f'<div><span style="display:inline-block;width:10px;height:10px;'
        f'border-radius:50%;background:{color};margin-right:6px;"></span>{room}</div>'
        for room, color in theme.ROOM_COLORS.items()
    )
    return (
        '<div style="position:fixed;bottom:24px;left:24px;z-index:9999;width:12em;'
        f'background:white;padding:6px 10px;border-radius:4px;font-family:{theme.FONT_FAMILY};'
        f'font-size:12px;box-shadow:0 0 4px rgba(0,0,0,.3);"><b>Room Type</b>{rows}</div>'
    )


def _add_listing_markers(m: folium.Map, listings: pd.DataFrame, theme: Theme, radius: int) -> None:
    for row in listings.itertuples(index=False):
        folium.CircleMarker(
            location=[row.latitude, row.longitude],
            radius=radius,
            stroke=False,
            fill=True,
            fill_color=theme.room_color(row.room_type),
            fill_opacity=0.5,
            tooltip=f"{row.room_type} | ${row.price:,.0f}",
        ).add_to(m)


def build_listing_map(
    listings: pd.DataFrame = None,
    extent=None,
    center=None,
    zoom=None,
    theme: Theme = THEME,
    settings: Settings = SETTINGS,
) -> folium.Map:
    """
    Base map with the room type legend.
    Markers are drawn for `listings` when given. The viewport is fitted to
    `extent` unless an explicit `center`/`zoom` is requested.
    """
    if center is None:
        center = extent_center(extent, default=theme.MAP_CENTER)
    m = folium.Map(location=list(center), zoom_start=zoom or 2, tiles=theme.TILES)

    if listings is not None and not listings.empty:
        _add_listing_markers(m, listings, theme, settings.MARKER_RADIUS)

    if extent and zoom is None:
        m.fit_bounds([[extent["lat"][0], extent["lng"][0]], [extent["lat"][1], extent["lng"][1]]])

    m.get_root().html.add_child(folium.Element(_legend_html(theme)))
    return m


def render_map(state: SelectionState, svc, theme: Theme = THEME, settings: Settings = SETTINGS):
    """Draws the map and returns the viewport Bounds reported by the browser, if any."""
    extent = svc.map_extent(state)
    listings = svc.scope_listings(state) if state.view is ActiveView.CITY_AND_AREA else None

    center, zoom = None, None
    if state.zoom_reset:
        center = state.reset_center or extent_center(extent, default=theme.MAP_CENTER)
        zoom = settings.RESET_ZOOM

    m = build_listing_map(listings, extent, center=center, zoom=zoom, theme=theme, settings=settings)
    out = st_folium(
        m,
        key=f"map-{state.city}-{state.area}-{state.zoom_reset}",
        height=settings.MAP_HEIGHT,
        use_container_width=True,
        returned_objects=["bounds"],
    )
    return Bounds.from_leaflet((out or {}).get("bounds"))
