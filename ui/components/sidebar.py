from typing import Callable, MutableMapping, Optional

import pandas as pd
import streamlit as st
from st_aggrid import AgGrid, GridOptionsBuilder

from ui.state import ActiveView, SelectionState

CITY_KEY = "city_select"
AREA_KEY = "area_select"


def city_changed(state: SelectionState, session: MutableMapping, on_change: Optional[Callable[[], None]] = None) -> bool:
    """Selectbox callback: applies the picked city and empties the area widget."""
    if not state.select_city(session.get(CITY_KEY)):
        return False
    session[AREA_KEY] = ""
    if on_change:
        on_change()
    return True


def area_changed(state: SelectionState, session: MutableMapping, on_change: Optional[Callable[[], None]] = None) -> bool:
    if not state.select_area(session.get(AREA_KEY)):
        return False
    if on_change:
        on_change()
    return True


def render_selectors(state: SelectionState, svc, on_change: Optional[Callable[[], None]] = None):
    st.sidebar.header("🏙️ Airbnb Market")

    cities = [""] + svc.city_options()
    if st.session_state.get(CITY_KEY) not in cities:
        st.session_state[CITY_KEY] = state.city if state.city in cities else ""
    st.sidebar.selectbox(
        "Select A City",
        cities,
        key=CITY_KEY,
        on_change=city_changed,
        args=(state, st.session_state, on_change),
    )

    areas = [""] + svc.area_options(state.city)
    if st.session_state.get(AREA_KEY) not in areas:
        st.session_state[AREA_KEY] = ""
    st.sidebar.selectbox(
        "Filter By Area",
        areas,
        key=AREA_KEY,
        on_change=area_changed,
        args=(state, st.session_state, on_change),
        disabled=state.view is ActiveView.NO_CITY,
    )

    if st.sidebar.button("🔍 Reset zoom", disabled=state.view is ActiveView.NO_CITY):
        state.request_zoom_reset()


def render_summary(summary: Optional[pd.DataFrame]):
    st.sidebar.subheader("Listings in view")
    if summary is None:
        st.sidebar.caption("Select a city to see room types in view.")
        return
    if summary.empty:
        st.sidebar.caption("No listing in the current map view.")
        return

    gob = GridOptionsBuilder.from_dataframe(summary)
    gob.configure_default_column(editable=False, sortable=True, filter=False)
    with st.sidebar:
        AgGrid(
            summary,
            gridOptions=gob.build(),
            height=35 * (len(summary) + 1) + 10,
            fit_columns_on_grid_load=True,
            theme="balham",
            key="room_summary",
        )
