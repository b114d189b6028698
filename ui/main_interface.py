import logging
from typing import Optional, Tuple

import streamlit as st

from config import SETTINGS, THEME, Settings, Theme
from ui.components.charts import host_concentration_figure, price_density_figure
from ui.components.map_view import render_map
from ui.components.sidebar import render_selectors, render_summary
from ui.state import ActiveView, SelectionState
from utils.debounce import Debouncer
from utils.geo import Bounds

logger = logging.getLogger(__name__)

STATE_KEY = "selection"
DEBOUNCER_KEY = "bounds_debouncer"
CHART_CACHE_KEY = "chart_cache"


def get_session(settings: Settings = SETTINGS):
    """Per-session selection state and bounds debouncer, created on first use."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = SelectionState()
    if DEBOUNCER_KEY not in st.session_state:
        st.session_state[DEBOUNCER_KEY] = Debouncer(settings.bounds_debounce_seconds)
    return st.session_state[STATE_KEY], st.session_state[DEBOUNCER_KEY]


def _header(state: SelectionState) -> None:
    text = state.city or "Select A City To Get Started."
    st.markdown(f"<h4 style='text-align: center;'>Hello, {text}</h4>", unsafe_allow_html=True)


def record_map_bounds(state: SelectionState, debouncer: Debouncer, bounds: Optional[Bounds]) -> bool:
    """Keeps the viewport reported by the map and queues it for the charts."""
    if not state.set_bounds(bounds):
        return False
    debouncer.submit(bounds)
    return True


def settle_map_bounds(state: SelectionState, debouncer: Debouncer) -> bool:
    """Hands the queued viewport to the charts once the map has been still long enough."""
    if not debouncer.pending:
        return False
    settled = debouncer.poll()
    if settled is None or not state.settle_bounds(settled):
        return False
    logger.debug("Charts follow map bounds %s", settled)
    return True


def chart_cache_key(state: SelectionState) -> Tuple:
    # sans zone, les graphiques couvrent toute la ville quelle que soit la vue
    bounds = state.settled_bounds if state.view is ActiveView.CITY_AND_AREA else None
    return (state.city, state.area, bounds)


@st.fragment(run_every=SETTINGS.DEBOUNCE_POLL_SECONDS)
def _charts(svc, theme: Theme = THEME) -> None:
    state, debouncer = get_session()
    settle_map_bounds(state, debouncer)

    if state.view is ActiveView.NO_CITY:
        st.info("Pick a city in the sidebar to see price and host charts.")
        return

    cache_key = chart_cache_key(state)
    cached = st.session_state.get(CHART_CACHE_KEY)
    if cached is None or cached[0] != cache_key:
        with st.spinner("Rendering..."):
            price_fig = price_density_figure(svc.price_distribution(state), theme)
            host_fig = host_concentration_figure(svc.host_concentration(state), theme)
        cached = (cache_key, price_fig, host_fig)
        st.session_state[CHART_CACHE_KEY] = cached

    _, price_fig, host_fig = cached
    left, right = st.columns(2)
    with left:
        st.plotly_chart(price_fig, use_container_width=True, key="price_chart")
    with right:
        st.plotly_chart(host_fig, use_container_width=True, key="host_chart")


def render_main_interface(svc, settings: Settings = SETTINGS, theme: Theme = THEME) -> None:
    state, debouncer = get_session(settings)

    # ville/zone appliquées tout de suite ; seuls les mouvements de carte passent par l'anti-rebond
    render_selectors(state, svc, on_change=debouncer.cancel)

    record_map_bounds(state, debouncer, render_map(state, svc, theme, settings))

    render_summary(svc.room_summary(state))

    st.divider()
    _header(state)
    _charts(svc, theme)

    st.divider()
    st.markdown(f"[Source Code]({settings.SOURCE_URL})")
