# app.py
# Point d'entrée Streamlit

import logging

import streamlit as st

from config import SETTINGS, THEME
from core.listings import DatasetError, load_cities
from services.dashboard_service import DashboardService
from ui.main_interface import render_main_interface

logging.basicConfig(
    level=getattr(logging, SETTINGS.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("airbnb_market")

st.set_page_config(page_title="Airbnb Market Explorer", layout="wide")

st.markdown(
    f"""
    <style>
    body {{ overflow: auto; }}
    .leaflet-control.legend {{ font-family: {THEME.FONT_FAMILY}; width: 12em; margin-right: 20px; }}
    </style>
    """,
    unsafe_allow_html=True,
)


@st.cache_resource(show_spinner="Loading listings…")
def get_service(data_dir: str) -> DashboardService:
    # chargé une fois par process, partagé en lecture seule entre les sessions
    return DashboardService(load_cities(data_dir), SETTINGS)


try:
    svc = get_service(SETTINGS.DATA_DIR)
except DatasetError as e:
    logger.exception("Cannot load listing data from %s", SETTINGS.DATA_DIR)
    st.error(f"Cannot start: {e}")
    st.stop()

render_main_interface(svc, SETTINGS, THEME)
