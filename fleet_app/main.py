from __future__ import annotations

import sys
import os
import logging

# --- Add project root to sys.path ---
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

import streamlit as st

# IMPORTS
from fleet_app.config import load_config
from fleet_app.ai_assistant import configure_gemini
from fleet_app.auth import is_dark_mode, set_dark_mode
from fleet_app.admin_dashboard import ADMIN_PAGES, render_admin_dashboard
from fleet_app.customer_portal import render_customer_portal
from fleet_db.database import get_preference_store, get_rental_store

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _init_app_state():
    if "is_admin" not in st.session_state:
        # ?mode=admin opens the dashboard directly
        st.session_state.is_admin = st.query_params.get("mode") == "admin"


# --- CSS STYLING ---
def inject_theme_css(dark: bool):
    if not dark:
        return
    st.markdown("""
    <style>
        .stApp { background-color: #020617; color: #f1f5f9; }
        header {visibility: hidden;}
        footer {visibility: hidden;}
    </style>
    """, unsafe_allow_html=True)


def main():
    st.set_page_config(
        page_title="KwasaShuttle Rentals",
        page_icon="🚐",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    cfg = load_config()
    configure_gemini(cfg.gemini.api_key)
    _init_app_state()

    store = get_rental_store()
    prefs = get_preference_store(cfg.preferences.path)

    # --- SIDEBAR NAVIGATION ---
    with st.sidebar:
        st.title("KwasaShuttle")
        dark = st.toggle("Dark mode", value=is_dark_mode(prefs))
        if dark != is_dark_mode(prefs):
            set_dark_mode(prefs, dark)

        if st.session_state.is_admin:
            page = st.radio("Go to", [*ADMIN_PAGES, "Public Site"])
            st.divider()
            if st.button("Log out"):
                st.session_state.is_admin = False
                st.rerun()
        else:
            page = "Public Site"

    inject_theme_css(is_dark_mode(prefs))

    if page == "Public Site":
        render_customer_portal(cfg, store, prefs)
    else:
        render_admin_dashboard(store, prefs, page)


if __name__ == "__main__":
    main()
