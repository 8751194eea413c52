# fleet_db/database.py

import streamlit as st

from fleet_db.preferences import PreferenceStore
from fleet_db.seed import build_seed_store
from fleet_db.store import RentalStore


def get_rental_store() -> RentalStore:
    """
    Returns the session's rental store.
    Seeded on first access; lives only as long as the Streamlit session,
    so a restart resets all rental data to the seed set.
    """

    if "rental_store" not in st.session_state:
        st.session_state.rental_store = build_seed_store()

    return st.session_state.rental_store


def get_preference_store(path: str) -> PreferenceStore:
    """Returns a cached preference store backed by the local file at `path`."""

    if "preference_store" not in st.session_state:
        st.session_state.preference_store = PreferenceStore(path)

    return st.session_state.preference_store
