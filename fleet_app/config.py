from __future__ import annotations

from dataclasses import dataclass
import streamlit as st

from fleet_app.auth import ADMIN_EMAIL


# ---------------------- DATA CLASSES ----------------------

@dataclass
class GeminiConfig:
    api_key: str


@dataclass
class AdminConfig:
    login_email: str


@dataclass
class PreferencesConfig:
    path: str


@dataclass
class AppConfig:
    gemini: GeminiConfig
    admin: AdminConfig
    preferences: PreferencesConfig


DEFAULT_PREFERENCES_PATH = ".kwasa_preferences.json"


# ---------------------- LOADING ----------------------

def load_config() -> AppConfig:
    secrets = st.secrets

    # --- Gemini (Google) ---
    # Checks for [google] section first, then falls back to [gemini]
    if "google" in secrets:
        api_key = secrets["google"]["api_key"]
    elif "gemini" in secrets:
        api_key = secrets["gemini"]["api_key"]
    else:
        api_key = secrets.get("google_api_key", "")

    gemini_cfg = GeminiConfig(api_key=api_key)

    # --- Admin login ---
    admin_section = secrets.get("admin", {})
    admin_cfg = AdminConfig(login_email=admin_section.get("email", ADMIN_EMAIL))

    # --- Local preferences file (theme, admin password) ---
    prefs_section = secrets.get("preferences", {})
    prefs_cfg = PreferencesConfig(path=prefs_section.get("path", DEFAULT_PREFERENCES_PATH))

    return AppConfig(
        gemini=gemini_cfg,
        admin=admin_cfg,
        preferences=prefs_cfg,
    )
