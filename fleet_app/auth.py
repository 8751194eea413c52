"""Admin gate and theme preference.

A single shared password compared in plain text. It keeps casual visitors
out of the dashboard and nothing more.
"""
from __future__ import annotations

from typing import Tuple

from fleet_db.preferences import ADMIN_PASSWORD_KEY, THEME_KEY, PreferenceStore

ADMIN_EMAIL = "admin@kwasa.co.za"
DEFAULT_ADMIN_PASSWORD = "0000"
MIN_PASSWORD_LENGTH = 6


def get_admin_password(prefs: PreferenceStore) -> str:
    return prefs.get(ADMIN_PASSWORD_KEY) or DEFAULT_ADMIN_PASSWORD


def check_admin_login(prefs: PreferenceStore, email: str, password: str, admin_email: str = ADMIN_EMAIL) -> bool:
    return email.strip().lower() == admin_email.lower() and password == get_admin_password(prefs)


def change_admin_password(prefs: PreferenceStore, current: str, new: str, confirm: str) -> Tuple[bool, str]:
    if current != get_admin_password(prefs):
        return False, "Current password is incorrect."
    if new != confirm:
        return False, "New passwords do not match."
    if len(new) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters."

    prefs.set(ADMIN_PASSWORD_KEY, new)
    return True, "Password updated successfully!"


def reset_admin_password(prefs: PreferenceStore) -> str:
    prefs.set(ADMIN_PASSWORD_KEY, DEFAULT_ADMIN_PASSWORD)
    return DEFAULT_ADMIN_PASSWORD


def is_dark_mode(prefs: PreferenceStore) -> bool:
    return prefs.get(THEME_KEY) == "dark"


def set_dark_mode(prefs: PreferenceStore, enabled: bool) -> None:
    prefs.set(THEME_KEY, "dark" if enabled else "light")
