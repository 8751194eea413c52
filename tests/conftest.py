from datetime import date

import pytest

from fleet_db.preferences import PreferenceStore
from fleet_db.seed import build_seed_store

TODAY = date(2024, 1, 10)


@pytest.fixture
def store():
    """Fresh seeded store with dates anchored to TODAY."""
    return build_seed_store(today=TODAY)


@pytest.fixture
def prefs(tmp_path):
    return PreferenceStore(tmp_path / "prefs.json")
