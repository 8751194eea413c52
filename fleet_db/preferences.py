# fleet_db/preferences.py
"""
Local key-value store for the two persisted preferences:

- theme          ("dark" | "light")
- adminPassword  (plain string)

Values are kept as strings in a small JSON file next to the app, the same
role the browser's local storage plays for a client-only dashboard.
No rental data is ever written here.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional
import json
import logging

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
ADMIN_PASSWORD_KEY = "adminPassword"


class PreferenceStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._values: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values = {**self._values, key: str(value)}
        self.path.write_text(json.dumps(self._values, indent=2), encoding="utf-8")
