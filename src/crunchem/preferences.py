# -----------------------------------------------------------------------------
# Preferences store
# Purpose:
#   Explicit container for the per-user UI state: favorite calculator ids,
#   dark mode and sidebar collapse. Loaded once at startup from a JSON
#   key-value file and written back on every change (last write wins).
#   The selected category is session-only and never persisted.
# -----------------------------------------------------------------------------

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .catalog import ALL_CATEGORIES

logger = logging.getLogger(__name__)

PREFERENCES_PATH = os.getenv("PREFERENCES_PATH", ".crunchem/preferences.json")

# Storage keys (each value is a JSON primitive or array of strings)
FAVORITES_KEY = "numera-favorites"
DARK_MODE_KEY = "numera-dark-mode"
SIDEBAR_KEY = "numera-sidebar-collapsed"


class Preferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    favorites: List[str] = Field(default_factory=list, alias=FAVORITES_KEY)
    dark_mode: bool = Field(default=False, alias=DARK_MODE_KEY)
    sidebar_collapsed: bool = Field(default=False, alias=SIDEBAR_KEY)


class PreferenceStore:
    def __init__(self, path: str | os.PathLike | None = None):
        self.path = Path(path or PREFERENCES_PATH)
        self.state = Preferences()
        self.selected_category = ALL_CATEGORIES

    @classmethod
    def load(cls, path: str | os.PathLike | None = None) -> "PreferenceStore":
        store = cls(path)
        store.reload()
        return store

    def reload(self) -> None:
        """Read the file; a missing or unreadable file leaves the defaults in place."""
        if not self.path.exists():
            self.state = Preferences()
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            self.state = Preferences.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Ignoring unreadable preferences at %s: %s", self.path, e)
            self.state = Preferences()

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = self.state.model_dump(by_alias=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.debug("Saved preferences to %s", self.path)

    # ---- favorites ----------------------------------------------------------
    def favorites(self) -> List[str]:
        return list(self.state.favorites)

    def is_favorite(self, calculator_id: str) -> bool:
        return calculator_id in self.state.favorites

    def toggle_favorite(self, calculator_id: str) -> bool:
        """Add or remove an id; returns True if it is a favorite afterwards."""
        favs = list(self.state.favorites)
        if calculator_id in favs:
            favs.remove(calculator_id)
        else:
            favs.append(calculator_id)
        self.state = self.state.model_copy(update={"favorites": favs})
        self.save()
        return calculator_id in favs

    # ---- flags --------------------------------------------------------------
    def set_dark_mode(self, enabled: bool) -> None:
        self.state = self.state.model_copy(update={"dark_mode": bool(enabled)})
        self.save()

    def toggle_dark_mode(self) -> bool:
        self.set_dark_mode(not self.state.dark_mode)
        return self.state.dark_mode

    def set_sidebar_collapsed(self, collapsed: bool) -> None:
        self.state = self.state.model_copy(update={"sidebar_collapsed": bool(collapsed)})
        self.save()

    def toggle_sidebar(self) -> bool:
        self.set_sidebar_collapsed(not self.state.sidebar_collapsed)
        return self.state.sidebar_collapsed
