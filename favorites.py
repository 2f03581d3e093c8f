#!/usr/bin/env python3
"""
Favorites Store
===============
Keeps the user's favorite names in a small JSON file:

    {"favorites": ["Voltix", "Lumina"]}
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from settings import get_setting, resolve_path

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


class FavoritesStore:
    """
    File-backed list of favorite names.

    Usage:
        store = FavoritesStore()
        store.toggle("Voltix")   # True: added
        store.toggle("Voltix")   # False: removed
    """

    def __init__(self, path: Optional[str] = None):
        if path is None:
            path = get_setting("favorites.path")
        if not path:
            raise ValueError("favorites.path must be set in app.yaml")
        self.path = resolve_path(path)
        self._names: List[str] = []
        self._load()

    def _load(self):
        if not self.path.exists():
            self._names = []
            return
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable favorites file {self.path}: {e}")
            self._names = []
            return
        names = data.get(FAVORITES_KEY, []) if isinstance(data, dict) else []
        self._names = [n for n in names if isinstance(n, str)]

    def _save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({FAVORITES_KEY: self._names}, indent=2),
                             encoding='utf-8')

    def list(self) -> List[str]:
        return list(self._names)

    def is_favorite(self, name: str) -> bool:
        return name in self._names

    def add(self, name: str) -> bool:
        """Add a name; False if it was already a favorite."""
        if name in self._names:
            return False
        self._names.append(name)
        self._save()
        return True

    def remove(self, name: str) -> bool:
        """Remove a name; False if it was not a favorite."""
        if name not in self._names:
            return False
        self._names.remove(name)
        self._save()
        return True

    def toggle(self, name: str) -> bool:
        """Flip a name's favorite state. Returns True if it is now a favorite."""
        if self.remove(name):
            return False
        self.add(name)
        return True

    def __len__(self):
        return len(self._names)

    def __contains__(self, name):
        return self.is_favorite(name)
