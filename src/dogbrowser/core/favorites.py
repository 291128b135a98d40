"""Persistent, ordered list of favourite dog images."""

import json
import logging
import threading

from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_FAVORITES_KEY = "dogFavorites"


class FavoritesStore:
    """Manage the favourites list on top of a key-value store.

    The list is kept in memory in insertion order and contains no
    duplicates.  Every mutation re-serializes the whole list as a JSON array
    and overwrites the value at ``key``.

    Args:
        store: Key-value store holding the JSON-encoded list
        key: Key under which the list is stored
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_FAVORITES_KEY):
        self.store = store
        self.key = key
        self._favorites: list[str] = []
        self._lock = threading.Lock()

    def load(self) -> list[str]:
        """Read the persisted list into memory.

        An absent or unparseable value yields an empty list.

        Returns:
            Copy of the loaded favourites list
        """
        raw = self.store.get(self.key)
        favorites: list[str] = []

        if raw is not None:
            try:
                parsed = json.loads(raw)
            except ValueError:
                logger.warning(f"Stored favorites at {self.key!r} are not valid JSON")
                parsed = []

            if isinstance(parsed, list) and all(isinstance(item, str) for item in parsed):
                # dict.fromkeys keeps first occurrence order
                favorites = list(dict.fromkeys(parsed))
            else:
                logger.warning(f"Stored favorites at {self.key!r} are not a list of URLs")

        with self._lock:
            self._favorites = favorites

        logger.info(f"Loaded {len(favorites)} favorites")
        return list(favorites)

    def toggle(self, image_ref: str) -> bool:
        """Add ``image_ref`` if absent, remove it if present, then persist.

        Args:
            image_ref: Image URL

        Returns:
            True if the image is now a favourite, False if it was removed
        """
        with self._lock:
            if image_ref in self._favorites:
                self._favorites.remove(image_ref)
                is_favorite = False
            else:
                self._favorites.append(image_ref)
                is_favorite = True

            self.store.set(self.key, json.dumps(self._favorites))

        if is_favorite:
            logger.info(f"Added to favorites: {image_ref}")
        else:
            logger.info(f"Removed from favorites: {image_ref}")
        return is_favorite

    def all(self) -> list[str]:
        """Return a copy of the current favourites list."""
        with self._lock:
            return list(self._favorites)

    def is_favorite(self, image_ref: str) -> bool:
        """Check whether an image is in the favourites list."""
        with self._lock:
            return image_ref in self._favorites

    def __contains__(self, image_ref: str) -> bool:
        return self.is_favorite(image_ref)

    def __len__(self) -> int:
        with self._lock:
            return len(self._favorites)
