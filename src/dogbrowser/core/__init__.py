"""Core functionality for the Dog Breed Browser.

This package holds everything that does not depend on a user interface:

- **DogBrowserConfig / config**: Configuration using Pydantic Settings
  (``DOGBROWSER_`` environment variables)
- **RemoteGateway**: Async client for the breed image and dictionary services
- **FavoritesStore**: Ordered favourites list persisted through a key-value store
- **JsonFileKeyValueStore / MemoryKeyValueStore**: Whole-value key-value stores

Usage Example
-------------
    from dogbrowser.core import FavoritesStore, JsonFileKeyValueStore, RemoteGateway, config

    favorites = FavoritesStore(JsonFileKeyValueStore(config.favorites_path))
    favorites.load()

    async with RemoteGateway.from_config(config) as gateway:
        images = await gateway.fetch_breed_images("akita")
"""

from dogbrowser.core.config import DogBrowserConfig, config
from dogbrowser.core.favorites import FavoritesStore
from dogbrowser.core.gateway import (
    GatewayError,
    GatewayErrorKind,
    RemoteGateway,
    first_audio_url,
    flatten_breeds,
)
from dogbrowser.core.kv_store import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore

__all__ = [
    "DogBrowserConfig",
    "config",
    "FavoritesStore",
    "GatewayError",
    "GatewayErrorKind",
    "RemoteGateway",
    "first_audio_url",
    "flatten_breeds",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
]
