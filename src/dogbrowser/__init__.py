"""Dog Breed Browser - browse dog breeds, hear their names, keep favourite images."""

__version__ = "0.1.0"

from dogbrowser.core.config import DogBrowserConfig, config
from dogbrowser.core.favorites import FavoritesStore
from dogbrowser.core.gateway import RemoteGateway

__all__ = [
    "DogBrowserConfig",
    "config",
    "FavoritesStore",
    "RemoteGateway",
]
