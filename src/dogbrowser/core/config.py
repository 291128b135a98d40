"""Configuration management for the Dog Breed Browser.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the DOGBROWSER_ prefix,
allowing the remote endpoints and storage location to be changed without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (DOGBROWSER_* prefix)
2. .env file in the project root
3. Default values defined in DogBrowserConfig

Example .env file:
    DOGBROWSER_DOG_API_ROOT=https://dog.ceo/api
    DOGBROWSER_DATA_DIR=data
    DOGBROWSER_DEFAULT_IMAGE_COUNT=12
    DOGBROWSER_REQUEST_TIMEOUT=10

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from dogbrowser.core.config import config

    print(config.dog_api_root)
    print(config.favorites_path)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DogBrowserConfig(BaseSettings):
    """Main configuration for the Dog Breed Browser.

    Attributes
    ----------
    Remote APIs:
        dog_api_root : str
            Root URL of the breed listing / image service
        dictionary_api_root : str
            Root URL of the dictionary lookup used for pronunciations
        request_timeout : float | None
            Timeout in seconds for remote calls (None waits indefinitely)

    Gallery Settings:
        default_image_count : int
            Number of images fetched when a breed is selected
        background_breed : str
            Breed identifier used for the idle background animation
        background_image_count : int
            Number of floating images in the background animation

    Storage:
        data_dir : Path
            Directory holding the key-value store file
        favorites_key : str
            Key under which the favourites list is persisted

    Server Settings:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Port for uvicorn (1024-65535)
        log_level : str
            Root logging level used by the CLI entry point

    Notes
    -----
    - data_dir is created automatically if it doesn't exist
    - To modify config, set environment variables and restart the application
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOGBROWSER_",
        case_sensitive=False,
    )

    # Remote APIs
    dog_api_root: str = Field(
        default="https://dog.ceo/api",
        description="Root URL of the breed listing and image service",
    )
    dictionary_api_root: str = Field(
        default="https://api.dictionaryapi.dev/api/v2/entries/en",
        description="Root URL of the dictionary service providing pronunciation audio",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Timeout for remote calls in seconds (None = no timeout)",
        gt=0,
    )

    # Gallery settings
    default_image_count: int = Field(
        default=9,
        description="Images fetched per breed selection",
        ge=1,
        le=50,
    )
    background_breed: str = Field(
        default="retriever/golden",
        description="Breed shown in the idle background animation",
    )
    background_image_count: int = Field(
        default=10,
        description="Number of floating images in the background animation",
        ge=1,
        le=50,
    )

    # Storage
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory for the key-value store file",
    )
    favorites_key: str = Field(
        default="dogFavorites",
        description="Key holding the JSON-encoded favourites list",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the application",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the data directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def favorites_path(self) -> Path:
        """Path to the JSON file backing the key-value store."""
        return self.data_dir / "favorites.json"


# Global configuration instance
# Loads values from environment variables (DOGBROWSER_* prefix) and .env file.
config = DogBrowserConfig()
