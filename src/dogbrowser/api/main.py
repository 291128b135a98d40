"""Dog Breed Browser — FastAPI Application.

This module builds the web application: a small JSON API over the remote
gateway and favourites store, with the Gradio UI mounted at ``/``.  It also
provides the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
- **Configuration** comes from :data:`~dogbrowser.core.config.config`
  (``DOGBROWSER_*`` environment variables / ``.env``).
- **Remote data** is fetched through a single
  :class:`~dogbrowser.core.gateway.RemoteGateway` whose HTTP client is closed
  when the application shuts down.
- **Favourites** are persisted in a JSON key-value file
  (``{data_dir}/favorites.json``) and loaded once at startup.
- **The UI** is a Gradio Blocks app sharing the same controller.

Endpoints
---------
========  =================================  ====================================
Method    Path                               Purpose
========  =================================  ====================================
GET       ``/api/health``                    Liveness probe and version
GET       ``/api/breeds``                    Flattened breed list
GET       ``/api/breeds/{breed}/images``     Random images for one breed
GET       ``/api/pronunciation/{word}``      Pronunciation audio URL
GET       ``/api/favorites``                 Favourites list
POST      ``/api/favorites/toggle``          Add or remove one favourite
GET       ``/``                              Gradio UI
========  =================================  ====================================

Usage
-----
CLI (installed entry point)::

    dogbrowser

Direct invocation::

    python -m dogbrowser.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import gradio as gr
from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from dogbrowser import __version__
from dogbrowser.api.models import (
    BreedImagesResponse,
    BreedsResponse,
    FavoritesResponse,
    FavoriteToggleRequest,
    FavoriteToggleResponse,
    HealthResponse,
    PronunciationResponse,
)
from dogbrowser.core.config import DogBrowserConfig, config
from dogbrowser.core.favorites import FavoritesStore
from dogbrowser.core.gateway import RemoteGateway
from dogbrowser.core.kv_store import JsonFileKeyValueStore, KeyValueStore
from dogbrowser.ui.app import create_ui
from dogbrowser.ui.controller import DogBrowserController

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return a liveness status and the application version."""
    return HealthResponse(version=__version__)


@router.get("/breeds", response_model=BreedsResponse)
async def list_breeds(request: Request) -> BreedsResponse:
    """Return every breed as a flat list of breed identifiers.

    Sub-breeds are listed as ``"breed/sub"``.  If the breed service is
    unavailable the list is empty; the gateway has already logged why.
    """
    gateway: RemoteGateway = request.app.state.gateway
    return BreedsResponse(breeds=await gateway.fetch_all_breeds())


@router.get("/breeds/{breed:path}/images", response_model=BreedImagesResponse)
async def breed_images(
    request: Request,
    breed: str,
    count: int | None = Query(default=None, ge=1, le=50),
) -> BreedImagesResponse:
    """Return random images for a breed.

    Args:
        breed: Breed identifier; sub-breeds use ``breed/sub``.
        count: Number of images (1–50).  Defaults to the configured
            ``default_image_count``.

    Returns:
        The breed and up to ``count`` image URLs (empty on failure).
    """
    controller: DogBrowserController = request.app.state.controller
    images = await controller.gateway.fetch_breed_images(breed, count or controller.image_count)
    return BreedImagesResponse(breed=breed, images=images)


@router.get("/pronunciation/{word}", response_model=PronunciationResponse)
async def pronunciation(request: Request, word: str) -> PronunciationResponse:
    """Return the first pronunciation audio URL for ``word``, or null."""
    gateway: RemoteGateway = request.app.state.gateway
    return PronunciationResponse(word=word, audio_url=await gateway.fetch_pronunciation(word))


@router.get("/favorites", response_model=FavoritesResponse)
async def list_favorites(request: Request) -> FavoritesResponse:
    """Return the favourites list in insertion order."""
    favorites: FavoritesStore = request.app.state.favorites
    return FavoritesResponse(favorites=favorites.all())


@router.post("/favorites/toggle", response_model=FavoriteToggleResponse)
async def toggle_favorite(request: Request, req: FavoriteToggleRequest) -> FavoriteToggleResponse:
    """Add an image to favourites, or remove it if it is already there.

    The whole list is persisted before the response is returned.
    """
    favorites: FavoritesStore = request.app.state.favorites
    is_favorite = favorites.toggle(req.image_url)
    return FavoriteToggleResponse(
        image_url=req.image_url,
        is_favorite=is_favorite,
        favorites=favorites.all(),
    )


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


def create_app(
    cfg: DogBrowserConfig | None = None,
    *,
    gateway: RemoteGateway | None = None,
    store: KeyValueStore | None = None,
    mount_ui: bool = True,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        cfg: Configuration (defaults to the global ``config``)
        gateway: Remote gateway (built from ``cfg`` if omitted)
        store: Key-value store for favourites (JSON file at
            ``cfg.favorites_path`` if omitted)
        mount_ui: Whether to mount the Gradio UI at ``/``

    Returns:
        The configured FastAPI app
    """
    cfg = cfg or config
    gateway = gateway or RemoteGateway.from_config(cfg)
    if store is None:
        store = JsonFileKeyValueStore(cfg.favorites_path)
    favorites = FavoritesStore(store, cfg.favorites_key)
    favorites.load()
    controller = DogBrowserController.from_config(cfg, gateway, favorites)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Close the gateway's HTTP client on shutdown."""
        logger.info("Dog Breed Browser started.")

        yield  # Application runs here.

        await gateway.aclose()
        logger.info("Gateway closed on shutdown.")

    app = FastAPI(
        title="Dog Breed Browser",
        description="Browse dog breeds, hear their names, and keep favourite images.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.gateway = gateway
    app.state.favorites = favorites
    app.state.controller = controller

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    if mount_ui:
        app = gr.mount_gradio_app(app, create_ui(controller), path="/")

    return app


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port, and log level from
    :data:`~dogbrowser.core.config.config` (``DOGBROWSER_SERVER_HOST``,
    ``DOGBROWSER_SERVER_PORT``, ``DOGBROWSER_LOG_LEVEL``).  Defaults to
    ``0.0.0.0:7860``.

    This function is registered as the ``dogbrowser`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "dogbrowser.api.main:create_app",
        factory=True,
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
