"""Pydantic request and response models for the Dog Breed Browser API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
BreedsResponse
    ``GET /api/breeds`` — flattened breed identifiers.
BreedImagesResponse
    ``GET /api/breeds/{breed}/images`` — image URLs for one breed.
PronunciationResponse
    ``GET /api/pronunciation/{word}`` — audio URL or null.
FavoritesResponse
    ``GET /api/favorites`` — the favourites list.
FavoriteToggleRequest / FavoriteToggleResponse
    ``POST /api/favorites/toggle`` — toggle one image.
HealthResponse
    ``GET /api/health`` — liveness probe.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BreedsResponse(BaseModel):
    """Response body for ``GET /api/breeds``.

    Attributes:
        breeds: Breed identifiers (``"breed"`` or ``"breed/sub"``) in source
            order.  Empty if the breed service could not be reached.
    """

    breeds: list[str] = Field(default_factory=list)


class BreedImagesResponse(BaseModel):
    """Response body for ``GET /api/breeds/{breed}/images``.

    Attributes:
        breed: The requested breed identifier.
        images: Image URLs, at most the requested count.
    """

    breed: str
    images: list[str] = Field(default_factory=list)


class PronunciationResponse(BaseModel):
    """Response body for ``GET /api/pronunciation/{word}``.

    Attributes:
        word: The word that was looked up.
        audio_url: URL of the first pronunciation clip, or null.
    """

    word: str
    audio_url: str | None = None


class FavoritesResponse(BaseModel):
    """Response body for ``GET /api/favorites``."""

    favorites: list[str] = Field(default_factory=list)


class FavoriteToggleRequest(BaseModel):
    """Request body for ``POST /api/favorites/toggle``.

    Attributes:
        image_url: URL of the image to add or remove.
    """

    image_url: str = Field(
        ...,
        min_length=1,
        description="URL of the image to add to or remove from favourites.",
    )


class FavoriteToggleResponse(BaseModel):
    """Response body for ``POST /api/favorites/toggle``.

    Attributes:
        image_url: The toggled image URL.
        is_favorite: True if the image is now a favourite.
        favorites: The full favourites list after the toggle.
    """

    image_url: str
    is_favorite: bool
    favorites: list[str]


class HealthResponse(BaseModel):
    """Response body for ``GET /api/health``."""

    status: str = "ok"
    version: str
