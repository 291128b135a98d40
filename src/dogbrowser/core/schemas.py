"""Typed schemas for the remote JSON responses.

Each remote endpoint is described by a small Pydantic model so that the
gateway can validate a payload once and then read it through attributes
instead of probing nested dictionaries.  Optional fields are declared as
such; a payload that does not fit its schema raises
:class:`pydantic.ValidationError`, which the gateway reports as a malformed
response.

Models
------
BreedListResponse
    ``GET /breeds/list/all`` — mapping of breed to sub-breed names.
BreedImagesResponse
    ``GET /breed/{breed}/images/random/{count}`` — list of image URLs.
Phonetic / LexiconEntry
    ``GET /entries/en/{word}`` — array of dictionary entries.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BreedListResponse(BaseModel):
    """Body of the breed listing endpoint.

    Attributes:
        message: Mapping from breed name to its (possibly empty) sub-breeds,
            in the order the service returns them.
        status: Status string reported by the service (``"success"``).
    """

    model_config = ConfigDict(extra="ignore")

    message: dict[str, list[str]]
    status: str | None = None


class BreedImagesResponse(BaseModel):
    """Body of the random breed images endpoint.

    Attributes:
        message: Image URLs in source order.
        status: Status string reported by the service.
    """

    model_config = ConfigDict(extra="ignore")

    message: list[str]
    status: str | None = None


class Phonetic(BaseModel):
    """A single phonetic variant of a dictionary entry."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = None
    audio: str | None = None


class LexiconEntry(BaseModel):
    """A dictionary entry; only the phonetic variants are of interest."""

    model_config = ConfigDict(extra="ignore")

    word: str | None = None
    phonetics: list[Phonetic] = Field(default_factory=list)


# The dictionary service answers with a bare JSON array, not an object.
LexiconResponse = TypeAdapter(list[LexiconEntry])
