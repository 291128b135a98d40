"""Remote data gateway for the breed image and dictionary services.

Every outbound HTTP request made by the application goes through
:class:`RemoteGateway`.  The gateway normalizes each JSON response into a
flat, display-ready shape and never lets a remote failure reach the caller:
all four error kinds are logged here and converted into an empty list or
``None``.

Error kinds
-----------
- ``TRANSPORT``: connection refused, DNS failure, timeout, ...
- ``HTTP_STATUS``: any non-success response other than 404
- ``MALFORMED``: body is not JSON or does not match the expected schema
- ``NOT_FOUND``: 404; an unknown dictionary word is a normal empty result

Usage Example
-------------
    async with RemoteGateway.from_config(config) as gateway:
        breeds = await gateway.fetch_all_breeds()
        images = await gateway.fetch_breed_images("bulldog/boston", count=9)
        audio = await gateway.fetch_pronunciation("bulldog")
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .config import DogBrowserConfig
from .schemas import BreedImagesResponse, BreedListResponse, LexiconEntry, LexiconResponse

logger = logging.getLogger(__name__)


class GatewayErrorKind(str, Enum):
    """Classification of remote call failures."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"
    NOT_FOUND = "not_found"


class GatewayError(Exception):
    """Raised inside the gateway for a failed remote call.

    Never escapes the public ``fetch_*`` methods.
    """

    def __init__(self, kind: GatewayErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


def flatten_breeds(mapping: dict[str, list[str]]) -> list[str]:
    """Flatten a breed -> sub-breeds mapping into breed identifiers.

    A breed without sub-breeds yields its own name; a breed with sub-breeds
    yields one ``"breed/sub"`` identifier per sub-breed, in source order.

    >>> flatten_breeds({"akita": [], "bulldog": ["boston", "french"]})
    ['akita', 'bulldog/boston', 'bulldog/french']
    """
    breeds: list[str] = []
    for breed, sub_breeds in mapping.items():
        if not sub_breeds:
            breeds.append(breed)
        else:
            breeds.extend(f"{breed}/{sub_breed}" for sub_breed in sub_breeds)
    return breeds


def first_audio_url(entries: list[LexiconEntry]) -> str | None:
    """Return the first audio URL among the first entry's phonetic variants."""
    if not entries:
        return None
    for phonetic in entries[0].phonetics:
        if phonetic.audio:
            return phonetic.audio
    return None


class RemoteGateway:
    """Async client for the breed image and dictionary services.

    The gateway owns an ``httpx.AsyncClient`` unless one is injected, in
    which case the caller is responsible for closing it.

    Args:
        dog_api_root: Root URL of the breed listing / image service
        dictionary_api_root: Root URL of the dictionary service
        client: Optional pre-built client (tests pass one with a MockTransport)
        timeout: Request timeout in seconds, None for no timeout
    """

    def __init__(
        self,
        dog_api_root: str = "https://dog.ceo/api",
        dictionary_api_root: str = "https://api.dictionaryapi.dev/api/v2/entries/en",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self.dog_api_root = dog_api_root.rstrip("/")
        self.dictionary_api_root = dictionary_api_root.rstrip("/")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(
        cls, cfg: DogBrowserConfig, client: httpx.AsyncClient | None = None
    ) -> RemoteGateway:
        """Build a gateway from application configuration."""
        return cls(
            cfg.dog_api_root,
            cfg.dictionary_api_root,
            client=client,
            timeout=cfg.request_timeout,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if the gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RemoteGateway:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _get_json(self, url: str) -> Any:
        """GET ``url`` and decode the JSON body.

        Raises:
            GatewayError: For transport failures, 404s, other non-success
                statuses, and undecodable bodies.
        """
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise GatewayError(GatewayErrorKind.TRANSPORT, f"GET {url} failed: {e}") from e

        if response.status_code == 404:
            raise GatewayError(GatewayErrorKind.NOT_FOUND, f"GET {url} returned 404")
        if not response.is_success:
            raise GatewayError(
                GatewayErrorKind.HTTP_STATUS,
                f"GET {url} returned {response.status_code}",
            )

        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(GatewayErrorKind.MALFORMED, f"GET {url} returned bad JSON") from e

    async def fetch_all_breeds(self) -> list[str]:
        """Fetch every breed as a flat, ordered list of breed identifiers.

        Returns:
            Breed identifiers (``"breed"`` or ``"breed/sub"``), or an empty
            list if the request fails for any reason.
        """
        url = f"{self.dog_api_root}/breeds/list/all"
        try:
            payload = BreedListResponse.model_validate(await self._get_json(url))
        except GatewayError as e:
            logger.error(f"Failed to fetch breeds ({e.kind.value}): {e}")
            return []
        except ValidationError as e:
            logger.error(f"Failed to fetch breeds ({GatewayErrorKind.MALFORMED.value}): {e}")
            return []

        breeds = flatten_breeds(payload.message)
        logger.info(f"Fetched {len(breeds)} breeds")
        return breeds

    async def fetch_breed_images(self, breed: str, count: int = 9) -> list[str]:
        """Fetch up to ``count`` random image URLs for a breed.

        Args:
            breed: Breed identifier, e.g. ``"akita"`` or ``"bulldog/boston"``
            count: Number of images to request (must be positive)

        Returns:
            Image URLs in source order, or an empty list on failure.
        """
        if count < 1:
            logger.error(f"Refusing to fetch {count} images for {breed}: count must be positive")
            return []

        url = f"{self.dog_api_root}/breed/{quote(breed, safe='/')}/images/random/{count}"
        try:
            payload = BreedImagesResponse.model_validate(await self._get_json(url))
        except GatewayError as e:
            logger.error(f"Failed to fetch images for {breed} ({e.kind.value}): {e}")
            return []
        except ValidationError as e:
            logger.error(
                f"Failed to fetch images for {breed} ({GatewayErrorKind.MALFORMED.value}): {e}"
            )
            return []

        return payload.message[:count]

    async def fetch_pronunciation(self, word: str) -> str | None:
        """Resolve an audio clip URL pronouncing ``word``.

        Scans the first dictionary entry's phonetic variants in order and
        returns the first one carrying an audio URL.

        Args:
            word: A single bare word (sub-breed suffix already removed)

        Returns:
            The audio URL, or None if the word is unknown, has no phonetics,
            no variant has audio, or the request fails.
        """
        url = f"{self.dictionary_api_root}/{quote(word, safe='')}"
        try:
            entries = LexiconResponse.validate_python(await self._get_json(url))
        except GatewayError as e:
            if e.kind is GatewayErrorKind.NOT_FOUND:
                logger.info(f"No dictionary entry for {word!r}")
            else:
                logger.error(f"Failed to fetch pronunciation for {word} ({e.kind.value}): {e}")
            return None
        except ValidationError as e:
            logger.error(
                f"Failed to fetch pronunciation for {word} "
                f"({GatewayErrorKind.MALFORMED.value}): {e}"
            )
            return None

        audio_url = first_audio_url(entries)
        if audio_url is None:
            logger.info(f"Dictionary entry for {word!r} has no audio")
        return audio_url
