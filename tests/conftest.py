"""Shared pytest fixtures for Dog Breed Browser tests."""

import re
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import httpx
import pytest

from dogbrowser.core.config import DogBrowserConfig
from dogbrowser.core.favorites import FavoritesStore
from dogbrowser.core.gateway import RemoteGateway
from dogbrowser.core.kv_store import MemoryKeyValueStore
from dogbrowser.ui.controller import DogBrowserController
from dogbrowser.ui.models import AppState

DOG_API_ROOT = "https://dog.ceo/api"
DICTIONARY_API_ROOT = "https://api.dictionaryapi.dev/api/v2/entries/en"


def image_urls(breed: str, count: int) -> list[str]:
    """Build image URLs laid out the way the image service lays them out."""
    folder = breed.replace("/", "-")
    return [f"https://images.dog.ceo/breeds/{folder}/n0210{i:04d}.jpg" for i in range(count)]


def lexicon_entry(word: str, *audio: str) -> dict:
    """Build one dictionary entry with a phonetic variant per audio value."""
    return {
        "word": word,
        "phonetics": [{"text": f"/{word}/", "audio": a} for a in audio],
        "meanings": [],
    }


class FakeDogServices:
    """In-process stand-in for the breed image and dictionary services.

    Used as the handler of an ``httpx.MockTransport``.  Responses can be
    overridden per path with :meth:`respond_with`, and every request is
    recorded in :attr:`requests`.
    """

    image_urls = staticmethod(image_urls)
    lexicon_entry = staticmethod(lexicon_entry)

    _IMAGES = re.compile(r"^/api/breed/(?P<breed>.+)/images/random/(?P<count>\d+)$")
    _ENTRY = re.compile(r"^/api/v2/entries/en/(?P<word>[^/]+)$")

    def __init__(self):
        self.breeds: dict[str, list[str]] = {
            "akita": [],
            "bulldog": ["boston", "english", "french"],
            "hound": ["afghan", "basset"],
            "retriever": ["golden"],
        }
        self.dictionary: dict[str, list[dict]] = {
            "akita": [lexicon_entry("akita", "https://audio.test/akita.mp3")],
            "bulldog": [lexicon_entry("bulldog", "", "https://audio.test/bulldog-us.mp3")],
            "hound": [lexicon_entry("hound", "https://audio.test/hound.mp3")],
            "retriever": [lexicon_entry("retriever")],
        }
        self.overrides: dict[str, httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def respond_with(self, path: str, response: httpx.Response | Exception) -> None:
        """Serve ``response`` (or raise the exception) for requests to ``path``."""
        self.overrides[path] = response

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        override = self.overrides.get(path)
        if isinstance(override, Exception):
            raise override
        if override is not None:
            return override

        if path == "/api/breeds/list/all":
            return httpx.Response(200, json={"message": self.breeds, "status": "success"})

        match = self._IMAGES.match(path)
        if match:
            breed = match["breed"]
            primary, _, sub = breed.partition("/")
            if primary not in self.breeds or (sub and sub not in self.breeds[primary]):
                return httpx.Response(
                    404,
                    json={"status": "error", "message": "Breed not found", "code": 404},
                )
            return httpx.Response(
                200,
                json={"message": image_urls(breed, int(match["count"])), "status": "success"},
            )

        match = self._ENTRY.match(path)
        if match and match["word"] in self.dictionary:
            return httpx.Response(200, json=self.dictionary[match["word"]])
        if match:
            return httpx.Response(
                404,
                json={"title": "No Definitions Found", "message": "Sorry pal."},
            )

        return httpx.Response(404)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> DogBrowserConfig:
    """Create a test configuration with a temporary data directory.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        DogBrowserConfig instance for testing
    """
    return DogBrowserConfig(
        _env_file=None,
        data_dir=str(temp_dir / "data"),
        dog_api_root=DOG_API_ROOT,
        dictionary_api_root=DICTIONARY_API_ROOT,
        default_image_count=9,
        background_image_count=10,
    )


@pytest.fixture
def fake_services() -> FakeDogServices:
    """Fake remote services with a small breed and dictionary catalogue."""
    return FakeDogServices()


@pytest.fixture
def gateway(fake_services: FakeDogServices) -> RemoteGateway:
    """RemoteGateway whose HTTP traffic is served by ``fake_services``."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_services))
    return RemoteGateway(DOG_API_ROOT, DICTIONARY_API_ROOT, client=client)


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def favorites(memory_store: MemoryKeyValueStore) -> FavoritesStore:
    """Loaded, empty favourites store backed by ``memory_store``."""
    store = FavoritesStore(memory_store)
    store.load()
    return store


@pytest.fixture
def controller(gateway: RemoteGateway, favorites: FavoritesStore) -> DogBrowserController:
    """Controller wired to the fake services and in-memory favourites."""
    return DogBrowserController(gateway, favorites)


@pytest.fixture
def app_state() -> AppState:
    """Fresh session state.

    Returns:
        AppState instance
    """
    return AppState()
