"""Integration tests for dogbrowser.api.main — FastAPI JSON API endpoints.

All tests use the FastAPI TestClient with the gateway wired to the in-process
fake services, so no network access occurs.  Tests cover every endpoint:

- ``GET /api/health`` — Liveness and version.
- ``GET /api/breeds`` — Flattened breed list.
- ``GET /api/breeds/{breed}/images`` — Random breed images.
- ``GET /api/pronunciation/{word}`` — Pronunciation audio lookup.
- ``GET /api/favorites`` — Favourites listing.
- ``POST /api/favorites/toggle`` — Favourite toggling and persistence.
- ``GET /`` — Gradio UI mount.
"""

from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from dogbrowser import __version__
from dogbrowser.api.main import create_app
from dogbrowser.core.kv_store import JsonFileKeyValueStore, MemoryKeyValueStore

FAVORITE = "https://images.dog.ceo/breeds/akita/n02106030_1.jpg"


@pytest.fixture
def test_client(test_config, gateway, memory_store):
    """TestClient over the JSON API (UI not mounted)."""
    app = create_app(test_config, gateway=gateway, store=memory_store, mount_ui=False)
    with TestClient(app) as client:
        yield client


# ---------------------------------------------------------------------------
# Health endpoint tests.
# ---------------------------------------------------------------------------


class TestHealth:
    """Test GET /api/health."""

    def test_health(self, test_client):
        resp = test_client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}


# ---------------------------------------------------------------------------
# Breed endpoint tests.
# ---------------------------------------------------------------------------


class TestBreeds:
    """Test GET /api/breeds."""

    def test_lists_flattened_breeds(self, test_client):
        resp = test_client.get("/api/breeds")
        assert resp.status_code == 200
        breeds = resp.json()["breeds"]
        assert breeds[:2] == ["akita", "bulldog/boston"]
        assert "bulldog" not in breeds

    def test_upstream_failure_returns_empty_list(self, test_client, fake_services):
        """Remote failures are absorbed; the endpoint still answers 200."""
        fake_services.respond_with("/api/breeds/list/all", httpx.ConnectError("down"))
        resp = test_client.get("/api/breeds")
        assert resp.status_code == 200
        assert resp.json() == {"breeds": []}


class TestBreedImages:
    """Test GET /api/breeds/{breed}/images."""

    def test_default_count(self, test_client, fake_services):
        resp = test_client.get("/api/breeds/akita/images")
        assert resp.status_code == 200
        data = resp.json()
        assert data["breed"] == "akita"
        assert data["images"] == fake_services.image_urls("akita", 9)

    def test_sub_breed_path(self, test_client, fake_services):
        resp = test_client.get("/api/breeds/bulldog/boston/images", params={"count": 3})
        assert resp.status_code == 200
        assert resp.json()["breed"] == "bulldog/boston"
        assert len(resp.json()["images"]) == 3
        assert fake_services.paths() == ["/api/breed/bulldog/boston/images/random/3"]

    @pytest.mark.parametrize("count", [0, 51])
    def test_count_out_of_range(self, test_client, count):
        resp = test_client.get("/api/breeds/akita/images", params={"count": count})
        assert resp.status_code == 422

    def test_unknown_breed_is_empty(self, test_client):
        resp = test_client.get("/api/breeds/wolfhound/images")
        assert resp.status_code == 200
        assert resp.json()["images"] == []


# ---------------------------------------------------------------------------
# Pronunciation endpoint tests.
# ---------------------------------------------------------------------------


class TestPronunciation:
    """Test GET /api/pronunciation/{word}."""

    def test_audio_found(self, test_client):
        resp = test_client.get("/api/pronunciation/hound")
        assert resp.status_code == 200
        assert resp.json() == {"word": "hound", "audio_url": "https://audio.test/hound.mp3"}

    def test_audio_missing(self, test_client):
        resp = test_client.get("/api/pronunciation/schnoodle")
        assert resp.status_code == 200
        assert resp.json()["audio_url"] is None


# ---------------------------------------------------------------------------
# Favourites endpoint tests.
# ---------------------------------------------------------------------------


class TestFavorites:
    """Test GET /api/favorites and POST /api/favorites/toggle."""

    def test_empty_by_default(self, test_client):
        resp = test_client.get("/api/favorites")
        assert resp.status_code == 200
        assert resp.json() == {"favorites": []}

    def test_toggle_adds_then_removes(self, test_client, memory_store):
        resp = test_client.post("/api/favorites/toggle", json={"image_url": FAVORITE})
        assert resp.status_code == 200
        assert resp.json() == {
            "image_url": FAVORITE,
            "is_favorite": True,
            "favorites": [FAVORITE],
        }
        assert json.loads(memory_store.get("dogFavorites")) == [FAVORITE]

        resp = test_client.post("/api/favorites/toggle", json={"image_url": FAVORITE})
        assert resp.json()["is_favorite"] is False
        assert test_client.get("/api/favorites").json() == {"favorites": []}
        assert json.loads(memory_store.get("dogFavorites")) == []

    def test_toggle_requires_image_url(self, test_client):
        resp = test_client.post("/api/favorites/toggle", json={"image_url": ""})
        assert resp.status_code == 422

    def test_favorites_loaded_at_startup(self, test_config, gateway):
        """Favourites persisted before startup are served immediately."""
        store = MemoryKeyValueStore({"dogFavorites": json.dumps([FAVORITE])})
        app = create_app(test_config, gateway=gateway, store=store, mount_ui=False)
        with TestClient(app) as client:
            assert client.get("/api/favorites").json() == {"favorites": [FAVORITE]}

    def test_default_store_is_json_file(self, test_config, gateway):
        """Without an injected store, favourites go to the data directory."""
        app = create_app(test_config, gateway=gateway, mount_ui=False)
        with TestClient(app) as client:
            client.post("/api/favorites/toggle", json={"image_url": FAVORITE})

        store = JsonFileKeyValueStore(test_config.favorites_path)
        assert json.loads(store.get("dogFavorites")) == [FAVORITE]


# ---------------------------------------------------------------------------
# UI mount tests.
# ---------------------------------------------------------------------------


class TestUiMount:
    """Test that the Gradio UI is served at the root path."""

    def test_root_serves_gradio(self, test_config, gateway, memory_store):
        app = create_app(test_config, gateway=gateway, store=memory_store)
        with TestClient(app) as client:
            resp = client.get("/")
            assert resp.status_code == 200
            assert "text/html" in resp.headers["content-type"]
            assert client.get("/api/health").status_code == 200
