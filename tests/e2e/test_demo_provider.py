"""End-to-end: the demo provider through the full app (real lifespan)."""

from __future__ import annotations

import json
import textwrap
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from vegagate.infrastructure.config import AppConfig
from vegagate.interfaces.app import create_app

pytestmark = pytest.mark.e2e


@pytest.fixture()
def client(app_config: AppConfig, demo_provider: Path) -> Iterator[TestClient]:
    with TestClient(create_app(app_config)) as test_client:
        yield test_client


class TestDemoScenario:
    def test_providers_lists_manifest(self, client: TestClient, manifest_path: Path) -> None:
        resp = client.get("/api/providers")

        assert resp.status_code == 200
        assert resp.json() == json.loads(manifest_path.read_text(encoding="utf-8"))

    def test_catalog_is_idempotent(self, client: TestClient) -> None:
        first = client.get("/api/provider/demo/catalog")
        second = client.get("/api/provider/demo/catalog")

        assert first.status_code == 200
        assert first.content == second.content
        assert first.json()["catalog"][0] == {"title": "Trending", "filter": "trending"}

    def test_posts_for_catalog_filter(self, client: TestClient) -> None:
        filter_ = client.get("/api/provider/demo/catalog").json()["catalog"][0]["filter"]

        resp = client.post(
            "/api/provider/demo/posts", json={"filter": filter_, "page": 1}
        )

        assert resp.status_code == 200
        (post,) = resp.json()
        assert post["title"] == "demo:trending:1"
        assert post["link"].startswith("https://")

    def test_search(self, client: TestClient) -> None:
        resp = client.post("/api/provider/demo/search", json={"query": "batman"})
        assert resp.json()[0]["title"] == "result for batman"

    def test_meta_has_title_and_link_list(self, client: TestClient) -> None:
        resp = client.post(
            "/api/provider/demo/meta", json={"link": "https://demo.example/m/1"}
        )

        assert resp.status_code == 200
        meta = resp.json()
        assert meta["title"] == "Demo Movie"
        assert isinstance(meta["linkList"], list)
        assert meta["linkList"][0]["directLinks"][0]["link"] == "https://demo.example/m/1"

    def test_stream_offers_playable_entry(self, client: TestClient) -> None:
        resp = client.post(
            "/api/provider/demo/stream",
            json={"link": "https://demo.example/m/1", "type": "movie"},
        )

        assert resp.status_code == 200
        streams = resp.json()
        assert any(s["type"] in {"m3u8", "mp4"} for s in streams)
        assert streams[0]["link"] == "https://demo.example/m/1/index.m3u8"

    def test_episodes_from_sync_provider(self, client: TestClient) -> None:
        resp = client.post(
            "/api/provider/demo/episodes", json={"url": "https://demo.example/s/1"}
        )
        assert [e["title"] for e in resp.json()] == ["Episode 1", "Episode 2"]


class TestErrorSurface:
    def test_unknown_provider(self, client: TestClient) -> None:
        resp = client.post("/api/provider/nope/posts", json={"filter": "x"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Provider not found"}

    def test_unknown_provider_episodes(self, client: TestClient) -> None:
        resp = client.post("/api/provider/nope/episodes", json={"url": "x"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Provider episodes not found"}

    def test_search_not_supported(self, client: TestClient, write_provider_file) -> None:
        write_provider_file(
            "plain",
            "posts.py",
            "async def get_posts(filter, page, provider_value, signal, context):\n"
            "    return []\n",
        )
        resp = client.post("/api/provider/plain/search", json={"query": "x"})
        assert resp.status_code == 501
        assert resp.json() == {"error": "Search not supported by this provider"}

    def test_provider_crash_does_not_take_down_server(
        self, client: TestClient, write_provider_file
    ) -> None:
        write_provider_file(
            "broken",
            "meta.py",
            "def get_meta(link, context):\n    raise RuntimeError('parse failed')\n",
        )

        resp = client.post("/api/provider/broken/meta", json={"link": "x"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "parse failed"}
        assert client.get("/api/health").status_code == 200


class TestHotReload:
    def test_edit_is_picked_up_by_next_request(
        self, client: TestClient, write_provider_file
    ) -> None:
        before = client.post("/api/provider/demo/meta", json={"link": "x"}).json()

        write_provider_file(
            "demo",
            "meta.py",
            """\
            async def get_meta(link, context):
                return {"title": "Rebuilt", "linkList": []}
            """,
        )
        after = client.post("/api/provider/demo/meta", json={"link": "x"}).json()

        assert before["title"] == "Demo Movie"
        assert after == {"title": "Rebuilt", "linkList": []}


class TestProviderCapabilities:
    @respx.mock
    def test_context_base_url_and_html(
        self, client: TestClient, write_provider_file
    ) -> None:
        respx.get("https://registry.test/modflix.json").respond(
            200, json={"demo": {"url": "https://mirror.example"}}
        )
        respx.get("https://mirror.example/movie/1").respond(
            200, html="<div class='title'><h1>Mirror Movie</h1></div>"
        )
        write_provider_file(
            "demo",
            "meta.py",
            textwrap.dedent(
                """\
                async def get_meta(link, context):
                    base = await context.get_base_url("demo")
                    resp = await context.http.get(base + link)
                    doc = context.parse_html(resp.text)
                    return {
                        "title": doc.select_one(".title h1").get_text(),
                        "linkList": [],
                        "ua": resp.request.headers["User-Agent"],
                    }
                """
            ),
        )

        resp = client.post("/api/provider/demo/meta", json={"link": "/movie/1"})

        assert resp.status_code == 200
        assert resp.json()["title"] == "Mirror Movie"
        assert "Mozilla/5.0" in resp.json()["ua"]

    @respx.mock
    def test_base_url_registry_down(self, client: TestClient, write_provider_file) -> None:
        respx.get("https://registry.test/modflix.json").mock(
            side_effect=httpx.ConnectError("offline")
        )
        write_provider_file(
            "demo",
            "meta.py",
            """\
            async def get_meta(link, context):
                base = await context.get_base_url("demo") or "https://fallback.example"
                return {"title": base, "linkList": []}
            """,
        )

        resp = client.post("/api/provider/demo/meta", json={"link": "x"})

        assert resp.json()["title"] == "https://fallback.example"


class TestFixedFixtureScenario:
    """One-descriptor manifest; every export returns constant data."""

    @pytest.fixture()
    def fixed_client(self, fixed_app_config: AppConfig) -> Iterator[TestClient]:
        with TestClient(create_app(fixed_app_config)) as test_client:
            yield test_client

    def test_full_walkthrough(
        self, fixed_client: TestClient, fixed_payloads: dict[str, Any]
    ) -> None:
        providers = fixed_client.get("/api/providers")
        assert providers.status_code == 200
        assert providers.json() == [
            {
                "value": "demo",
                "display_name": "Demo",
                "type": "global",
                "version": "1.0",
                "disabled": False,
            }
        ]

        catalog = fixed_client.get("/api/provider/demo/catalog")
        assert catalog.json() == fixed_payloads["catalog"]

        posts = fixed_client.post(
            "/api/provider/demo/posts", json={"filter": "trending", "page": 1}
        )
        assert posts.json() == fixed_payloads["posts"]

        stream = fixed_client.post(
            "/api/provider/demo/stream", json={"link": "x", "type": "movie"}
        )
        assert stream.json() == fixed_payloads["stream"]
        assert any(s["type"] in {"m3u8", "mp4"} for s in stream.json())

    def test_meta_and_episodes(
        self, fixed_client: TestClient, fixed_payloads: dict[str, Any]
    ) -> None:
        meta = fixed_client.post("/api/provider/demo/meta", json={"link": "x"})
        episodes = fixed_client.post("/api/provider/demo/episodes", json={"url": "x"})

        assert meta.json() == fixed_payloads["meta"]
        assert episodes.json() == fixed_payloads["episodes"]

    def test_search_not_exported(self, fixed_client: TestClient) -> None:
        resp = fixed_client.post("/api/provider/demo/search", json={"query": "x"})
        assert resp.status_code == 501
