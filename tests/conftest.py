"""Shared test fixtures for the vegagate test suite."""

from __future__ import annotations

import json
import textwrap
from collections.abc import Callable
from typing import Any
from pathlib import Path

import pytest

from vegagate.domain.entities import (
    Catalog,
    DirectLink,
    Episode,
    LinkGroup,
    MetaDetails,
    Post,
    StreamOption,
)
from vegagate.infrastructure.config import AppConfig

# ---------------------------------------------------------------------------
# Demo provider sources
# ---------------------------------------------------------------------------

DEMO_CATALOG = """\
catalog = [
    {"title": "Trending", "filter": "trending"},
    {"title": "Latest", "filter": "latest"},
]
genres = [{"title": "Action", "filter": "genre/action"}]
"""

DEMO_POSTS = """\
async def get_posts(filter, page, provider_value, signal, context):
    return [
        {
            "title": f"{provider_value}:{filter}:{page}",
            "link": f"https://demo.example/{filter}/{page}",
            "image": "https://demo.example/poster.jpg",
        }
    ]


async def get_search_posts(search_query, page, provider_value, signal, context):
    return [
        {
            "title": f"result for {search_query}",
            "link": "https://demo.example/search/1",
            "image": "https://demo.example/poster.jpg",
        }
    ]
"""

DEMO_META = """\
async def get_meta(link, context):
    return {
        "title": "Demo Movie",
        "image": "https://demo.example/poster.jpg",
        "type": "movie",
        "synopsis": "A demo.",
        "linkList": [
            {
                "title": "1080p",
                "quality": 1080,
                "directLinks": [{"title": "Movie", "link": link, "type": "movie"}],
            }
        ],
    }
"""

DEMO_STREAM = """\
async def get_stream(link, type, signal, context):
    return [
        {"server": "demo-hls", "link": link + "/index.m3u8", "type": "m3u8"},
        {"server": "demo-mp4", "link": link + "/video.mp4", "type": "mp4"},
    ]
"""

DEMO_EPISODES = """\
def get_episodes(url, context):
    return [
        {"title": "Episode 1", "link": url + "/1"},
        {"title": "Episode 2", "link": url + "/2"},
    ]
"""

DEMO_FILES: dict[str, str] = {
    "catalog.py": DEMO_CATALOG,
    "posts.py": DEMO_POSTS,
    "meta.py": DEMO_META,
    "stream.py": DEMO_STREAM,
    "episodes.py": DEMO_EPISODES,
}

DEMO_MANIFEST = [
    {
        "value": "demo",
        "display_name": "Demo",
        "type": "global",
        "version": "1.0.0",
        "disabled": False,
    },
    {
        "value": "ghost",
        "display_name": "Ghost",
        "type": "english",
        "version": "0.1.0",
        "disabled": True,
    },
]

ProviderWriter = Callable[[str, str, str], Path]


# ---------------------------------------------------------------------------
# Filesystem fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def providers_dir(tmp_path: Path) -> Path:
    """Empty providers root (``dist``) inside tmp_path."""
    path = tmp_path / "dist"
    path.mkdir()
    return path


@pytest.fixture()
def write_provider_file(providers_dir: Path) -> ProviderWriter:
    """Write ``<providers_dir>/<provider_id>/<filename>`` and return its path."""

    def _write(provider_id: str, filename: str, code: str) -> Path:
        directory = providers_dir / provider_id
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(textwrap.dedent(code), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def demo_provider(providers_dir: Path, write_provider_file: ProviderWriter) -> Path:
    """Fully featured ``demo`` provider."""
    for filename, code in DEMO_FILES.items():
        write_provider_file("demo", filename, code)
    return providers_dir / "demo"


@pytest.fixture()
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(DEMO_MANIFEST), encoding="utf-8")
    return path


@pytest.fixture()
def app_config(tmp_path: Path, providers_dir: Path, manifest_path: Path) -> AppConfig:
    """AppConfig pointing every path into tmp_path."""
    return AppConfig(
        environment="test",
        providers_dir=providers_dir,
        manifest_path=manifest_path,
        website_dir=tmp_path / "website",
        base_url_registry="https://registry.test/modflix.json",
        call_timeout_seconds=5.0,
    )


# ---------------------------------------------------------------------------
# Fixed-fixture provider (every export returns constant data)
# ---------------------------------------------------------------------------

FIXED_MANIFEST = [
    {
        "value": "demo",
        "display_name": "Demo",
        "type": "global",
        "version": "1.0",
        "disabled": False,
    }
]

FIXED_CATALOG: Catalog = {
    "catalog": [{"title": "Trending", "filter": "trending"}],
    "genres": [{"title": "Drama", "filter": "genre/drama"}],
}

FIXED_POSTS: list[Post] = [
    {
        "title": "Fixed Movie",
        "link": "https://fixed.example/movie/1",
        "image": "https://fixed.example/movie/1.jpg",
    }
]

FIXED_DIRECT_LINK: DirectLink = {
    "title": "Movie",
    "link": "https://fixed.example/movie/1/play",
    "type": "movie",
}

FIXED_LINK_GROUPS: list[LinkGroup] = [
    {"title": "720p", "quality": 720, "directLinks": [FIXED_DIRECT_LINK]},
    {"title": "Season 1", "episodesLink": "https://fixed.example/series/1/s1"},
]

FIXED_META: MetaDetails = {
    "title": "Fixed Movie",
    "image": "https://fixed.example/movie/1.jpg",
    "type": "movie",
    "linkList": FIXED_LINK_GROUPS,
    "synopsis": "Always the same.",
}

FIXED_EPISODES: list[Episode] = [
    {"title": "Episode 1", "link": "https://fixed.example/series/1/e1"}
]

FIXED_STREAMS: list[StreamOption] = [
    {"server": "fixed", "link": "https://fixed.example/hls/index.m3u8", "type": "m3u8"},
    {"server": "fixed-mp4", "link": "https://fixed.example/video.mp4", "type": "mp4"},
]


def _fixed_sources() -> dict[str, str]:
    return {
        "catalog.py": f"def get_catalog():\n    return {FIXED_CATALOG!r}\n",
        "posts.py": (
            "async def get_posts(filter, page, provider_value, signal, context):\n"
            f"    return {FIXED_POSTS!r}\n"
        ),
        "meta.py": f"async def get_meta(link, context):\n    return {FIXED_META!r}\n",
        "stream.py": (
            "async def get_stream(link, type, signal, context):\n"
            f"    return {FIXED_STREAMS!r}\n"
        ),
        "episodes.py": (
            f"async def get_episodes(url, context):\n    return {FIXED_EPISODES!r}\n"
        ),
    }


@pytest.fixture()
def fixed_app_config(tmp_path: Path) -> AppConfig:
    """One-descriptor manifest plus a ``demo`` provider returning constants."""
    root = tmp_path / "fixed"
    provider_dir = root / "dist" / "demo"
    provider_dir.mkdir(parents=True)
    for filename, code in _fixed_sources().items():
        (provider_dir / filename).write_text(code, encoding="utf-8")

    manifest = root / "manifest.json"
    manifest.write_text(json.dumps(FIXED_MANIFEST), encoding="utf-8")

    return AppConfig(
        environment="test",
        providers_dir=root / "dist",
        manifest_path=manifest,
        website_dir=root / "website",
        call_timeout_seconds=5.0,
    )


@pytest.fixture()
def fixed_payloads() -> dict[str, Any]:
    """What each ``fixed_app_config`` export returns, keyed by operation."""
    return {
        "providers": FIXED_MANIFEST,
        "catalog": FIXED_CATALOG,
        "posts": FIXED_POSTS,
        "meta": FIXED_META,
        "stream": FIXED_STREAMS,
        "episodes": FIXED_EPISODES,
    }
