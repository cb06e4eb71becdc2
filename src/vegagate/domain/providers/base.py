"""Domain models and protocols for the provider plugin contract."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class Operation(str, Enum):
    """Operations the gateway can dispatch to a provider."""

    CATALOG = "catalog"
    POSTS = "posts"
    SEARCH = "search"
    META = "meta"
    STREAM = "stream"
    EPISODES = "episodes"


@dataclass(frozen=True)
class OperationSpec:
    """Where an operation lives inside a provider directory.

    ``filename`` is relative to ``<providers_dir>/<provider_id>/``.
    ``export`` is the function looked up on the loaded module.
    ``required`` is False for operations a provider may leave out; a
    missing optional export means "not supported" rather than an error.
    """

    operation: Operation
    filename: str
    export: str
    required: bool = True
    not_found_message: str = "Provider not found"


OPERATIONS: dict[Operation, OperationSpec] = {
    Operation.CATALOG: OperationSpec(Operation.CATALOG, "catalog.py", "get_catalog"),
    Operation.POSTS: OperationSpec(Operation.POSTS, "posts.py", "get_posts"),
    Operation.SEARCH: OperationSpec(
        Operation.SEARCH, "posts.py", "get_search_posts", required=False
    ),
    Operation.META: OperationSpec(Operation.META, "meta.py", "get_meta"),
    Operation.STREAM: OperationSpec(Operation.STREAM, "stream.py", "get_stream"),
    Operation.EPISODES: OperationSpec(
        Operation.EPISODES,
        "episodes.py",
        "get_episodes",
        not_found_message="Provider episodes not found",
    ),
}


class CryptoProtocol(Protocol):
    """Crypto capability slots offered to providers."""

    async def derive_key(self, *args: Any, **kwargs: Any) -> str: ...

    async def decrypt(self, *args: Any, **kwargs: Any) -> str: ...

    async def encrypt(self, *args: Any, **kwargs: Any) -> str: ...


@dataclass(frozen=True)
class ProviderContext:
    """Capability bundle passed to every provider call.

    Built fresh per call and dropped once the response is sent. ``http`` is
    shared across calls; everything else belongs to this call only.
    ``extractors`` holds only the extractors that could be loaded, so
    providers must check membership before calling one.
    """

    http: Any
    common_headers: Mapping[str, str]
    parse_html: Callable[[str], Any]
    crypto: CryptoProtocol
    get_base_url: Callable[[str], Awaitable[str]]
    extractors: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
