"""Provider context factory (the per-call capability bundle)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import httpx
import structlog

from vegagate.domain.providers import ProviderContext

from .base_url import BaseUrlResolver
from .crypto import CryptoStub
from .extractors import load_extractors
from .html import parse_html

log = structlog.get_logger(__name__)


class ProviderContextFactory:
    """Builds a fresh ``ProviderContext`` for every provider call.

    The HTTP client is shared (it owns the connection pool and is closed by
    the app lifespan); the extractor mapping is rebuilt from disk each time
    so dropped-in or removed extractors are seen without a restart.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        common_headers: Mapping[str, str],
        extractors_dir: Path,
        base_url_registry: str,
    ) -> None:
        self._http = http_client
        self._common_headers = dict(common_headers)
        self._extractors_dir = extractors_dir
        self._base_url_registry = base_url_registry

    def __call__(self) -> ProviderContext:
        extractors = load_extractors(self._extractors_dir)
        log.debug("provider_context_built", extractors=sorted(extractors))
        return ProviderContext(
            http=self._http,
            common_headers=MappingProxyType(dict(self._common_headers)),
            parse_html=parse_html,
            crypto=CryptoStub(),
            get_base_url=BaseUrlResolver(self._http, self._base_url_registry),
            extractors=MappingProxyType(extractors),
        )
