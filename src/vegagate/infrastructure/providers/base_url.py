"""Base-URL resolver backed by a shared remote JSON registry.

The registry is a flat object mapping provider keys to their current base
URL, e.g.::

    {"vega": "https://vegamovies.example", "mod": {"url": "https://moviesmod.example"}}

Entries are either the URL itself or an object carrying it under ``url``.

Resolution never raises: any failure, including a malformed registry URL or a
closed client, yields ``""`` so the provider can fall back to a hardcoded
default.
"""

from __future__ import annotations

import httpx
import structlog

from .constants import DEFAULT_BASE_URL_TIMEOUT

log = structlog.get_logger(__name__)


class BaseUrlResolver:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        registry_url: str,
        timeout: float = DEFAULT_BASE_URL_TIMEOUT,
    ) -> None:
        self._http = http_client
        self._registry_url = registry_url
        self._timeout = timeout

    async def __call__(self, key: str) -> str:
        try:
            resp = await self._http.get(self._registry_url, timeout=self._timeout)
        except Exception as e:  # noqa: BLE001
            log.warning(
                "base_url_fetch_failed",
                key=key,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return ""

        if resp.status_code != 200:
            log.warning("base_url_http_error", key=key, status=resp.status_code)
            return ""

        try:
            data = resp.json()
        except ValueError:
            log.warning("base_url_invalid_json", key=key)
            return ""

        if not isinstance(data, dict):
            log.warning("base_url_unexpected_payload", key=key)
            return ""

        value = data.get(key)
        if isinstance(value, dict):
            value = value.get("url")
        if not isinstance(value, str):
            log.debug("base_url_key_missing", key=key)
            return ""
        return value
