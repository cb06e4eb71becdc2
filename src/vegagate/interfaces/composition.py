"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from vegagate.application.use_cases import ProviderDispatcher
from vegagate.domain.providers import ProviderError
from vegagate.infrastructure.providers import (
    ManifestReader,
    ProviderContextFactory,
    ProviderRegistry,
)
from vegagate.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def _log_manifest_summary(manifest: ManifestReader, registry: ProviderRegistry) -> None:
    """Report manifest entries that have no provider directory on disk."""
    try:
        descriptors = manifest.descriptors()
    except ProviderError as e:
        log.warning("manifest_unavailable", manifest=str(manifest.path), reason=str(e))
        return

    on_disk = set(registry.list_ids())
    missing = [d.value for d in descriptors if d.value not in on_disk]
    log.info(
        "manifest_loaded",
        providers=len(descriptors),
        enabled=sum(1 for d in descriptors if not d.disabled),
    )
    if missing:
        log.warning("manifest_providers_missing_on_disk", providers=missing)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. HTTP Client (shared by every provider context)
        2. Provider Registry + Manifest
        3. Context Factory (uses HTTP client)
        4. Dispatcher (uses registry + context factory)
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) HTTP client handed to providers
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers=config.common_headers,
        follow_redirects=config.http_follow_redirects,
    )
    log.info("http_client_initialized", user_agent=config.http_user_agent)

    # 2) Provider registry + manifest
    registry = ProviderRegistry(providers_dir=config.providers_dir)
    if not config.providers_dir.is_dir():
        log.warning(
            "providers_dir_not_found",
            directory=str(config.providers_dir),
            hint="build the providers first",
        )
    state.manifest = ManifestReader(config.manifest_path)
    _log_manifest_summary(state.manifest, registry)

    # 3) Context factory
    assert config.extractors_dir is not None
    context_factory = ProviderContextFactory(
        http_client=state.http_client,
        common_headers=config.common_headers,
        extractors_dir=config.extractors_dir,
        base_url_registry=config.base_url_registry,
    )

    # 4) Dispatcher
    state.dispatcher = ProviderDispatcher(
        registry=registry,
        context_factory=context_factory,
        call_timeout=config.call_timeout_seconds,
    )

    log.info("app_startup_complete", providers_dir=str(config.providers_dir))

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("http_client_closed")

        log.info("app_shutdown_complete")
