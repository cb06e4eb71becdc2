"""Provider gateway endpoints (``/api/*``)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, cast

import structlog
from fastapi import APIRouter, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from vegagate.domain.providers import (
    ManifestNotFoundError,
    OperationNotSupportedError,
    ProviderError,
    ProviderNotFoundError,
)
from vegagate.interfaces.app_state import AppState

from .models import (
    EpisodesRequest,
    MetaRequest,
    PostsRequest,
    SearchRequest,
    StreamRequest,
)

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["providers"])


def _status_for(exc: ProviderError) -> int:
    if isinstance(exc, (ProviderNotFoundError, ManifestNotFoundError)):
        return 404
    if isinstance(exc, OperationNotSupportedError):
        return 501
    return 500


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _respond(
    operation: str, provider_id: str | None, pending: Awaitable[Any]
) -> JSONResponse:
    """Await a dispatcher call and map the outcome to an HTTP response."""
    try:
        result = await pending
        return JSONResponse(jsonable_encoder(result))
    except ProviderError as e:
        status_code = _status_for(e)
        if status_code == 500:
            log.error(
                "provider_request_failed",
                operation=operation,
                provider_id=provider_id,
                error_type=type(e).__name__,
                error_message=str(e),
                exc_info=True,
            )
        else:
            log.warning(
                "provider_request_rejected",
                operation=operation,
                provider_id=provider_id,
                status_code=status_code,
                reason=str(e),
            )
        return _error(status_code, str(e))
    except Exception as e:
        log.error(
            "provider_response_failed",
            operation=operation,
            provider_id=provider_id,
            error_type=type(e).__name__,
            error_message=str(e),
            exc_info=True,
        )
        return _error(500, str(e) or type(e).__name__)


async def _read_manifest(state: AppState) -> Any:
    return state.manifest.read_raw()


@router.get("/providers")
async def list_providers(request: Request) -> JSONResponse:
    """Return the provider manifest exactly as it is on disk."""
    state = cast(AppState, request.app.state)
    return await _respond("providers", None, _read_manifest(state))


@router.get("/provider/{value}/catalog")
async def provider_catalog(value: str, request: Request) -> JSONResponse:
    state = cast(AppState, request.app.state)
    return await _respond("catalog", value, state.dispatcher.catalog(value))


@router.post("/provider/{value}/posts")
async def provider_posts(
    value: str, request: Request, payload: PostsRequest | None = None
) -> JSONResponse:
    state = cast(AppState, request.app.state)
    body = payload or PostsRequest()
    return await _respond(
        "posts",
        value,
        state.dispatcher.posts(value, body.filter, _page(body.page)),
    )


@router.post("/provider/{value}/search")
async def provider_search(
    value: str, request: Request, payload: SearchRequest | None = None
) -> JSONResponse:
    state = cast(AppState, request.app.state)
    body = payload or SearchRequest()
    return await _respond(
        "search",
        value,
        state.dispatcher.search(value, body.query, _page(body.page)),
    )


@router.post("/provider/{value}/meta")
async def provider_meta(
    value: str, request: Request, payload: MetaRequest | None = None
) -> JSONResponse:
    state = cast(AppState, request.app.state)
    body = payload or MetaRequest()
    return await _respond("meta", value, state.dispatcher.meta(value, body.link))


@router.post("/provider/{value}/stream")
async def provider_stream(
    value: str, request: Request, payload: StreamRequest | None = None
) -> JSONResponse:
    state = cast(AppState, request.app.state)
    body = payload or StreamRequest()
    return await _respond(
        "stream", value, state.dispatcher.stream(value, body.link, body.type)
    )


@router.post("/provider/{value}/episodes")
async def provider_episodes(
    value: str, request: Request, payload: EpisodesRequest | None = None
) -> JSONResponse:
    state = cast(AppState, request.app.state)
    body = payload or EpisodesRequest()
    return await _respond(
        "episodes", value, state.dispatcher.episodes(value, body.url)
    )


def _page(page: Any) -> Any:
    # An explicit null page falls back to the first page.
    return 1 if page is None else page
