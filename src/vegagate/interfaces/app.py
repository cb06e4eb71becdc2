"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.responses import Response

from vegagate import __version__
from vegagate.infrastructure.config import AppConfig
from vegagate.interfaces.app_state import AppState
from vegagate.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def create_app(config: AppConfig) -> FastAPI:
    """Create FastAPI app: configuration ONLY, NO resource initialization.

    Resources (HTTP client, registry, dispatcher) are created in lifespan().
    """
    app = FastAPI(
        title="Vegagate",
        description="HTTP gateway for pluggable streaming content providers",
        version=__version__,
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    from vegagate.interfaces.api.providers import router as providers_router

    app.include_router(providers_router)

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        """Liveness probe: returns 200 as long as the process is running."""
        return {"status": "healthy", "timestamp": _utc_timestamp()}

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        log.warning(
            "request_validation_failed",
            path=request.url.path,
            error_details=exc.errors(),
        )
        return JSONResponse({"error": "Invalid request body"}, status_code=400)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                query=str(request.url.query),
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    # Static mounts go last so /api/* always wins.
    if config.providers_dir.is_dir():
        app.mount("/dist", StaticFiles(directory=config.providers_dir), name="dist")
    if config.website_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=config.website_dir, html=True),
            name="website",
        )
    else:
        log.info("website_dir_not_found", directory=str(config.website_dir))

    return app
