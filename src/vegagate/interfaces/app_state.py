"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from vegagate.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from vegagate.application.use_cases import ProviderDispatcher
    from vegagate.domain.ports import ManifestPort


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient

    # Domain Ports
    manifest: ManifestPort

    # Application Services
    dispatcher: ProviderDispatcher
