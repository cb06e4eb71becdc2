"""Port for building the per-call provider context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from vegagate.domain.providers.base import ProviderContext


@runtime_checkable
class ProviderContextFactoryPort(Protocol):
    """Builds a fresh ``ProviderContext`` for one provider call."""

    def __call__(self) -> ProviderContext: ...
