"""Port for reading the provider manifest."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from vegagate.domain.entities.provider import ProviderDescriptor


@runtime_checkable
class ManifestPort(Protocol):
    def read_raw(self) -> Any: ...
    def descriptors(self) -> list[ProviderDescriptor]: ...
