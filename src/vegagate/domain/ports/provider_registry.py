"""Port for locating and loading provider operation modules."""

from __future__ import annotations

from pathlib import Path
from types import ModuleType
from typing import Protocol, runtime_checkable

from vegagate.domain.providers.base import OperationSpec


@runtime_checkable
class ProviderRegistryPort(Protocol):
    """Synchronous interface for resolving and (re)loading provider modules."""

    def resolve(self, provider_id: str, spec: OperationSpec) -> Path: ...
    def load(self, path: Path) -> ModuleType: ...
