"""Provider registry: maps provider ids to operation files on disk."""

from __future__ import annotations

from pathlib import Path
from types import ModuleType

import structlog

from vegagate.domain.providers import OperationSpec, ProviderNotFoundError

from .constants import PROVIDER_ID_RE
from .loader import import_module_from_path

log = structlog.get_logger(__name__)


class ProviderRegistry:
    """
    Filesystem-backed provider registry.

    resolve():
      - validates the provider id and checks the operation file exists
        (no Python execution)

    load():
      - imports the file anew on every call; nothing is cached, so a
        rebuilt provider takes effect on the next request
    """

    def __init__(self, providers_dir: Path) -> None:
        self._providers_dir = providers_dir

    @property
    def providers_dir(self) -> Path:
        return self._providers_dir

    def resolve(self, provider_id: str, spec: OperationSpec) -> Path:
        if not self._is_safe_id(provider_id):
            log.warning("provider_id_rejected", provider_id=provider_id)
            raise ProviderNotFoundError(spec.not_found_message)

        path = self._providers_dir / provider_id / spec.filename
        root = self._providers_dir.resolve()
        try:
            path.resolve().relative_to(root)
        except ValueError:
            log.warning("provider_path_escapes_root", provider_id=provider_id)
            raise ProviderNotFoundError(spec.not_found_message) from None

        if not path.is_file():
            log.info(
                "provider_file_not_found",
                provider_id=provider_id,
                operation=spec.operation.value,
                path=str(path),
            )
            raise ProviderNotFoundError(spec.not_found_message)
        return path

    def load(self, path: Path) -> ModuleType:
        module = import_module_from_path(path)
        log.debug("provider_module_loaded", path=str(path))
        return module

    def list_ids(self) -> list[str]:
        """Provider directories currently present on disk."""
        if not self._providers_dir.is_dir():
            return []
        return sorted(
            p.name
            for p in self._providers_dir.iterdir()
            if p.is_dir() and self._is_safe_id(p.name)
        )

    @staticmethod
    def _is_safe_id(provider_id: str) -> bool:
        return bool(PROVIDER_ID_RE.match(provider_id)) and ".." not in provider_id
