"""Provider manifest: a JSON array of provider descriptors on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from vegagate.domain.entities import ProviderDescriptor
from vegagate.domain.providers import ManifestNotFoundError, ProviderLoadError

log = structlog.get_logger(__name__)


class ProviderDescriptorModel(BaseModel):
    """Validation schema for one manifest entry (unknown keys are kept)."""

    model_config = ConfigDict(extra="allow")

    value: str = Field(min_length=1)
    display_name: str
    type: str = "global"
    version: str = "0.0.0"
    disabled: bool = False


_MANIFEST_ADAPTER = TypeAdapter(list[ProviderDescriptorModel])


def to_domain_descriptor(model: ProviderDescriptorModel) -> ProviderDescriptor:
    return ProviderDescriptor(
        value=model.value,
        display_name=model.display_name,
        type=model.type,
        version=model.version,
        disabled=model.disabled,
    )


class ManifestReader:
    """Reads the manifest fresh on every call; nothing is cached."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read_raw(self) -> Any:
        """Return the parsed manifest JSON exactly as written."""
        if not self._path.is_file():
            raise ManifestNotFoundError("Manifest not found")
        try:
            return json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            log.error(
                "manifest_read_failed",
                manifest=str(self._path),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise ProviderLoadError(str(e)) from e

    def descriptors(self) -> list[ProviderDescriptor]:
        """Validated descriptors (used for startup diagnostics)."""
        raw = self.read_raw()
        try:
            models = _MANIFEST_ADAPTER.validate_python(raw)
        except ValidationError as e:
            log.error(
                "manifest_validation_failed",
                manifest=str(self._path),
                error_details=e.errors(),
            )
            raise ProviderLoadError(str(e)) from e
        return [to_domain_descriptor(m) for m in models]
