"""Extractor discovery: link resolvers shared by all providers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import structlog

from vegagate.domain.providers import ProviderLoadError
from vegagate.domain.providers.exports import get_export

from .constants import KNOWN_EXTRACTORS
from .loader import import_module_from_path

log = structlog.get_logger(__name__)


def load_extractors(
    extractors_dir: Path,
    names: Iterable[str] = KNOWN_EXTRACTORS,
) -> dict[str, Callable[..., Any]]:
    """Load every known extractor present in ``extractors_dir``.

    Missing files are skipped silently. A file that fails to import or does
    not export its function is logged and skipped; it never breaks the
    provider call that asked for the bundle.
    """
    extractors: dict[str, Callable[..., Any]] = {}
    for name in names:
        path = extractors_dir / f"{name}.py"
        if not path.is_file():
            continue
        try:
            module = import_module_from_path(path)
            fn = get_export(module, name)
        except ProviderLoadError as e:
            log.error(
                "extractor_load_failed",
                extractor=name,
                path=str(path),
                error_message=str(e),
            )
            continue
        extractors[name] = fn
    return extractors
