from __future__ import annotations

import importlib.machinery
import importlib.util
import re
import sys
from pathlib import Path
from types import CodeType, ModuleType

import structlog

from vegagate.domain.providers import ProviderLoadError

from .constants import MODULE_NAME_PREFIX

log = structlog.get_logger(__name__)

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_]")


class _FreshSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that never reads or writes ``__pycache__``."""

    def get_code(self, fullname: str) -> CodeType:
        path = self.get_filename(fullname)
        return self.source_to_code(self.get_data(path), path)


def module_name_for(path: Path) -> str:
    """Stable import name for a plugin file: one sys.modules slot per path."""
    parts = [path.parent.name, path.stem]
    return "_".join(
        [MODULE_NAME_PREFIX, *(_UNSAFE_NAME_CHARS.sub("_", p) for p in parts)]
    )


def import_module_from_path(path: Path) -> ModuleType:
    """Import ``path`` as a brand-new module object.

    Any module previously loaded from the same path is dropped first, and the
    source is compiled on every call so an edited file is always picked up.
    """
    module_name = module_name_for(path)
    sys.modules.pop(module_name, None)

    loader = _FreshSourceLoader(module_name, str(path))
    spec = importlib.util.spec_from_file_location(
        module_name, str(path), loader=loader
    )
    if spec is None or spec.loader is None:
        raise ProviderLoadError(f"Could not create import spec for {path}")

    module = importlib.util.module_from_spec(spec)

    # Registered while executing so dataclasses/typing can find the module.
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except SyntaxError as e:
        sys.modules.pop(module_name, None)
        raise ProviderLoadError(f"SyntaxError while importing {path}: {e}") from e
    except OSError as e:
        sys.modules.pop(module_name, None)
        raise ProviderLoadError(f"Could not read {path}: {e}") from e
    except Exception as e:
        sys.modules.pop(module_name, None)
        log.error(
            "provider_module_import_failed",
            module_file=str(path),
            error_type=type(e).__name__,
            exc_info=True,
        )
        raise ProviderLoadError(f"Error while importing {path}: {e}") from e

    return module
