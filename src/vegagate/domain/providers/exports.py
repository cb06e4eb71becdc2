"""Export lookup on loaded provider modules."""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType
from typing import Any

from .exceptions import ProviderLoadError


def get_export(
    module: ModuleType, name: str, *, required: bool = True
) -> Callable[..., Any] | None:
    """Look up an exported function on a loaded provider module.

    Returns None for a missing optional export; raises ProviderLoadError for
    a missing required one or for a non-callable attribute.
    """
    fn = getattr(module, name, None)
    if fn is None:
        if required:
            raise ProviderLoadError(
                f"Provider module {module.__file__} must export '{name}'"
            )
        return None
    if not callable(fn):
        raise ProviderLoadError(f"Export '{name}' in {module.__file__} is not callable")
    return fn
