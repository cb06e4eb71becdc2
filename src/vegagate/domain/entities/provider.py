"""Provider descriptor (one manifest entry)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderDescriptor:
    """Read-only description of a provider as listed in the manifest.

    ``value`` is the provider id and doubles as the name of its directory
    under the providers root.
    """

    value: str
    display_name: str
    type: str = "global"
    version: str = "0.0.0"
    disabled: bool = False
