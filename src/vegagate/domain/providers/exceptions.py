"""Provider system exceptions."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for all provider-related errors."""


class ProviderNotFoundError(ProviderError):
    """Raised when a provider id or its operation file is not on disk."""


class OperationNotSupportedError(ProviderError):
    """Raised when an optional operation is not exported by the provider."""


class ManifestNotFoundError(ProviderError):
    """Raised when the provider manifest file does not exist."""


class ProviderLoadError(ProviderError):
    """Raised when a provider module fails to import or lacks a required export."""


class ProviderCallError(ProviderError):
    """Raised when a provider function raises or exceeds the call timeout."""
