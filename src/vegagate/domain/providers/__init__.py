from .base import (
    OPERATIONS,
    CryptoProtocol,
    Operation,
    OperationSpec,
    ProviderContext,
)
from .exceptions import (
    ManifestNotFoundError,
    OperationNotSupportedError,
    ProviderCallError,
    ProviderError,
    ProviderLoadError,
    ProviderNotFoundError,
)
from .exports import get_export

__all__ = [
    "OPERATIONS",
    "CryptoProtocol",
    "ManifestNotFoundError",
    "Operation",
    "OperationNotSupportedError",
    "OperationSpec",
    "ProviderCallError",
    "ProviderContext",
    "ProviderError",
    "ProviderLoadError",
    "ProviderNotFoundError",
    "get_export",
]
