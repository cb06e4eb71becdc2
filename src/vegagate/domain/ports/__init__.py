from .context_factory import ProviderContextFactoryPort
from .manifest import ManifestPort
from .provider_registry import ProviderRegistryPort

__all__ = [
    "ManifestPort",
    "ProviderContextFactoryPort",
    "ProviderRegistryPort",
]
