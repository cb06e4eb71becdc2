from .context import ProviderContextFactory
from .loader import import_module_from_path
from .manifest import ManifestReader
from .registry import ProviderRegistry

__all__ = [
    "ManifestReader",
    "ProviderContextFactory",
    "ProviderRegistry",
    "import_module_from_path",
]
