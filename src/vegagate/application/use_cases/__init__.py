from .dispatch import ProviderDispatcher

__all__ = ["ProviderDispatcher"]
