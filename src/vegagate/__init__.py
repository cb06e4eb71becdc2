"""vegagate: HTTP gateway for dynamically loaded streaming providers."""

__version__ = "0.1.0"
