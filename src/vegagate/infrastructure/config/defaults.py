"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "vegagate",
    "environment": "dev",
    "providers": {
        "providers_dir": "./dist",
        "extractors_dir": None,  # Falls back to providers_dir in schema.py
        "manifest_path": "./manifest.json",
        "base_url_registry": (
            "https://raw.githubusercontent.com/himanshu8443/providers/main/modflix.json"
        ),
        "call_timeout_seconds": 60.0,
    },
    "http": {
        "timeout_seconds": 30.0,
        "follow_redirects": True,
        "user_agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
        ),
    },
    "website": {
        "dir": "./website",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
