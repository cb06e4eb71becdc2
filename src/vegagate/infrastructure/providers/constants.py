"""Shared constants for the provider plugin system."""

from __future__ import annotations

import re

DEFAULT_BASE_URL_TIMEOUT = 10.0

# Extractor modules looked up in the extractors directory. Each
# ``<name>.py`` must export a callable with the same name.
KNOWN_EXTRACTORS: tuple[str, ...] = (
    "hubcloud_extractor",
    "gofile_extractor",
    "supervideo_extractor",
    "gdflix_extractor",
)

# Provider ids double as directory names.
PROVIDER_ID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")

MODULE_NAME_PREFIX = "vegagate_dynamic"
