"""No-op crypto capability for providers.

Providers that optionally decrypt payloads call these unconditionally; when
the host has no real implementation they must get an empty result back, not
an exception.
"""

from __future__ import annotations

from typing import Any


class CryptoStub:
    async def derive_key(self, *args: Any, **kwargs: Any) -> str:
        return ""

    async def decrypt(self, *args: Any, **kwargs: Any) -> str:
        return ""

    async def encrypt(self, *args: Any, **kwargs: Any) -> str:
        return ""
