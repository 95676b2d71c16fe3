"""Token persistence backends."""

from netgear_console.storage.tokens import (
    FileTokenStore,
    MemoryTokenStore,
    TokenStore,
    fnv1a_32,
)

__all__ = ["FileTokenStore", "MemoryTokenStore", "TokenStore", "fnv1a_32"]
