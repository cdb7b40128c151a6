"""Cache protocol for the distributed tier (DIP)."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for shared cache backends (e.g. Redis). Used by the translation coordinator."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 86400) -> bool:
        """Store value with TTL in seconds. Returns True if stored."""
        ...
