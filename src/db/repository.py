"""Protocol for the byte store (can implement for SQL Alchemy / in-memory dict / browser-like local storage etc.)"""

from typing import Optional, Protocol


class PersistenceAdapter(Protocol):
    """Synchronous key-value store. The game core treats values as opaque bytes."""

    def get(self, key: str) -> Optional[bytes]:
        """Stored value for the key, or None if nothing was stored yet."""
        ...

    def set(self, key: str, value: bytes) -> None:
        """Replace whatever is stored under the key."""
        ...
