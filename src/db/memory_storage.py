"""Implementation of the PersistenceAdapter backed by a plain dictionary"""

from typing import Optional


class InMemoryStorage:
    """
    Values live only as long as the instance.

    Two stores sharing one instance behave like two browser tabs sharing local storage.
    """

    def __init__(self) -> None:
        self._values: dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._values[key] = bytes(value)

    def clear(self) -> None:
        self._values.clear()
