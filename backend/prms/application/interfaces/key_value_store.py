"""Abstract port for string-valued persistent key-value storage."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for the single-profile persisted settings — implemented in infrastructure.

    Writes must be visible to subsequent reads immediately (write-through).
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is a no-op."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """Return every stored key."""
        ...
