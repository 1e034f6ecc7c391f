"""Abstract key-value store the registry is persisted into.

One key holds one serialized value. Concrete implementations (a JSON
file per key, an in-memory dict for tests) live outside the domain.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*. Removing an absent key is a no-op."""
