from __future__ import annotations

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract base class for document output backends."""

    @abstractmethod
    def write(self, key: str, data: bytes) -> None:
        """Write data to the given key, replacing any previous content."""
        ...

    @abstractmethod
    def resolve_uri(self, key: str) -> str:
        """Return a location suitable for showing to the user."""
        ...
