from __future__ import annotations

from gpt_markdown.storage.base import StorageBackend


class InMemoryStorage(StorageBackend):
    """Dict-backed storage for dry runs. Nothing touches the filesystem."""

    def __init__(self) -> None:
        self.documents: dict[str, bytes] = {}

    def write(self, key: str, data: bytes) -> None:
        self.documents[key] = data

    def resolve_uri(self, key: str) -> str:
        return f"memory://{key}"
