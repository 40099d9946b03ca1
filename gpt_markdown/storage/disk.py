from __future__ import annotations

from pathlib import Path

from gpt_markdown.storage.base import StorageBackend


class DiskStorage(StorageBackend):
    """Writes documents under a local directory.

    The directory is created on the first write, so a run that never
    produces a document leaves nothing behind.
    """

    def __init__(self, base_path: str) -> None:
        self._base = Path(base_path)

    def _resolve(self, key: str) -> Path:
        return self._base / key

    def write(self, key: str, data: bytes) -> None:
        path = self._resolve(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def resolve_uri(self, key: str) -> str:
        return str(self._resolve(key))
