from gpt_markdown.storage.base import StorageBackend
from gpt_markdown.storage.disk import DiskStorage
from gpt_markdown.storage.memory import InMemoryStorage

__all__ = [
    "StorageBackend",
    "DiskStorage",
    "InMemoryStorage",
]
