from __future__ import annotations

import re
import time

_UNSAFE = re.compile(r'[\s/\\:*?"<>|\x00-\x1f]')

MARKDOWN_SUFFIX = ".md"

# Leaves room for a duplicate suffix and ".md" under the usual 255-byte limit.
MAX_NAME_BYTES = 200


def safe_filename(title: str | None) -> str:
    """Replace whitespace and path-unsafe characters in *title* with ``_``."""
    return _UNSAFE.sub("_", title or "").strip(".")


def _truncate(name: str) -> str:
    encoded = name.encode("utf-8")
    if len(encoded) <= MAX_NAME_BYTES:
        return name
    return encoded[:MAX_NAME_BYTES].decode("utf-8", "ignore")


def default_filename() -> str:
    """Timestamp-derived name used when a title leaves nothing usable."""
    return f"conversation_{time.time_ns() // 1_000_000}"


class NameAllocator:
    """Hands out unique document keys within one conversion run.

    A repeated base name gets ``_2``, ``_3``, ... appended instead of
    overwriting the earlier document.
    """

    def __init__(self) -> None:
        self._used: set[str] = set()

    def allocate(self, title: str | None) -> str:
        base = _truncate(safe_filename(title)) or default_filename()
        name = base
        n = 2
        while name in self._used:
            name = f"{base}_{n}"
            n += 1
        self._used.add(name)
        return f"{name}{MARKDOWN_SUFFIX}"
