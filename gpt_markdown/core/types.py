from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(frozen=True)
class AssetRef:
    """Opaque handle to an exported media asset.

    Only the type tag and pointer string are kept. The asset itself is
    never fetched or decoded.
    """

    content_type: str
    pointer: str | None = None


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class TranscriptPart:
    transcript: str


@dataclass(frozen=True)
class AssetPart:
    asset: AssetRef


NormalizedPart: TypeAlias = TextPart | TranscriptPart | AssetPart


@dataclass
class NormalizedMessage:
    """One rendered turn: a display author label and its normalized parts."""

    author: str
    parts: list[NormalizedPart] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Result returned from :meth:`ExportConverter.convert`."""

    source: str
    conversations_found: int = 0
    documents_written: int = 0
    conversations_failed: int = 0
    written: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.conversations_failed == 0
