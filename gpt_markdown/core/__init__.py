from gpt_markdown.core.exceptions import (
    ConversionFailedException,
    CyclicConversationError,
    ExportNotFoundError,
    MalformedExportError,
)
from gpt_markdown.core.types import (
    AssetPart,
    AssetRef,
    ConversionResult,
    NormalizedMessage,
    NormalizedPart,
    TextPart,
    TranscriptPart,
)

__all__ = [
    "AssetPart",
    "AssetRef",
    "ConversionFailedException",
    "ConversionResult",
    "CyclicConversationError",
    "ExportNotFoundError",
    "MalformedExportError",
    "NormalizedMessage",
    "NormalizedPart",
    "TextPart",
    "TranscriptPart",
]
