"""Normalization of raw ``content.parts`` entries."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from gpt_markdown.core.types import (
    AssetPart,
    AssetRef,
    NormalizedPart,
    TextPart,
    TranscriptPart,
)
from gpt_markdown.providers.chatgpt.schemas import (
    ChatGPTAssetPointer,
    ChatGPTContentPart,
)

ASSET_CONTENT_TYPES = frozenset(
    {
        "audio_asset_pointer",
        "image_asset_pointer",
        "video_container_asset_pointer",
    }
)


def _asset_ref(pointer: ChatGPTAssetPointer | ChatGPTContentPart) -> AssetPart:
    return AssetPart(
        asset=AssetRef(
            content_type=pointer.content_type or "",
            pointer=pointer.asset_pointer,
        )
    )


def _realtime_assets(part: ChatGPTContentPart) -> Iterator[AssetPart]:
    if part.audio_asset_pointer is not None:
        yield _asset_ref(part.audio_asset_pointer)
    if part.video_container_asset_pointer is not None:
        yield _asset_ref(part.video_container_asset_pointer)
    for frame in part.frame_asset_pointers or ():
        if frame is not None:
            yield _asset_ref(frame)


def normalize_part(part: ChatGPTContentPart) -> list[NormalizedPart]:
    """Classify one raw part. Returns zero or more normalized parts.

    Non-empty ``text`` always wins over ``content_type``. Unknown content
    types produce nothing.
    """
    if part.text:
        return [TextPart(text=part.text)]

    match part.content_type:
        case "audio_transcription":
            return [TranscriptPart(transcript=part.text or "")]
        case ct if ct in ASSET_CONTENT_TYPES:
            return [_asset_ref(part)]
        case "real_time_user_audio_video_asset_pointer":
            return list(_realtime_assets(part))
        case _:
            return []


def normalize_parts(parts: Sequence[ChatGPTContentPart]) -> list[NormalizedPart]:
    """Normalize a message's parts, preserving input order."""
    normalized: list[NormalizedPart] = []
    for part in parts:
        normalized.extend(normalize_part(part))
    return normalized
