"""Pydantic schemas for raw ChatGPT archive data."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Content parts
# ---------------------------------------------------------------------------


class ChatGPTAssetPointer(BaseModel):
    """Pointer to an uploaded or recorded asset.

    Kept opaque: only the type tag and the pointer string are modelled,
    everything else the export carries (size, dimensions, metadata) is
    preserved as extra fields but never read.
    """

    model_config = ConfigDict(extra="allow")

    content_type: str | None = None
    asset_pointer: str | None = None


class ChatGPTContentPart(BaseModel):
    """One entry of ``content.parts``.

    Older exports store parts as bare strings; newer multimodal ones store
    objects tagged with ``content_type``. Strings are lifted into the object
    shape before validation so the rest of the pipeline sees one type.
    A ``null`` entry becomes an empty part that normalizes to nothing.
    """

    model_config = ConfigDict(extra="allow")

    content_type: str = ""
    text: str | None = None
    asset_pointer: str | None = None
    audio_asset_pointer: ChatGPTAssetPointer | None = None
    video_container_asset_pointer: ChatGPTAssetPointer | None = None
    frame_asset_pointers: list[ChatGPTAssetPointer | None] | None = None

    @model_validator(mode="before")
    @classmethod
    def _lift_legacy_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"content_type": "text", "text": data}
        if data is None:
            return {}
        return data


# ---------------------------------------------------------------------------
# Messages and the node tree
# ---------------------------------------------------------------------------


class ChatGPTAuthor(BaseModel):
    role: str
    name: str | None = None


class ChatGPTContent(BaseModel):
    content_type: str | None = None
    parts: list[ChatGPTContentPart] | None = None


class ChatGPTMessageMetadata(BaseModel):
    is_user_system_message: bool | None = None


class ChatGPTMessage(BaseModel):
    id: str | None = None
    author: ChatGPTAuthor
    content: ChatGPTContent
    metadata: ChatGPTMessageMetadata | None = None
    create_time: float | None = None

    @property
    def is_user_system_message(self) -> bool:
        return bool(self.metadata and self.metadata.is_user_system_message)


class ChatGPTNode(BaseModel):
    id: str | None = None
    message: ChatGPTMessage | None = None
    parent: str | None = None
    children: list[str] = Field(default_factory=list)


class ChatGPTConversation(BaseModel):
    """One entry of the top-level ``conversations.json`` array."""

    id: str | None = None
    conversation_id: str | None = None
    title: str | None = None
    create_time: float | None = None
    update_time: float | None = None
    current_node: str | None = None
    mapping: dict[str, ChatGPTNode] = Field(default_factory=dict)
