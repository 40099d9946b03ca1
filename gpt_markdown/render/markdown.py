"""Markdown rendering of linearized conversations."""

from __future__ import annotations

from collections.abc import Sequence

from gpt_markdown.core.types import (
    AssetPart,
    NormalizedMessage,
    NormalizedPart,
    TextPart,
    TranscriptPart,
)
from gpt_markdown.providers.chatgpt.conversations import linearize
from gpt_markdown.providers.chatgpt.schemas import ChatGPTConversation

ASSET_PLACEHOLDER = "[File]: [asset_pointer]"
TRANSCRIPT_MARKER = "[Transcript]"
MESSAGE_SEPARATOR = "\n---\n\n"


def render_part(part: NormalizedPart) -> str | None:
    """Body text for one part, or ``None`` when it renders nothing."""
    match part:
        case TextPart(text=text) if text:
            return text
        case TranscriptPart(transcript=transcript) if transcript:
            return f"{TRANSCRIPT_MARKER}\n{transcript}"
        case AssetPart():
            return ASSET_PLACEHOLDER
        case _:
            return None


def render_markdown(title: str, messages: Sequence[NormalizedMessage]) -> str:
    """Render *messages* under a ``# title`` heading.

    Each message becomes a bold author line followed by its part bodies,
    closed by a horizontal rule. Text is written verbatim, unescaped.
    """
    chunks = [f"# {title}\n\n"]
    for message in messages:
        chunks.append(f"**{message.author}:**\n\n")
        for part in message.parts:
            body = render_part(part)
            if body is not None:
                chunks.append(f"{body}\n\n")
        chunks.append(MESSAGE_SEPARATOR)
    return "".join(chunks)


def render_conversation(conversation: ChatGPTConversation) -> str:
    return render_markdown(conversation.title or "", linearize(conversation))
