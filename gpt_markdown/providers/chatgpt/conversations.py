"""Linearization of a ChatGPT conversation tree into chronological messages."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from gpt_markdown.core.exceptions import CyclicConversationError
from gpt_markdown.core.types import NormalizedMessage
from gpt_markdown.providers.chatgpt.parts import normalize_parts
from gpt_markdown.providers.chatgpt.schemas import ChatGPTConversation, ChatGPTMessage

logger = logging.getLogger(__name__)

ASSISTANT_LABEL = "CHATGPT"
CUSTOM_INSTRUCTIONS_LABEL = "Custom User Info"

RENDERABLE_CONTENT_TYPES = frozenset({"text", "multimodal"})


def iter_path(conversation: ChatGPTConversation) -> Iterator[str]:
    """Yield node ids from ``current_node`` up to the root.

    The walk ends at an empty parent id or at an id missing from
    ``mapping``. Raises :class:`CyclicConversationError` if a node is
    reached twice.
    """
    seen: set[str] = set()
    node_id = conversation.current_node
    while node_id:
        node = conversation.mapping.get(node_id)
        if node is None:
            logger.debug("Node %s not in mapping, ending walk", node_id)
            return
        if node_id in seen:
            raise CyclicConversationError(node_id, conversation.title)
        seen.add(node_id)
        yield node_id
        node_id = node.parent


def author_label(message: ChatGPTMessage) -> str:
    """Display label for a message author."""
    role = message.author.role
    if role in ("assistant", "tool"):
        return ASSISTANT_LABEL
    if role == "system" and message.is_user_system_message:
        return CUSTOM_INSTRUCTIONS_LABEL
    return role


def is_candidate(message: ChatGPTMessage) -> bool:
    """Messages with content that are not hidden system prompts."""
    if not message.content.parts:
        return False
    return message.author.role != "system" or message.is_user_system_message


def to_normalized_message(message: ChatGPTMessage) -> NormalizedMessage | None:
    if not is_candidate(message):
        return None
    if message.content.content_type not in RENDERABLE_CONTENT_TYPES:
        return None
    parts = normalize_parts(message.content.parts or [])
    if not parts:
        return None
    return NormalizedMessage(author=author_label(message), parts=parts)


def linearize(conversation: ChatGPTConversation) -> list[NormalizedMessage]:
    """Return the messages on the current branch in chronological order."""
    messages: list[NormalizedMessage] = []
    for node_id in iter_path(conversation):
        message = conversation.mapping[node_id].message
        if message is None:
            continue
        normalized = to_normalized_message(message)
        if normalized is None:
            logger.debug("Skipping node %s (%s)", node_id, message.author.role)
            continue
        messages.append(normalized)

    messages.reverse()
    return messages
