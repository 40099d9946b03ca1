from gpt_markdown.core.types import ConversionResult, NormalizedMessage
from gpt_markdown.facade import ExportConverter
from gpt_markdown.providers.chatgpt import (
    ChatGPTConversation,
    iter_conversations,
    linearize,
    normalize_parts,
)
from gpt_markdown.render import render_conversation, render_markdown

__all__ = [
    "ChatGPTConversation",
    "ConversionResult",
    "ExportConverter",
    "NormalizedMessage",
    "iter_conversations",
    "linearize",
    "normalize_parts",
    "render_conversation",
    "render_markdown",
]
