from gpt_markdown.providers.chatgpt.conversations import (
    author_label,
    iter_path,
    linearize,
)
from gpt_markdown.providers.chatgpt.loader import (
    iter_conversations,
    iter_records,
    open_export,
    parse_conversation,
)
from gpt_markdown.providers.chatgpt.parts import normalize_part, normalize_parts
from gpt_markdown.providers.chatgpt.schemas import (
    ChatGPTAssetPointer,
    ChatGPTContentPart,
    ChatGPTConversation,
    ChatGPTMessage,
    ChatGPTNode,
)

__all__ = [
    "ChatGPTAssetPointer",
    "ChatGPTContentPart",
    "ChatGPTConversation",
    "ChatGPTMessage",
    "ChatGPTNode",
    "author_label",
    "iter_conversations",
    "iter_path",
    "iter_records",
    "linearize",
    "normalize_part",
    "normalize_parts",
    "open_export",
    "parse_conversation",
]
