from __future__ import annotations

import pytest

from gpt_markdown.core.exceptions import CyclicConversationError
from gpt_markdown.core.types import NormalizedMessage, TextPart
from gpt_markdown.providers.chatgpt.conversations import (
    author_label,
    is_candidate,
    iter_path,
    linearize,
    to_normalized_message,
)
from gpt_markdown.providers.chatgpt.schemas import ChatGPTConversation, ChatGPTMessage
from tests.conftest import CHATGPT_CONVERSATIONS
from tests.factories import chain, message


def _texts(messages: list[NormalizedMessage]) -> list[tuple[str, list[str]]]:
    return [(m.author, [p.text for p in m.parts]) for m in messages]


class TestIterPath:
    def test_walks_leaf_to_root(self):
        conv = chain(message("user", ["a"]), message("assistant", ["b"]), None)
        assert list(iter_path(conv)) == ["n3", "n2", "n1"]

    def test_empty_current_node(self):
        conv = chain(message("user", ["a"]))
        conv.current_node = ""
        assert list(iter_path(conv)) == []

    def test_missing_current_node(self):
        conv = chain(message("user", ["a"]))
        conv.current_node = "nope"
        assert list(iter_path(conv)) == []

    def test_missing_parent_ends_walk(self):
        conv = ChatGPTConversation.model_validate(
            {
                "current_node": "b",
                "mapping": {
                    "b": {"message": message("user", ["x"]), "parent": "gone"}
                },
            }
        )
        assert list(iter_path(conv)) == ["b"]

    def test_cycle_raises(self):
        conv = ChatGPTConversation.model_validate(
            {
                "title": "Loop",
                "current_node": "a",
                "mapping": {
                    "a": {"message": None, "parent": "b"},
                    "b": {"message": None, "parent": "a"},
                },
            }
        )
        with pytest.raises(CyclicConversationError) as exc_info:
            list(iter_path(conv))
        assert exc_info.value.node_id == "a"


class TestAuthorLabel:
    @pytest.mark.parametrize(
        ("role", "user_system", "expected"),
        [
            ("assistant", False, "CHATGPT"),
            ("tool", False, "CHATGPT"),
            ("system", True, "Custom User Info"),
            ("system", False, "system"),
            ("user", False, "user"),
            ("critic", False, "critic"),
        ],
    )
    def test_labels(self, role, user_system, expected):
        msg = ChatGPTMessage.model_validate(
            message(role, ["x"], user_system=user_system)
        )
        assert author_label(msg) == expected


class TestIsCandidate:
    def test_empty_parts(self):
        assert not is_candidate(ChatGPTMessage.model_validate(message("user", [])))

    def test_hidden_system_prompt(self):
        msg = ChatGPTMessage.model_validate(message("system", ["You are ChatGPT"]))
        assert not is_candidate(msg)

    def test_user_system_message(self):
        msg = ChatGPTMessage.model_validate(
            message("system", ["About me"], user_system=True)
        )
        assert is_candidate(msg)


class TestLinearize:
    def test_chronological_order_and_remap(self):
        conv = chain(message("user", ["Hi"]), message("assistant", ["Hello!"]))
        assert linearize(conv) == [
            NormalizedMessage(author="user", parts=[TextPart(text="Hi")]),
            NormalizedMessage(author="CHATGPT", parts=[TextPart(text="Hello!")]),
        ]

    def test_placeholder_nodes_skipped_but_followed(self):
        conv = chain(None, message("user", ["a"]), None, message("tool", ["b"]))
        assert _texts(linearize(conv)) == [("user", ["a"]), ("CHATGPT", ["b"])]

    def test_empty_or_unknown_current_node(self):
        conv = chain(message("user", ["a"]))
        conv.current_node = ""
        assert linearize(conv) == []
        conv.current_node = "missing"
        assert linearize(conv) == []
        conv.current_node = None
        assert linearize(conv) == []

    def test_non_text_content_type_excluded(self):
        conv = chain(
            message("user", ["look"], content_type="image"),
            message("assistant", ["ok"]),
        )
        assert _texts(linearize(conv)) == [("CHATGPT", ["ok"])]

    def test_multimodal_included(self):
        conv = chain(message("user", ["a", "b"], content_type="multimodal"))
        assert _texts(linearize(conv)) == [("user", ["a", "b"])]

    def test_user_system_message_included(self):
        conv = chain(
            message("system", ["I like tea"], user_system=True),
            message("user", ["hi"]),
        )
        assert _texts(linearize(conv)) == [
            ("Custom User Info", ["I like tea"]),
            ("user", ["hi"]),
        ]

    def test_hidden_system_message_excluded(self):
        conv = chain(
            message("system", ["I like tea"], user_system=False),
            message("user", ["hi"]),
        )
        assert _texts(linearize(conv)) == [("user", ["hi"])]

    def test_message_with_nothing_to_render_dropped(self):
        conv = chain(
            message("user", ["", {"content_type": "tether_quote"}]),
            message("assistant", ["answer"]),
        )
        assert _texts(linearize(conv)) == [("CHATGPT", ["answer"])]

    def test_only_current_branch(self):
        conv = ChatGPTConversation.model_validate(CHATGPT_CONVERSATIONS[0])
        assert _texts(linearize(conv)) == [
            ("user", ["Where should I go in Portugal?"]),
            ("CHATGPT", ["Try Lisbon."]),
        ]

    def test_cycle_propagates(self):
        conv = chain(message("user", ["a"]), message("assistant", ["b"]))
        conv.mapping["n1"].parent = "n2"
        with pytest.raises(CyclicConversationError):
            linearize(conv)


class TestReversalConsistency:
    @pytest.mark.parametrize("index", range(len(CHATGPT_CONVERSATIONS)))
    def test_matches_root_to_leaf_walk(self, index):
        conv = ChatGPTConversation.model_validate(CHATGPT_CONVERSATIONS[index])

        # Invert the parent links along the current branch, then walk down.
        child_of: dict[str | None, str] = {}
        for node_id in iter_path(conv):
            child_of[conv.mapping[node_id].parent or None] = node_id
        forward: list[str] = []
        cursor = child_of.get(None)
        while cursor is not None:
            forward.append(cursor)
            cursor = child_of.get(cursor)

        assert forward == list(reversed(list(iter_path(conv))))

        expected = []
        for node_id in forward:
            msg = conv.mapping[node_id].message
            normalized = to_normalized_message(msg) if msg is not None else None
            if normalized is not None:
                expected.append(normalized)
        assert linearize(conv) == expected
