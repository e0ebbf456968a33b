"""Pull the latest user message text out of chat-message payloads.

The chat endpoint receives messages in several shapes: UI messages with a
``parts`` list, plain ``{"role", "content"}`` dicts, content-block lists, or a
single message instead of a list. Messages without a role count as user
messages.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from glom import Coalesce, glom

_ROLE = Coalesce("role", default="user")
_PARTS = Coalesce("parts", default=None)
_CONTENT = Coalesce("content", default=None)
_PART_TYPE = Coalesce("type", default="text")
_PART_TEXT = Coalesce("text", default="")


def _text_from_blocks(blocks: list[Any]) -> str:
    texts = []
    for block in blocks:
        if isinstance(block, str):
            texts.append(block)
        elif isinstance(block, Mapping) and glom(block, _PART_TYPE) == "text":
            text = glom(block, _PART_TEXT)
            if isinstance(text, str):
                texts.append(text)
    return " ".join(t for t in texts if t)


def message_text(message: Any) -> str:
    """Return the text of one message, or "" if it has none."""
    if not isinstance(message, Mapping):
        return ""
    parts = glom(message, _PARTS)
    if isinstance(parts, list):
        text = _text_from_blocks(parts)
        if text:
            return text
    content = glom(message, _CONTENT)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return _text_from_blocks(content)
    return ""


def latest_user_text(messages: Any) -> str:
    """Return the text of the last user message.

    Args:
        messages: A list of messages or a single message dict

    Returns:
        The message text, or "" when there is no user message
    """
    if isinstance(messages, Mapping):
        messages = [messages]
    if not isinstance(messages, list):
        return ""
    for message in reversed(messages):
        if isinstance(message, Mapping) and glom(message, _ROLE) == "user":
            return message_text(message)
    return ""
