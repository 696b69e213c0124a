"""Mention resolution and inline emphasis for conversation message bodies."""

from .conversation import ConversationMessage, ConversationMessageFactory, DisplaySettings
from .core import AnnotatedText, Mention, MessageRecord, RecordKind, Style, StyledRange, TextRange

__all__ = [
    "AnnotatedText",
    "ConversationMessage",
    "ConversationMessageFactory",
    "DisplaySettings",
    "Mention",
    "MessageRecord",
    "RecordKind",
    "Style",
    "StyledRange",
    "TextRange",
]
