"""Enums for record kinds and text styles."""

from enum import StrEnum


class RecordKind(StrEnum):
    """Storage kind of a message record.

    The value doubles as the fingerprint prefix, so it must stay stable:
        SMS: plain text message, never carries mentions
        MMS: multimedia-capable message, may carry mentions
    """

    SMS = "SMS"
    MMS = "MMS"


class Style(StrEnum):
    """Style tags attached to emphasis spans."""

    BOLD = "bold"
    ITALIC = "italic"
    MONOSPACE = "monospace"
    STRIKETHROUGH = "strikethrough"
