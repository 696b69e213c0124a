"""Exception taxonomy for conversation display building."""

from __future__ import annotations


class ConversationDisplayError(Exception):
    """Base class for every error raised by conversation_display."""


class InvalidRange(ConversationDisplayError, ValueError):
    """A text range has negative offsets or runs past its buffer."""


class OverlappingEdit(ConversationDisplayError, ValueError):
    """Edits handed to the remapper are unsorted or overlap each other."""


class OverlappingMention(OverlappingEdit):
    """Two placeholder mentions claim overlapping parts of the body."""


class LookupUnavailable(ConversationDisplayError):
    """An external mention store or name directory could not be reached."""


class NameNotFound(ConversationDisplayError, LookupError):
    """A recipient has no resolvable display name."""

    def __init__(self, recipient_id: str) -> None:
        super().__init__(f"No display name for recipient {recipient_id!r}")
        self.recipient_id = recipient_id
