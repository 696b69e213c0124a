from __future__ import annotations

from typing import Protocol, runtime_checkable

from conversation_display.core.enums import RecordKind
from conversation_display.core.models import Mention


@runtime_checkable
class MessageRecordLike(Protocol):
    """Externally owned message record. Read-only from this package's side."""

    @property
    def message_id(self) -> int: ...

    @property
    def kind(self) -> RecordKind: ...

    def is_multimedia_capable(self) -> bool:
        """Return True if the record may carry mentions."""
        ...

    def get_raw_display_body(self) -> str: ...


class MentionStore(Protocol):
    def get_mentions_for_message(self, message_id: int) -> list[Mention]:
        """Return the placeholder mentions stored for a message, ordered by start.

        May raise LookupUnavailable. Blocking.
        """
        ...


class DisplayNameLookup(Protocol):
    def resolve_display_name(self, recipient_id: str) -> str:
        """Return the text that replaces a placeholder for *recipient_id*.

        May raise NameNotFound or LookupUnavailable. Must be deterministic
        within one resolution pass. Blocking.
        """
        ...
