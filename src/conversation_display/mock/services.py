"""Mock capabilities that record calls and can be told to fail."""

from __future__ import annotations

from conversation_display.core.errors import LookupUnavailable, NameNotFound
from conversation_display.core.models import Mention

from .data import MOCK_RECIPIENTS, create_mock_mentions


class MockMentionStore:
    """Mock implementation of MentionStore for testing and development."""

    def __init__(self, mentions: dict[int, list[Mention]] | None = None) -> None:
        self._mentions = mentions if mentions is not None else create_mock_mentions()
        self.queries: list[int] = []
        self.available = True

    def get_mentions_for_message(self, message_id: int) -> list[Mention]:
        self.queries.append(message_id)
        if not self.available:
            raise LookupUnavailable("Mock mention store is offline")
        return list(self._mentions.get(message_id, []))


class MockDirectory:
    """Mock implementation of DisplayNameLookup for testing and development."""

    def __init__(self, names: dict[str, str] | None = None, prefix: str = "@") -> None:
        self._names = names if names is not None else dict(MOCK_RECIPIENTS)
        self._prefix = prefix
        self.lookups: list[str] = []
        self.available = True

    def resolve_display_name(self, recipient_id: str) -> str:
        self.lookups.append(recipient_id)
        if not self.available:
            raise LookupUnavailable("Mock directory is offline")
        name = self._names.get(recipient_id)
        if name is None:
            raise NameNotFound(recipient_id)
        return f"{self._prefix}{name}"
