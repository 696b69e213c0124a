"""In-memory mention index keyed by message id.

Satisfies the :class:`~conversation_display.core.services.MentionStore`
protocol for hosts that already hold their mentions in memory.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from conversation_display.core.models import Mention


class MentionIndex:
    def __init__(self) -> None:
        self._by_message: dict[int, list[Mention]] = defaultdict(list)

    def add_mentions(self, message_id: int, mentions: Iterable[Mention]) -> None:
        self._by_message[message_id].extend(mentions)

    def remove_for_message(self, message_id: int) -> None:
        self._by_message.pop(message_id, None)

    def get_mentions_for_message(self, message_id: int) -> list[Mention]:
        mentions = self._by_message.get(message_id, [])
        return sorted(mentions, key=lambda m: m.range.start)

    def get_mentions_for_messages(self, message_ids: Iterable[int]) -> dict[int, list[Mention]]:
        """Return mentions for every id that has any, skipping the rest."""
        result: dict[int, list[Mention]] = {}
        for message_id in message_ids:
            mentions = self.get_mentions_for_message(message_id)
            if mentions:
                result[message_id] = mentions
        return result

    def __len__(self) -> int:
        return sum(len(mentions) for mentions in self._by_message.values())
