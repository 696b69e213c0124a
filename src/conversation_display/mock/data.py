"""Mock data constants and factory helpers for testing and development."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from conversation_display.conversation.mention_resolver import MENTION_PLACEHOLDER
from conversation_display.core.enums import RecordKind
from conversation_display.core.models import Mention, MessageRecord, TextRange

P = MENTION_PLACEHOLDER

# Format: (recipient_id, display name)
MOCK_RECIPIENTS: list[tuple[str, str]] = [
    ("recipient-alice", "Alice"),
    ("recipient-bob", "Bob"),
    ("recipient-charlie", "Charlie Brown"),
    ("recipient-diana", "Di"),
]

# Format: (message_id, kind, body)
MOCK_BODIES: list[tuple[int, RecordKind, str]] = [
    (1, RecordKind.SMS, "plain *sms* with no mentions"),
    (2, RecordKind.MMS, f"hey {P} are you coming?"),
    (3, RecordKind.MMS, f"{P} and {P}: *meeting* moved to 3pm"),
    (4, RecordKind.MMS, f"ping {P} *now* and {P} later, {P} too"),
    (5, RecordKind.MMS, "no mentions but *bold* text"),
]


def create_mock_records() -> dict[int, MessageRecord]:
    base = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)
    return {
        message_id: MessageRecord(
            message_id=message_id,
            kind=kind,
            body=body,
            thread_id=1,
            sender_id="recipient-alice",
            created_at=base + timedelta(minutes=message_id),
        )
        for message_id, kind, body in MOCK_BODIES
    }


def create_mock_mentions() -> dict[int, list[Mention]]:
    """Placeholder mentions for the mock records, keyed by message id."""
    mentions: dict[int, list[Mention]] = {}
    recipients = {
        2: ["recipient-bob"],
        3: ["recipient-alice", "recipient-charlie"],
        4: ["recipient-diana", "recipient-bob", "recipient-diana"],
    }
    for message_id, _kind, body in MOCK_BODIES:
        offsets = [i for i, ch in enumerate(body) if ch == P]
        if not offsets:
            continue
        mentions[message_id] = [
            Mention(recipient_id, TextRange(offset, 1))
            for recipient_id, offset in zip(recipients[message_id], offsets)
        ]
    return mentions
