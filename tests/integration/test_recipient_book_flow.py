"""Factory wired to the in-memory RecipientBook and MentionIndex."""

from __future__ import annotations

from conversation_display.conversation.mention_index import MentionIndex
from conversation_display.conversation.mention_resolver import MENTION_PLACEHOLDER as P
from conversation_display.conversation.message import ConversationMessageFactory
from conversation_display.conversation.recipient_book import Recipient, RecipientBook
from conversation_display.conversation.settings import DisplaySettings, apply_preset
from conversation_display.core.enums import RecordKind
from conversation_display.core.models import Mention, MessageRecord, TextRange


def test_unknown_recipient_label_fills_gaps() -> None:
    settings = apply_preset(DisplaySettings(), "signal")
    book = RecipientBook(settings)
    book.add_recipient(Recipient("r1", profile_name="Alice", system_name="Ally"))
    index = MentionIndex()
    record = MessageRecord(message_id=10, kind=RecordKind.MMS, body=f"{P}, {P}: *hi*")
    index.add_mentions(10, [Mention("r2", TextRange(3, 1)), Mention("r1", TextRange(0, 1))])

    factory = ConversationMessageFactory(index, book, settings)
    message = factory.create_by_query(record)

    body = message.get_display_body()
    assert body.text == "@Ally, @Unknown: hi"
    assert [m.recipient_id for m in message.get_mentions()] == ["r1", "r2"]
    assert [m.range.slice(body.text) for m in body.mentions] == ["@Ally", "@Unknown"]


def test_messages_in_one_pass_share_nothing() -> None:
    book = RecipientBook()
    book.add_recipient(Recipient("r1", profile_name="Alice"))
    index = MentionIndex()
    records = [
        MessageRecord(message_id=i, kind=RecordKind.MMS, body=f"{P} #{i}") for i in range(3)
    ]
    for record in records:
        index.add_mentions(record.message_id, [Mention("r1", TextRange(0, 1))])

    factory = ConversationMessageFactory(index, book)
    messages = [factory.create_by_query(record) for record in records]

    assert [m.get_display_body().text for m in messages] == ["@Alice #0", "@Alice #1", "@Alice #2"]
    assert len({m.get_fingerprint() for m in messages}) == 3
