"""End-to-end tests for ConversationMessageFactory against the mock capabilities."""

from __future__ import annotations

import pytest

from conversation_display.conversation.message import ConversationMessageFactory
from conversation_display.conversation.settings import DisplaySettings
from conversation_display.core.enums import RecordKind, Style
from conversation_display.core.errors import LookupUnavailable, NameNotFound
from conversation_display.core.models import Mention, MessageRecord, StyledRange, TextRange
from conversation_display.mock import (
    MockDirectory,
    MockMentionStore,
    create_mock_mentions,
    create_mock_records,
)


@pytest.fixture()
def store() -> MockMentionStore:
    return MockMentionStore()


@pytest.fixture()
def directory() -> MockDirectory:
    return MockDirectory()


@pytest.fixture()
def factory(store, directory) -> ConversationMessageFactory:
    return ConversationMessageFactory(store, directory)


@pytest.fixture()
def records() -> dict[int, MessageRecord]:
    return create_mock_records()


def test_query_resolves_and_formats(factory, store, directory, records) -> None:
    message = factory.create_by_query(records[3])

    assert store.queries == [3]
    assert directory.lookups == ["recipient-alice", "recipient-charlie"]
    body = message.get_display_body()
    assert body.text == "@Alice and @Charlie Brown: meeting moved to 3pm"
    assert [m.range.slice(body.text) for m in body.mentions] == ["@Alice", "@Charlie Brown"]
    assert body.styles == (StyledRange(TextRange(27, 7), Style.BOLD),)


def test_query_with_repeated_recipient(factory, directory, records) -> None:
    message = factory.create_by_query(records[4])

    assert directory.lookups == ["recipient-diana", "recipient-bob"]
    assert [m.range for m in message.get_mentions()] == [
        TextRange(5, 3),
        TextRange(19, 4),
        TextRange(31, 3),
    ]
    body = message.get_display_body()
    assert body.text == "ping @Di now and @Bob later, @Di too"
    assert [m.range.slice(body.text) for m in body.mentions] == ["@Di", "@Bob", "@Di"]
    assert body.styles == (StyledRange(TextRange(9, 3), Style.BOLD),)


def test_query_without_stored_mentions_is_empty(factory, store, directory, records) -> None:
    message = factory.create_by_query(records[5])

    assert store.queries == [5]
    assert directory.lookups == []
    assert not message.has_cached_body
    assert message.get_display_body().text == "no mentions but bold text"


@pytest.mark.parametrize("entry_point", ["empty", "resolved", "placeholders", "query"])
def test_non_multimedia_record_never_touches_capabilities(
    factory, store, directory, records, entry_point: str
) -> None:
    sms = records[1]
    mentions = [Mention("recipient-bob", TextRange(0, 5))]
    if entry_point == "empty":
        message = factory.create_empty(sms)
    elif entry_point == "resolved":
        message = factory.create_with_resolved_data(sms, "@Bob sms", mentions)
    elif entry_point == "placeholders":
        message = factory.create_with_placeholders(sms, mentions)
    else:
        message = factory.create_by_query(sms)

    assert store.queries == []
    assert directory.lookups == []
    assert not message.has_cached_body
    assert message.get_mentions() == ()
    assert message.get_display_body().text == "plain sms with no mentions"


def test_placeholders_skip_the_store(factory, store, directory, records) -> None:
    mentions = create_mock_mentions()[2]
    message = factory.create_with_placeholders(records[2], mentions)

    assert store.queries == []
    assert directory.lookups == ["recipient-bob"]
    assert message.get_display_body().text == "hey @Bob are you coming?"
    assert message.get_mentions() == (Mention("recipient-bob", TextRange(4, 4)),)


def test_empty_placeholder_list_is_resolved_empty(factory, directory, records) -> None:
    message = factory.create_with_placeholders(records[2], [])
    assert directory.lookups == []
    assert not message.has_cached_body
    assert message.get_display_body().text == records[2].body


def test_resolved_data_skips_resolution(factory, store, directory, records) -> None:
    mentions = [Mention("recipient-bob", TextRange(4, 4))]
    message = factory.create_with_resolved_data(records[2], "hey @Bob *are* you coming?", mentions)

    assert store.queries == []
    assert directory.lookups == []
    body = message.get_display_body()
    assert body.text == "hey @Bob are you coming?"
    assert body.mentions == (Mention("recipient-bob", TextRange(4, 4)),)


@pytest.mark.parametrize("body,mentions", [("hey @Bob", []), ("hey @Bob", None), (None, [])])
def test_resolved_data_demotes_without_mentions(factory, records, body, mentions) -> None:
    message = factory.create_with_resolved_data(records[2], body, mentions)
    assert not message.has_cached_body
    assert message.get_mentions() == ()


def test_resolved_data_without_body_is_resolved_empty(factory, records) -> None:
    mentions = [Mention("recipient-bob", TextRange(4, 4))]
    message = factory.create_with_resolved_data(records[2], None, mentions)
    assert not message.has_cached_body


def test_same_record_built_twice_is_equal(factory, records) -> None:
    first = factory.create_by_query(records[3])
    second = factory.create_empty(records[3])
    assert first == second
    assert first.get_fingerprint() == second.get_fingerprint()
    assert first.get_display_body() != second.get_display_body()


def test_store_failure_propagates(factory, store, records) -> None:
    store.available = False
    with pytest.raises(LookupUnavailable):
        factory.create_by_query(records[2])


def test_missing_name_propagates(store, records) -> None:
    factory = ConversationMessageFactory(store, MockDirectory({}))
    with pytest.raises(NameNotFound):
        factory.create_by_query(records[2])


def test_missing_capabilities_raise(records) -> None:
    factory = ConversationMessageFactory()
    with pytest.raises(RuntimeError):
        factory.create_by_query(records[2])
    with pytest.raises(RuntimeError):
        factory.create_with_placeholders(records[2], create_mock_mentions()[2])
    assert factory.create_by_query(records[1]).get_mentions() == ()


def test_settings_flow_into_messages(store, directory, records) -> None:
    settings = DisplaySettings(format_delimiter="_", emphasis_style=Style.ITALIC, fingerprint_digest="md5")
    factory = ConversationMessageFactory(store, directory, settings)
    record = MessageRecord(message_id=99, kind=RecordKind.MMS, body="_so_ *what*")

    message = factory.create_empty(record)
    body = message.get_display_body()
    assert body.text == "so *what*"
    assert body.styles == (StyledRange(TextRange(0, 2), Style.ITALIC),)
    assert message.get_fingerprint() == message.get_unique_id("md5")
    assert factory.settings is settings
