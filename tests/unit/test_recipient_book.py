"""Tests for RecipientBook."""

import pytest

from conversation_display.conversation.recipient_book import Recipient, RecipientBook
from conversation_display.conversation.settings import DisplaySettings
from conversation_display.core.errors import LookupUnavailable, NameNotFound


def test_recipient_prefers_system_name() -> None:
    assert Recipient("r1", profile_name="Profile", system_name="Contact").display_name == "Contact"
    assert Recipient("r1", profile_name="Profile").display_name == "Profile"


def test_recipient_book_add_and_resolve() -> None:
    book = RecipientBook()
    book.add_recipient({"recipient_id": "r1", "profile_name": "Alice"})

    assert book.get("r1") is not None
    assert book.resolve_display_name("r1") == "@Alice"


def test_recipient_book_update_replaces_entry() -> None:
    book = RecipientBook()
    book.add_recipient({"recipient_id": "r1", "profile_name": "Alice"})
    book.add_recipient(Recipient("r1", profile_name="Alicia"))

    assert len(book.list_recipients()) == 1
    assert book.resolve_display_name("r1") == "@Alicia"


def test_recipient_book_ignores_entries_without_id() -> None:
    book = RecipientBook()
    book.add_recipient({"profile_name": "Nobody"})
    assert book.list_recipients() == []


def test_missing_recipient_raises_without_label() -> None:
    book = RecipientBook()
    with pytest.raises(NameNotFound):
        book.resolve_display_name("ghost")


def test_missing_recipient_uses_unknown_label() -> None:
    book = RecipientBook(DisplaySettings(unknown_recipient_label="Unknown"))
    book.add_recipient(Recipient("blank"))
    assert book.resolve_display_name("ghost") == "@Unknown"
    assert book.resolve_display_name("blank") == "@Unknown"


def test_custom_mention_prefix() -> None:
    book = RecipientBook(DisplaySettings(mention_prefix=""))
    book.add_recipient(Recipient("r1", profile_name="Alice"))
    assert book.resolve_display_name("r1") == "Alice"


def test_closed_book_is_unavailable() -> None:
    book = RecipientBook()
    book.add_recipient(Recipient("r1", profile_name="Alice"))
    book.close()
    with pytest.raises(LookupUnavailable):
        book.resolve_display_name("r1")

