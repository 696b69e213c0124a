"""View-level message model and the factory that builds it.

A :class:`ConversationMessage` wraps an externally owned message record
together with its mention-resolved, emphasis-formatted body. It is a
disposable presentation cache: build a fresh one per display pass, and
compare instances by the record they wrap, never by body content.
"""

from __future__ import annotations

import logging
from typing import Sequence

from conversation_display.core.enums import RecordKind, Style
from conversation_display.core.errors import ConversationDisplayError
from conversation_display.core.models import AnnotatedText, Mention
from conversation_display.core.services import DisplayNameLookup, MentionStore, MessageRecordLike

from .fingerprint import DEFAULT_DIGEST, check_digest, fingerprint
from .markup import DEFAULT_DELIMITER, apply_formatting
from .mention_resolver import resolve_mentions
from .settings import DisplaySettings

logger = logging.getLogger(__name__)


class ConversationMessage:
    """Immutable pairing of a message record with its display body.

    ``body`` is only kept when the record is multimedia-capable and has at
    least one mention; otherwise the display body is derived from the record
    on every read.
    """

    __slots__ = ("_record", "_mentions", "_display_body", "_delimiter", "_style", "_digest")

    def __init__(
        self,
        record: MessageRecordLike,
        body: AnnotatedText | str | None = None,
        mentions: Sequence[Mention] | None = None,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        style: Style = Style.BOLD,
        digest: str = DEFAULT_DIGEST,
    ) -> None:
        self._record = record
        self._delimiter = delimiter
        self._style = style
        self._digest = check_digest(digest)
        self._mentions: tuple[Mention, ...] = tuple(mentions or ())
        self._display_body: AnnotatedText | None = None

        if body is None or not self._mentions or not record.is_multimedia_capable():
            self._mentions = ()
            return

        text = body if isinstance(body, str) else body.text
        styles = () if isinstance(body, str) else body.styles
        annotated = AnnotatedText(text, mentions=self._mentions, styles=styles)
        self._display_body = self._format(annotated)

    @property
    def record(self) -> MessageRecordLike:
        return self._record

    def get_message_record(self) -> MessageRecordLike:
        return self._record

    def get_mentions(self) -> tuple[Mention, ...]:
        """Resolved mentions, anchored to the mention-resolved body."""
        return self._mentions

    @property
    def has_cached_body(self) -> bool:
        return self._display_body is not None

    def get_display_body(self) -> AnnotatedText:
        """Return the body to display, with emphasis applied.

        Uses the cached mention-resolved body when there is one, otherwise the
        record's raw body. Never raises for formatting problems.
        """
        if self._display_body is not None:
            return self._display_body
        return self._format(AnnotatedText.plain(self._record.get_raw_display_body()))

    def get_fingerprint(self) -> int:
        return self.get_unique_id(self._digest)

    def get_unique_id(self, digest_name: str) -> int:
        return fingerprint(self._record.kind, self._record.message_id, digest_name)

    def _format(self, annotated: AnnotatedText) -> AnnotatedText:
        try:
            return apply_formatting(annotated, self._delimiter, self._style)
        except (ConversationDisplayError, ValueError):
            logger.warning(
                "Formatting failed for message %s, showing plain text",
                self._record.message_id,
                exc_info=True,
            )
            return AnnotatedText(annotated.text, mentions=annotated.mentions)

    def _key(self) -> tuple[RecordKind, int]:
        return RecordKind(self._record.kind), self._record.message_id

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ConversationMessage):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        kind, message_id = self._key()
        return f"ConversationMessage({kind.value}::{message_id}, mentions={len(self._mentions)})"


class ConversationMessageFactory:
    """Builds :class:`ConversationMessage` instances, doing only the work needed.

    ``create_empty`` and ``create_with_resolved_data`` never touch the
    injected capabilities and are safe anywhere. ``create_with_placeholders``
    and ``create_by_query`` may block on the directory and mention store and
    belong on a worker thread.

    Usage::

        factory = ConversationMessageFactory(mention_store, directory, settings)
        message = factory.create_by_query(record)
        body = message.get_display_body()
    """

    def __init__(
        self,
        mention_store: MentionStore | None = None,
        directory: DisplayNameLookup | None = None,
        settings: DisplaySettings | None = None,
    ) -> None:
        self._mention_store = mention_store
        self._directory = directory
        self._settings = settings if settings is not None else DisplaySettings()

    @property
    def settings(self) -> DisplaySettings:
        return self._settings

    def create_empty(self, record: MessageRecordLike) -> ConversationMessage:
        """Wrap a record assumed to have no mentions."""
        return self._build(record)

    def create_with_resolved_data(
        self,
        record: MessageRecordLike,
        body: AnnotatedText | str | None,
        mentions: Sequence[Mention] | None,
    ) -> ConversationMessage:
        """Wrap a body and mentions that already carry display names."""
        if record.is_multimedia_capable() and body is not None and mentions:
            return self._build(record, body, mentions)
        return self.create_empty(record)

    def create_with_placeholders(
        self, record: MessageRecordLike, mentions: Sequence[Mention] | None
    ) -> ConversationMessage:
        """Resolve placeholder *mentions* against the record body. Blocking."""
        if record.is_multimedia_capable() and mentions:
            return self._resolve(record, mentions)
        return self.create_empty(record)

    def create_by_query(self, record: MessageRecordLike) -> ConversationMessage:
        """Query the mention store for the record, then resolve. Blocking."""
        if record.is_multimedia_capable():
            if self._mention_store is None:
                raise RuntimeError("No mention store configured for querying mentions.")
            mentions = self._mention_store.get_mentions_for_message(record.message_id)
            logger.debug("Found %d mentions for message %s", len(mentions), record.message_id)
            if mentions:
                return self._resolve(record, mentions)
        return self.create_empty(record)

    def _resolve(
        self, record: MessageRecordLike, mentions: Sequence[Mention]
    ) -> ConversationMessage:
        if self._directory is None:
            raise RuntimeError("No display-name directory configured for resolving mentions.")
        resolved = resolve_mentions(
            record.get_raw_display_body(), mentions, self._directory.resolve_display_name
        )
        return self._build(record, resolved.body, resolved.mentions)

    def _build(
        self,
        record: MessageRecordLike,
        body: AnnotatedText | str | None = None,
        mentions: Sequence[Mention] | None = None,
    ) -> ConversationMessage:
        return ConversationMessage(
            record,
            body,
            mentions,
            delimiter=self._settings.format_delimiter,
            style=self._settings.emphasis_style,
            digest=self._settings.fingerprint_digest,
        )
