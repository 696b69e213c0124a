from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from .enums import RecordKind, Style
from .errors import InvalidRange


@dataclass(slots=True, frozen=True)
class TextRange:
    """Half-open ``[start, start + length)`` range over one text buffer version."""

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise InvalidRange(f"Range start must be >= 0, got {self.start}")
        if self.length < 0:
            raise InvalidRange(f"Range length must be >= 0, got {self.length}")

    @classmethod
    def within(cls, text: str, start: int, length: int) -> TextRange:
        """Build a range and check it fits inside *text*."""
        text_range = cls(start, length)
        text_range.check_within(text)
        return text_range

    @property
    def end(self) -> int:
        return self.start + self.length

    def check_within(self, text: str) -> None:
        if self.end > len(text):
            raise InvalidRange(
                f"Range [{self.start}, {self.end}) exceeds buffer of length {len(text)}"
            )

    def overlaps(self, other: TextRange) -> bool:
        return self.start < other.end and other.start < self.end

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(slots=True, frozen=True)
class Mention:
    recipient_id: str
    range: TextRange  # Placeholder range before resolution, display name after


@dataclass(slots=True, frozen=True)
class StyledRange:
    range: TextRange
    style: Style = Style.BOLD


@dataclass(slots=True, frozen=True)
class AnnotatedText:
    """Immutable text buffer carrying mention and style annotations.

    Every annotation is anchored to ``text``; construction fails with
    :class:`InvalidRange` if any of them runs past the end of the buffer.
    """

    text: str
    mentions: tuple[Mention, ...] = ()
    styles: tuple[StyledRange, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "mentions", tuple(self.mentions))
        object.__setattr__(self, "styles", tuple(self.styles))
        for mention in self.mentions:
            mention.range.check_within(self.text)
        for styled in self.styles:
            styled.range.check_within(self.text)

    @classmethod
    def plain(cls, text: str) -> AnnotatedText:
        return cls(text)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    @property
    def is_plain(self) -> bool:
        return not self.mentions and not self.styles


@dataclass(slots=True)
class MessageRecord:
    message_id: int
    kind: RecordKind
    body: str
    thread_id: int = 0
    sender_id: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_multimedia_capable(self) -> bool:
        return self.kind == RecordKind.MMS

    def get_raw_display_body(self) -> str:
        return self.body
