from .enums import RecordKind, Style
from .errors import (
    ConversationDisplayError,
    InvalidRange,
    LookupUnavailable,
    NameNotFound,
    OverlappingEdit,
    OverlappingMention,
)
from .models import AnnotatedText, Mention, MessageRecord, StyledRange, TextRange
from .services import DisplayNameLookup, MentionStore, MessageRecordLike

__all__ = [
    "AnnotatedText",
    "ConversationDisplayError",
    "DisplayNameLookup",
    "InvalidRange",
    "LookupUnavailable",
    "Mention",
    "MentionStore",
    "MessageRecord",
    "MessageRecordLike",
    "NameNotFound",
    "OverlappingEdit",
    "OverlappingMention",
    "RecordKind",
    "Style",
    "StyledRange",
    "TextRange",
]
