from .config import load_settings_from_env
from .fingerprint import check_digest, fingerprint
from .logging_setup import configure_logging, reset_logging, set_stderr_level
from .markup import apply_formatting, find_delimiters
from .mention_index import MentionIndex
from .mention_resolver import MENTION_PLACEHOLDER, ResolvedBody, resolve_annotated, resolve_mentions
from .message import ConversationMessage, ConversationMessageFactory
from .ranges import Edit, apply_edits, check_edits, remap_offset, remap_range, remap_ranges
from .recipient_book import Recipient, RecipientBook
from .settings import SETTINGS_PRESETS, DisplaySettings, apply_preset

__all__ = [
    "ConversationMessage",
    "ConversationMessageFactory",
    "DisplaySettings",
    "Edit",
    "MENTION_PLACEHOLDER",
    "MentionIndex",
    "Recipient",
    "RecipientBook",
    "ResolvedBody",
    "SETTINGS_PRESETS",
    "apply_edits",
    "apply_formatting",
    "apply_preset",
    "check_digest",
    "check_edits",
    "configure_logging",
    "find_delimiters",
    "fingerprint",
    "load_settings_from_env",
    "remap_offset",
    "remap_range",
    "remap_ranges",
    "resolve_annotated",
    "resolve_mentions",
    "reset_logging",
    "set_stderr_level",
]
