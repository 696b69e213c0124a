from __future__ import annotations

from dataclasses import dataclass, replace

from conversation_display.core.enums import Style

from .fingerprint import check_digest


@dataclass(slots=True)
class DisplaySettings:
    # Emphasis
    format_delimiter: str = "*"
    emphasis_style: Style = Style.BOLD

    # Mentions
    mention_prefix: str = "@"
    unknown_recipient_label: str = ""  # Empty raises NameNotFound instead

    # Identity
    fingerprint_digest: str = "sha256"

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        check_digest(self.fingerprint_digest)

    def clone(self) -> "DisplaySettings":
        return replace(self)


SETTINGS_PRESETS: dict[str, dict[str, str]] = {
    "signal": {
        "format_delimiter": "*",
        "emphasis_style": Style.BOLD,
        "mention_prefix": "@",
        "unknown_recipient_label": "Unknown",
    },
    "slack": {
        "format_delimiter": "_",
        "emphasis_style": Style.ITALIC,
        "mention_prefix": "@",
        "unknown_recipient_label": "",
    },
}


def apply_preset(settings: DisplaySettings, preset: str) -> DisplaySettings:
    values = SETTINGS_PRESETS.get(preset)
    updated = settings.clone()
    if values is None:
        return updated
    for key, value in values.items():
        setattr(updated, key, value)
    return updated
