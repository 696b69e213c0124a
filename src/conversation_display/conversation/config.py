from __future__ import annotations

import logging
import os

from conversation_display.core.enums import Style

from .fingerprint import check_digest
from .settings import DisplaySettings, apply_preset

logger = logging.getLogger(__name__)

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_settings_from_env() -> DisplaySettings:
    defaults = DisplaySettings()
    preset = os.environ.get("CONVERSATION_PRESET")
    if preset:
        defaults = apply_preset(defaults, preset.strip().lower())
    return DisplaySettings(
        format_delimiter=_env_delimiter("CONVERSATION_FORMAT_DELIMITER", defaults.format_delimiter),
        emphasis_style=_env_style("CONVERSATION_EMPHASIS_STYLE", defaults.emphasis_style),
        mention_prefix=os.environ.get("CONVERSATION_MENTION_PREFIX", defaults.mention_prefix),
        unknown_recipient_label=os.environ.get(
            "CONVERSATION_UNKNOWN_LABEL", defaults.unknown_recipient_label
        ),
        fingerprint_digest=_env_digest("CONVERSATION_FINGERPRINT_DIGEST", defaults.fingerprint_digest),
        log_level=_env_level("LOG_LEVEL", defaults.log_level),
    )


def _env_delimiter(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    if len(value) != 1:
        logger.warning("Ignoring %s=%r: delimiter must be a single character", name, value)
        return default
    return value


def _env_style(name: str, default: Style) -> Style:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return Style(value.strip().lower())
    except ValueError:
        logger.warning("Ignoring %s=%r: unknown style", name, value)
        return default


def _env_digest(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return check_digest(value.strip().lower())
    except ValueError:
        logger.warning("Ignoring %s=%r: unsupported digest", name, value)
        return default


def _env_level(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip().upper()
    if value in VALID_LEVELS:
        return value
    return default
