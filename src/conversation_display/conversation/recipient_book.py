"""In-memory recipient directory for display-name lookups.

Satisfies the :class:`~conversation_display.core.services.DisplayNameLookup`
protocol. The "unknown recipient" fallback policy lives here rather than in
the resolver: when ``unknown_recipient_label`` is empty a missing recipient
raises :class:`NameNotFound`.
"""

from __future__ import annotations

from dataclasses import dataclass

from conversation_display.core.errors import LookupUnavailable, NameNotFound

from .settings import DisplaySettings


@dataclass
class Recipient:
    recipient_id: str
    profile_name: str = ""
    system_name: str = ""  # Name from the local address book, preferred when set

    @property
    def display_name(self) -> str:
        return self.system_name or self.profile_name


class RecipientBook:
    def __init__(self, settings: DisplaySettings | None = None) -> None:
        self._settings = settings if settings is not None else DisplaySettings()
        self._recipients: dict[str, Recipient] = {}
        self._closed = False

    def list_recipients(self) -> list[Recipient]:
        return list(self._recipients.values())

    def get(self, recipient_id: str) -> Recipient | None:
        return self._recipients.get(recipient_id)

    def add_recipient(self, data: dict[str, str] | Recipient) -> None:
        if isinstance(data, Recipient):
            entry = data
        else:
            entry = Recipient(
                recipient_id=data.get("recipient_id", ""),
                profile_name=data.get("profile_name", ""),
                system_name=data.get("system_name", ""),
            )
        if not entry.recipient_id:
            return
        # Update existing or insert
        self._recipients[entry.recipient_id] = entry

    def close(self) -> None:
        """Stop answering lookups; later calls raise LookupUnavailable."""
        self._closed = True

    def resolve_display_name(self, recipient_id: str) -> str:
        if self._closed:
            raise LookupUnavailable("Recipient book is closed")
        recipient = self._recipients.get(recipient_id)
        name = recipient.display_name if recipient is not None else ""
        if not name:
            if not self._settings.unknown_recipient_label:
                raise NameNotFound(recipient_id)
            name = self._settings.unknown_recipient_label
        return f"{self._settings.mention_prefix}{name}"
