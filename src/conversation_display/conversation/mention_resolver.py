"""Replace mention placeholders with display names.

A message body stores each mention as a short placeholder token plus a
:class:`Mention` recording where the token sits. Resolution swaps every token
for the recipient's display name and re-anchors the mention ranges to the new
body, so a mention always spans exactly the name it was replaced with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from conversation_display.core.errors import OverlappingMention
from conversation_display.core.models import AnnotatedText, Mention, TextRange

from .ranges import Edit, apply_edits, remap_offset

logger = logging.getLogger(__name__)

# Placeholder token written into bodies in place of a mention
MENTION_PLACEHOLDER = "\ufffc"

ResolveDisplayName = Callable[[str], str]


@dataclass(slots=True, frozen=True)
class ResolvedBody:
    body: str
    mentions: tuple[Mention, ...]

    def to_annotated(self) -> AnnotatedText:
        return AnnotatedText(self.body, mentions=self.mentions)


def resolve_mentions(
    body: str,
    mentions: Sequence[Mention],
    resolve_display_name: ResolveDisplayName,
) -> ResolvedBody:
    """Return *body* with every placeholder replaced by its display name.

    Placeholders are handled in ascending offset order and must not overlap
    (:class:`OverlappingMention` otherwise). Each distinct recipient is looked
    up once. Errors raised by *resolve_display_name* propagate unchanged.
    The returned mentions keep the order they were given in.
    """
    if not mentions:
        return ResolvedBody(body, ())

    for mention in mentions:
        mention.range.check_within(body)

    # Stable sort keeps the caller's order for equal starts
    ordered = sorted(range(len(mentions)), key=lambda i: mentions[i].range.start)
    _check_disjoint([mentions[i] for i in ordered])

    names: dict[str, str] = {}
    edits: list[Edit] = []
    replacements: list[str] = []
    for index in ordered:
        mention = mentions[index]
        name = names.get(mention.recipient_id)
        if name is None:
            name = resolve_display_name(mention.recipient_id)
            names[mention.recipient_id] = name
        edits.append(Edit(mention.range, len(name)))
        replacements.append(name)

    new_body = apply_edits(body, edits, replacements)

    resolved: list[Mention | None] = [None] * len(mentions)
    for index, edit in zip(ordered, edits):
        start = remap_offset(edit.range.start, edits)
        resolved[index] = Mention(mentions[index].recipient_id, TextRange(start, edit.replacement_length))

    logger.debug(
        "Resolved %d mentions (%d distinct recipients), body length %d -> %d",
        len(mentions),
        len(names),
        len(body),
        len(new_body),
    )
    return ResolvedBody(new_body, tuple(m for m in resolved if m is not None))


def resolve_annotated(
    body: str,
    mentions: Sequence[Mention],
    resolve_display_name: ResolveDisplayName,
) -> AnnotatedText:
    """Like :func:`resolve_mentions`, returning an annotated buffer."""
    return resolve_mentions(body, mentions, resolve_display_name).to_annotated()


def _check_disjoint(ordered: Sequence[Mention]) -> None:
    for previous, current in zip(ordered, ordered[1:]):
        if current.range.start < previous.range.end or (
            current.range.start == previous.range.start
        ):
            raise OverlappingMention(
                f"Mention for {current.recipient_id!r} at [{current.range.start}, {current.range.end}) "
                f"overlaps mention for {previous.recipient_id!r} at "
                f"[{previous.range.start}, {previous.range.end})"
            )
