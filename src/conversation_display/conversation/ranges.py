"""Offset remapping for text buffers edited by non-overlapping substitutions.

An :class:`Edit` replaces ``range`` in the original buffer with
``replacement_length`` characters. Edits are applied left-to-right, so any
offset in the original buffer moves by the summed length delta of the edits
that lie before it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from conversation_display.core.errors import InvalidRange, OverlappingEdit
from conversation_display.core.models import TextRange


@dataclass(slots=True, frozen=True)
class Edit:
    range: TextRange
    replacement_length: int

    def __post_init__(self) -> None:
        if self.replacement_length < 0:
            raise InvalidRange(f"Replacement length must be >= 0, got {self.replacement_length}")

    @property
    def delta(self) -> int:
        return self.replacement_length - self.range.length


def check_edits(edits: Sequence[Edit]) -> None:
    """Raise :class:`OverlappingEdit` unless *edits* are sorted and disjoint."""
    previous: Edit | None = None
    for edit in edits:
        if previous is not None:
            if edit.range.start < previous.range.start:
                raise OverlappingEdit(
                    f"Edits must be sorted by start: {edit.range.start} after {previous.range.start}"
                )
            if edit.range.start < previous.range.end:
                raise OverlappingEdit(
                    f"Edit at [{edit.range.start}, {edit.range.end}) overlaps "
                    f"[{previous.range.start}, {previous.range.end})"
                )
        previous = edit


def remap_offset(offset: int, edits: Sequence[Edit], *, at_end: bool = False) -> int:
    """Return the image of *offset* once *edits* have been applied.

    Only edits starting strictly before *offset* move it. An offset falling
    strictly inside a replaced region snaps to the start of the replacement,
    or to its end when *at_end* is set.
    """
    shift = 0
    for edit in edits:
        if edit.range.start >= offset:
            break
        if edit.range.end <= offset:
            shift += edit.delta
            continue
        replacement_start = edit.range.start + shift
        return replacement_start + edit.replacement_length if at_end else replacement_start
    return offset + shift


def remap_range(text_range: TextRange, edits: Sequence[Edit]) -> TextRange:
    check_edits(edits)
    return _remap(text_range, edits)


def remap_ranges(ranges: Iterable[TextRange], edits: Sequence[Edit]) -> list[TextRange]:
    """Remap several ranges against the same edit list, checking it once."""
    check_edits(edits)
    return [_remap(text_range, edits) for text_range in ranges]


def _remap(text_range: TextRange, edits: Sequence[Edit]) -> TextRange:
    start = remap_offset(text_range.start, edits)
    if text_range.length == 0:
        return TextRange(start, 0)
    end = remap_offset(text_range.end, edits, at_end=True)
    return TextRange(start, max(end - start, 0))


def apply_edits(text: str, edits: Sequence[Edit], replacements: Sequence[str]) -> str:
    """Splice *replacements* into *text* at the ranges named by *edits*."""
    check_edits(edits)
    if len(edits) != len(replacements):
        raise ValueError(f"Got {len(replacements)} replacements for {len(edits)} edits")

    pieces: list[str] = []
    cursor = 0
    for edit, replacement in zip(edits, replacements):
        edit.range.check_within(text)
        if len(replacement) != edit.replacement_length:
            raise ValueError(
                f"Replacement {replacement!r} does not match declared length {edit.replacement_length}"
            )
        pieces.append(text[cursor : edit.range.start])
        pieces.append(replacement)
        cursor = edit.range.end
    pieces.append(text[cursor:])
    return "".join(pieces)
