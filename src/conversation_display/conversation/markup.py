"""Delimiter-pair emphasis scanning.

``hello *world* today`` becomes ``hello world today`` with a bold span over
``world``. Delimiters pair up in order of appearance; an odd trailing
delimiter is left in place as literal text. There is no nesting and no
escaping.
"""

from __future__ import annotations

from conversation_display.core.enums import Style
from conversation_display.core.models import AnnotatedText, Mention, StyledRange, TextRange

from .ranges import Edit, check_edits, remap_offset, remap_ranges

DEFAULT_DELIMITER = "*"


def find_delimiters(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[int]:
    """Return the offsets of every *delimiter* in *text*, ascending."""
    _check_delimiter(delimiter)
    offsets: list[int] = []
    index = text.find(delimiter)
    while index != -1:
        offsets.append(index)
        index = text.find(delimiter, index + 1)
    return offsets


def apply_formatting(
    source: AnnotatedText | str,
    delimiter: str = DEFAULT_DELIMITER,
    style: Style = Style.BOLD,
) -> AnnotatedText:
    """Strip matched delimiter pairs from *source* and style what they enclosed.

    Mention annotations already on *source* are moved along with the text.
    Text without a complete pair comes back unchanged.
    """
    annotated = AnnotatedText.plain(source) if isinstance(source, str) else source
    offsets = find_delimiters(annotated.text, delimiter)
    if len(offsets) < 2:
        return annotated

    pairs = list(zip(offsets[0::2], offsets[1::2]))
    edits = [Edit(TextRange(offset, 1), 0) for pair in pairs for offset in pair]
    check_edits(edits)

    text = annotated.text
    pieces: list[str] = []
    cursor = 0
    for opening, closing in pairs:
        pieces.append(text[cursor:opening])
        pieces.append(text[opening + 1 : closing])
        cursor = closing + 1
    pieces.append(text[cursor:])

    new_styles = [
        StyledRange(TextRange(remap_offset(opening + 1, edits), closing - opening - 1), style)
        for opening, closing in pairs
    ]
    carried_styles = [
        StyledRange(text_range, styled.style)
        for styled, text_range in zip(
            annotated.styles, remap_ranges([s.range for s in annotated.styles], edits)
        )
    ]
    mentions = [
        Mention(mention.recipient_id, text_range)
        for mention, text_range in zip(
            annotated.mentions, remap_ranges([m.range for m in annotated.mentions], edits)
        )
    ]
    return AnnotatedText(
        "".join(pieces),
        mentions=tuple(mentions),
        styles=tuple(carried_styles + new_styles),
    )


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
