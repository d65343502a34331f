"""
Highlighter Service - Turn word-level diff pieces into highlight ranges
"""

from __future__ import annotations

from models.diff import ChangeType, DiffPiece
from models.highlight import ColorRole, HighlightPalette, HighlightRange, TextHighlighter

FONT_FAMILY = (
    "Cascadia Code, Consolas, Courier New, monospace, Microsoft Yahei, Microsoft Jhenghei, "
    "Meiryo, Segoe UI, Segoe UI Emoji, Segoe UI Symbol"
)

DEFAULT_PALETTE = HighlightPalette()


def add_range(ranges: list[HighlightRange], start: int, length: int) -> None:
    """Append a range, merging it with the previous one when they touch"""
    if ranges:
        last = ranges[-1]
        if start == last.end:
            start = last.start_index
            length += last.length
            ranges.pop()

    ranges.append(HighlightRange(start_index=start, length=length))


def build_highlight_ranges(
    sub_pieces: list[DiffPiece] | None,
    modify: ChangeType,
) -> tuple[list[HighlightRange], list[HighlightRange]] | None:
    """
    Build (insert, delete) ranges over the concatenated sub-piece texts.

    Modified pieces count as `modify`. Ranges are only compared against the
    last one added, so pieces must come in text order.
    """
    if sub_pieces is None:
        return None

    insert: list[HighlightRange] = []
    delete: list[HighlightRange] = []
    offset = 0
    for piece in sub_pieces:
        text = piece.text
        if not text:
            continue

        change = modify if piece.type == ChangeType.MODIFIED else piece.type
        if change == ChangeType.INSERTED:
            add_range(insert, offset, len(text))
        elif change == ChangeType.DELETED:
            add_range(delete, offset, len(text))

        offset += len(text)

    return insert, delete


def get_text_highlighters(
    sub_pieces: list[DiffPiece] | None,
    modify: ChangeType,
    foreground: str | None = None,
    palette: HighlightPalette | None = None,
) -> list[TextHighlighter] | None:
    """Wrap the insert and delete ranges into [insert, delete] highlighters"""
    ranges = build_highlight_ranges(sub_pieces, modify)
    if ranges is None:
        return None

    palette = palette or DEFAULT_PALETTE
    insert, delete = ranges
    return [
        TextHighlighter(
            role=ColorRole.INSERT,
            foreground=foreground,
            background=palette.insert_background,
            ranges=insert,
        ),
        TextHighlighter(
            role=ColorRole.DELETE,
            foreground=foreground,
            background=palette.delete_background,
            ranges=delete,
        ),
    ]
