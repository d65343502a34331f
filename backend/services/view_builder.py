"""
View Builder Service - Paginate diff models into displayable rows
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from models.diff import DiffPaneModel, SideBySideDiffModel
from models.highlight import HighlightPalette
from models.view import InlineRow, SideBySideRow

from .highlighter import DEFAULT_PALETTE
from .view_models import BaseDiffTextViewModel, DiffTextViewModel, InlineDiffTextViewModel

RowT = TypeVar("RowT", bound=BaseDiffTextViewModel)


def build_side_by_side_rows(model: SideBySideDiffModel) -> list[DiffTextViewModel]:
    """One paired view model per row, numbered from 1"""
    return [
        DiffTextViewModel(number, left, right)
        for number, (left, right) in enumerate(zip(model.old_lines, model.new_lines), start=1)
    ]


def build_inline_rows(model: DiffPaneModel) -> list[InlineDiffTextViewModel]:
    """One inline view model per line, numbered from 1"""
    return [
        InlineDiffTextViewModel(number, line)
        for number, line in enumerate(model.lines, start=1)
    ]


def collapse_unchanged(rows: Sequence[RowT], context_lines: int | None) -> list[RowT]:
    """
    Keep changed rows plus `context_lines` unchanged rows around each of them.

    Rows keep their line numbers, so dropped runs show up as gaps.
    """
    if context_lines is None:
        return list(rows)

    context_lines = max(0, context_lines)
    changed = [index for index, row in enumerate(rows) if not row.is_unchanged]
    keep = set()
    for index in changed:
        start = max(0, index - context_lines)
        end = min(len(rows), index + context_lines + 1)
        keep.update(range(start, end))

    return [row for index, row in enumerate(rows) if index in keep]


def find_rows(rows: Sequence[BaseDiffTextViewModel], query: str | None) -> list[int]:
    """Line numbers of the rows whose text contains the query"""
    return [row.line_number for row in rows if row.contains(query)]


def to_side_by_side_row(
    view_model: DiffTextViewModel,
    foreground: str | None = None,
    palette: HighlightPalette | None = None,
) -> SideBySideRow:
    left = view_model.left
    right = view_model.right
    gray = (palette or DEFAULT_PALETTE).gray_background
    return SideBySideRow(
        line_number=view_model.line_number,
        is_unchanged=view_model.is_unchanged,
        is_null_line=view_model.is_null_line,
        left_text=view_model.left_text,
        right_text=view_model.right_text,
        left_type=left.type if left else None,
        right_type=right.type if right else None,
        left_position=left.position if left else None,
        right_position=right.position if right else None,
        left_highlighters=view_model.get_left_highlighter(foreground, palette),
        right_highlighters=view_model.get_right_highlighter(foreground, palette),
        left_background=gray if left is None else None,
        right_background=gray if right is None else None,
    )


def to_inline_row(
    view_model: InlineDiffTextViewModel,
    foreground: str | None = None,
    palette: HighlightPalette | None = None,
) -> InlineRow:
    line = view_model.line
    return InlineRow(
        line_number=view_model.line_number,
        is_unchanged=view_model.is_unchanged,
        is_null_line=view_model.is_null_line,
        text=view_model.text,
        type=line.type if line else None,
        position=view_model.position,
        highlighters=view_model.get_text_highlighter(foreground, palette),
        background=(palette or DEFAULT_PALETTE).gray_background if line is None else None,
    )
