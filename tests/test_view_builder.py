"""
Tests for services.view_builder - row pagination, collapsing and search
"""

from __future__ import annotations

from models.diff import ChangeType
from models.highlight import ColorRole, HighlightPalette
from services.diff_generator import DiffGenerator
from services.view_models import InlineDiffTextViewModel
from services.view_builder import (
    build_inline_rows,
    build_side_by_side_rows,
    collapse_unchanged,
    find_rows,
    to_inline_row,
    to_side_by_side_row,
)

OLD = "\n".join(f"line {n}" for n in range(1, 11))
NEW = OLD.replace("line 5", "line five")


def test_side_by_side_rows_are_numbered_from_one():
    rows = build_side_by_side_rows(DiffGenerator().build_side_by_side("a\nb", "a\nc\nb"))
    assert [row.line_number for row in rows] == [1, 2, 3]
    assert rows[1].left is None
    assert rows[1].right_text == "c"


def test_inline_rows_are_numbered_from_one():
    rows = build_inline_rows(DiffGenerator().build_inline("a", "b"))
    assert [(row.line_number, row.text) for row in rows] == [(1, "a"), (2, "b")]


def test_collapse_keeps_context_around_changes():
    rows = build_side_by_side_rows(DiffGenerator().build_side_by_side(OLD, NEW))
    visible = collapse_unchanged(rows, 2)
    assert [row.line_number for row in visible] == [3, 4, 5, 6, 7]


def test_collapse_with_zero_context_keeps_changes_only():
    rows = build_inline_rows(DiffGenerator().build_inline(OLD, NEW))
    visible = collapse_unchanged(rows, 0)
    assert [row.text for row in visible] == ["line 5", "line five"]


def test_collapse_none_keeps_everything():
    rows = build_inline_rows(DiffGenerator().build_inline(OLD, NEW))
    assert collapse_unchanged(rows, None) == rows


def test_collapse_identical_texts_hides_all_rows():
    rows = build_inline_rows(DiffGenerator().build_inline(OLD, OLD))
    assert collapse_unchanged(rows, 3) == []


def test_find_rows():
    rows = build_side_by_side_rows(DiffGenerator().build_side_by_side(OLD, NEW))
    assert find_rows(rows, "five") == [5]
    assert find_rows(rows, "line 1") == [1, 10]
    assert find_rows(rows, "") == []


def test_to_side_by_side_row():
    rows = build_side_by_side_rows(DiffGenerator().build_side_by_side("one two", "one three"))
    row = to_side_by_side_row(rows[0], foreground="#FF202020")

    assert row.left_type == ChangeType.MODIFIED
    assert row.right_position == 1
    assert row.is_unchanged is False

    left_insert, left_delete = row.left_highlighters
    assert left_insert.role == ColorRole.INSERT and left_insert.ranges == []
    assert [(r.start_index, r.length) for r in left_delete.ranges] == [(4, 3)]

    right_insert, _ = row.right_highlighters
    assert [(r.start_index, r.length) for r in right_insert.ranges] == [(4, 5)]
    assert right_insert.foreground == "#FF202020"


def test_to_side_by_side_row_for_gap():
    rows = build_side_by_side_rows(DiffGenerator().build_side_by_side("a\nb", "a"))
    row = to_side_by_side_row(rows[1])
    assert row.is_null_line is True
    assert row.right_type is None
    assert row.right_highlighters is None
    assert row.left_type == ChangeType.DELETED


def test_to_inline_row():
    rows = build_inline_rows(DiffGenerator().build_inline("x", "x"))
    row = to_inline_row(rows[0])
    assert row.is_unchanged is True
    assert row.position == 1
    assert [h.ranges for h in row.highlighters] == [[], []]


def test_gap_side_gets_gray_background():
    palette = HighlightPalette(gray_background="#10AAAAAA")
    rows = build_side_by_side_rows(DiffGenerator().build_side_by_side("a", "a\nb"))
    row = to_side_by_side_row(rows[1], palette=palette)
    assert row.left_background == "#10AAAAAA"
    assert row.right_background is None

    unchanged = to_side_by_side_row(rows[0])
    assert unchanged.left_background is None and unchanged.right_background is None


def test_null_inline_row_gets_gray_background():
    row = to_inline_row(InlineDiffTextViewModel(1, None))
    assert row.background == "#20808080"
    assert row.highlighters is None
