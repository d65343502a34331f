"""Row models returned to the viewer"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import ChangeType, DiffMode
from .highlight import TextHighlighter


class SideBySideRow(BaseModel):
    """One row of a side-by-side diff"""

    line_number: int
    is_unchanged: bool
    is_null_line: bool
    left_text: str | None = None
    right_text: str | None = None
    left_type: ChangeType | None = None
    right_type: ChangeType | None = None
    left_position: int | None = None
    right_position: int | None = None
    left_highlighters: list[TextHighlighter] | None = None
    right_highlighters: list[TextHighlighter] | None = None
    left_background: str | None = None  # gray on the side a line is missing from
    right_background: str | None = None


class InlineRow(BaseModel):
    """One row of a unified diff"""

    line_number: int
    is_unchanged: bool
    is_null_line: bool
    text: str | None = None
    type: ChangeType | None = None
    position: int | None = None
    highlighters: list[TextHighlighter] | None = None
    background: str | None = None  # gray on null lines


class SideBySideResponse(BaseModel):
    """Side-by-side rows for display"""

    rows: list[SideBySideRow]
    has_differences: bool
    total_rows: int  # before collapsing unchanged rows
    font_family: str


class InlineResponse(BaseModel):
    """Unified rows for display"""

    rows: list[InlineRow]
    has_differences: bool
    total_rows: int
    font_family: str


class SearchResponse(BaseModel):
    """Rows containing a query"""

    query: str
    mode: DiffMode
    line_numbers: list[int] = []
    count: int = 0
