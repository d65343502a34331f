"""Diff-related data models"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, field_validator

_ARGB_PATTERN = re.compile(r"^#[0-9A-Fa-f]{8}$")


def validate_argb(value: str | None) -> str | None:
    """Check a #AARRGGBB color string"""
    if value is None:
        return value
    if not isinstance(value, str) or not _ARGB_PATTERN.match(value):
        raise ValueError(f"Invalid color '{value}', expected #AARRGGBB")
    return value


class ChangeType(str, Enum):
    """Change kind of a diff piece"""

    UNCHANGED = "unchanged"
    INSERTED = "inserted"
    DELETED = "deleted"
    MODIFIED = "modified"


class DiffMode(str, Enum):
    """Display mode of a diff"""

    SPLIT = "split"  # side-by-side
    UNIFIED = "unified"  # inline


class DiffPiece(BaseModel):
    """A span of text tagged with its change kind"""

    type: ChangeType
    text: str | None = None
    position: int | None = None  # 1-indexed
    sub_pieces: list[DiffPiece] | None = None  # word-level pieces of a line


class DiffPaneModel(BaseModel):
    """Unified diff result: one list of lines"""

    lines: list[DiffPiece] = []
    has_differences: bool = False


class SideBySideDiffModel(BaseModel):
    """Side-by-side diff result, None marks a gap row"""

    old_lines: list[DiffPiece | None] = []
    new_lines: list[DiffPiece | None] = []
    has_differences: bool = False


class DiffRequest(BaseModel):
    """Request to diff two texts"""

    old_text: str
    new_text: str
    ignore_whitespace: bool | None = None
    ignore_case: bool | None = None
    context_lines: int | None = None  # collapse unchanged rows beyond this
    foreground: str | None = None  # inherited text color, #AARRGGBB

    @field_validator("foreground")
    @classmethod
    def _check_foreground(cls, value: str | None) -> str | None:
        return validate_argb(value)


class StreamRequest(DiffRequest):
    """Request to stream the rows of one display mode"""

    mode: DiffMode = DiffMode.SPLIT


class SearchRequest(StreamRequest):
    """Request to find rows containing a query"""

    query: str
