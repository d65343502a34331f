"""Highlight data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from .diff import ChangeType, DiffPiece, validate_argb


class ColorRole(str, Enum):
    """What a highlighter marks"""

    INSERT = "insert"
    DELETE = "delete"


class HighlightRange(BaseModel):
    """A (start, length) span over a line's characters"""

    model_config = ConfigDict(frozen=True)

    start_index: int
    length: int

    @property
    def end(self) -> int:
        return self.start_index + self.length


class HighlightPalette(BaseModel):
    """Background colors per change kind"""

    insert_background: str = "#4060D820"
    delete_background: str = "#40D82020"
    gray_background: str = "#20808080"

    @field_validator("insert_background", "delete_background", "gray_background")
    @classmethod
    def _check_color(cls, value: str) -> str:
        return validate_argb(value)


class TextHighlighter(BaseModel):
    """Highlight descriptor for one color role"""

    role: ColorRole
    foreground: str | None = None  # None inherits the display's color
    background: str
    ranges: list[HighlightRange] = []


class HighlightRequest(BaseModel):
    """Request to build highlighters for a list of sub-pieces"""

    sub_pieces: list[DiffPiece] | None = None
    modify: ChangeType = ChangeType.DELETED
    foreground: str | None = None

    @field_validator("foreground")
    @classmethod
    def _check_foreground(cls, value: str | None) -> str | None:
        return validate_argb(value)


class HighlightResponse(BaseModel):
    """Highlighters for a list of sub-pieces, None when there were none"""

    highlighters: list[TextHighlighter] | None = None
