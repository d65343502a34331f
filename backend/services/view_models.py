"""
View Models - Per-row projections of diff pieces for the viewer
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from models.diff import ChangeType, DiffPiece
from models.highlight import HighlightPalette, TextHighlighter

from .highlighter import get_text_highlighters


class BaseDiffTextViewModel(ABC):
    """The base view model for one displayed diff row"""

    def __init__(self, line_number: int = 0):
        self.line_number = line_number

    @property
    @abstractmethod
    def is_unchanged(self) -> bool:
        """Whether the row is unchanged"""

    @property
    @abstractmethod
    def is_null_line(self) -> bool:
        """Whether the row has no line behind it (a gap)"""

    @abstractmethod
    def contains(self, q: str | None) -> bool:
        """Whether the row's text contains `q`. Empty queries never match."""


class DiffTextViewModel(BaseDiffTextViewModel):
    """
    Split (side-by-side) row.

    Row status comes from the right piece only: a left-only deletion row
    reports itself as a null line.
    """

    def __init__(
        self,
        line_number: int = 0,
        left: DiffPiece | None = None,
        right: DiffPiece | None = None,
    ):
        super().__init__(line_number)
        self._left = left
        self._right = right

    @property
    def left(self) -> DiffPiece | None:
        return self._left

    @property
    def right(self) -> DiffPiece | None:
        return self._right

    @property
    def left_text(self) -> str | None:
        return self._left.text if self._left else None

    @property
    def right_text(self) -> str | None:
        return self._right.text if self._right else None

    @property
    def is_unchanged(self) -> bool:
        return self._right is not None and self._right.type == ChangeType.UNCHANGED

    @property
    def is_null_line(self) -> bool:
        return self._right is None

    def get_left_highlighter(
        self,
        foreground: str | None = None,
        palette: HighlightPalette | None = None,
    ) -> list[TextHighlighter] | None:
        sub_pieces = self._left.sub_pieces if self._left else None
        return get_text_highlighters(sub_pieces, ChangeType.DELETED, foreground, palette)

    def get_right_highlighter(
        self,
        foreground: str | None = None,
        palette: HighlightPalette | None = None,
    ) -> list[TextHighlighter] | None:
        sub_pieces = self._right.sub_pieces if self._right else None
        return get_text_highlighters(sub_pieces, ChangeType.INSERTED, foreground, palette)

    def contains(self, q: str | None) -> bool:
        if not q:
            return False
        for text in (self.right_text, self.left_text):
            if text is not None and q in text:
                return True
        return False


class InlineDiffTextViewModel(BaseDiffTextViewModel):
    """Unified (inline) row"""

    def __init__(self, line_number: int = 0, line: DiffPiece | None = None):
        super().__init__(line_number)
        self._line = line

    @property
    def line(self) -> DiffPiece | None:
        return self._line

    @property
    def text(self) -> str | None:
        return self._line.text if self._line else None

    @property
    def position(self) -> int | None:
        return self._line.position if self._line else None

    @property
    def is_unchanged(self) -> bool:
        return self._line is not None and self._line.type == ChangeType.UNCHANGED

    @property
    def is_null_line(self) -> bool:
        return self._line is None

    def get_text_highlighter(
        self,
        foreground: str | None = None,
        palette: HighlightPalette | None = None,
    ) -> list[TextHighlighter] | None:
        sub_pieces = self._line.sub_pieces if self._line else None
        return get_text_highlighters(sub_pieces, ChangeType.DELETED, foreground, palette)

    def contains(self, q: str | None) -> bool:
        if not q:
            return False
        text = self.text
        return text is not None and q in text
