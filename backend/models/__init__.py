"""Models module - Pydantic data models"""

from .diff import (
    ChangeType,
    DiffMode,
    DiffPaneModel,
    DiffPiece,
    DiffRequest,
    SearchRequest,
    SideBySideDiffModel,
    StreamRequest,
)
from .highlight import (
    ColorRole,
    HighlightPalette,
    HighlightRange,
    HighlightRequest,
    HighlightResponse,
    TextHighlighter,
)
from .view import (
    InlineResponse,
    InlineRow,
    SearchResponse,
    SideBySideResponse,
    SideBySideRow,
)

__all__ = [
    # Diff models
    "ChangeType",
    "DiffMode",
    "DiffPaneModel",
    "DiffPiece",
    "DiffRequest",
    "SearchRequest",
    "SideBySideDiffModel",
    "StreamRequest",
    # Highlight models
    "ColorRole",
    "HighlightPalette",
    "HighlightRange",
    "HighlightRequest",
    "HighlightResponse",
    "TextHighlighter",
    # View models
    "InlineResponse",
    "InlineRow",
    "SearchResponse",
    "SideBySideResponse",
    "SideBySideRow",
]
