"""Diff view API endpoints"""

from __future__ import annotations

import json
from typing import Any, Iterator

from fastapi import APIRouter
from sse_starlette.sse import EventSourceResponse

from models.diff import DiffMode, DiffRequest, SearchRequest, StreamRequest, validate_argb
from models.highlight import HighlightRequest, HighlightResponse
from models.view import InlineResponse, SearchResponse, SideBySideResponse
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.highlighter import get_text_highlighters
from services.view_builder import (
    build_inline_rows,
    build_side_by_side_rows,
    collapse_unchanged,
    find_rows,
    to_inline_row,
    to_side_by_side_row,
)

router = APIRouter()


def resolve_options(request: DiffRequest, config: dict[str, Any]) -> dict[str, Any]:
    """Request options, falling back to the configured defaults"""
    diff_cfg = config.get("diff", {})
    theme = config.get("theme", {})

    def pick(value, key: str, section: dict[str, Any]):
        return value if value is not None else section.get(key)

    options = {
        "ignore_whitespace": bool(pick(request.ignore_whitespace, "ignoreWhitespace", diff_cfg)),
        "ignore_case": bool(pick(request.ignore_case, "ignoreCase", diff_cfg)),
        "context_lines": pick(request.context_lines, "contextLines", diff_cfg),
        "foreground": pick(request.foreground, "foreground", theme),
        "font_family": theme.get("fontFamily", ""),
    }

    # Request colors are validated by DiffRequest; a bad stored color is ignored
    try:
        validate_argb(options["foreground"])
    except ValueError as e:
        print(f"[DiffRouter] Ignoring configured foreground: {e}")
        options["foreground"] = None
    return options


def _generator(options: dict[str, Any]) -> DiffGenerator:
    return DiffGenerator(
        ignore_whitespace=options["ignore_whitespace"],
        ignore_case=options["ignore_case"],
    )


@router.post("/side-by-side", response_model=SideBySideResponse)
async def side_by_side(request: DiffRequest) -> SideBySideResponse:
    """Diff two texts into paired rows"""
    config_manager = ConfigManager.get_instance()
    options = resolve_options(request, config_manager.get_config())
    palette = config_manager.get_palette()

    model = _generator(options).build_side_by_side(request.old_text, request.new_text)
    rows = build_side_by_side_rows(model)
    visible = collapse_unchanged(rows, options["context_lines"])

    return SideBySideResponse(
        rows=[to_side_by_side_row(row, options["foreground"], palette) for row in visible],
        has_differences=model.has_differences,
        total_rows=len(rows),
        font_family=options["font_family"],
    )


@router.post("/inline", response_model=InlineResponse)
async def inline(request: DiffRequest) -> InlineResponse:
    """Diff two texts into unified rows"""
    config_manager = ConfigManager.get_instance()
    options = resolve_options(request, config_manager.get_config())
    palette = config_manager.get_palette()

    model = _generator(options).build_inline(request.old_text, request.new_text)
    rows = build_inline_rows(model)
    visible = collapse_unchanged(rows, options["context_lines"])

    return InlineResponse(
        rows=[to_inline_row(row, options["foreground"], palette) for row in visible],
        has_differences=model.has_differences,
        total_rows=len(rows),
        font_family=options["font_family"],
    )


@router.post("/search", response_model=SearchResponse)
async def search(request: SearchRequest) -> SearchResponse:
    """Find the rows whose text contains the query"""
    options = resolve_options(request, ConfigManager.get_instance().get_config())
    generator = _generator(options)

    if request.mode == DiffMode.UNIFIED:
        rows = build_inline_rows(generator.build_inline(request.old_text, request.new_text))
    else:
        rows = build_side_by_side_rows(
            generator.build_side_by_side(request.old_text, request.new_text)
        )

    line_numbers = find_rows(rows, request.query)
    return SearchResponse(
        query=request.query,
        mode=request.mode,
        line_numbers=line_numbers,
        count=len(line_numbers),
    )


@router.post("/highlight", response_model=HighlightResponse)
async def highlight(request: HighlightRequest) -> HighlightResponse:
    """Build highlighters for a list of word-level pieces"""
    palette = ConfigManager.get_instance().get_palette()
    return HighlightResponse(
        highlighters=get_text_highlighters(
            request.sub_pieces, request.modify, request.foreground, palette
        )
    )


def iter_row_events(rows: list, total_rows: int, has_differences: bool) -> Iterator[dict]:
    """SSE events: one per row, then a done event"""
    for row in rows:
        yield {"event": "row", "data": row.model_dump_json()}
    yield {
        "event": "done",
        "data": json.dumps({"total_rows": total_rows, "has_differences": has_differences}),
    }


@router.post("/stream")
async def stream(request: StreamRequest):
    """Stream diff rows as server-sent events"""
    config_manager = ConfigManager.get_instance()
    options = resolve_options(request, config_manager.get_config())
    palette = config_manager.get_palette()
    generator = _generator(options)
    mode = request.mode

    if mode == DiffMode.UNIFIED:
        model = generator.build_inline(request.old_text, request.new_text)
        rows = build_inline_rows(model)
        visible = [
            to_inline_row(row, options["foreground"], palette)
            for row in collapse_unchanged(rows, options["context_lines"])
        ]
    else:
        model = generator.build_side_by_side(request.old_text, request.new_text)
        rows = build_side_by_side_rows(model)
        visible = [
            to_side_by_side_row(row, options["foreground"], palette)
            for row in collapse_unchanged(rows, options["context_lines"])
        ]

    print(f"[DiffRouter] Streaming {len(visible)} of {len(rows)} rows ({mode.value})")

    async def event_generator():
        for event in iter_row_events(visible, len(rows), model.has_differences):
            yield event

    return EventSourceResponse(event_generator())
