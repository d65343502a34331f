"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .file_picker import select_file, try_get_file_text
from .highlighter import FONT_FAMILY, add_range, build_highlight_ranges, get_text_highlighters
from .view_models import BaseDiffTextViewModel, DiffTextViewModel, InlineDiffTextViewModel

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "select_file",
    "try_get_file_text",
    "FONT_FAMILY",
    "add_range",
    "build_highlight_ranges",
    "get_text_highlighters",
    "BaseDiffTextViewModel",
    "DiffTextViewModel",
    "InlineDiffTextViewModel",
]
