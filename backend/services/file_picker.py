"""
File Picker - Let a desktop host choose a text file to compare
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Optional

# Errors the picker treats as "no file": bad arguments, I/O and permission
# failures, Tk/platform failures (raised as RuntimeError), unsupported ops.
RECOVERABLE_ERRORS = (ValueError, OSError, RuntimeError, NotImplementedError)

FileDialog = Callable[[Any, Path], Optional[str]]
ErrorHandler = Callable[[Exception], None]


def _documents_dir() -> Path:
    documents = Path.home() / "Documents"
    return documents if documents.is_dir() else Path.home()


def _ask_open_filename(parent: Any, initial_dir: Path) -> str | None:
    """Show the Tk open-file dialog, return the chosen path or None"""
    import tkinter
    from tkinter import filedialog

    try:
        path = filedialog.askopenfilename(
            parent=parent,
            initialdir=str(initial_dir),
            title="Select File",
            filetypes=[("All Files", "*")],
        )
    except tkinter.TclError as e:
        raise RuntimeError(f"File dialog failed: {e}") from e

    # Tk returns "" or () on cancel
    return path or None


def select_file(parent: Any = None, dialog: FileDialog | None = None) -> Path | None:
    """
    Ask the user for a single file. Cancellation and recoverable errors give None.

    The dialog is modal and blocks: call this from the GUI thread.
    """
    dialog = dialog or _ask_open_filename
    try:
        path = dialog(parent, _documents_dir())
        if path:
            return Path(path)
    except RECOVERABLE_ERRORS as e:
        print(f"[FilePicker] Could not select file: {e}")

    return None


def _log_error(error: Exception) -> None:
    print(f"[FilePicker] Failed to read file: {error}")


async def try_get_file_text(
    parent: Any = None,
    error_handler: ErrorHandler | None = None,
    dialog: FileDialog | None = None,
    encoding: str = "utf-8",
) -> str | None:
    """
    Let the user pick a file and read it as text.

    The dialog runs on the calling thread, only the read is offloaded.

    Returns None when nothing was picked, the file is gone, or a recoverable
    error occurred (reported to `error_handler`). MemoryError propagates as
    is; other unexpected errors are reported and then re-raised.
    """
    error_handler = error_handler or _log_error
    try:
        path = select_file(parent, dialog)
        if path is None or not path.is_file():
            return None
        return await asyncio.to_thread(path.read_text, encoding=encoding)
    except MemoryError:
        raise
    except RECOVERABLE_ERRORS as e:
        error_handler(e)
    except Exception as e:
        error_handler(e)
        raise

    return None
