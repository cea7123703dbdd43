"""
Clipboard access through the Tk host clipboard.
"""

from __future__ import annotations

import logging
import tkinter as tk

logger = logging.getLogger(__name__)


def copy_to_clipboard(widget: tk.Misc, text: str) -> bool:
    """
    Replace the clipboard contents with text.

    Args:
        widget:
            Any widget of the running Tk application.
        text:
            The text to place on the clipboard.

    Returns:
        bool:
            True if the clipboard was written, False otherwise.
    """
    try:
        widget.clipboard_clear()
        widget.clipboard_append(text)
        # Tk only hands the selection to the OS once the event loop runs
        widget.update()
    except tk.TclError as exc:
        logger.warning(f"Failed to write clipboard: {exc}")
        return False
    return True
