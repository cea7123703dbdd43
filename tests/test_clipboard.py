"""
tests/test_clipboard.py — Unit tests for clipboard writes.

Uses a stand-in widget so no display is required.
"""

from __future__ import annotations

import tkinter as tk
import unittest

from glyph_editor.backend.utils.clipboard import copy_to_clipboard


class FakeWidget:
    def __init__(self, fail_on: str = "") -> None:
        self.fail_on = fail_on
        self.contents = "previous"
        self.updated = False

    def clipboard_clear(self) -> None:
        if self.fail_on == "clear":
            raise tk.TclError("CLIPBOARD selection doesn't exist")
        self.contents = ""

    def clipboard_append(self, text: str) -> None:
        if self.fail_on == "append":
            raise tk.TclError("can't append")
        self.contents += text

    def update(self) -> None:
        self.updated = True


class TestCopyToClipboard(unittest.TestCase):
    def test_success_replaces_contents(self) -> None:
        widget = FakeWidget()
        result = copy_to_clipboard(widget, "{0x01,0x01,0x01,0x01,0x01}")
        self.assertTrue(result)
        self.assertEqual(widget.contents, "{0x01,0x01,0x01,0x01,0x01}")
        self.assertTrue(widget.updated)

    def test_failure_returns_false(self) -> None:
        for step in ("clear", "append"):
            with self.subTest(step=step):
                widget = FakeWidget(fail_on=step)
                self.assertFalse(copy_to_clipboard(widget, "{0x00}"))

    def test_failure_is_logged(self) -> None:
        with self.assertLogs(
            "glyph_editor.backend.utils.clipboard", level="WARNING"
        ) as logs:
            copy_to_clipboard(FakeWidget(fail_on="clear"), "x")
        self.assertIn("Failed to write clipboard", logs.output[0])


if __name__ == "__main__":
    unittest.main()
