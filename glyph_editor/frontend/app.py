"""
GUI for editing a single 5x8 font glyph with a debounced LCD preview.
"""

from __future__ import annotations

import io
import logging
import tkinter as tk
from typing import Any, Optional

import cairosvg
import ttkbootstrap as ttk
from PIL import Image, ImageOps, ImageTk
from ttkbootstrap.constants import BOTH, LEFT, RIGHT, X

from glyph_editor.backend.utils import glyph_encoder as enc
from glyph_editor.backend.utils.clipboard import copy_to_clipboard
from glyph_editor.backend.utils.generate_svg import generate_glyph_svg
from glyph_editor.backend.utils.settings_manager import (
    EditorSettings,
    get_preset,
    preset_names,
)

logger = logging.getLogger(__name__)


class GlyphEditorApp(ttk.Window):
    def __init__(self, settings: Optional[EditorSettings] = None) -> None:
        self.settings = settings or EditorSettings()
        super().__init__(themename=self.settings.theme)
        self.title("Glyph Editor 5x8")
        self.geometry("820x560")

        self.glyph = enc.GlyphState()
        self.style_choice = self.settings.style
        self._render_job: Optional[str] = None
        self._image_ref: Optional[ImageTk.PhotoImage] = None
        self._last_svg: Optional[str] = None
        self._pixel_buttons: dict[int, tk.Button] = {}
        self._column_labels: list[ttk.Label] = []
        self._preset_var = tk.StringVar(value=preset_names()[0])
        self._array_var = tk.StringVar()
        self._status_var = tk.StringVar()

        self._build_ui()
        self._refresh()

    def _build_ui(self) -> None:
        toolbar = ttk.Frame(self)
        toolbar.pack(fill=X, padx=8, pady=6)

        ttk.Button(
            toolbar, text="Clear", command=lambda: self._run(enc.Clear())
        ).pack(side=LEFT, padx=4)
        ttk.Button(
            toolbar, text="Fill All", command=lambda: self._run(enc.FillAll())
        ).pack(side=LEFT, padx=4)
        ttk.Button(
            toolbar,
            text="Test Pattern",
            command=lambda: self._run(enc.LoadTestPattern()),
        ).pack(side=LEFT, padx=4)
        ttk.Button(
            toolbar,
            text="Copy Array",
            bootstyle="success",
            command=self._on_copy,
        ).pack(side=LEFT, padx=4)

        preset_selector = ttk.Combobox(
            toolbar,
            state="readonly",
            values=preset_names(),
            textvariable=self._preset_var,
            width=14,
        )
        preset_selector.pack(side=RIGHT, padx=4)
        preset_selector.bind("<<ComboboxSelected>>", self._on_preset_select)
        ttk.Label(toolbar, text="Preset").pack(side=RIGHT, padx=(0, 4))

        main = ttk.Frame(self)
        main.pack(fill=BOTH, expand=True, padx=8, pady=8)
        main.columnconfigure(1, weight=1)
        main.columnconfigure(2, weight=1)
        main.rowconfigure(0, weight=1)

        grid_frame = ttk.Labelframe(main, text="Pixels")
        grid_frame.grid(row=0, column=0, sticky="n", padx=(0, 8))
        self._build_pixel_grid(grid_frame)

        output = ttk.Labelframe(main, text="Font Data")
        output.grid(row=0, column=1, sticky="nsew", padx=(0, 8))
        self._build_output_widgets(output)

        preview_frame = ttk.Frame(main)
        preview_frame.grid(row=0, column=2, sticky="nsew")
        preview_frame.rowconfigure(0, weight=1)
        preview_frame.columnconfigure(0, weight=1)
        preview_frame.bind("<Configure>", self._on_preview_resize)

        self.image_label = ttk.Label(preview_frame, text="Rendering...")
        self.image_label.grid(row=0, column=0, sticky="nsew")

        ttk.Label(self, textvariable=self._status_var).pack(
            fill=X, padx=12, pady=(0, 8)
        )

    def _build_pixel_grid(self, parent: ttk.Frame) -> None:
        for r in range(enc.GLYPH_ROWS):
            for c in range(enc.GLYPH_COLS):
                pid = enc.pixel_id(r, c)
                btn = tk.Button(
                    parent,
                    width=2,
                    height=1,
                    command=lambda p=pid: self._run(enc.Toggle(p)),
                    borderwidth=0,
                    highlightthickness=0,
                    padx=0,
                    pady=0,
                )
                btn.grid(row=r, column=c, padx=2, pady=2)
                self._pixel_buttons[pid] = btn

    def _build_output_widgets(self, parent: ttk.Frame) -> None:
        ttk.Label(parent, text="Array (C/C++)").pack(anchor="w", padx=6)
        ttk.Entry(
            parent, textvariable=self._array_var, state="readonly"
        ).pack(fill=X, padx=6, pady=(0, 6))

        ttk.Label(parent, text="Declarations").pack(anchor="w", padx=6)
        self.declarations_text = tk.Text(parent, height=2, width=44)
        self.declarations_text.pack(fill=X, padx=6, pady=(0, 6))

        columns = ttk.Frame(parent)
        columns.pack(fill=X, padx=6, pady=(0, 6))
        for _ in range(enc.GLYPH_COLS):
            label = ttk.Label(columns, font=("TkFixedFont", 10))
            label.pack(anchor="w")
            self._column_labels.append(label)

        ttk.Label(parent, text="Bit Matrix").pack(anchor="w", padx=6)
        self.matrix_label = ttk.Label(
            parent, font=("TkFixedFont", 10), justify=LEFT
        )
        self.matrix_label.pack(anchor="w", padx=6)

    def _run(self, command: enc.Command) -> None:
        self.glyph = enc.apply(self.glyph, command)
        self._refresh()

    def _refresh(self) -> None:
        self._render_pixel_grid()
        font_data = self.glyph.font_data

        self._array_var.set(enc.format_array(font_data))

        self.declarations_text.configure(state="normal")
        self.declarations_text.delete("1.0", "end")
        self.declarations_text.insert(
            "1.0", "\n".join(enc.format_declarations(font_data))
        )
        self.declarations_text.configure(state="disabled")

        for label, info in zip(
            self._column_labels, enc.column_breakdown(font_data)
        ):
            label.configure(
                text=(
                    f"Col {info.column}: {info.hex}  "
                    f"{info.binary}  ({info.decimal})"
                )
            )

        self.matrix_label.configure(
            text="\n".join(
                " ".join(str(bit) for bit in row)
                for row in enc.bit_matrix(font_data)
            )
        )
        self._schedule_render()

    def _render_pixel_grid(self) -> None:
        on_color = self.style_choice.pixel_on
        off_color = self.style_choice.pixel_off
        border_color = self.style_choice.frame
        for pid, btn in self._pixel_buttons.items():
            color = on_color if pid in self.glyph.active_pixels else off_color
            btn.configure(
                background=color,
                activebackground=color,
                highlightbackground=border_color,
                highlightthickness=1,
                relief="flat",
            )

    def _on_copy(self) -> None:
        text = enc.format_array(self.glyph.font_data)
        if copy_to_clipboard(self, text):
            self._status_var.set(f"Copied {text}")
        else:
            self._status_var.set("Copy failed: clipboard is not available")

    def _on_preset_select(self, _event: Any = None) -> None:
        name = self._preset_var.get()
        try:
            self.style_choice = get_preset(name)
        except KeyError as exc:
            logger.warning(exc)
            return
        self._render_pixel_grid()
        self._schedule_render()

    def _schedule_render(self) -> None:
        if self._render_job is not None:
            self.after_cancel(self._render_job)
        self._render_job = self.after(
            self.settings.render_delay_ms, self._render_svg
        )

    def _render_svg(self) -> None:
        self._render_job = None
        self._last_svg = generate_glyph_svg(self.glyph, style=self.style_choice)
        self._update_preview()

    def _on_preview_resize(self, _event: Any = None) -> None:
        if self._last_svg:
            self._update_preview()

    def _update_preview(self) -> None:
        if not self._last_svg:
            return
        width = max(self.image_label.winfo_width(), 1)
        height = max(self.image_label.winfo_height(), 1)
        try:
            png_bytes = cairosvg.svg2png(
                bytestring=self._last_svg.encode("utf-8"),
                output_width=width,
            )
            image = Image.open(io.BytesIO(png_bytes))
            image = ImageOps.contain(
                image,
                (width, height),
                method=Image.LANCZOS,
            )
            self._image_ref = ImageTk.PhotoImage(image)
            self.image_label.configure(image=self._image_ref, text="")
        except Exception as exc:  # noqa: BLE001
            logger.error(f"Preview render failed: {exc}")
            self.image_label.configure(
                text=(
                    "Failed to render SVG. Ensure cairosvg is installed.\n"
                    f"Error: {exc}"
                ),
                image="",
            )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    app = GlyphEditorApp()
    app.mainloop()


if __name__ == "__main__":
    main()
