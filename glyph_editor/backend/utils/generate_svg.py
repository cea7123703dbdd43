from __future__ import annotations

import logging
from dataclasses import dataclass

from glyph_editor.backend.utils.glyph_encoder import (
    GLYPH_COLS,
    GLYPH_ROWS,
    GlyphState,
    bit_matrix,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphStyle:
    background: str = "#ccffcc"
    frame: str = "#000000"
    pixel_on: str = "#446644"
    pixel_off: str = "#bbeebb"
    border_radius: int = 12
    padding: int = 16
    pixel_size: int = 24
    pixel_gap: int = 3
    frame_width: int = 8


@dataclass(frozen=True)
class CustomStyle(GlyphStyle):
    background: str = "#d8f245"
    frame: str = "#000000"
    pixel_on: str = "#141f14"
    pixel_off: str = "#cde543"


def glyph_size(style: GlyphStyle) -> tuple[int, int]:
    """Return the ``(width, height)`` of a rendered glyph in SVG units."""
    px = style.pixel_size
    gap = style.pixel_gap
    w = (
        style.padding * 2
        + GLYPH_COLS * px
        + (GLYPH_COLS - 1) * gap
        + style.frame_width * 2
    )
    h = (
        style.padding * 2
        + GLYPH_ROWS * px
        + (GLYPH_ROWS - 1) * gap
        + style.frame_width * 2
    )
    return w, h


def generate_glyph_svg(
    state: GlyphState,
    style: GlyphStyle = CustomStyle(),
) -> str:
    """Generate SVG for one 5x8 glyph as it would appear on an LCD.

    Pixels are taken from the encoded column bytes of state, so the
    preview shows what the copied array really contains.
    """
    w, h = glyph_size(style)
    px = style.pixel_size
    gap = style.pixel_gap

    # SVG header
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="100%" height="100%" '
        f'viewBox="0 0 {w} {h}">',
        f'<rect x="0" y="0" width="{w}" height="{h}" '
        f'rx="{style.border_radius}" fill="{style.frame}"/>',
        f'<rect x="{style.frame_width}" y="{style.frame_width}" '
        f'width="{w - 2 * style.frame_width}" '
        f'height="{h - 2 * style.frame_width}" '
        f'rx="{max(style.border_radius - 4, 0)}" fill="{style.background}"/>',
    ]

    origin_x = style.frame_width + style.padding
    origin_y = style.frame_width + style.padding

    for gy, row in enumerate(bit_matrix(state.font_data)):
        for gx, bit in enumerate(row):
            fill = style.pixel_on if bit else style.pixel_off
            px_x = origin_x + gx * (px + gap)
            px_y = origin_y + gy * (px + gap)
            parts.append(
                f'<rect x="{px_x}" y="{px_y}" width="{px}" '
                f'height="{px}" '
                f'fill="{fill}"/>'
            )

    parts.append("</svg>")
    logger.debug(f"Rendered glyph {state.font_data} to SVG")
    return "\n".join(parts)
