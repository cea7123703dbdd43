"""
Settings for the glyph editor.

Settings are kept in memory only; presets are named style bundles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from glyph_editor.backend.utils.generate_svg import CustomStyle, GlyphStyle


@dataclass(frozen=True)
class EditorSettings:
    style: GlyphStyle = field(default_factory=CustomStyle)
    render_delay_ms: int = 150
    theme: str = "darkly"


PRESETS: Dict[str, GlyphStyle] = {
    "Yellow LCD": CustomStyle(),
    "Green LCD": GlyphStyle(),
    "Blue LCD": GlyphStyle(
        background="#1f3fff",
        frame="#000000",
        pixel_on="#e8f0ff",
        pixel_off="#2f4fff",
    ),
}


def preset_names() -> List[str]:
    return list(PRESETS.keys())


def get_preset(name: str) -> GlyphStyle:
    """
    Look up a style preset by name.

    Raises:
        KeyError: if no preset with that name exists.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset: {name}") from None

