"""
Glyph encoding for 5x8 bitmap font characters.

A glyph is edited as a set of active pixel ids (1-40, row-major over a
5 column x 8 row grid) and read back as five column bytes.

Bit orientation: row 0 (top) is bit 0, row 7 (bottom) is bit 7,
i.e. ``byte[col] |= 1 << row``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

GLYPH_COLS = 5
GLYPH_ROWS = 8
PIXEL_COUNT = GLYPH_COLS * GLYPH_ROWS
ALL_PIXELS = frozenset(range(1, PIXEL_COUNT + 1))
TOP_ROW_PIXELS = frozenset(range(1, GLYPH_COLS + 1))

FontData = tuple[int, ...]


class InvalidPixelError(ValueError):
    pass


def pixel_position(pixel_id: int) -> tuple[int, int]:
    """Return ``(row, col)`` of a pixel id, row 0 being the top row."""
    return (pixel_id - 1) // GLYPH_COLS, (pixel_id - 1) % GLYPH_COLS


def pixel_id(row: int, col: int) -> int:
    return row * GLYPH_COLS + col + 1


def validate_pixel_id(value: object) -> int:
    """
    Check a pixel id coming from outside the editor.

    Args:
        value:
            Anything a caller handed in, usually decoded JSON.

    Returns:
        int:
            The pixel id.

    Raises:
        InvalidPixelError: if value is not an integer in 1-40.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPixelError(f"Pixel id must be an integer, got {value!r}")
    if value < 1 or value > PIXEL_COUNT:
        raise InvalidPixelError(
            f"Pixel id must be 1-{PIXEL_COUNT}, got {value}"
        )
    return value


def encode(active_pixels: Iterable[int]) -> FontData:
    """Pack active pixel ids into five column bytes."""
    columns = [0] * GLYPH_COLS
    for pid in active_pixels:
        row, col = pixel_position(pid)
        columns[col] |= 1 << row
    return tuple(columns)


def toggle(active_pixels: Iterable[int], pid: int) -> frozenset[int]:
    return frozenset(active_pixels) ^ {pid}


@dataclass(frozen=True)
class GlyphState:
    active_pixels: frozenset[int] = frozenset()
    font_data: FontData = field(init=False)

    def __post_init__(self) -> None:
        # font_data is always derived, never passed in
        pixels = frozenset(self.active_pixels)
        object.__setattr__(self, "active_pixels", pixels)
        object.__setattr__(self, "font_data", encode(pixels))

    @classmethod
    def from_pixels(cls, active_pixels: Iterable[int]) -> "GlyphState":
        return cls(active_pixels=frozenset(active_pixels))


def clear() -> GlyphState:
    return GlyphState()


def fill_all() -> GlyphState:
    return GlyphState.from_pixels(ALL_PIXELS)


def load_test_pattern() -> GlyphState:
    """Top row only; every column byte reads 0x01."""
    return GlyphState.from_pixels(TOP_ROW_PIXELS)


@dataclass(frozen=True)
class Toggle:
    pixel_id: int

    def __post_init__(self) -> None:
        validate_pixel_id(self.pixel_id)


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class FillAll:
    pass


@dataclass(frozen=True)
class LoadTestPattern:
    pass


Command = Union[Toggle, Clear, FillAll, LoadTestPattern]


def apply(state: GlyphState, command: Command) -> GlyphState:
    """Return the state that results from running command on state."""
    logger.debug("Applying %s", command)
    if isinstance(command, Toggle):
        return GlyphState.from_pixels(
            toggle(state.active_pixels, command.pixel_id)
        )
    if isinstance(command, Clear):
        return clear()
    if isinstance(command, FillAll):
        return fill_all()
    if isinstance(command, LoadTestPattern):
        return load_test_pattern()
    raise TypeError(f"Unknown glyph command: {command!r}")


def format_hex(byte: int) -> str:
    return f"0x{byte:02X}"


def format_binary(byte: int) -> str:
    return f"{byte:08b}"


def format_array(font_data: Iterable[int]) -> str:
    """Render column bytes as a C array initializer, e.g. ``{0x00,0x1F,...}``."""
    return "{" + ",".join(format_hex(byte) for byte in font_data) + "}"


def format_declarations(font_data: Iterable[int]) -> List[str]:
    array = format_array(font_data)
    return [
        f"const uint8_t char[{GLYPH_COLS}] = {array};",
        f"unsigned char font[] = {array};",
    ]


@dataclass(frozen=True)
class ColumnInfo:
    column: int
    hex: str
    binary: str
    decimal: int


def column_breakdown(font_data: Iterable[int]) -> List[ColumnInfo]:
    return [
        ColumnInfo(
            column=index + 1,
            hex=format_hex(byte),
            binary=format_binary(byte),
            decimal=byte,
        )
        for index, byte in enumerate(font_data)
    ]


def bit_matrix(font_data: Iterable[int]) -> List[List[int]]:
    """
    Unpack column bytes into 8 rows of 5 bits, top row first.

    Uses the same orientation as encode(), so the matrix marks exactly
    the active pixels the bytes were built from.
    """
    columns = list(font_data)
    return [
        [(byte >> row) & 1 for byte in columns] for row in range(GLYPH_ROWS)
    ]
