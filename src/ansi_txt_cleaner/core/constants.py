"""Shared constants for text cleaning."""

from types import MappingProxyType
from typing import Mapping

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["

# Characters allowed in a CSI parameter section
CSI_PARAM_CHARS = frozenset("0123456789;")

# Final character of a strippable CSI sequence (ASCII letters only)
CSI_FINAL_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)

# Box/line-drawing glyphs grouped by ASCII replacement
# Source: https://en.wikipedia.org/wiki/Box-drawing_characters
_GLYPH_GROUPS: tuple[tuple[str, str], ...] = (
    # Light corners, tees, cross and arcs
    ("+", "├┤└┌┐┘┬┴┼╭╮╯╰"),
    # Double and mixed-weight corners/junctions (U+2552-U+256C)
    ("+", "╒╓╔╕╖╗╘╙╚╛╜╝╞╟╠╡╢╣╤╥╦╧╨╩╪╫╬"),
    # Full, half and mixed-weight horizontals
    ("-", "─╴╶╸╺╼╾"),
    # Full, half and mixed-weight verticals, plus double vertical
    ("|", "│╵╷╹╻╽╿║"),
    ("=", "═"),
    ("/", "╱"),
    ("\\", "╲"),
    ("X", "╳"),
)

GLYPH_MAP: Mapping[str, str] = MappingProxyType({
    glyph: replacement
    for replacement, glyphs in _GLYPH_GROUPS
    for glyph in glyphs
})

# Code point -> replacement, for str.translate
GLYPH_TABLE: dict[int, str] = str.maketrans(dict(GLYPH_MAP))

# File naming
TEXT_EXTENSIONS = frozenset({".txt"})
OUTPUT_SUFFIX = "_output"
OUTPUT_EXTENSION = ".txt"
FALLBACK_STEM = "output"
