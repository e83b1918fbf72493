"""
Clean module - strip terminal escape sequences and box-drawing glyphs.

Turns captured terminal output (tree listings, tables, colored logs)
into plain ASCII-friendly text, one line at a time.
"""

from ansi_txt_cleaner.clean.cleaner import (
    CleanResult,
    clean_file,
    clean_line,
    clean_lines,
    clean_text,
    remap_glyphs,
    strip_escapes,
)

__all__ = [
    "CleanResult",
    "clean_file",
    "clean_line",
    "clean_lines",
    "clean_text",
    "remap_glyphs",
    "strip_escapes",
]
