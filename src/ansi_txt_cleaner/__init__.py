r"""
ansi-txt-cleaner: turn captured terminal output into plain text

Quick Start:
    >>> import ansi_txt_cleaner as atc
    >>> atc.clean_text("\x1b[32m├── src\x1b[0m")
    '+-- src'
    >>> atc.clean_file("tree.txt")  # writes tree_output.txt

Features:
    - Strip ANSI/VT escape sequences (ESC [ params letter)
    - Replace Unicode box/line-drawing characters with ASCII
    - Clean whole files line by line into <name>_output.txt
    - Interactive terminal picker for choosing .txt files
"""

__version__ = "0.1.0"

from ansi_txt_cleaner.clean.cleaner import (
    CleanResult,
    clean_file,
    clean_line,
    clean_lines,
    clean_text,
    remap_glyphs,
    strip_escapes,
)
from ansi_txt_cleaner.core.constants import GLYPH_MAP
from ansi_txt_cleaner.errors import InvalidEncodingError, SameFileError, UserCancelled
from ansi_txt_cleaner.io.naming import output_path_for

__all__ = [
    # Version
    "__version__",
    # Cleaning
    "clean_text",
    "clean_line",
    "clean_lines",
    "clean_file",
    "strip_escapes",
    "remap_glyphs",
    "CleanResult",
    "GLYPH_MAP",
    # Files
    "output_path_for",
    # Errors
    "UserCancelled",
    "InvalidEncodingError",
    "SameFileError",
]
