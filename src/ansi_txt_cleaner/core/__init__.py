"""Static tables shared by the cleaner, the I/O layer and the picker."""

from ansi_txt_cleaner.core.constants import (
    CSI,
    ESC,
    GLYPH_MAP,
    GLYPH_TABLE,
    TEXT_EXTENSIONS,
)

__all__ = ["CSI", "ESC", "GLYPH_MAP", "GLYPH_TABLE", "TEXT_EXTENSIONS"]
