"""
Clean text lines by removing escape sequences and box-drawing glyphs.

Two steps, applied per line:
- Strip CSI sequences of the form ESC [ params letter (params: digits and ';')
- Replace Unicode box/line-drawing characters with ASCII look-alikes

Everything else, including non-Latin text, passes through unchanged.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

from ansi_txt_cleaner.core.constants import (
    CSI_FINAL_CHARS,
    CSI_PARAM_CHARS,
    ESC,
    GLYPH_MAP,
    GLYPH_TABLE,
)
from ansi_txt_cleaner.errors import SameFileError
from ansi_txt_cleaner.io.naming import output_path_for
from ansi_txt_cleaner.io.reader import iter_lines
from ansi_txt_cleaner.io.writer import write_lines


@dataclass
class CleanResult:
    """Result of cleaning a file."""
    lines: int = 0
    sequences_removed: int = 0
    glyphs_replaced: int = 0
    original_chars: int = 0
    cleaned_chars: int = 0

    @property
    def was_modified(self) -> bool:
        """True if any sequence was removed or glyph replaced."""
        return self.sequences_removed > 0 or self.glyphs_replaced > 0


def _strip(text: str) -> tuple[str, int]:
    """Strip CSI sequences, returning the text and number removed."""
    if ESC not in text:
        return text, 0

    result: list[str] = []
    i = 0
    start = 0
    removed = 0
    n = len(text)

    while i < n:
        if text[i] == ESC and i + 1 < n and text[i + 1] == '[':
            # Read parameters (digits and semicolons)
            j = i + 2
            while j < n and text[j] in CSI_PARAM_CHARS:
                j += 1

            # A letter must terminate the sequence on this line
            if j < n and text[j] in CSI_FINAL_CHARS:
                result.append(text[start:i])
                removed += 1
                i = j + 1
                start = i
                continue

        i += 1

    result.append(text[start:])
    return ''.join(result), removed


def strip_escapes(text: str) -> str:
    """
    Remove every ESC [ [0-9;]* [A-Za-z] sequence from text.

    Matches are leftmost and non-overlapping. An ESC [ that is not closed
    by a letter is kept as-is and scanning resumes after the ESC.
    """
    return _strip(text)[0]


def remap_glyphs(text: str) -> str:
    """Replace box-drawing glyphs with their ASCII equivalents."""
    return text.translate(GLYPH_TABLE)


def clean_line(line: str) -> tuple[str, int, int]:
    """
    Clean one line and report what changed.

    Returns:
        Tuple of (cleaned_line, sequences_removed, glyphs_replaced)
    """
    stripped, removed = _strip(line)
    replaced = sum(1 for char in stripped if char in GLYPH_MAP)
    cleaned = stripped.translate(GLYPH_TABLE) if replaced else stripped
    return cleaned, removed, replaced


def clean_text(line: str) -> str:
    """Strip escape sequences from a line, then remap box-drawing glyphs."""
    return remap_glyphs(strip_escapes(line))


def clean_lines(lines: Iterable[str]) -> Iterator[str]:
    """Lazily clean lines, preserving their order."""
    for line in lines:
        yield clean_text(line)


def clean_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
) -> tuple[Path, CleanResult]:
    """
    Clean a text file line by line.

    Lines are written as soon as they are cleaned, so if reading or writing
    fails part-way the lines already processed remain in the output file.

    Args:
        input_path: Path to a UTF-8 text file
        output_path: Path to output file (default: <stem>_output.txt)

    Returns:
        Tuple of (output_path, CleanResult)

    Raises:
        OSError: If the input cannot be read or the output cannot be written.
            Undecodable input raises InvalidEncodingError, a subclass.
        SameFileError: If output_path is the input file.
    """
    input_path = Path(input_path)

    if output_path is None:
        output_path = output_path_for(input_path)
    else:
        output_path = Path(output_path)

    # Writing would truncate the input before it is read
    if output_path.resolve() == input_path.resolve() or (
        output_path.exists() and input_path.exists()
        and output_path.samefile(input_path)
    ):
        raise SameFileError(input_path)

    result = CleanResult()

    def cleaned(lines: Iterator[str]) -> Iterator[str]:
        for line in lines:
            out, removed, replaced = clean_line(line)
            result.lines += 1
            result.sequences_removed += removed
            result.glyphs_replaced += replaced
            result.original_chars += len(line)
            result.cleaned_chars += len(out)
            yield out

    # Open the input before creating the output
    with open(input_path, "rb") as source:
        write_lines(output_path, cleaned(iter_lines(source, input_path)))

    return output_path, result
