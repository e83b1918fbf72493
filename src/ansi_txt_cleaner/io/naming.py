"""Derive output file names from input paths."""

from pathlib import Path

from ansi_txt_cleaner.core.constants import (
    FALLBACK_STEM,
    OUTPUT_EXTENSION,
    OUTPUT_SUFFIX,
)


def output_path_for(input_path: str | Path) -> Path:
    """
    Get the output path for an input file.

    ``notes.txt`` becomes ``notes_output.txt`` in the same directory.
    Paths without a file name (``/``, ``..``) get ``output_output.txt``
    appended instead.
    """
    path = Path(input_path)

    if path.name in ("", ".."):
        return path / f"{FALLBACK_STEM}{OUTPUT_SUFFIX}{OUTPUT_EXTENSION}"

    return path.with_name(f"{path.stem}{OUTPUT_SUFFIX}{OUTPUT_EXTENSION}")
