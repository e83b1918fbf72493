"""Write text files one line at a time."""

from pathlib import Path
from typing import Iterable


def write_lines(path: str | Path, lines: Iterable[str]) -> int:
    """
    Write lines to a UTF-8 file, each followed by LF.

    Any existing file is overwritten. Lines are written as they arrive,
    so an exception from ``lines`` leaves the earlier lines on disk.

    Returns:
        Number of lines written
    """
    path = Path(path)
    count = 0

    with open(path, 'w', encoding='utf-8', newline='') as f:
        for line in lines:
            f.write(line)
            f.write('\n')
            count += 1

    return count
