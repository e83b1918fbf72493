"""Read text files one line at a time."""

from pathlib import Path
from typing import BinaryIO, Iterator

from ansi_txt_cleaner.errors import InvalidEncodingError


def iter_lines(stream: BinaryIO, source: str | Path = "<stream>") -> Iterator[str]:
    """
    Decode lines from a binary stream.

    Lines are split on LF only. The LF and one preceding CR are removed,
    and a final LF does not produce an extra empty line.

    Raises:
        InvalidEncodingError: If a line is not valid UTF-8.
    """
    for number, raw in enumerate(stream, start=1):
        if raw.endswith(b'\n'):
            raw = raw[:-1]
            if raw.endswith(b'\r'):
                raw = raw[:-1]
        try:
            yield raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(Path(source), number, e.reason) from e


def read_lines(path: str | Path) -> Iterator[str]:
    """Lazily read lines from a UTF-8 text file."""
    path = Path(path)

    with open(path, 'rb') as f:
        yield from iter_lines(f, path)
