"""Exceptions raised while picking, reading and cleaning files."""

from __future__ import annotations

from pathlib import Path


class UserCancelled(Exception):
    """The file picker was closed without choosing a file."""


class InvalidEncodingError(OSError):
    """An input line is not valid UTF-8."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        super().__init__(f"{path}: line {line_number} is not valid UTF-8 ({reason})")
        self.path = path
        self.line_number = line_number
        self.reason = reason


class SameFileError(OSError):
    """The output path points at the input file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path}: output path is the input file")
        self.path = path
