"""Low-level terminal operations for the file picker."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from ansi_txt_cleaner.core.constants import CSI


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O abstraction for the picker screen."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def move_to(row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        Terminal.write(f'{CSI}{row};{col}H')

    @staticmethod
    def clear_below() -> None:
        """Erase from cursor to end of screen."""
        Terminal.write(f'{CSI}J')

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows - input is still line-buffered
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full-screen mode: alternate screen, hidden cursor, raw input."""
        Terminal.write(f'{CSI}?1049h{CSI}?25l')
        try:
            with Terminal.raw_mode():
                yield
        finally:
            Terminal.write(f'{CSI}0m{CSI}?25h{CSI}?1049l')
