"""Keyboard input handling with event abstraction."""

from __future__ import annotations

import os
import select
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ansi_txt_cleaner.core.constants import ESC


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""


class InputReader:
    """
    Keyboard reader for raw-mode stdin.

    Uses os.read() so escape sequences arriving in one chunk are
    kept together in the buffer.
    """

    # Escape sequences (without the ESC prefix)
    SEQUENCES: dict[str, Key] = {
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = fd

    def feed(self, data: str) -> None:
        """Append raw input to the buffer."""
        self._buffer += data

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """Read a single key event, or None if nothing arrives in time."""
        if self._fd is None:
            self._fd = sys.stdin.fileno()

        if not self._buffer:
            if not self._has_input(timeout):
                return None
            try:
                data = os.read(self._fd, 1024)
            except (OSError, BlockingIOError):
                return None
            self.feed(data.decode('utf-8', errors='replace'))

        return self.next_event()

    def next_event(self) -> Optional[KeyEvent]:
        """Consume the next event from the buffer."""
        if not self._buffer:
            return None

        first = self._buffer[0]

        if first in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[first], raw=first)

        if first == ESC:
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]
        if first.isprintable():
            return KeyEvent(char=first, raw=first)

        # Unknown control character
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]

        # Sequence ends at a letter or '~', or before the next ESC
        end_idx = 0
        for i, ch in enumerate(rest):
            if ch == ESC:
                break
            end_idx = i + 1
            if i > 0 and (ch.isalpha() or ch == '~'):
                break

        if end_idx == 0:
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw=ESC)

        seq = rest[:end_idx]
        self._buffer = rest[end_idx:]
        return KeyEvent(key=self.SEQUENCES.get(seq), raw=ESC + seq)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
