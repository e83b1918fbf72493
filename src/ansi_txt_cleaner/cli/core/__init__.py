"""Core TUI infrastructure - terminal I/O and input handling."""

from ansi_txt_cleaner.cli.core.terminal import Terminal, TerminalSize
from ansi_txt_cleaner.cli.core.input import InputReader, KeyEvent, Key

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
]
