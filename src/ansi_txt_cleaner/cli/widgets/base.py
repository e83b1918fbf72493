"""Base widget and shared rendering helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ansi_txt_cleaner.clean.cleaner import strip_escapes
from ansi_txt_cleaner.cli.core.input import KeyEvent


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(strip_escapes(s))


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    def __init__(self) -> None:
        self._focused = False

    @property
    def focused(self) -> bool:
        return self._focused

    @focused.setter
    def focused(self, value: bool) -> None:
        self._focused = value

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Render widget content as list of lines."""
        pass

    def handle_input(self, event: KeyEvent) -> bool:
        """Handle input event. Returns True if consumed."""
        return False
