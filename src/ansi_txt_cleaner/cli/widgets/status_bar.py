"""Status bar widget for displaying the current directory and shortcuts."""

from __future__ import annotations

from dataclasses import dataclass

from ansi_txt_cleaner.cli.widgets.base import BaseWidget, Rect, visible_len


@dataclass
class Shortcut:
    """A keyboard shortcut to display."""
    key: str
    label: str


class StatusBarWidget(BaseWidget):
    """Bottom status bar showing info and keyboard shortcuts."""

    def __init__(self) -> None:
        super().__init__()
        self._left_text: str = ""
        self._shortcuts: list[Shortcut] = []

    def set_left(self, text: str) -> None:
        """Set left-aligned text."""
        self._left_text = text

    def set_shortcuts(self, shortcuts: list[Shortcut]) -> None:
        """Set keyboard shortcuts to display."""
        self._shortcuts = shortcuts

    def render(self, bounds: Rect) -> list[str]:
        """Render the status bar, fitting within bounds.width."""
        width = bounds.width

        # Build shortcuts from right, only include what fits
        shortcut_parts: list[str] = []
        shortcuts_len = 0

        for sc in reversed(self._shortcuts):
            part = f"\x1b[7m {sc.key} \x1b[0;100;36m {sc.label} "
            part_len = visible_len(part)
            # Keep room for the left text
            if shortcuts_len + part_len + 20 < width:
                shortcut_parts.insert(0, part)
                shortcuts_len += part_len
            else:
                break

        left = f" {self._left_text}"
        available = width - shortcuts_len
        if len(left) > available:
            left = "…" + left[-(available - 1):] if available > 1 else ""

        padding = " " * max(0, width - len(left) - shortcuts_len)

        return [f"\x1b[100;97m{left}{padding}{''.join(shortcut_parts)}\x1b[0m"]
