"""Scrollable file browser widget with directory navigation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ansi_txt_cleaner.cli.core.input import Key, KeyEvent
from ansi_txt_cleaner.cli.widgets.base import BaseWidget, Rect
from ansi_txt_cleaner.core.constants import TEXT_EXTENSIONS


@dataclass
class FileItem:
    """Represents a file or directory in the list."""
    path: Path
    name: str
    is_dir: bool

    @classmethod
    def from_path(cls, path: Path) -> FileItem:
        return cls(path=path, name=path.name, is_dir=path.is_dir())


class FileListWidget(BaseWidget):
    """
    Scrollable file browser that only lists matching files.

    Keyboard shortcuts:
        ↑/k ↓/j     Move selection (wraps around)
        PgUp/PgDn   Page up/down
        Home/End    Jump to first/last
        Enter/l/→   Enter directory / open file
        Backspace/h/← Go up to parent directory
        ~           Go to home directory
        .           Toggle hidden files
    """

    def __init__(
        self,
        extensions: Optional[frozenset[str]] = None,
        on_open: Optional[Callable[[FileItem], None]] = None,
        show_hidden: bool = False,
    ):
        super().__init__()
        self.extensions = extensions or TEXT_EXTENSIONS
        self.on_open = on_open
        self.show_hidden = show_hidden

        self._items: list[FileItem] = []
        self._selected: int = 0
        self._scroll_offset: int = 0
        self._current_dir: Path = Path.cwd()
        self._page_size: int = 20  # Updated from render bounds

    def load_directory(self, path: Path) -> None:
        """Load files from directory."""
        self._current_dir = path.resolve()
        self._refresh_items()

    def _refresh_items(self) -> None:
        """Refresh the file list for current directory."""
        self._items = []

        # Parent directory navigation (unless at root)
        if self._current_dir.parent != self._current_dir:
            self._items.append(FileItem(self._current_dir.parent, "..", is_dir=True))

        try:
            entries = sorted(
                self._current_dir.iterdir(),
                key=lambda p: (not p.is_dir(), p.name.lower())
            )
        except PermissionError:
            entries = []

        for entry in entries:
            if entry.name.startswith('.') and not self.show_hidden:
                continue
            if entry.is_dir() or entry.suffix.lower() in self.extensions:
                self._items.append(FileItem.from_path(entry))

        self._selected = 0
        self._scroll_offset = 0

    def go_up(self) -> bool:
        """Navigate to parent directory. Returns True if successful."""
        if self._current_dir.parent == self._current_dir:
            return False
        # Re-select the directory we came from
        previous = self._current_dir.name
        self.load_directory(self._current_dir.parent)
        self._select_by_name(previous)
        return True

    def toggle_hidden(self) -> None:
        """Toggle visibility of hidden files."""
        self.show_hidden = not self.show_hidden
        self._refresh_items()

    def _select_by_name(self, name: str) -> None:
        for i, item in enumerate(self._items):
            if item.name == name:
                self._selected = i
                return

    def handle_input(self, event: KeyEvent) -> bool:
        if event.key == Key.BACKSPACE or event.key == Key.LEFT or event.char == 'h':
            self.go_up()
            return True
        elif event.char == '~':
            self.load_directory(Path.home())
            return True
        elif event.char == '.':
            self.toggle_hidden()
            return True

        if not self._items:
            return False

        if event.key == Key.UP or event.char == 'k':
            self._selected = (self._selected - 1) % len(self._items)
        elif event.key == Key.DOWN or event.char == 'j':
            self._selected = (self._selected + 1) % len(self._items)
        elif event.key == Key.PAGE_UP:
            self._move_selection(-self._page_size)
        elif event.key == Key.PAGE_DOWN:
            self._move_selection(self._page_size)
        elif event.key == Key.HOME:
            self._selected = 0
        elif event.key == Key.END:
            self._selected = len(self._items) - 1
        elif event.key == Key.ENTER or event.key == Key.RIGHT or event.char == 'l':
            item = self._items[self._selected]
            if item.is_dir:
                self.load_directory(item.path)
            elif self.on_open:
                self.on_open(item)
        else:
            return False
        return True

    def _move_selection(self, delta: int) -> None:
        """Move selection by delta, clamping to bounds."""
        self._selected = max(0, min(len(self._items) - 1, self._selected + delta))

    def _adjust_scroll(self, visible_height: int) -> None:
        """Ensure selected item is visible for given viewport height."""
        if visible_height <= 0:
            return
        if self._selected < self._scroll_offset:
            self._scroll_offset = self._selected
        elif self._selected >= self._scroll_offset + visible_height:
            self._scroll_offset = self._selected - visible_height + 1

    def render(self, bounds: Rect) -> list[str]:
        """Render the file list."""
        visible_height = bounds.height - 1  # Reserve for header
        self._page_size = max(1, visible_height)
        self._adjust_scroll(visible_height)

        path_str = str(self._current_dir)
        if len(path_str) > bounds.width - 2:
            path_str = "…" + path_str[-(bounds.width - 3):]
        lines = [f"\x1b[1;36m{path_str}\x1b[0m"]

        max_name_len = max(1, bounds.width - 4)
        visible_end = min(self._scroll_offset + visible_height, len(self._items))

        for i in range(self._scroll_offset, visible_end):
            item = self._items[i]

            name = item.name
            if item.is_dir and name != "..":
                name += "/"
            if len(name) > max_name_len:
                name = name[:max_name_len - 1] + "…"

            if i == self._selected:
                line = f"\x1b[30;46m▶ {name:<{max_name_len}} \x1b[0m"
            elif item.is_dir:
                line = f"\x1b[34m  {name}\x1b[0m"
            else:
                line = f"  {name}"
            lines.append(line)

        has_files = any(not item.is_dir for item in self._items)
        if not has_files and len(lines) < bounds.height:
            exts = ", ".join(sorted(self.extensions))
            lines.append(f"\x1b[90m  (no {exts} files here)\x1b[0m")

        while len(lines) < bounds.height:
            lines.append("")

        return lines

    @property
    def items(self) -> list[FileItem]:
        return list(self._items)

    @property
    def selected_item(self) -> Optional[FileItem]:
        if self._items and 0 <= self._selected < len(self._items):
            return self._items[self._selected]
        return None

    @property
    def current_directory(self) -> Path:
        return self._current_dir
