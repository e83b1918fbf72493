"""Interactive terminal file picker for choosing the input file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ansi_txt_cleaner.cli.core.input import InputReader, Key, KeyEvent
from ansi_txt_cleaner.cli.core.terminal import Terminal
from ansi_txt_cleaner.cli.widgets.base import Rect
from ansi_txt_cleaner.cli.widgets.file_list import FileItem, FileListWidget
from ansi_txt_cleaner.cli.widgets.status_bar import Shortcut, StatusBarWidget
from ansi_txt_cleaner.core.constants import TEXT_EXTENSIONS
from ansi_txt_cleaner.errors import UserCancelled


class FilePickerApp:
    """
    Full-screen browser that returns one chosen file.

    - Arrow keys navigate, Enter opens a directory or picks a file
    - q or Escape cancels
    """

    def __init__(
        self,
        start_dir: Optional[Path] = None,
        extensions: frozenset[str] = TEXT_EXTENSIONS,
        title: str = "Select Input File",
    ) -> None:
        self.title = title
        self.running = False
        self.chosen: Optional[Path] = None

        self.file_list = FileListWidget(extensions=extensions, on_open=self._on_open)
        self.file_list.focused = True
        self.status_bar = StatusBarWidget()
        self.status_bar.set_shortcuts([
            Shortcut("↑↓", "Navigate"),
            Shortcut("⏎", "Open"),
            Shortcut("⌫", "Parent"),
            Shortcut("q", "Cancel"),
        ])

        self.file_list.load_directory(start_dir or Path.cwd())

    def run(self, reader: Optional[InputReader] = None) -> Path:
        """
        Show the picker until a file is chosen or the user cancels.

        Raises:
            UserCancelled: If the picker is closed without a choice.
        """
        reader = reader or InputReader()
        self.running = True

        with Terminal.managed_mode():
            while self.running:
                self._render()
                event = reader.read(timeout=0.05)
                if event is not None:
                    self.handle_event(event)

        if self.chosen is None:
            raise UserCancelled("No input file selected")
        return self.chosen

    def handle_event(self, event: KeyEvent) -> None:
        """Route a key event to the picker or the file list."""
        if event.char == 'q' or event.key == Key.ESCAPE:
            self.running = False
            return
        self.file_list.handle_input(event)

    def render_lines(self, cols: int, rows: int) -> list[str]:
        """Compose the full screen as a list of lines."""
        lines = [f"\x1b[1m {self.title}\x1b[0m"]
        lines.extend(self.file_list.render(Rect(0, 1, cols, rows - 2)))

        self.status_bar.set_left(str(self.file_list.current_directory))
        lines.extend(self.status_bar.render(Rect(0, rows - 1, cols, 1)))
        return lines

    def _render(self) -> None:
        size = Terminal.size()
        lines = self.render_lines(size.cols, size.rows)
        Terminal.move_to(1, 1)
        # Raw mode: CR LF between lines, clear leftovers to end of line
        Terminal.write("\x1b[K\r\n".join(lines))
        Terminal.clear_below()

    def _on_open(self, item: FileItem) -> None:
        self.chosen = item.path
        self.running = False


def pick_file(start_dir: Optional[Path] = None) -> Path:
    """Let the user pick a .txt file; raises UserCancelled on cancel."""
    return FilePickerApp(start_dir).run()
