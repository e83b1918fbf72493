"""Widgets used by the file picker screen."""

from ansi_txt_cleaner.cli.widgets.base import BaseWidget, Rect
from ansi_txt_cleaner.cli.widgets.file_list import FileListWidget, FileItem
from ansi_txt_cleaner.cli.widgets.status_bar import StatusBarWidget, Shortcut

__all__ = [
    "BaseWidget",
    "Rect",
    "FileListWidget",
    "FileItem",
    "StatusBarWidget",
    "Shortcut",
]
