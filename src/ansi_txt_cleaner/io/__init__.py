"""Line-oriented file I/O and output naming."""

from ansi_txt_cleaner.io.naming import output_path_for
from ansi_txt_cleaner.io.reader import iter_lines, read_lines
from ansi_txt_cleaner.io.writer import write_lines

__all__ = ["output_path_for", "iter_lines", "read_lines", "write_lines"]
