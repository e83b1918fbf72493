"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest


# Captured `tree --color` style output with SGR codes and box drawing
TREE_LINES = [
    "\x1b[1;34m.\x1b[0m",
    "├── \x1b[1;34msrc\x1b[0m",
    "│   └── main.py",
    "└── README.md",
]

TREE_CLEANED = [
    ".",
    "+-- src",
    "|   +-- main.py",
    "+-- README.md",
]


@pytest.fixture
def write_bytes(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Factory writing raw bytes to a file under tmp_path."""
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def tree_file(write_bytes: Callable[[str, bytes], Path]) -> Path:
    """A .txt file holding colored tree output, LF line endings."""
    text = "\n".join(TREE_LINES) + "\n"
    return write_bytes("tree.txt", text.encode("utf-8"))


@pytest.fixture
def browse_dir(tmp_path: Path) -> Path:
    """Directory with a mix of files for the picker."""
    root = tmp_path / "browse"
    root.mkdir()
    (root / "b_notes.txt").write_text("b\n")
    (root / "A_log.TXT").write_text("a\n")
    (root / "image.png").write_bytes(b"\x89PNG")
    (root / "script.py").write_text("print()\n")
    (root / ".hidden.txt").write_text("h\n")
    sub = root / "sub"
    sub.mkdir()
    (sub / "inner.txt").write_text("inner\n")
    return root


@pytest.fixture
def tree_cleaned() -> list[str]:
    """Expected output lines for tree_file."""
    return list(TREE_CLEANED)
