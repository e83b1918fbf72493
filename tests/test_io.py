"""Tests for line I/O, output naming and clean_file."""

from pathlib import Path

import pytest

import ansi_txt_cleaner as atc
from ansi_txt_cleaner.errors import InvalidEncodingError, SameFileError
from ansi_txt_cleaner.io import output_path_for, read_lines, write_lines


class TestOutputPathFor:
    """Test output file naming."""

    @pytest.mark.parametrize("given, expected", [
        ("/data/logs/notes.txt", "/data/logs/notes_output.txt"),
        ("/data/archive.tar.txt", "/data/archive.tar_output.txt"),
        ("/data/README", "/data/README_output.txt"),
        ("relative.txt", "relative_output.txt"),
        ("/data/.txt", "/data/.txt_output.txt"),
    ])
    def test_renames_stem(self, given, expected):
        assert output_path_for(given) == Path(expected)

    def test_same_directory(self, tmp_path: Path):
        path = tmp_path / "in.txt"
        assert output_path_for(path).parent == tmp_path

    def test_fallback_for_root(self):
        assert output_path_for(Path("/")) == Path("/output_output.txt")

    def test_fallback_for_parent_reference(self):
        assert output_path_for(Path("a/..")) == Path("a/../output_output.txt")


class TestReadLines:
    """Test read_lines line splitting and decoding."""

    @pytest.mark.parametrize("data, expected", [
        (b"one\ntwo\nthree\n", ["one", "two", "three"]),
        (b"one\ntwo", ["one", "two"]),
        (b"crlf\r\nlines\r\n", ["crlf", "lines"]),
        (b"a\n\nb\n", ["a", "", "b"]),
        (b"\n", [""]),
        (b"", []),
        (b"lone\rcr\n", ["lone\rcr"]),
        (b"last\r", ["last\r"]),
        ("├── ü\n".encode("utf-8"), ["├── ü"]),
    ])
    def test_splitting(self, write_bytes, data, expected):
        path = write_bytes("in.txt", data)
        assert list(read_lines(path)) == expected

    def test_invalid_utf8(self, write_bytes):
        path = write_bytes("bad.txt", b"ok\n\xff\xfe broken\nnever\n")
        with pytest.raises(InvalidEncodingError) as exc_info:
            list(read_lines(path))

        err = exc_info.value
        assert isinstance(err, OSError)
        assert err.line_number == 2
        assert err.path == path
        assert "line 2" in str(err)

    def test_lazy(self, write_bytes):
        """Lines before a bad one are still delivered."""
        path = write_bytes("bad.txt", b"first\n\xff\n")
        lines = read_lines(path)
        assert next(lines) == "first"
        with pytest.raises(InvalidEncodingError):
            next(lines)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            list(read_lines(tmp_path / "missing.txt"))


class TestWriteLines:
    """Test write_lines."""

    def test_writes_lf_terminated(self, tmp_path: Path):
        path = tmp_path / "out.txt"
        count = write_lines(path, ["a", "", "ü"])
        assert count == 3
        assert path.read_bytes() == "a\n\nü\n".encode("utf-8")

    def test_overwrites(self, tmp_path: Path):
        path = tmp_path / "out.txt"
        path.write_text("old content that is longer\n")
        write_lines(path, ["new"])
        assert path.read_text() == "new\n"

    def test_empty_creates_file(self, tmp_path: Path):
        path = tmp_path / "out.txt"
        assert write_lines(path, []) == 0
        assert path.exists()
        assert path.read_bytes() == b""

    def test_partial_output_kept_on_error(self, tmp_path: Path):
        path = tmp_path / "out.txt"

        def lines():
            yield "first"
            raise OSError("disk gone")

        with pytest.raises(OSError, match="disk gone"):
            write_lines(path, lines())
        assert path.read_text() == "first\n"


class TestCleanFile:
    """Test clean_file end to end."""

    def test_default_output(self, tree_file: Path, tree_cleaned):
        out_path, result = atc.clean_file(tree_file)

        assert out_path == tree_file.with_name("tree_output.txt")
        assert out_path.read_text(encoding="utf-8") == "\n".join(tree_cleaned) + "\n"
        assert tree_file.exists()

        assert result.lines == 4
        assert result.sequences_removed == 4
        assert result.glyphs_replaced == 10
        assert result.cleaned_chars < result.original_chars
        assert result.was_modified

    def test_explicit_output(self, tree_file: Path, tmp_path: Path, tree_cleaned):
        target = tmp_path / "elsewhere.txt"
        out_path, _ = atc.clean_file(str(tree_file), str(target))
        assert out_path == target
        assert target.read_text(encoding="utf-8").splitlines() == tree_cleaned

    def test_already_clean(self, write_bytes):
        path = write_bytes("plain.txt", b"nothing\nto do\n")
        out_path, result = atc.clean_file(path)
        assert out_path.read_bytes() == b"nothing\nto do\n"
        assert result.lines == 2
        assert not result.was_modified

    def test_crlf_becomes_lf(self, write_bytes):
        path = write_bytes("dos.txt", "│x│\r\ny\r\n".encode("utf-8"))
        out_path, _ = atc.clean_file(path)
        assert out_path.read_bytes() == b"|x|\ny\n"

    def test_overwrites_existing_output(self, tree_file: Path):
        stale = tree_file.with_name("tree_output.txt")
        stale.write_text("stale\n" * 100)
        out_path, _ = atc.clean_file(tree_file)
        assert "stale" not in out_path.read_text(encoding="utf-8")

    def test_missing_input_creates_no_output(self, tmp_path: Path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(FileNotFoundError):
            atc.clean_file(missing)
        assert not (tmp_path / "missing_output.txt").exists()

    def test_invalid_encoding_keeps_partial_output(self, write_bytes):
        path = write_bytes("mixed.txt", b"\x1b[1mfirst\x1b[0m\n\xc3\x28\nthird\n")
        with pytest.raises(InvalidEncodingError):
            atc.clean_file(path)
        assert path.with_name("mixed_output.txt").read_text() == "first\n"

    def test_refuses_to_overwrite_input(self, write_bytes):
        data = "│ keep me │\n".encode("utf-8")
        path = write_bytes("keep.txt", data)

        with pytest.raises(SameFileError) as exc_info:
            atc.clean_file(path, path)

        assert isinstance(exc_info.value, OSError)
        assert path.read_bytes() == data

    def test_refuses_input_through_other_spelling(self, write_bytes, tmp_path: Path):
        data = b"\x1b[1mkeep\x1b[0m\n"
        path = write_bytes("keep.txt", data)
        (tmp_path / "sub").mkdir()

        with pytest.raises(SameFileError):
            atc.clean_file(path, tmp_path / "sub" / ".." / "keep.txt")
        assert path.read_bytes() == data
