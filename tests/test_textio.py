"""Tests for text file reads and writes."""

import pytest

from t3.exceptions import ReadError, WriteError
from t3.textio import read_text, write_text


def test_read_missing_file_raises_read_error(tmp_path):
    path = tmp_path / "gone.txt"
    with pytest.raises(ReadError) as exc_info:
        read_text(path)
    assert exc_info.value.path == path
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_write_to_directory_raises_write_error(tmp_path):
    target = tmp_path / "dir"
    target.mkdir()
    with pytest.raises(WriteError) as exc_info:
        write_text(target, "text")
    assert exc_info.value.path == target
    assert exc_info.value.exit_code == 1


def test_write_then_read(tmp_path):
    path = tmp_path / "f.txt"
    write_text(path, "a\r\nb\n")
    assert read_text(path) == "a\r\nb\n"
