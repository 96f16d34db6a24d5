"""Unit tests for rwc.api.count.read_paths0_from module."""

import io

import pytest

from rwc.api.count.CountIOError import CountIOError
from rwc.api.count.InvalidPathError import InvalidPathError
from rwc.api.count.MultiError import MultiError
from rwc.api.count.read_paths0_from import read_paths0_from


def test_nul_separated_paths():
    assert read_paths0_from(io.BytesIO(b"a\0b")) == ["a", "b"]


def test_trailing_separator_ignored():
    assert read_paths0_from(io.BytesIO(b"a\0b\0")) == ["a", "b"]


def test_interior_empty_entry_kept():
    assert read_paths0_from(io.BytesIO(b"a\0\0b")) == ["a", "", "b"]


def test_empty_stream():
    assert read_paths0_from(io.BytesIO(b"")) == []


def test_newline_is_part_of_path_by_default():
    assert read_paths0_from(io.BytesIO(b"a\nb")) == ["a\nb"]


def test_multiple_separators():
    assert read_paths0_from(io.BytesIO(b"a\nb\0c\n"), separators=b"\0\n") == ["a", "b", "c"]


def test_utf8_paths():
    paths = read_paths0_from(io.BytesIO("dir/naïve.txt\0日本.txt".encode("utf-8")))
    assert paths == ["dir/naïve.txt", "日本.txt"]


def test_all_invalid_segments_reported():
    """Every undecodable entry is reported, never a partial list."""
    with pytest.raises(MultiError) as exc_info:
        read_paths0_from(io.BytesIO(b"ok\0bad\xff\0fine\0\xfe"))

    errors = exc_info.value.errors
    assert len(errors) == 2
    assert all(isinstance(e, InvalidPathError) for e in errors)
    assert [e.raw for e in errors] == [b"bad\xff", b"\xfe"]
    assert "Invalid Path: bad" in str(exc_info.value)


def test_read_failure_reported_as_multi_error():
    class BrokenStream:
        def read(self, size):
            raise OSError("broken pipe")

    with pytest.raises(MultiError) as exc_info:
        read_paths0_from(BrokenStream())
    assert len(exc_info.value.errors) == 1
    assert isinstance(exc_info.value.errors[0], CountIOError)


def test_separators_required():
    with pytest.raises(ValueError):
        read_paths0_from(io.BytesIO(b"a"), separators=b"")
