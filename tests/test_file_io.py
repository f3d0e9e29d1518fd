"""Tests for the on-disk line format and atomic saving."""

import os
import stat
import tempfile

import pytest

from nte.fileio import read_lines, write_lines


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as path:
        yield path


def _write_bytes(path, data):
    with open(path, 'wb') as f:
        f.write(data)


def _read_bytes(path):
    with open(path, 'rb') as f:
        return f.read()


def test_read_lines_with_trailing_newline(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, b"one\ntwo\n")
    assert read_lines(path) == ["one", "two"]


def test_read_lines_without_trailing_newline(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, b"one\ntwo")
    assert read_lines(path) == ["one", "two"]


def test_read_empty_file_is_one_empty_line(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, b"")
    assert read_lines(path) == [""]


def test_read_keeps_blank_lines(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, b"\n\nx\n\n")
    assert read_lines(path) == ["", "", "x", ""]


def test_read_strips_carriage_returns(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, b"one\r\ntwo\r\n")
    assert read_lines(path) == ["one", "two"]


def test_read_utf8(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, "Café\n世界\n".encode('utf-8'))
    assert read_lines(path) == ["Café", "世界"]


def test_read_missing_file_raises(temp_dir):
    with pytest.raises(FileNotFoundError):
        read_lines(os.path.join(temp_dir, "missing.txt"))


def test_read_invalid_utf8_raises(temp_dir):
    path = os.path.join(temp_dir, "a.bin")
    _write_bytes(path, b"\xff\xfe\x00bad")
    with pytest.raises(UnicodeDecodeError):
        read_lines(path)


def test_write_appends_newline_to_every_line(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    write_lines(path, ["one", "", "three"])
    assert _read_bytes(path) == b"one\n\nthree\n"


def test_write_single_empty_line(temp_dir):
    path = os.path.join(temp_dir, "new.txt")
    write_lines(path, [""])
    assert _read_bytes(path) == b"\n"
    assert read_lines(path) == [""]


def test_round_trip_is_byte_identical_with_trailing_newline(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    original = b"alpha\n\tbeta\n\ngamma\n"
    _write_bytes(path, original)

    write_lines(path, read_lines(path))

    assert _read_bytes(path) == original


def test_round_trip_adds_missing_trailing_newline(temp_dir):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, b"alpha\nbeta")

    write_lines(path, read_lines(path))

    assert _read_bytes(path) == b"alpha\nbeta\n"


def test_write_keeps_existing_permissions(temp_dir):
    path = os.path.join(temp_dir, "script.sh")
    _write_bytes(path, b"echo hi\n")
    os.chmod(path, 0o750)

    write_lines(path, ["echo bye"])

    assert stat.S_IMODE(os.stat(path).st_mode) == 0o750
    assert _read_bytes(path) == b"echo bye\n"


def test_new_file_mode_follows_umask_and_umask_is_restored(temp_dir):
    path = os.path.join(temp_dir, "new.txt")
    old_umask = os.umask(0o027)
    try:
        write_lines(path, ["x"])
        assert os.umask(0o027) == 0o027
    finally:
        os.umask(old_umask)

    assert stat.S_IMODE(os.stat(path).st_mode) == 0o640


def test_write_to_missing_directory_raises_and_leaves_no_temp_file(temp_dir):
    path = os.path.join(temp_dir, "missing", "a.txt")
    with pytest.raises(OSError):
        write_lines(path, ["x"])
    assert os.listdir(temp_dir) == []


def test_failed_replace_keeps_original_and_removes_temp_file(temp_dir, monkeypatch):
    path = os.path.join(temp_dir, "a.txt")
    _write_bytes(path, b"original\n")

    def failing_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(os, "replace", failing_replace)
    with pytest.raises(OSError):
        write_lines(path, ["new"])

    assert _read_bytes(path) == b"original\n"
    assert os.listdir(temp_dir) == ["a.txt"]
