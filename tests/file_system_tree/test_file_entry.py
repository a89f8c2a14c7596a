"""Unit tests for FileEntry and WalkCounts."""

import os
import stat
from unittest.mock import patch

import pytest

from any2tree.file_system_tree.file_entry import FileEntry, WalkCounts


@pytest.fixture
def file_entry(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"x" * 1234)
    return FileEntry(path, "data.bin", 1, is_dir=False)


def test_metadata_is_read_once(file_entry):
    with patch("any2tree.file_system_tree.file_entry.os.stat", wraps=os.stat) as mock_stat:
        first = file_entry.metadata()
        second = file_entry.metadata()
    assert first is second
    assert mock_stat.call_count == 1


def test_size(file_entry):
    assert file_entry.size == 1234


def test_directory_has_no_size(tmp_path):
    entry = FileEntry(tmp_path, "", 1, is_dir=True)
    with patch("any2tree.file_system_tree.file_entry.os.stat") as mock_stat:
        assert entry.size is None
    mock_stat.assert_not_called()


def test_missing_file_metadata(tmp_path):
    entry = FileEntry(tmp_path / "gone", "gone", 1, is_dir=False)
    assert entry.metadata() is None
    assert entry.size is None
    assert entry.mode is None


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
def test_mode(file_entry):
    os.chmod(file_entry.path, 0o640)
    assert stat.S_IMODE(file_entry.mode) == 0o640


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
def test_broken_symlink_is_stat_ed_without_following(tmp_path):
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "missing", link)

    entry = FileEntry(link, "dangling", 1, is_dir=False, is_symlink=True)

    assert entry.metadata() is not None
    assert stat.S_ISLNK(entry.mode)


def test_repr(file_entry):
    assert repr(file_entry) == "FileEntry('data.bin', depth=1, is_dir=False)"


def test_walk_counts():
    counts = WalkCounts()
    counts.add(is_dir=True)
    counts.add(is_dir=False)
    counts.add(is_dir=False)
    assert (counts.directories, counts.files) == (1, 2)
    assert counts.summary() == "1 directories, 2 files"

    counts.reset()
    assert counts.summary() == "0 directories, 0 files"
