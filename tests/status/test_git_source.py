"""Unit tests for the git command line status source."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from any2tree.status.file_status import FileStatus
from any2tree.status.git_source import classify_status, load_git_status, parse_porcelain


@pytest.mark.parametrize(
    "code,expected",
    [
        ("??", FileStatus.UNTRACKED),
        ("A ", FileStatus.NEW),
        ("AM", FileStatus.NEW),
        (" M", FileStatus.MODIFIED),
        ("M ", FileStatus.MODIFIED),
        ("MM", FileStatus.MODIFIED),
        (" D", FileStatus.DELETED),
        ("D ", FileStatus.DELETED),
        ("R ", FileStatus.RENAMED),
        ("C ", FileStatus.RENAMED),
        (" T", FileStatus.TYPECHANGE),
        ("UU", FileStatus.CONFLICTED),
        ("AA", FileStatus.CONFLICTED),
        ("DD", FileStatus.CONFLICTED),
        ("AU", FileStatus.CONFLICTED),
        ("!!", None),
        ("  ", None),
    ],
)
def test_classify_status(code, expected):
    assert classify_status(code) == expected


def test_parse_porcelain():
    output = "\0".join([" M src/main.py", "?? notes.txt", "A  docs/new.md", ""])
    assert parse_porcelain(output) == {
        "src/main.py": FileStatus.MODIFIED,
        "notes.txt": FileStatus.UNTRACKED,
        "docs/new.md": FileStatus.NEW,
    }


def test_parse_porcelain_skips_rename_source():
    output = "\0".join(["R  new_name.py", "old_name.py", " M other.py", ""])
    assert parse_porcelain(output) == {
        "new_name.py": FileStatus.RENAMED,
        "other.py": FileStatus.MODIFIED,
    }


def test_parse_porcelain_strips_directory_slash():
    assert parse_porcelain("?? build/\0") == {"build": FileStatus.UNTRACKED}


def test_parse_porcelain_keeps_spaces_in_names():
    assert parse_porcelain(" M my file.txt\0") == {"my file.txt": FileStatus.MODIFIED}


def test_parse_porcelain_empty():
    assert parse_porcelain("") == {}


def test_load_git_status_outside_repository():
    with patch("any2tree.status.git_source.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=128, stdout="")
        assert load_git_status(Path("/not/a/repo")) is None


def test_load_git_status_without_git():
    with patch("any2tree.status.git_source.subprocess.run", side_effect=FileNotFoundError("git")):
        assert load_git_status(Path("/anywhere")) is None


def test_load_git_status_parses_output(tmp_path):
    responses = [
        MagicMock(returncode=0, stdout=f"{tmp_path}\n"),
        MagicMock(returncode=0, stdout=" M a.txt\0?? b.txt\0"),
    ]
    with patch("any2tree.status.git_source.subprocess.run", side_effect=responses) as mock_run:
        result = load_git_status(tmp_path)

    assert result == (tmp_path.resolve(), {"a.txt": FileStatus.MODIFIED, "b.txt": FileStatus.UNTRACKED})
    status_call = mock_run.call_args_list[1].args[0]
    assert "--porcelain" in status_call
    assert "-z" in status_call


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_load_git_status_real_repository(tmp_path):
    def git(*args):
        subprocess.run(["git", "-C", str(tmp_path), *args], check=True, capture_output=True)

    git("init")
    git("config", "user.email", "test@example.com")
    git("config", "user.name", "Test")
    (tmp_path / "tracked.txt").write_text("one\n")
    git("add", "tracked.txt")
    git("commit", "-m", "initial")
    (tmp_path / "tracked.txt").write_text("two\n")
    (tmp_path / "untracked.txt").write_text("new\n")

    result = load_git_status(tmp_path)

    assert result is not None
    repo_root, statuses = result
    assert repo_root == tmp_path.resolve()
    assert statuses == {"tracked.txt": FileStatus.MODIFIED, "untracked.txt": FileStatus.UNTRACKED}
