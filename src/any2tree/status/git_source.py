"""Version-control status source backed by the git command line."""

import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from any2tree.status.file_status import FileStatus


def _run_git(cwd: Path, args: List[str]) -> Optional[str]:
    try:
        proc = subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout


def classify_status(code: str) -> Optional[FileStatus]:
    """Classify a two-letter porcelain status code.

    Args:
        code: The ``XY`` code from ``git status --porcelain``.

    Returns:
        The status, or None for codes without a notable status.

    Example:
        >>> classify_status("??")
        <FileStatus.UNTRACKED: 'untracked'>
        >>> classify_status(" M")
        <FileStatus.MODIFIED: 'modified'>
        >>> classify_status("UU")
        <FileStatus.CONFLICTED: 'conflicted'>
    """
    if "U" in code or code in ("DD", "AA"):
        return FileStatus.CONFLICTED
    if code == "??":
        return FileStatus.UNTRACKED
    if code[:1] == "A":
        return FileStatus.NEW
    if "M" in code:
        return FileStatus.MODIFIED
    if "D" in code:
        return FileStatus.DELETED
    if "R" in code or "C" in code:
        return FileStatus.RENAMED
    if "T" in code:
        return FileStatus.TYPECHANGE
    return None


def parse_porcelain(output: str) -> Dict[str, FileStatus]:
    """Parse ``git status --porcelain -z`` output.

    Args:
        output: NUL separated porcelain records.

    Returns:
        Statuses keyed by repository-relative POSIX path.
    """
    statuses: Dict[str, FileStatus] = {}
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if len(token) < 4 or token[2] != " ":
            continue

        code = token[:2]
        status = classify_status(code)
        if status is not None:
            statuses[token[3:].rstrip("/")] = status

        # Renamed and copied records carry the source path as an extra token;
        # the first path is the destination.
        if "R" in code or "C" in code:
            index += 1
    return statuses


def load_git_status(path: Path) -> Optional[Tuple[Path, Dict[str, FileStatus]]]:
    """Collect the status of every changed path in the repository containing a path.

    Args:
        path: Any path inside the repository.

    Returns:
        The canonical repository root and the statuses keyed by repository-relative
        path, or None if the path is not inside a git work tree or git is unavailable.
    """
    top_level = _run_git(path, ["rev-parse", "--show-toplevel"])
    if not top_level or not top_level.strip():
        return None
    repo_root = Path(top_level.strip()).resolve()

    output = _run_git(repo_root, ["status", "--porcelain", "-z", "--untracked-files=all"])
    if output is None:
        return None
    return repo_root, parse_porcelain(output)
