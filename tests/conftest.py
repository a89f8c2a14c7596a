"""Test configuration and fixtures for any2tree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project tree.

    Layout::

        project/
            .hidden
            README.md
            src/
                main.py
                utils/
                    helpers.py
    """
    root = tmp_path / "project"
    (root / "src" / "utils").mkdir(parents=True)
    (root / ".hidden").write_text("secret")
    (root / "README.md").write_text("# Project\n")
    (root / "src" / "main.py").write_text("def main(): pass\n")
    (root / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    return root


@pytest.fixture
def no_git_status():
    """A status source that never finds a repository."""
    return lambda path: None
