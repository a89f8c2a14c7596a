"""Unit tests for the CLI main module."""

import io
import json
from unittest.mock import patch

import pytest

from any2tree.cli.main import iter_json_lines, main, open_input

PLAIN_PATH_ARGS = ["-p", "--color", "never", "--no-status", "--no-icons", "--no-permissions", "--no-size"]


@pytest.fixture(autouse=True)
def no_signal_handlers():
    """Keep the test process's own signal handlers in place."""
    with patch("any2tree.cli.main.setup_signal_handling"):
        yield


@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"name": "any2tree", "tags": ["tree", "cli"]}))
    return path


def run_main(*args):
    """Run main() with the given arguments and return its exit code."""
    with patch("sys.argv", ["any2tree", *args]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def test_data_mode_from_file(json_file, capfd):
    assert run_main("--color", "never", str(json_file)) == 0
    assert capfd.readouterr().out == "├── name\n│   └── any2tree\n└── tags\n    ├── tree\n    └── cli\n"


def test_data_mode_from_stdin(capfd):
    with patch("sys.stdin", io.StringIO('[1, {"a": null}]')):
        assert run_main("--color", "never") == 0
    assert capfd.readouterr().out == "├── 1\n└── a\n    └── null\n"


def test_data_mode_indent(json_file, capfd):
    assert run_main("--color", "never", "--indent", "2", str(json_file)) == 0
    assert capfd.readouterr().out.splitlines()[:2] == ["├ name", "│ └ any2tree"]


def test_data_mode_color_always(json_file, capfd):
    assert run_main("--color", "always", str(json_file)) == 0
    assert "\x1b[" in capfd.readouterr().out


def test_json_lines(tmp_path, capfd):
    path = tmp_path / "events.jsonl"
    path.write_text('{"event": "start"}\n\n{"event": "stop"}\n')

    assert run_main("--color", "never", "--json-lines", str(path)) == 0
    assert capfd.readouterr().out == "├── event\n│   └── start\n└── event\n    └── stop\n"


def test_invalid_json(tmp_path, capfd):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    assert run_main(str(path)) == 1
    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_missing_input_file(tmp_path, capfd):
    assert run_main(str(tmp_path / "missing.json")) == 1
    assert "Error: " in capfd.readouterr().err


def test_path_mode(sample_project, capfd):
    exit_code = run_main(*PLAIN_PATH_ARGS, "--no-all", str(sample_project))

    assert exit_code == 0
    assert capfd.readouterr().out == (
        f"{sample_project}\n"
        "└── README.md\n"
        "└── src\n"
        "    └── main.py\n"
        "    └── utils\n"
        "        └── helpers.py\n"
        "\n"
        "2 directories, 3 files\n"
    )


def test_path_mode_filters(sample_project, capfd):
    exit_code = run_main(*PLAIN_PATH_ARGS, "-L", "1", "-i", "*.md", str(sample_project))

    assert exit_code == 0
    assert capfd.readouterr().out == f"{sample_project}\n└── .hidden\n└── src\n\n1 directories, 1 files\n"


def test_path_mode_not_a_directory(tmp_path, capfd):
    file_path = tmp_path / "file.txt"
    file_path.write_text("content")

    assert run_main("-p", str(file_path)) == 1
    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Error trying to create a tree view:")


def test_invalid_indent(capfd):
    assert run_main("--indent", "1") == 1
    assert "Error: --indent must be at least 2, got 1" in capfd.readouterr().err


def test_json_lines_with_path_mode(capfd):
    assert run_main("-p", "--json-lines", ".") == 1
    assert "cannot be combined" in capfd.readouterr().err


def test_unknown_option():
    assert run_main("--bogus") == 2


def test_exit_code_after_signal(json_file, capfd):
    with patch("any2tree.cli.main.signal_handler") as mock_handler:
        mock_handler.exit_code.return_value = 141
        assert run_main("--color", "never", str(json_file)) == 141


def test_open_input_stdin():
    with patch("sys.stdin", io.StringIO("data")) as stdin:
        with open_input(None) as stream:
            assert stream is stdin
        with open_input("-") as stream:
            assert stream is stdin


def test_iter_json_lines():
    assert list(iter_json_lines(io.StringIO('1\n\n"two"\n[3]\n'))) == [1, "two", [3]]


def test_iter_json_lines_reports_line_number():
    with pytest.raises(ValueError, match="Invalid JSON on line 2"):
        list(iter_json_lines(io.StringIO("1\n{\n")))
