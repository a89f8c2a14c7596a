"""Unit tests for the argument parser module in the any2tree CLI."""

import argparse
from unittest.mock import MagicMock

import pytest

from any2tree.cli.argparser import build_walk_options, create_exclusion_action, create_parser, validate_args
from any2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from any2tree.styling.color_choice import ColorChoice


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock ExclusionRules object."""
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


@pytest.fixture
def exclusion_rules():
    return GitIgnoreExclusionRules()


@pytest.fixture
def parser(exclusion_rules):
    return create_parser(exclusion_rules)


def test_create_exclusion_action():
    """Test creation of ExclusionRulesAction class."""
    ExclusionAction = create_exclusion_action(MagicMock())
    assert issubclass(ExclusionAction, argparse.Action)


def test_exclusion_action_preserves_order(mock_exclusion_rules, tmp_path):
    """Patterns and exclusion files are applied in command-line order."""
    exclude_file = tmp_path / "rules.ignore"
    exclude_file.write_text("*.log\n")
    parser = create_parser(mock_exclusion_rules)
    calls = []
    mock_exclusion_rules.add_rule.side_effect = lambda rule: calls.append(("rule", rule))
    mock_exclusion_rules.load_rules.side_effect = lambda path: calls.append(("file", path))

    args = parser.parse_args(["-p", "-i", "*.pyc", "-e", str(exclude_file), "--ignore", "build/", "."])

    assert calls == [("rule", "*.pyc"), ("file", exclude_file), ("rule", "build/")]
    assert args.ignore == ["*.pyc", "build/"]
    assert args.exclude == [exclude_file]


def test_exclusion_action_missing_file(parser, tmp_path):
    with pytest.raises(FileNotFoundError):
        parser.parse_args(["-p", "-e", str(tmp_path / "missing.ignore")])


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.input is None
    assert not args.path
    assert args.color is None
    assert not args.json_lines
    assert args.indent == 4
    assert args.level is None
    assert not args.dirs_only
    assert not args.gitignore
    assert args.all and args.status and args.size and args.permissions and args.icons
    assert not args.follow_symlinks


def test_negated_decorations(parser):
    args = parser.parse_args(["-p", "--no-all", "--no-status", "--no-size", "--no-permissions", "--no-icons"])
    assert not (args.all or args.status or args.size or args.permissions or args.icons)


def test_short_options(parser):
    args = parser.parse_args(["-p", "-L", "2", "-d", "-g", "src"])
    assert args.path
    assert args.level == 2
    assert args.dirs_only
    assert args.gitignore
    assert args.input == "src"


def test_invalid_color_choice(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["--color", "sometimes"])


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("any2tree ")


@pytest.mark.parametrize(
    "argv,message",
    [
        (["--indent", "1"], "--indent must be at least 2"),
        (["-p", "-L", "-1"], "--level cannot be negative"),
        (["-p", "--json-lines"], "cannot be combined"),
    ],
)
def test_validate_args_errors(parser, argv, message):
    args = parser.parse_args(argv)
    with pytest.raises(ValueError, match=message):
        validate_args(args)


def test_validate_args_valid(parser):
    validate_args(parser.parse_args(["-p", "-L", "0", "."]))
    validate_args(parser.parse_args(["--indent", "2", "--json-lines", "data.jsonl"]))


def test_build_walk_options_defaults(parser, exclusion_rules):
    options = build_walk_options(parser.parse_args(["-p"]), exclusion_rules)

    assert options.show_hidden
    assert options.show_status
    assert options.show_size
    assert options.show_permissions
    assert options.show_icons
    assert options.color is ColorChoice.ALWAYS
    assert not options.respect_ignore_files
    assert options.exclusion_rules is None


def test_build_walk_options_flags(parser, exclusion_rules):
    args = parser.parse_args(["-p", "-L", "3", "-d", "-g", "--no-all", "--color", "never", "--follow-symlinks"])
    options = build_walk_options(args, exclusion_rules)

    assert options.max_depth == 3
    assert options.dirs_only
    assert options.respect_ignore_files
    assert not options.show_hidden
    assert options.color is ColorChoice.NEVER
    assert options.follow_symlinks


def test_build_walk_options_with_patterns(parser, exclusion_rules):
    options = build_walk_options(parser.parse_args(["-p", "-i", "*.log"]), exclusion_rules)
    assert options.exclusion_rules is exclusion_rules
    assert options.exclusion_rules.exclude("debug.log")


def test_help_mentions_both_modes(parser):
    help_text = parser.format_help()
    assert "data mode" in help_text
    assert "path mode" in help_text
