"""Unit tests for the signal handler module in the any2tree CLI."""

import os
import signal
from unittest.mock import MagicMock, patch

import pytest

from any2tree.cli.signal_handler import (
    EXIT_SIGINT,
    EXIT_SIGPIPE,
    SignalHandler,
    cleanup,
    setup_signal_handling,
    signal_handler,
)

requires_sigpipe = pytest.mark.skipif(not hasattr(signal, "SIGPIPE"), reason="SIGPIPE not available")


@pytest.fixture
def fresh_signal_handler():
    """Create a fresh SignalHandler instance for tests.

    This avoids interference with the singleton instance.
    """
    return SignalHandler()


def test_signal_handler_initialization(fresh_signal_handler):
    assert not fresh_signal_handler.sigpipe_received.is_set()
    assert not fresh_signal_handler.sigint_received.is_set()
    assert not fresh_signal_handler.interrupted
    assert fresh_signal_handler.exit_code() is None


@requires_sigpipe
def test_handle_sigpipe(fresh_signal_handler):
    original = MagicMock()
    fresh_signal_handler._original_handlers[signal.SIGPIPE] = original

    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, None)

    assert fresh_signal_handler.sigpipe_received.is_set()
    assert fresh_signal_handler.interrupted
    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE
    mock_signal.assert_called_once_with(signal.SIGPIPE, original)


def test_handle_sigint(fresh_signal_handler):
    original = MagicMock()
    fresh_signal_handler._original_handlers[signal.SIGINT] = original

    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    assert fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.exit_code() == EXIT_SIGINT
    mock_signal.assert_called_once_with(signal.SIGINT, original)


def test_sigpipe_exit_code_wins(fresh_signal_handler):
    fresh_signal_handler.sigint_received.set()
    fresh_signal_handler.sigpipe_received.set()
    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE


def test_handler_without_original(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)
    mock_signal.assert_not_called()


def test_install(fresh_signal_handler):
    with patch("signal.signal", return_value=signal.SIG_DFL) as mock_signal:
        fresh_signal_handler.install()

    mock_signal.assert_any_call(signal.SIGINT, fresh_signal_handler.handle_sigint)
    if hasattr(signal, "SIGPIPE"):
        mock_signal.assert_any_call(signal.SIGPIPE, fresh_signal_handler.handle_sigpipe)
    assert fresh_signal_handler._original_handlers[signal.SIGINT] == signal.SIG_DFL


def test_setup_signal_handling_installs_singleton():
    with patch.object(signal_handler, "install") as mock_install:
        setup_signal_handling()
    mock_install.assert_called_once_with()


def test_cleanup_without_interrupt():
    with patch("any2tree.cli.signal_handler.signal_handler") as mock_handler, patch(
        "any2tree.cli.signal_handler.os"
    ) as mock_os:
        mock_handler.interrupted = False
        cleanup()
    mock_os.dup2.assert_not_called()


def test_cleanup_after_interrupt():
    with patch("any2tree.cli.signal_handler.signal_handler") as mock_handler, patch(
        "any2tree.cli.signal_handler.os"
    ) as mock_os, patch("any2tree.cli.signal_handler.sys") as mock_sys:
        mock_handler.interrupted = True
        mock_os.open.return_value = 123
        mock_os.devnull = os.devnull
        mock_sys.stdout.fileno.return_value = 1
        cleanup()

    mock_os.open.assert_called_once_with(os.devnull, mock_os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)
