"""Signal handling utilities for the any2tree CLI.

SIGPIPE (consumer closed the pipe, e.g. ``any2tree -p . | head``) and SIGINT
(Ctrl+C) are recorded instead of killing the process, so output stops cleanly
and the CLI can exit with the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141

# SIGPIPE does not exist on Windows.
_SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT so output can stop at the next write.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_handlers: Dict[int, Any] = {}

    @property
    def interrupted(self) -> bool:
        """Whether output should stop."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status matching the received signal, or None if none was received."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def install(self) -> None:
        """Install the handlers, remembering the previous ones."""
        if _SIGPIPE is not None:
            self._original_handlers[_SIGPIPE] = signal.signal(_SIGPIPE, self.handle_sigpipe)
        self._original_handlers[signal.SIGINT] = signal.signal(signal.SIGINT, self.handle_sigint)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        self._restore(signum)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        self._restore(signum)

    def _restore(self, signum: int) -> None:
        original: Any = self._original_handlers.get(signum)
        if original is not None:
            signal.signal(signum, original)


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Silence standard output after an interruption.

    Redirects stdout to the null device so the interpreter's final flush does
    not print a broken pipe error during shutdown.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
