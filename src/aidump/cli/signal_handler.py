"""Signal handling utilities for aidump CLI.

SIGINT and SIGPIPE are recorded rather than left to raise, so the writer can stop
at a clean point and the process exits with the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Callable, Dict, Optional

# SIGPIPE does not exist on Windows
HAS_SIGPIPE = hasattr(signal, "SIGPIPE")


class SignalHandler:
    """Records interrupting signals for the single writer thread to act upon.

    Attributes:
        sigpipe_received: Set when SIGPIPE arrives (reader of our stdout went away).
        sigint_received: Set when SIGINT arrives (Ctrl+C).
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_handlers: Dict[int, Any] = {}

    def install(self) -> None:
        """Install handlers, remembering the previous ones."""
        self._install(signal.SIGINT, self.handle_sigint)
        if HAS_SIGPIPE:
            self._install(signal.SIGPIPE, self.handle_sigpipe)

    def _install(self, signum: int, handler: Callable[[int, Optional[FrameType]], None]) -> None:
        self._original_handlers[signum] = signal.getsignal(signum)
        signal.signal(signum, handler)

    def _restore(self, signum: int) -> None:
        if signum in self._original_handlers:
            signal.signal(signum, self._original_handlers[signum])

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        self._restore(signum)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        self._restore(signum)

    def interrupted(self) -> bool:
        """True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status implied by the received signals, or None if none arrived."""
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Silence stdout at exit after an interruption so no further errors are printed."""
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
