"""Graceful shutdown on interrupt and termination signals."""

from __future__ import annotations

import os
import signal
import sys
import threading
from typing import Callable

_setup_lock = threading.Lock()
_setup_done = False


def shutdown_signals() -> tuple[signal.Signals, ...]:
    """Return the signals that request a shutdown on this platform."""
    if sys.platform == "win32":
        return (signal.SIGINT,)
    return (signal.SIGINT, signal.SIGTERM)


def setup_signal_handler(cancel: Callable[[], None]) -> None:
    """Call cancel on the first shutdown signal; exit with status 1 on the second.

    May be called only once per process.
    """
    global _setup_done
    with _setup_lock:
        if _setup_done:
            raise RuntimeError("signal handler already set up")
        _setup_done = True

    received = 0

    def _handle(signum, frame):
        nonlocal received
        received += 1
        if received == 1:
            cancel()
        else:
            os._exit(1)

    for sig in shutdown_signals():
        signal.signal(sig, _handle)