"""
Readiness Core - Startup Readiness Gate.

Tracks the one-way NotReady -> Ready transition signalled once startup has
completed. Readiness is independent of the memory health checks.
"""

import logging
import threading
import time

logger = logging.getLogger(__name__)

NOT_READY_REASON = "initializing"


class ReadinessGate:
    """
    One-way readiness flag.

    Backed by a threading.Event so the transition made by the startup thread
    is visible to every request thread. Reads never take a lock.
    """

    def __init__(self):
        self._ready = threading.Event()
        self._transition_lock = threading.Lock()

    def mark_ready(self) -> bool:
        """
        Flips the gate to ready. Safe to call more than once.

        Returns:
            True if this call performed the transition, False if the gate
            was already ready.
        """
        with self._transition_lock:
            if self._ready.is_set():
                return False
            self._ready.set()
            return True

    def is_ready(self) -> bool:
        return self._ready.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Blocks until ready or until timeout expires. Returns the ready state."""
        return self._ready.wait(timeout)


def start_initialization(
    gate: ReadinessGate, delay_seconds: float
) -> threading.Thread:
    """
    Starts the one-shot startup task.

    The task waits `delay_seconds` (stand-in for real dependency checks) and
    then marks the gate ready.

    Returns:
        The started daemon thread.
    """

    def _initialize():
        if delay_seconds > 0:
            time.sleep(delay_seconds)
        gate.mark_ready()
        logger.info("Application initialized and ready")

    thread = threading.Thread(target=_initialize, name="StartupInit", daemon=True)
    thread.start()
    return thread
