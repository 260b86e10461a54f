"""
Debug Memory Core - Artificial Memory Pressure.

Non-production harness that inflates process memory by a fixed buffer so the
memory health warning can be exercised end to end. The sampler knows nothing
about this module; it only observes what the process reports.
"""

import gc
import logging
import threading

from utils.system_monitor import MIB, MemorySampler

logger = logging.getLogger(__name__)

DEBUG_ALLOCATION_BYTES = 150 * MIB


class DebugMemoryBuffer:
    """Holds at most one debug allocation."""

    def __init__(self, size_bytes: int = DEBUG_ALLOCATION_BYTES):
        self.size_bytes = size_bytes
        self._buffer: bytes | None = None
        self._lock = threading.Lock()

    @property
    def allocated_bytes(self) -> int:
        with self._lock:
            return len(self._buffer) if self._buffer is not None else 0

    def allocate(self) -> int:
        """Allocates the buffer, replacing any previous one. Returns its size."""
        # Filled with non-zero bytes so every page is committed to RSS.
        buffer = b"\x01" * self.size_bytes
        with self._lock:
            self._buffer = buffer
        logger.info(f"Allocated {self.size_bytes // MIB}MB of memory for testing")
        return self.size_bytes

    def free(self) -> None:
        with self._lock:
            self._buffer = None
        gc.collect()
        logger.info("Freed debug memory")

    def status(self, sampler: MemorySampler | None = None) -> list[str]:
        """
        Reports current usage without changing anything.

        Returns:
            Human-readable report lines.
        """
        sampler = sampler or MemorySampler()
        sample, _ = sampler.sample()
        lines = [f"Current process memory usage: {sample.process_bytes_used // MIB} MB"]
        allocated = self.allocated_bytes
        if allocated:
            lines.append(f"Debug memory allocated: {allocated // MIB} MB")
        else:
            lines.append("No debug memory allocated")
        return lines
