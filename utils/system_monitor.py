# utils/system_monitor.py
"""
Memory Sampler for health probes.

Reads the current process memory and the host memory on every call and
normalizes both into a MemorySample. Host figures come from /proc/meminfo
(psutil on hosts without procfs); a missing or malformed reading leaves
the host fields empty instead of failing the sample.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import psutil

logger = logging.getLogger(__name__)

MEMINFO_PATH = Path("/proc/meminfo")
MIB = 1024 * 1024


@dataclass(frozen=True)
class MemorySample:
    """
    One point-in-time memory reading.

    Host fields are None when unavailable. A host pair that is not a valid
    reading (total <= 0, available outside 0..total) counts as absent.
    """

    process_bytes_used: int
    host_total_bytes: int | None = None
    host_available_bytes: int | None = None

    @property
    def host_present(self) -> bool:
        return _validate_host(self.host_total_bytes, self.host_available_bytes) is not None

    @property
    def host_used_bytes(self) -> int | None:
        if not self.host_present:
            return None
        return self.host_total_bytes - self.host_available_bytes

    @property
    def host_usage_percent(self) -> float | None:
        if not self.host_present:
            return None
        return self.host_used_bytes / self.host_total_bytes * 100


def _validate_host(total: int | None, available: int | None) -> tuple[int, int] | None:
    """Return (total, available) only if the pair forms a usable reading."""
    if total is None or available is None:
        return None
    if total <= 0 or available < 0 or available > total:
        return None
    return total, available


def _parse_kb_field(line: str) -> int | None:
    # Format: "MemTotal:       16314480 kB"
    fields = line.split()
    if len(fields) < 2:
        return None
    try:
        return int(fields[1]) * 1024
    except ValueError:
        return None


def parse_meminfo(content: str) -> tuple[int, int] | None:
    """
    Parse /proc/meminfo text into (total_bytes, available_bytes).

    Returns None when MemTotal or MemAvailable is missing or unparsable,
    or when the values violate total > 0 and available <= total.
    """
    total = available = None
    for line in content.splitlines():
        if line.startswith("MemTotal:"):
            total = _parse_kb_field(line)
        elif line.startswith("MemAvailable:"):
            available = _parse_kb_field(line)
    return _validate_host(total, available)


def read_process_memory() -> int:
    """Resident memory held by this process, including allocator-retained pages."""
    return psutil.Process(os.getpid()).memory_info().rss


def read_host_memory(meminfo_path: Path = MEMINFO_PATH) -> tuple[int, int] | None:
    """Read host (total, available) bytes, or None if no valid reading exists."""
    try:
        content = meminfo_path.read_text(encoding="utf-8", errors="ignore")
    except FileNotFoundError:
        # No procfs (macOS, Windows): ask psutil instead.
        try:
            vm = psutil.virtual_memory()
        except (OSError, RuntimeError) as e:
            logger.debug(f"Host memory unavailable via psutil: {e}")
            return None
        return _validate_host(vm.total, vm.available)
    except OSError as e:
        logger.debug(f"Could not read {meminfo_path}: {e}")
        return None

    host = parse_meminfo(content)
    if host is None:
        logger.debug(f"Ignoring malformed host memory info from {meminfo_path}")
    return host


class MemorySampler:
    """
    Produces a fresh MemorySample per call.

    Stateless apart from the configured meminfo path, so one instance can be
    shared across request threads.
    """

    def __init__(self, meminfo_path: Path | str = MEMINFO_PATH):
        self.meminfo_path = Path(meminfo_path)

    def sample(self) -> tuple[MemorySample, bool]:
        """
        Take one memory reading.

        Returns:
            (sample, partial) where partial is True if the host figures
            could not be obtained and are absent from the sample.
        """
        process_bytes = read_process_memory()
        host = read_host_memory(self.meminfo_path)
        if host is None:
            return MemorySample(process_bytes_used=process_bytes), True

        total, available = host
        sample = MemorySample(
            process_bytes_used=process_bytes,
            host_total_bytes=total,
            host_available_bytes=available,
        )
        return sample, False
