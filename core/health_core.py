"""
Health Core - Memory Health Evaluation.

Applies fixed memory thresholds to a MemorySample and produces a
HealthVerdict (healthy or degraded, plus one warning per breached threshold).
"""

import datetime
import enum
import logging
from dataclasses import dataclass, field

from utils.system_monitor import MIB, MemorySample, MemorySampler

logger = logging.getLogger(__name__)

# Fixed thresholds. Candidates for configuration later.
PROCESS_MEMORY_THRESHOLD_BYTES = 100 * MIB
SYSTEM_MEMORY_THRESHOLD_PERCENT = 80.0

PROCESS_MEMORY_KEY = "process_memory"
SYSTEM_MEMORY_KEY = "system_memory"
WARNING_TAG = "WARNING"


class HealthStatus(enum.Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"

    @property
    def http_status(self) -> int:
        return 200 if self is HealthStatus.HEALTHY else 503


@dataclass(frozen=True)
class HealthVerdict:
    status: HealthStatus
    warnings: dict[str, str] = field(default_factory=dict)
    timestamp: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )

    @property
    def is_healthy(self) -> bool:
        return self.status is HealthStatus.HEALTHY


def _process_memory_warning(sample: MemorySample) -> str | None:
    if sample.process_bytes_used > PROCESS_MEMORY_THRESHOLD_BYTES:
        return f"{WARNING_TAG}: {sample.process_bytes_used // MIB} MB"
    return None


def _system_memory_warning(sample: MemorySample) -> str | None:
    if not sample.host_present:
        return None
    percent = sample.host_usage_percent
    if percent > SYSTEM_MEMORY_THRESHOLD_PERCENT:
        return f"{WARNING_TAG}: {percent:.1f}%"
    return None


def evaluate(
    sample: MemorySample, now: datetime.datetime | None = None
) -> HealthVerdict:
    """
    Evaluates a memory sample against the fixed thresholds.

    The result depends only on the sample (and the supplied timestamp), so
    repeated calls with the same sample yield the same status and warnings.

    Args:
        sample: Memory reading to evaluate.
        now: Evaluation instant; defaults to the current UTC time.

    Returns:
        HealthVerdict, DEGRADED if any warning was produced.
    """
    warnings: dict[str, str] = {}

    process_warning = _process_memory_warning(sample)
    if process_warning:
        warnings[PROCESS_MEMORY_KEY] = process_warning

    system_warning = _system_memory_warning(sample)
    if system_warning:
        warnings[SYSTEM_MEMORY_KEY] = system_warning

    status = HealthStatus.DEGRADED if warnings else HealthStatus.HEALTHY
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    return HealthVerdict(status=status, warnings=warnings, timestamp=now)


def check_health(sampler: MemorySampler | None = None) -> HealthVerdict:
    """
    Takes one fresh memory sample and evaluates it.

    Returns:
        HealthVerdict for the current process and host.
    """
    sampler = sampler or MemorySampler()
    sample, partial = sampler.sample()
    if partial:
        logger.debug("Host memory unavailable, skipping system memory check")

    verdict = evaluate(sample)
    if not verdict.is_healthy:
        logger.warning(f"Health degraded: {verdict.warnings}")
    return verdict
