"""
App State - Explicitly owned process state.

Everything mutable that request handlers share lives here. One instance is
built at startup and attached to the web server; nothing is module-global.
"""

from dataclasses import dataclass, field

from config import is_debug_endpoints_enabled
from core.debug_memory_core import DebugMemoryBuffer
from core.readiness_core import ReadinessGate
from utils.system_monitor import MemorySampler


@dataclass
class AppState:
    environment: str = "dev"
    version: str = "1.0.0"
    readiness: ReadinessGate = field(default_factory=ReadinessGate)
    sampler: MemorySampler = field(default_factory=MemorySampler)
    # None when the debug harness is not wired in (production).
    debug_memory: DebugMemoryBuffer | None = None

    @property
    def debug_enabled(self) -> bool:
        return self.debug_memory is not None


def build_app_state(config: dict) -> AppState:
    """Creates the AppState for a loaded configuration."""
    debug_memory = DebugMemoryBuffer() if is_debug_endpoints_enabled(config) else None
    return AppState(
        environment=config["ENVIRONMENT"],
        version=config["APP_VERSION"],
        debug_memory=debug_memory,
    )
