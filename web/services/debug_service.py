"""
Debug Service - Web Layer Service for the Debug Memory Harness.
"""

from core.app_state import AppState
from core.debug_memory_core import DebugMemoryBuffer


def _buffer(state: AppState) -> DebugMemoryBuffer:
    if state.debug_memory is None:
        raise RuntimeError("Debug memory harness is disabled")
    return state.debug_memory


def allocate(state: AppState) -> int:
    """Allocates the debug buffer. Returns the allocated size in bytes."""
    return _buffer(state).allocate()


def free(state: AppState) -> None:
    _buffer(state).free()


def status(state: AppState) -> list[str]:
    """Returns report lines describing current memory usage."""
    return _buffer(state).status(state.sampler)
