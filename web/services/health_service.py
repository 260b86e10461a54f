"""
Health Service - Web Layer Service for Health and Readiness.

Exposes memory health and startup readiness to the probe routes.
"""

from core import health_core
from core.app_state import AppState
from core.readiness_core import NOT_READY_REASON


def get_health(state: AppState) -> health_core.HealthVerdict:
    """
    Evaluates current memory health.

    Returns:
        HealthVerdict from one fresh memory sample.
    """
    return health_core.check_health(state.sampler)


def is_ready(state: AppState) -> bool:
    """Returns whether startup has completed."""
    return state.readiness.is_ready()


def get_not_ready_reason() -> str:
    return NOT_READY_REASON
