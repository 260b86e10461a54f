"""
Info Service - Web Layer Service for the Service Banner.
"""

from core import info_core
from core.app_state import AppState


def get_service_info(state: AppState) -> dict:
    """
    Returns the banner payload for the root route.

    Returns:
        Dictionary with message, environment, version, hostname, timestamp.
    """
    return info_core.get_service_info(state.environment, state.version)
