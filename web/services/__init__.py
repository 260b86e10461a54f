"""
podhealth Services Package.

This package contains the service layer that sits between Flask routes and
the core package, keeping routes free of business logic.

ARCHITECTURE RULE:
- Services may ONLY import from core/* modules
- Services MUST NOT import directly from utils/
"""

from web.services import (
    debug_service,
    health_service,
    info_service,
)

__all__ = [
    "debug_service",
    "health_service",
    "info_service",
]
