"""
podhealth Core Package.

This package contains the health-evaluation logic, separated from the web
layer: memory thresholding, the readiness gate, the debug memory harness and
the service banner.

ARCHITECTURE RULES:
- core/ modules may only import from:
  - Python standard library
  - utils/ (OS-level readers)
  - config (for global configuration)

- core/ modules MUST NOT import from:
  - web/ (no Flask dependencies)
  - flask, werkzeug, waitress, or any web-specific packages
"""

__all__ = [
    "app_state",
    "debug_memory_core",
    "health_core",
    "info_core",
    "readiness_core",
]
