"""
Info Core - Service Banner.

Builds the environment-specific greeting served on the root route.
"""

import datetime
import socket
from typing import Any

ENVIRONMENT_BANNERS = {
    "prod": ("🚀", "Hello from PROD! Live environment - handle with care!"),
    "stage": ("🧪", "Hello from STAGE! Stage environment - safe for testing!"),
    "test": ("🧬", "Hello from TEST! Test environment - safe for validation!"),
    "dev": ("🛠️", "Hello from DEV! Development environment - safe for debugging!"),
}


def get_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def get_service_info(environment: str, version: str) -> dict[str, Any]:
    """
    Returns the service banner payload.

    Args:
        environment: One of dev, test, stage, prod.
        version: Application version string.

    Returns:
        Dictionary with message, environment, version, hostname, timestamp.
    """
    emoji, message = ENVIRONMENT_BANNERS.get(environment, ("", ""))
    return {
        "message": f"{emoji} {message}".strip(),
        "environment": environment,
        "version": version,
        "hostname": get_hostname(),
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }
