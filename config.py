# config.py
import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file.
load_dotenv()

logger = logging.getLogger(__name__)

VALID_ENVIRONMENTS = ("dev", "test", "stage", "prod")

DEFAULTS = {
    "PORT": 8080,
    "HOST": "0.0.0.0",
    "ENVIRONMENT": "dev",
    "APP_VERSION": "1.0.0",
    "STARTUP_DELAY_SECONDS": 2.0,
    "WAITRESS_THREADS": 4,
}

_config: dict | None = None


def _getenv(key: str, default: str) -> str:
    """Like os.getenv, but an empty value counts as unset."""
    value = os.getenv(key, "")
    return value if value != "" else default


def _parse_environment(raw: str) -> str:
    # Exact match only: "PROD" or " prod" are unrecognized.
    if raw not in VALID_ENVIRONMENTS:
        logger.warning(
            f"Invalid environment '{raw}', defaulting to '{DEFAULTS['ENVIRONMENT']}'"
        )
        return DEFAULTS["ENVIRONMENT"]
    return raw


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        logger.warning(f"Invalid PORT '{raw}', defaulting to {DEFAULTS['PORT']}")
        return DEFAULTS["PORT"]
    if not 0 < port < 65536:
        logger.warning(f"PORT {port} out of range, defaulting to {DEFAULTS['PORT']}")
        return DEFAULTS["PORT"]
    return port


def _parse_delay(raw: str) -> float:
    try:
        delay = float(raw)
    except ValueError:
        delay = -1.0
    if delay < 0:
        logger.warning(
            f"Invalid STARTUP_DELAY_SECONDS '{raw}', "
            f"defaulting to {DEFAULTS['STARTUP_DELAY_SECONDS']}"
        )
        return DEFAULTS["STARTUP_DELAY_SECONDS"]
    return delay


def _parse_threads(raw: str) -> int:
    try:
        threads = int(raw)
    except ValueError:
        threads = 0
    if threads < 1:
        logger.warning(
            f"Invalid WAITRESS_THREADS '{raw}', "
            f"defaulting to {DEFAULTS['WAITRESS_THREADS']}"
        )
        return DEFAULTS["WAITRESS_THREADS"]
    return threads


def load_config() -> dict:
    """
    Loads configuration from environment variables and returns a dictionary.

    Invalid values are never fatal: they are replaced by their default and
    logged as a warning.
    """
    config = {
        # General Settings
        "DEBUG_MODE": _getenv("DEBUG_MODE", "False").lower() == "true",
        "ENVIRONMENT": _parse_environment(
            _getenv("ENVIRONMENT", DEFAULTS["ENVIRONMENT"])
        ),
        "APP_VERSION": _getenv("APP_VERSION", DEFAULTS["APP_VERSION"]),

        # Server Settings
        "HOST": _getenv("HOST", DEFAULTS["HOST"]),
        "PORT": _parse_port(_getenv("PORT", str(DEFAULTS["PORT"]))),
        "WAITRESS_THREADS": _parse_threads(
            _getenv("WAITRESS_THREADS", str(DEFAULTS["WAITRESS_THREADS"]))
        ),

        # Startup Settings
        "STARTUP_DELAY_SECONDS": _parse_delay(
            _getenv("STARTUP_DELAY_SECONDS", str(DEFAULTS["STARTUP_DELAY_SECONDS"]))
        ),
    }
    return config


def get_config() -> dict:
    """Returns the process configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def is_debug_endpoints_enabled(config: dict) -> bool:
    """Debug endpoints are wired in everywhere except production."""
    return config.get("ENVIRONMENT") != "prod"


if __name__ == "__main__":
    # For testing purposes, print the configuration
    config = load_config()
    from pprint import pprint

    pprint(config)
