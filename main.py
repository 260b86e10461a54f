# ------------------------------------------------------------------------------
# Health probe service for container orchestration platforms
# main.py
# ------------------------------------------------------------------------------
import sys

from config import get_config
config = get_config()
from logging_config import get_logger
logger = get_logger(__name__)

from core.app_state import build_app_state
from core.readiness_core import start_initialization

# --------------------------------------------------------------------------
# Configuration Parameters
# --------------------------------------------------------------------------
_debug = config["DEBUG_MODE"]
logger.info(f"Debug mode is {'enabled' if _debug else 'disabled'}.")

# -----------------------------
# Build the shared state and kick off startup
# -----------------------------
state = build_app_state(config)
start_initialization(state.readiness, config["STARTUP_DELAY_SECONDS"])

# -----------------------------
# Import and Run the Web Interface
# -----------------------------
from web.web_interface import create_web_interface

# Expose the Flask server as the WSGI app for Waitress.
interface = create_web_interface(state)
app = interface["server"]

if __name__ == '__main__':
    try:
        interface["run"](
            host=config["HOST"],
            port=config["PORT"],
            threads=config["WAITRESS_THREADS"],
        )
    except OSError as e:
        logger.critical(f"Server failed to start: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt received. Shutting down...")
