# logging_config.py
import logging

from config import get_config

config = get_config()
DEBUG_MODE = config["DEBUG_MODE"]

# Configure logging once for the entire application.
logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Probes hit /health and /ready every few seconds; keep the server's
# per-request chatter out of the log unless debugging.
for _noisy in ("waitress.queue", "werkzeug"):
    logging.getLogger(_noisy).setLevel(logging.DEBUG if DEBUG_MODE else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger with the given name.
    """
    return logging.getLogger(name)
