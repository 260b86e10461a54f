# ------------------------------------------------------------------------------
# web_interface.py
# ------------------------------------------------------------------------------

from flask import Flask, jsonify
from waitress import serve
from werkzeug.exceptions import HTTPException

from core.app_state import AppState
from logging_config import get_logger
from web.blueprints import APP_STATE_KEY
from web.blueprints.debug import debug_bp
from web.blueprints.probes import probes_bp

logger = get_logger(__name__)


def _register_error_handlers(server: Flask) -> None:
    @server.errorhandler(Exception)
    def handle_unexpected_error(e):
        # Routing errors (404, 405) keep their own responses.
        if isinstance(e, HTTPException):
            return e
        logger.exception(f"Error handling request: {e}")
        return jsonify({"error": "Internal server error"}), 500


def create_web_interface(state: AppState):
    """
    Creates and returns the web interface (Flask server plus runner).

    The AppState is attached to the server so every route reaches the same
    readiness gate and debug buffer. The debug blueprint is only registered
    when the state carries a debug buffer (non-production environments).

    Returns:
        Dict with keys "server" (the Flask WSGI app) and "run" (a function
        serving it with Waitress).
    """
    server = Flask(__name__)
    server.json.sort_keys = False
    server.extensions[APP_STATE_KEY] = state

    server.register_blueprint(probes_bp)
    if state.debug_enabled:
        server.register_blueprint(debug_bp)
        logger.info(
            f"🔧 Debug endpoints enabled for non-production environment: '{state.environment}'"
        )
    else:
        logger.info(
            f"🚫 Debug endpoints disabled in production for security: '{state.environment}'"
        )

    _register_error_handlers(server)

    # -----------------------------
    # Function to Start the Web Interface
    # -----------------------------
    def run(host="0.0.0.0", port=8080, threads=4):
        logger.info(
            f"🚀 Server starting on port {port} in {state.environment} environment "
            f"(version: {state.version})"
        )
        serve(server, host=host, port=port, threads=threads)

    return {"server": server, "run": run}
