"""
Debug Blueprint.

Non-production memory harness:
- GET /debug/memory?action=allocate - Allocate 150MB
- GET /debug/memory?action=free - Release the allocation
- GET /debug/memory?action=status - Report current usage

Registered only when the environment is not prod.
"""

from flask import Blueprint, Response, request

from web.blueprints import get_app_state
from web.services import debug_service

debug_bp = Blueprint("debug", __name__, url_prefix="/debug")

USAGE_LINES = [
    "Debug memory endpoint. Use ?action=allocate|free|status",
    "Examples:",
    "  /debug/memory?action=allocate  - Allocate 150MB",
    "  /debug/memory?action=free      - Free memory",
    "  /debug/memory?action=status    - Show current usage",
]


def _text(lines: list[str]) -> Response:
    return Response("\n".join(lines) + "\n", mimetype="text/plain")


@debug_bp.route("/memory", methods=["GET"])
def debug_memory():
    """Allocate, free or inspect the debug memory buffer."""
    state = get_app_state()
    action = request.args.get("action", "")

    if action == "allocate":
        size_mb = debug_service.allocate(state) // (1024 * 1024)
        return _text([f"Allocated {size_mb}MB of memory. Check /health for warning."])

    if action == "free":
        debug_service.free(state)
        return _text(["Freed debug memory. Check /health for clean status."])

    if action == "status":
        return _text(debug_service.status(state))

    return _text(USAGE_LINES)
