"""
Probes Blueprint.

Handles the orchestrator-facing routes:
- GET /health - Memory health (200 healthy, 503 degraded)
- GET /ready - Startup readiness (200 ready, 503 not ready)
- GET / - Service banner
"""

import datetime

from flask import Blueprint, jsonify

from logging_config import get_logger
from web.blueprints import get_app_state
from web.services import health_service, info_service

logger = get_logger(__name__)

probes_bp = Blueprint("probes", __name__)


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def _envelope(status: str, details: dict | None, timestamp: str) -> dict:
    """Health-style response body; details are omitted when empty."""
    body = {"status": status}
    if details:
        body["details"] = details
    body["timestamp"] = timestamp
    return body


@probes_bp.route("/health", methods=["GET"])
def health():
    """Memory health probe."""
    verdict = health_service.get_health(get_app_state())
    body = _envelope(
        verdict.status.value, verdict.warnings, verdict.timestamp.isoformat()
    )
    return jsonify(body), verdict.status.http_status


@probes_bp.route("/ready", methods=["GET"])
def ready():
    """Readiness probe: 503 until the startup task has completed."""
    if not health_service.is_ready(get_app_state()):
        body = _envelope(
            "not ready", {"reason": health_service.get_not_ready_reason()}, _now_iso()
        )
        return jsonify(body), 503

    return jsonify(_envelope("ready", None, _now_iso())), 200


@probes_bp.route("/", methods=["GET"])
def home():
    """Service banner with environment, version and hostname."""
    return jsonify(info_service.get_service_info(get_app_state())), 200
