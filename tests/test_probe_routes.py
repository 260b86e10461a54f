"""
Probe Route Tests.

These tests verify the /health, /ready, / and /debug/memory endpoints return
the expected envelopes and status codes.
"""

import datetime
from unittest.mock import patch

import pytest

from core.app_state import AppState, build_app_state
from core.debug_memory_core import DebugMemoryBuffer
from utils.system_monitor import MIB, MemorySample
from web.web_interface import create_web_interface


class FakeSampler:
    """Sampler returning a fixed reading."""

    def __init__(self, process_mb=50, host_percent=50.0):
        self.process_mb = process_mb
        self.host_percent = host_percent

    def sample(self):
        if self.host_percent is None:
            return MemorySample(process_bytes_used=self.process_mb * MIB), True
        total = 1000
        available = total - int(total * self.host_percent / 100)
        sample = MemorySample(
            process_bytes_used=self.process_mb * MIB,
            host_total_bytes=total,
            host_available_bytes=available,
        )
        return sample, False


@pytest.fixture
def state():
    return AppState(
        environment="dev",
        version="1.2.3",
        sampler=FakeSampler(),
        debug_memory=DebugMemoryBuffer(size_bytes=MIB),
    )


@pytest.fixture
def app(state):
    server = create_web_interface(state)["server"]
    server.config["TESTING"] = True
    return server


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


def _assert_iso_timestamp(value):
    parsed = datetime.datetime.fromisoformat(value)
    assert parsed.tzinfo is not None


class TestHealthEndpoint:
    """Test /health endpoint."""

    def test_healthy(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "healthy"
        assert "details" not in data
        _assert_iso_timestamp(data["timestamp"])

    def test_process_memory_degraded(self, client, state):
        state.sampler = FakeSampler(process_mb=159, host_percent=50.0)

        response = client.get("/health")

        assert response.status_code == 503
        data = response.get_json()
        assert data["status"] == "degraded"
        assert data["details"] == {"process_memory": "WARNING: 159 MB"}

    def test_system_memory_degraded(self, client, state):
        state.sampler = FakeSampler(process_mb=50, host_percent=85.0)

        response = client.get("/health")

        assert response.status_code == 503
        assert response.get_json()["details"] == {"system_memory": "WARNING: 85.0%"}

    def test_both_warnings_keep_order(self, client, state):
        state.sampler = FakeSampler(process_mb=159, host_percent=85.0)

        response = client.get("/health")

        assert response.status_code == 503
        assert list(response.get_json()["details"]) == [
            "process_memory",
            "system_memory",
        ]

    def test_missing_host_memory_still_answers(self, client, state):
        state.sampler = FakeSampler(process_mb=50, host_percent=None)

        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"


class TestReadyEndpoint:
    """Test /ready endpoint."""

    def test_not_ready_before_startup(self, client):
        response = client.get("/ready")

        assert response.status_code == 503
        data = response.get_json()
        assert data["status"] == "not ready"
        assert data["details"] == {"reason": "initializing"}
        _assert_iso_timestamp(data["timestamp"])

    def test_ready_after_startup(self, client, state):
        state.readiness.mark_ready()

        response = client.get("/ready")

        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "ready"
        assert "details" not in data

    def test_readiness_ignores_memory_health(self, client, state):
        state.sampler = FakeSampler(process_mb=500, host_percent=99.0)
        state.readiness.mark_ready()

        assert client.get("/ready").status_code == 200


class TestHomeEndpoint:
    def test_banner(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.get_json()
        assert data["environment"] == "dev"
        assert data["version"] == "1.2.3"
        assert "Hello from DEV!" in data["message"]
        assert "hostname" in data
        _assert_iso_timestamp(data["timestamp"])


class TestDebugEndpoint:
    def test_usage_without_action(self, client):
        response = client.get("/debug/memory")

        assert response.status_code == 200
        assert response.mimetype == "text/plain"
        assert "Use ?action=allocate|free|status" in response.get_data(as_text=True)

    def test_allocate_status_free(self, client, state):
        response = client.get("/debug/memory?action=allocate")
        assert "Allocated 1MB of memory" in response.get_data(as_text=True)
        assert state.debug_memory.allocated_bytes == MIB

        status_text = client.get("/debug/memory?action=status").get_data(as_text=True)
        assert "Current process memory usage: 50 MB" in status_text
        assert "Debug memory allocated: 1 MB" in status_text

        response = client.get("/debug/memory?action=free")
        assert "Freed debug memory" in response.get_data(as_text=True)
        assert state.debug_memory.allocated_bytes == 0

    def test_not_registered_in_prod(self):
        prod_state = build_app_state({"ENVIRONMENT": "prod", "APP_VERSION": "1.0.0"})
        assert prod_state.debug_memory is None

        server = create_web_interface(prod_state)["server"]
        with server.test_client() as client:
            assert client.get("/debug/memory?action=allocate").status_code == 404

    def test_registered_outside_prod(self):
        stage_state = build_app_state({"ENVIRONMENT": "stage", "APP_VERSION": "1.0.0"})
        assert stage_state.debug_memory is not None

        server = create_web_interface(stage_state)["server"]
        rules = {rule.rule for rule in server.url_map.iter_rules()}
        assert "/debug/memory" in rules


class TestErrorHandling:
    def test_encoding_failure_returns_generic_error(self, client, caplog):
        with patch(
            "web.blueprints.probes.jsonify", side_effect=TypeError("not serializable")
        ):
            with caplog.at_level("ERROR", logger="web.web_interface"):
                response = client.get("/health")

        assert response.status_code == 500
        assert response.get_json() == {"error": "Internal server error"}
        assert "not serializable" not in response.get_data(as_text=True)
        assert "not serializable" in caplog.text

    def test_unknown_route_is_404(self, client):
        assert client.get("/nope").status_code == 404
