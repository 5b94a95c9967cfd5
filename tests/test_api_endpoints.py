"""Tests for the HTTP surface of the demo service.

These tests validate status codes, payload shapes and not-found handling
through FastAPI's test client with a deterministic runtime double.
"""

from datetime import datetime, timezone

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from kube_demo.api.application import create_api_application
from kube_demo.config import AppSettings
from kube_demo.domain import MemorySnapshot


class _SteppingRuntimeInfo:
    """Test double whose uptime advances by one second per read."""

    def __init__(self) -> None:
        self._uptime_seconds = 0.0

    def runtime_now_utc(self) -> datetime:
        return datetime.now(timezone.utc)

    def runtime_uptime_seconds(self) -> float:
        current_uptime = self._uptime_seconds
        self._uptime_seconds += 1.0
        return current_uptime

    def runtime_version(self) -> str:
        return "3.12.4"

    def runtime_platform(self) -> str:
        return "linux"

    def runtime_memory_snapshot(self) -> MemorySnapshot:
        return MemorySnapshot(rss_bytes=2048, vms_bytes=8192, allocated_blocks=5)


def _build_application(environment_name: str, json_body_limit_bytes: int) -> FastAPI:
    settings = AppSettings(
        environment_name=environment_name,
        application_port=3000,
        json_body_limit_bytes=json_body_limit_bytes,
    )
    return create_api_application(settings, _SteppingRuntimeInfo())


def _build_client(environment_name: str = "development", json_body_limit_bytes: int = 100 * 1024) -> TestClient:
    """Create test client over a freshly composed application.

    Args:
        environment_name: Environment label passed through settings.
        json_body_limit_bytes: JSON body size limit passed through settings.

    Returns:
        TestClient: Client bound to the application.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    return TestClient(_build_application(environment_name, json_body_limit_bytes))


def test_api_health_returns_ok_with_non_decreasing_uptime() -> None:
    """Return HTTP 200 and an uptime that never decreases across calls.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client()

    first_response = client.get("/health")
    second_response = client.get("/health")

    assert first_response.status_code == 200
    assert first_response.headers["content-type"].startswith("application/json")
    assert first_response.json()["status"] == "OK"
    assert first_response.json()["message"] == "Health check passed"
    assert first_response.json()["uptimeSeconds"] == 0.0
    assert datetime.fromisoformat(first_response.json()["timestamp"].replace("Z", "+00:00")).tzinfo is not None
    assert second_response.json()["uptimeSeconds"] >= first_response.json()["uptimeSeconds"]
    assert set(second_response.json()) == set(first_response.json())


def test_api_root_echoes_host_header() -> None:
    """Return HTTP 200 with fixed version and the supplied host header.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client()

    response = client.get("/", headers={"Host": "example.com"})

    assert response.status_code == 200
    assert response.json() == {
        "message": "Hello from Kubernetes! 🚀",
        "version": "1.0.0",
        "environment": "development",
        "host": "example.com",
        "server": "FastAPI on Python 3.12.4",
    }


def test_api_info_reports_configured_environment() -> None:
    """Return HTTP 200 with the environment label from settings.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client(environment_name="production")

    response = client.get("/info")

    assert response.status_code == 200
    assert response.json() == {
        "app": "Express Kubernetes Demo",
        "runtimeVersion": "3.12.4",
        "platform": "linux",
        "memory": {"rss": 2048, "vms": 8192, "allocatedBlocks": 5},
        "env": "production",
    }


def test_api_info_shape_is_stable_across_calls() -> None:
    client = _build_client()

    first_response = client.get("/info")
    second_response = client.get("/info")

    assert first_response.status_code == second_response.status_code == 200
    assert first_response.json() == second_response.json()


def test_api_unknown_path_returns_not_found() -> None:
    """Return HTTP 404 JSON for paths without a registered route.

    Raises:
        AssertionError: Raised when response is not a 404.
    """

    client = _build_client()

    response = client.get("/nonexistent")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found", "method": "GET", "path": "/nonexistent"}


def test_api_unregistered_method_returns_not_found() -> None:
    """Return HTTP 404 rather than 405 for a known path with another method.

    Raises:
        AssertionError: Raised when response is not a 404.
    """

    client = _build_client()

    post_response = client.post("/health")
    delete_response = client.delete("/info")

    assert post_response.status_code == 404
    assert post_response.json()["method"] == "POST"
    assert post_response.json()["path"] == "/health"
    assert delete_response.status_code == 404


def test_api_documentation_routes_are_not_exposed() -> None:
    client = _build_client()

    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_api_malformed_json_body_returns_bad_request() -> None:
    """Reject a malformed JSON body before routing.

    Raises:
        AssertionError: Raised when response is not a 400.
    """

    client = _build_client()

    response = client.post(
        "/health",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Malformed JSON request body"}


def test_api_well_formed_json_body_is_accepted_and_routed() -> None:
    client = _build_client()

    unmatched_response = client.post("/health", json={"ready": True})
    matched_response = client.request("GET", "/health", json={"ready": True})

    assert unmatched_response.status_code == 404
    assert matched_response.status_code == 200


def test_api_declared_oversized_json_body_returns_payload_too_large() -> None:
    """Reject a JSON body whose Content-Length exceeds the limit.

    Raises:
        AssertionError: Raised when response is not a 413.
    """

    client = _build_client(json_body_limit_bytes=64)

    response = client.post("/health", json={"padding": "x" * 512})

    assert response.status_code == 413
    assert response.json() == {"detail": "Request body exceeds the JSON size limit"}


def test_api_streamed_oversized_json_body_returns_payload_too_large() -> None:
    """Reject a chunked JSON body once the received bytes exceed the limit.

    Raises:
        AssertionError: Raised when response is not a 413.
    """

    client = _build_client(json_body_limit_bytes=64)

    def _chunks():
        yield b'{"padding": "'
        for _ in range(16):
            yield b"x" * 32
        yield b'"}'

    response = client.post("/health", content=_chunks(), headers={"Content-Type": "application/json"})

    assert response.status_code == 413


def test_api_json_body_at_limit_is_accepted() -> None:
    body = b'{"a": 1}'
    client = _build_client(json_body_limit_bytes=len(body))

    response = client.request("GET", "/health", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 200


@pytest.mark.parametrize("body", [b'"text"', b"42", b"true", b"null"])
def test_api_top_level_json_primitive_returns_bad_request(body: bytes) -> None:
    client = _build_client()

    response = client.post("/health", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Malformed JSON request body"}


def test_api_non_json_body_is_not_buffered_or_limited() -> None:
    client = _build_client(json_body_limit_bytes=8)

    response = client.request("GET", "/health", content=b"x" * 1024, headers={"Content-Type": "text/plain"})

    assert response.status_code == 200


def test_api_decoded_json_body_reaches_route_state_and_stream() -> None:
    """Expose the decoded body on request state and replay the raw bytes.

    Raises:
        AssertionError: Raised when the body is not available downstream.
    """

    application = _build_application("development", 100 * 1024)

    @application.post("/echo")
    async def echo(request: Request):
        return {"state": request.state.json_body, "parsed": await request.json()}

    client = TestClient(application)

    response = client.post("/echo", json={"items": [1, 2]})

    assert response.status_code == 200
    assert response.json() == {"state": {"items": [1, 2]}, "parsed": {"items": [1, 2]}}
