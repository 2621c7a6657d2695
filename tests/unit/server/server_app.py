"""Unit tests for the router HTTP surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from inference_router.state import ServingConfig, ExternalTokenizer
from inference_router.server import create_app
from inference_router.backends import Backend
from inference_router.server.auth import extract_api_key


class _Backend(Backend):
    name = "fake"

    def __init__(self, healthy: bool = True):
        self.healthy = healthy

    async def health(self) -> bool:
        return self.healthy

    async def shutdown(self) -> None:
        return None


def _client(backend: Backend | None = None, **overrides) -> TestClient:
    config = ServingConfig(tokenizer_name="org/model", max_input_tokens=1024, max_total_tokens=2048, **overrides)
    return TestClient(create_app(backend or _Backend(), config, ExternalTokenizer("org/model")))


def test_health_ok() -> None:
    response = _client().get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "backend": "fake"}


def test_health_unavailable() -> None:
    assert _client(_Backend(healthy=False)).get("/health").status_code == 503


def test_info_reports_limits() -> None:
    body = _client().get("/info").json()
    assert body["model_id"] == "org/model"
    assert body["max_input_tokens"] == 1024
    assert body["max_total_tokens"] == 2048
    assert body["fast_tokenizer"] is False
    assert body["backend"] == "fake"
    assert body["usage_stats"] == "on"
    assert body["trust_remote_code"] is False


def test_info_requires_configured_key() -> None:
    client = _client(api_key="secret")
    assert client.get("/info").status_code == 401
    assert client.get("/info", headers={"Authorization": "Bearer wrong"}).status_code == 401
    assert client.get("/info", headers={"Authorization": "Bearer secret"}).status_code == 200
    assert client.get("/info", headers={"X-API-Key": "secret"}).status_code == 200


def test_health_needs_no_key() -> None:
    assert _client(api_key="secret").get("/health").status_code == 200


def test_payload_limit_rejects_large_bodies() -> None:
    client = _client(payload_limit=10)
    response = client.post("/info", content=b"x" * 64)
    assert response.status_code == 413


def test_payload_limit_counts_chunked_bodies() -> None:
    client = _client(payload_limit=10)
    response = client.post("/info", content=iter([b"x" * 6, b"x" * 6]))
    assert "content-length" not in response.request.headers
    assert response.status_code == 413


def test_small_chunked_body_reaches_route() -> None:
    client = _client(payload_limit=10)
    response = client.request("GET", "/health", content=iter([b"ab", b"cd"]))
    assert response.status_code == 200


def test_cors_origin_allowed() -> None:
    client = _client(cors_allow_origin=("https://app.example",))
    response = client.get("/health", headers={"Origin": "https://app.example"})
    assert response.headers["access-control-allow-origin"] == "https://app.example"


@pytest.mark.parametrize(
    ("authorization", "api_key", "expected"),
    [
        ("Bearer abc", None, "abc"),
        ("bearer abc", None, "abc"),
        ("Basic abc", "fallback", "fallback"),
        (None, "xyz", "xyz"),
        (None, None, None),
    ],
)
def test_extract_api_key(authorization, api_key, expected) -> None:
    assert extract_api_key(authorization, api_key) == expected
