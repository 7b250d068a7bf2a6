"""Shared fixtures - isolate tests from the caller's environment."""

import json
from pathlib import Path

import httpx
import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Drop GHUSER_* variables and run away from any local .env file."""
    for key in ("GHUSER_USER", "GHUSER_API_BASE_URL", "GHUSER_LOG_LEVEL", "GHUSER_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def load_fixture(name: str) -> dict:
    """Load a JSON fixture."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


def json_transport(payload, status_code: int = 200, calls: list | None = None) -> httpx.MockTransport:
    """MockTransport answering every request with the given JSON payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


def raw_transport(content: bytes, status_code: int = 200) -> httpx.MockTransport:
    """MockTransport answering every request with a raw body."""
    return httpx.MockTransport(lambda request: httpx.Response(status_code, content=content))


def failing_transport(exc: Exception) -> httpx.MockTransport:
    """MockTransport raising a transport error on every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(handler)
