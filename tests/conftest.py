"""Shared fixtures for the rollbar_sourcemaps test suite.

HTTP goes through httpx.MockTransport so the real multipart encoding is
exercised; every request the pipeline sends is recorded for assertions.
"""

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from rollbar_sourcemaps.core.config import RunConfiguration

ACCESS_TOKEN = "post-server-item-token"
VERSION = "1.2.3"
BASE_URL = "https://cdn.example.com"
SOURCEMAP = b'{"version":3,"sources":["src/app.ts"],"mappings":"AAAA"}'


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def form_field(request: httpx.Request, name: str) -> str:
    """Extract a plain text field from a recorded multipart request body."""
    body = request.content.decode("utf-8", errors="replace")
    marker = f'name="{name}"\r\n\r\n'
    start = body.index(marker) + len(marker)
    end = body.index("\r\n", start)
    return body[start:end]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep ROLLBAR_* variables from the surrounding shell out of every test."""
    for name in RunConfiguration.model_fields:
        monkeypatch.delenv(f"ROLLBAR_{name.upper()}", raising=False)


@pytest.fixture
def dist(tmp_path) -> Path:
    """Empty build output directory."""
    out = tmp_path / "dist"
    out.mkdir()
    return out


@pytest.fixture
def make_config(dist) -> Callable[..., RunConfiguration]:
    def _make(**overrides) -> RunConfiguration:
        options = {
            "access_token": ACCESS_TOKEN,
            "version": VERSION,
            "base_url": BASE_URL,
            "output_dir": dist,
        }
        options.update(overrides)
        return RunConfiguration(**options)

    return _make


@pytest.fixture
def ok_transport() -> RecordingTransport:
    return RecordingTransport(
        lambda request: httpx.Response(200, json={"err": 0, "result": {}})
    )


def write_build(dist: Path, *names: str, content: bytes = SOURCEMAP) -> None:
    """Write compiled files and their sourcemaps under dist."""
    for name in names:
        compiled = dist / name
        compiled.parent.mkdir(parents=True, exist_ok=True)
        compiled.write_text("console.log(1);\n//# sourceMappingURL=" + compiled.name + ".map")
        (dist / f"{name}.map").write_bytes(content)


def rejected(status: int, body=None) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with the given status and optional body."""
    def handler(request: httpx.Request) -> httpx.Response:
        if body is None:
            return httpx.Response(status)
        if isinstance(body, (dict, list)):
            return httpx.Response(status, content=json.dumps(body).encode(),
                                  headers={"content-type": "application/json"})
        return httpx.Response(status, text=body)

    return handler
