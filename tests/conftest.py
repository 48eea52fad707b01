"""Shared pytest fixtures: fake HTTP transport and API test client."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient
from requests.structures import CaseInsensitiveDict

from vodrelay.backend.http_client import FetchResponse
from vodrelay.backend.main import app, get_http_client


class FakeHttpClient:
    """Records fetch() calls and answers from ``routes``.

    ``routes`` maps a URL substring to a FetchResponse or an exception;
    the first matching key wins.
    """

    def __init__(self) -> None:
        self.routes: dict[str, FetchResponse | Exception] = {}
        self.calls: list[dict[str, Any]] = []

    def fetch(self, url, headers=None, follow_redirects=True) -> FetchResponse:
        self.calls.append({"url": url, "headers": headers or {}, "follow_redirects": follow_redirects})
        for key, result in self.routes.items():
            if key in url:
                if isinstance(result, Exception):
                    raise result
                return result
        raise AssertionError(f"unexpected fetch: {url}")

    @property
    def urls(self) -> list[str]:
        return [call["url"] for call in self.calls]


def make_response(status: int, reason: str = "", headers: dict | None = None, body: str | bytes = b"") -> FetchResponse:
    """Build a FetchResponse around a real, already-read requests.Response."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.headers = CaseInsensitiveDict(headers or {})
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    return FetchResponse(response)


def json_response(payload: Any, status: int = 200) -> FetchResponse:
    return make_response(
        status,
        "OK" if status == 200 else "Error",
        {"Content-Type": "application/json"},
        json.dumps(payload, ensure_ascii=False),
    )


@pytest.fixture()
def fake_http() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture()
def api_client(fake_http: FakeHttpClient):
    app.dependency_overrides[get_http_client] = lambda: fake_http
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.pop(get_http_client, None)
