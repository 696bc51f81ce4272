"""Shared fixtures: an in-memory Directus behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import MagicMock

import httpx
import pytest

from config import get_app_config
from content_api.service import ContentService
from services.directus_client import DirectusClient

BASE_URL = "https://cms.example.org"


class FakeDirectus:
    """
    Minimal Directus stand-in.

    `items` maps collection name to what GET /items/{name} returns as `data`.
    `fail` maps collection name to an HTTP status (or an exception instance)
    to produce instead. Every request is recorded in `requests`.
    """

    def __init__(self):
        self.items: Dict[str, Any] = {}
        self.fail: Dict[str, Any] = {}
        self.requests: List[httpx.Request] = []
        self.created: List[Dict[str, Any]] = []
        self._next_id = 1
        self.ping_status = 200

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/server/ping":
            return httpx.Response(self.ping_status, text="pong", headers={"content-type": "text/html"})

        collection = path.removeprefix("/items/")
        failure = self.fail.get(collection)
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return httpx.Response(
                failure,
                json={"errors": [{"message": f"boom in {collection}"}]}
            )

        if request.method == "POST":
            body = json.loads(request.content)
            record = {
                **body,
                "id": self._next_id,
                "date_created": "2026-10-19T10:00:00.000Z",
            }
            self._next_id += 1
            self.created.append(body)
            return httpx.Response(200, json={"data": record})

        if collection not in self.items:
            return httpx.Response(403, json={"errors": [{"message": "You don't have permission to access this."}]})
        return httpx.Response(200, json={"data": self.items[collection]})

    def last_params(self) -> httpx.QueryParams:
        return self.requests[-1].url.params


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv("DIRECTUS_URL", raising=False)
    monkeypatch.delenv("DIRECTUS_TIMEOUT", raising=False)
    monkeypatch.delenv("DEBUG_LOGGING", raising=False)
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


@pytest.fixture
def fake_cms() -> FakeDirectus:
    return FakeDirectus()


@pytest.fixture
def client(fake_cms) -> DirectusClient:
    c = DirectusClient(base_url=BASE_URL, transport=httpx.MockTransport(fake_cms.handler))
    yield c
    c.close()


@pytest.fixture
def service_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(client, service_logger) -> ContentService:
    return ContentService(client=client, logger=service_logger)
