# Twitter Ads API Client
# File: tests/conftest.py
# Version: v1

"""Shared fixtures: a client wired to an in-memory fake of the Ads API."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from twitter_ads import Account, Client, ClientConfig


class FakeAdsAPI:
    """Serves queued responses through httpx.MockTransport and records requests.

    Responses are returned in the order they were queued, whatever the URL.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._queue: List[Tuple[int, List[Tuple[str, str]], bytes]] = []

    def add(
        self,
        status: int = 200,
        body: Any = None,
        text: Optional[str] = None,
        headers: Optional[List[Tuple[str, str]]] = None,
    ) -> None:
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self._queue.append((status, list(headers or []), text.encode("utf-8")))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        status, headers, content = self._queue.pop(0)
        return httpx.Response(status, headers=headers, content=content)

    def params(self, index: int = -1) -> Dict[str, str]:
        return dict(self.requests[index].url.params)


def make_config(**overrides: Any) -> ClientConfig:
    values: Dict[str, Any] = dict(
        consumer_key="ck",
        consumer_secret="cs",
        access_token="at",
        access_token_secret="ats",
    )
    values.update(overrides)
    return ClientConfig(**values)


@pytest.fixture
def api() -> FakeAdsAPI:
    return FakeAdsAPI()


@pytest.fixture
def make_client(api: FakeAdsAPI):
    """Factory for clients talking to `api` with overridden config fields."""
    created: List[Client] = []

    def factory(**overrides: Any) -> Client:
        logger = overrides.pop("logger", None)
        kwargs: Dict[str, Any] = {"logger": logger} if logger is not None else {}
        c = Client(
            config=make_config(**overrides),
            transport=httpx.MockTransport(api.handler),
            **kwargs,
        )
        created.append(c)
        return c

    yield factory
    for c in created:
        c.close()


@pytest.fixture
def client(make_client) -> Client:
    return make_client()


@pytest.fixture
def account(client: Client) -> Account:
    return Account(client).from_response({"id": "abc1", "name": "Test Account"})
