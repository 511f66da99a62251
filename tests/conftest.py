"""Pytest configuration and fixtures."""

import copy
import json
import os
from typing import Callable

import httpx
import pytest

# Set test environment
os.environ["ULTRA_ENVIRONMENT"] = "test"
os.environ["ULTRA_API_BASE_URL"] = "https://ultra.test"
os.environ["ULTRA_DEBUG"] = "true"

from ultraswap.config import UltraEndpoints, get_settings

from samples import QUOTE_BODY, ROUTERS_BODY


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the test environment for each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def endpoints() -> UltraEndpoints:
    return UltraEndpoints(base_url="https://ultra.test")


@pytest.fixture
def quote_body() -> dict:
    return copy.deepcopy(QUOTE_BODY)


@pytest.fixture
def routers_body() -> list:
    return copy.deepcopy(ROUTERS_BODY)


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it handled."""

    def __init__(self, handler: Callable):
        self.requests: list[httpx.Request] = []

        async def record(request: httpx.Request):
            self.requests.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        super().__init__(record)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a transport from a handler or a fixed (status, body) pair."""

    def factory(handler=None, status_code: int = 200, body=None) -> RecordingTransport:
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if isinstance(body, (dict, list)):
                    return httpx.Response(status_code, json=body)
                return httpx.Response(status_code, text=body or "")

        return RecordingTransport(handler)

    return factory


def json_body(request: httpx.Request) -> dict:
    return json.loads(request.content)
