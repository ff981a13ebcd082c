"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import MagicMock

import pytest

from iconify_client.config import IconifyConfig
from iconify_client.services import IconifyClient, InMemoryCacheStore

BASE_URL = "https://api.iconify.test"


def _make_response(json_data=None, text=None, status_code=200):
    """Create a mock requests.Response.

    Without ``json_data`` the body is treated as non-JSON and ``json()`` raises.
    """
    resp = MagicMock()
    resp.status_code = status_code
    if json_data is not None:
        resp.json.return_value = json_data
        resp.text = text if text is not None else json.dumps(json_data)
    else:
        resp.text = text if text is not None else ""
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    return resp


class FakeRegistry:
    """A real HttpTransport implementation that serves canned responses and records calls.

    Routes map a path below BASE_URL to a response, an exception to raise, or
    a callable taking the request's query params and returning a response.
    Unknown paths answer 404.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        assert url.startswith(BASE_URL), url
        route = self.routes.get(url[len(BASE_URL) :])
        if route is None:
            return _make_response(text="404", status_code=404)
        if isinstance(route, Exception):
            raise route
        if callable(route) and not isinstance(route, MagicMock):
            return route(kwargs.get("params") or {})
        return route

    def count(self, path):
        """Number of requests sent to ``path``."""
        return sum(1 for _, url, _ in self.calls if url == BASE_URL + path)


@pytest.fixture
def sample_collections():
    """Provide a small /collections payload."""
    return {
        "mdi": {
            "name": "Material Design Icons",
            "total": 7447,
            "author": {"name": "Pictogrammers", "url": "https://github.com/Templarian/MaterialDesign"},
            "license": {"title": "Apache 2.0", "spdx": "Apache-2.0"},
            "samples": ["account-check", "bell-alert-outline", "calendar-edit"],
            "height": 24,
            "category": "General",
            "palette": False,
        },
        "bi": {
            "name": "Bootstrap Icons",
            "total": 2078,
            "height": 16,
            "palette": False,
        },
        "flat": {
            "name": "Dimensionless Set",
            "total": 3,
        },
    }


@pytest.fixture
def registry(sample_collections):
    """Provide a fake registry serving the sample collection index."""
    return FakeRegistry({"/collections": _make_response(sample_collections)})


@pytest.fixture
def cache():
    """Provide an empty in-memory cache store."""
    return InMemoryCacheStore()


@pytest.fixture
def client(cache, registry):
    """Provide a client bound to the fake registry."""
    return IconifyClient(cache, endpoint=BASE_URL, http=registry)


@pytest.fixture
def test_config(tmp_path):
    """Provide a test configuration with temporary paths."""
    return IconifyConfig(
        endpoint=BASE_URL,
        timeout=5.0,
        cache_db_path=tmp_path / "cache" / "cache.db",
        icons_dir=tmp_path / "icons",
    )


@pytest.fixture
def base_url():
    """Provide the registry endpoint the fake registry answers on."""
    return BASE_URL


@pytest.fixture
def make_response():
    """Factory fixture for mock registry responses."""
    return _make_response


@pytest.fixture
def make_registry():
    """Factory fixture for fake registries with custom routes."""
    return FakeRegistry
