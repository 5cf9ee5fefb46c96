# tests/conftest.py
import pytest
import requests

from htmlwalker.utils.path_utils import PathUtils


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, url: str, body: bytes, status_code: int = 200):
        self.url = url
        self.content = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}", response=self)


@pytest.fixture
def fake_http(monkeypatch):
    """
    Replaces requests.Session.get with a lookup in a dict of url -> (status, body).
    Yields the dict (to register pages) and records every request in `fake_http.calls`.
    """
    pages = {}
    calls = []

    def fake_get(self, url, **kwargs):
        calls.append({"url": url, "headers": kwargs.get("headers", {}), "timeout": kwargs.get("timeout")})
        if url not in pages:
            raise requests.ConnectionError(f"Failed to resolve '{url}'")
        status, body = pages[url]
        return FakeResponse(url, body, status)

    monkeypatch.setattr(requests.Session, "get", fake_get)
    fake_get.pages = pages
    fake_get.calls = calls
    return fake_get


@pytest.fixture
def cache_root(tmp_path, monkeypatch):
    """Points the default cache root at a temporary directory."""
    root = tmp_path / "cache"
    monkeypatch.setattr(PathUtils, "get_cache_root", lambda: root)
    return root
