"""Shared fixtures: an isolated cache file and a stubbed requests.get."""

import pytest
import requests

import cache


@pytest.fixture(autouse=True)
def cache_file(tmp_path, monkeypatch):
    """Point the disk cache at a per-test file so tests never share state."""
    path = tmp_path / "data" / "trending.json"
    monkeypatch.setattr(cache, "CACHE_FILE", path)
    return path


@pytest.fixture
def fake_http(monkeypatch):
    """
    Route requests.get by URL substring.

    Register with fake_http.routes["hollisterco.com"] = FakeResponse(...), or an
    exception instance to raise. Unregistered URLs raise ConnectionError.
    """
    class _FakeHTTP:
        def __init__(self):
            self.routes = {}
            self.calls = []

        def get(self, url, headers=None, timeout=None, **kwargs):
            self.calls.append({"url": url, "headers": headers, "timeout": timeout})
            for marker, outcome in self.routes.items():
                if marker in url:
                    if isinstance(outcome, BaseException):
                        raise outcome
                    return outcome
            raise requests.ConnectionError(f"No route to {url}")

    fake = _FakeHTTP()
    monkeypatch.setattr(requests, "get", fake.get)
    return fake
