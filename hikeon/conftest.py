import json

import httpx
import pytest

from hikeon.config import Settings


class FakeResponse:
    def __init__(self, json_data=None, status_code=200, text=None):
        self._json_data = json_data
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(json_data)

    def json(self):
        if self._json_data is None:
            return json.loads(self.text)
        return self._json_data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {self.status_code}",
                request=httpx.Request("GET", "https://example.test"),
                response=self,
            )
        return None


class FakeUpstream:
    """Routes faked ``httpx.get`` calls by URL prefix and records them."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, url_prefix, response):
        self.routes[url_prefix] = response

    def __call__(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        for prefix, response in self.routes.items():
            if url.startswith(prefix):
                return response(url, params) if callable(response) else response
        raise AssertionError(f"Unexpected URL: {url}")

    def params_for(self, url_prefix):
        return [params for url, params in self.calls if url.startswith(url_prefix)]


@pytest.fixture
def settings():
    return Settings(google_api_key="test-key", _env_file=None)


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr("hikeon.http_client.httpx.get", fake)
    return fake


@pytest.fixture
def fake_response():
    return FakeResponse
