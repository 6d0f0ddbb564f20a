import json

import pytest
import requests

from app import create_app


class FakeResponse:
    """Minimal stand-in for requests.Response as returned by the provider."""

    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON payload")
        return self._payload


class FakeProviderSession:
    """记录所有请求，并按路径返回预设响应。"""

    def __init__(self):
        self.calls = []
        self.routes = {
            "/v2/translate": FakeResponse(200, {
                "translations": [{"detected_source_language": "EN", "text": "Hola"}]
            }),
            "/v2/languages": FakeResponse(200, [
                {"language": "DE", "name": "German", "supports_formality": True},
                {"language": "ES", "name": "Spanish", "supports_formality": True},
            ]),
        }
        self.error = None

    def respond(self, path: str, response: FakeResponse):
        self.routes[path] = response

    def fail_with(self, error: Exception):
        self.error = error

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        for path, response in self.routes.items():
            if url.endswith(path):
                return response
        return FakeResponse(404, text="not found")


@pytest.fixture()
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture()
def app(data_dir):
    """提供测试用的 Flask 应用（数据文件落在临时目录）。"""
    return create_app("testing", DATA_DIR=str(data_dir))


@pytest.fixture()
def provider(app):
    fake = FakeProviderSession()
    app.extensions["translation_gateway"].session = fake
    return fake


@pytest.fixture()
def client(app, provider):
    return app.test_client()


@pytest.fixture()
def register(client):
    def _register(email="alice@example.com", password="s3cret-pass", name=None, http=None):
        payload = {"email": email, "password": password}
        if name is not None:
            payload["name"] = name
        return (http or client).post("/api/auth/register", json=payload)
    return _register


@pytest.fixture()
def transport_error():
    return requests.ConnectionError("connection refused")
