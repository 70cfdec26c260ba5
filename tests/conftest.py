"""
Shared test fixtures.

FakeBackend stands in for the guides REST backend behind an
httpx.MockTransport, recording every request it receives.
"""

import json

import httpx
import pytest

from guide_admin.core.api.client import ApiClient, ApiClientConfig

BASE_URL = "http://backend.test"


class FakeBackend:
    """
    Scripted REST backend.

    Usage:
        backend.respond("GET", "/categories/", {"data": [...]})
        backend.respond("DELETE", "/categories/5", {"message": "nope"}, status=400)
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []
        self.unreachable = False

    def respond(self, method: str, path: str, body: object, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)

        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Rota não encontrada"})

        status, body = self.routes[key]
        if isinstance(body, (dict, list)):
            return httpx.Response(status, content=json.dumps(body).encode(),
                                  headers={"content-type": "application/json"})
        return httpx.Response(status, text=str(body))

    def calls(self, method: str, path: str | None = None) -> list[httpx.Request]:
        """Requests received with the given method (and path, if given)."""
        return [
            r for r in self.requests
            if r.method == method and (path is None or r.url.path == path)
        ]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api_client(backend: FakeBackend) -> ApiClient:
    """ApiClient wired to the fake backend."""
    return ApiClient(
        ApiClientConfig(base_url=BASE_URL, timeout=1.0, token="test-token"),
        transport=httpx.MockTransport(backend.handler),
    )
