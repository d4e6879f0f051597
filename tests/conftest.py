import json
from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

import makedistribution.transport as transport
from makedistribution.settings import ApiSettings

BASE = "https://makedistribution.com/s/api/v0"


class FakeApi:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, url: str, status: int = 200, json_body: Any = None, text: str = None) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=json_body)

        self.routes[(method, url)] = _respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, str(request.url)))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url}")
        return route(request)

    @property
    def calls(self) -> List[Tuple[str, str]]:
        return [(r.method, str(r.url)) for r in self.requests]

    def body(self, index: int) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_api(monkeypatch) -> FakeApi:
    api = FakeApi()
    mock = httpx.MockTransport(api.handler)
    monkeypatch.setattr(transport, "_client", lambda headers: httpx.Client(transport=mock, headers=headers))
    return api


@pytest.fixture
def settings() -> ApiSettings:
    return ApiSettings(base_url=BASE, token="secret")


@pytest.fixture(autouse=True)
def _no_env_token(monkeypatch):
    monkeypatch.delenv("MAKEDISTRIBUTION_API_TOKEN", raising=False)
