"""Shared fixtures."""

import httpx
import pytest

from coincheck_sdk import CoincheckClient, NoopLogger

BASE_URL = "https://coincheck.test/api"


class MockExchange:
    """Canned-response exchange that records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, dict]] = {}

    def route(self, path: str, status_code: int = 200, json=None, content=None):
        body = {"json": json} if json is not None else {"content": content or b""}
        self.routes[path] = (status_code, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path not in self.routes:
            return httpx.Response(404, json={"success": False, "error": f"no route for {path}"})
        status_code, body = self.routes[path]
        return httpx.Response(status_code, **body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def exchange():
    """Create an empty mock exchange."""
    return MockExchange()


@pytest.fixture
async def client(exchange):
    """Create a client wired to the mock exchange."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(exchange.handler))
    client = CoincheckClient(
        api_key="key",
        api_secret="secret",
        base_url=BASE_URL,
        logger=NoopLogger(),
        http_client=http,
    )
    yield client
    await http.aclose()
