import asyncio
from typing import Any

import httpx
import pytest


def _key(url: httpx.URL) -> tuple:
    return (url.scheme, url.host, url.path, url.query)


class FakeWeb:
    """
    In-memory web behind a real httpx.AsyncClient (via MockTransport).
    Unknown URLs answer 404; every request is recorded in order.
    """

    def __init__(self):
        self._routes: dict[tuple, Any] = {}
        self.requests: list[httpx.Request] = []

    def add(self, url: str, status: int = 200, *, text: str | None = None, json: Any = None,
            headers: dict | None = None) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status, json=json, headers=headers)
            return httpx.Response(status, text=text or "", headers=headers)

        self._routes[_key(httpx.URL(url))] = respond

    def fail(self, url: str) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self._routes[_key(httpx.URL(url))] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self._routes.get(_key(request.url))
        if respond is None:
            return httpx.Response(404, text="not found")
        return respond(request)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

    def run(self, fn):
        """Call fn(client) with a client wired to this fake web and return its result."""
        async def main():
            async with httpx.AsyncClient(transport=httpx.MockTransport(self.handler)) as client:
                return await fn(client)

        return asyncio.run(main())


@pytest.fixture
def web():
    return FakeWeb()


