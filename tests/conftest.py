"""Shared pytest fixtures for backend-facing tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest_asyncio

from search_console.config import BackendSettings
from search_console.services.backend import SearchBackendClient


class RecordingHandler:
    """MockTransport handler that dispatches by path and records JSON bodies."""

    def __init__(self, routes: dict[str, Callable[[dict[str, Any]], Any]]) -> None:
        self.routes = routes
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content.decode("utf-8")) if request.content else {}
        self.calls.append((request.url.path, body))
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="not found")
        result = route(body)
        if hasattr(result, "__await__"):
            result = await result
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    def paths(self) -> list[str]:
        return [path for path, _ in self.calls]


@pytest_asyncio.fixture
async def make_backend():
    clients: list[httpx.AsyncClient] = []

    def factory(handler, settings: BackendSettings | None = None) -> SearchBackendClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return SearchBackendClient(client, settings or BackendSettings())

    try:
        yield factory
    finally:
        for client in clients:
            await client.aclose()
