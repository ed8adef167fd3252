"""
Общие фикстуры: подменённый PoetryDB поверх httpx.MockTransport.
"""

import asyncio
import inspect
import json

import httpx
import pytest

from services.poetry_client import PoetryDbClient

BASE_URL = "https://poetrydb.test"


def make_poem(title, author, lines=None):
    lines = lines if lines is not None else [f"{title} by {author}", "", "last line"]
    return {"title": title, "author": author, "lines": lines, "linecount": str(len(lines))}


class FakePoetryDb:
    """Маршруты пути -> ответ и журнал всех запросов."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def reply(self, path, payload=None, status=200, delay=0.0):
        async def respond(request):
            if delay:
                await asyncio.sleep(delay)
            return httpx.Response(
                status,
                content=json.dumps(payload),
                headers={"content-type": "application/json"},
            )
        self.routes[path] = respond

    def fail(self, path, error_cls=httpx.ConnectError):
        async def respond(request):
            raise error_cls("connection refused", request=request)
        self.routes[path] = respond

    def raw(self, path, handler):
        self.routes[path] = handler

    async def handler(self, request):
        self.calls.append(request.url.path)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(200, json={"status": 404, "reason": "Not found"})
        result = route(request)
        if inspect.isawaitable(result):
            result = await result
        return result

    def client(self):
        return PoetryDbClient(BASE_URL, transport=httpx.MockTransport(self.handler))

    def run(self, action):
        """Выполняет action(client) в отдельном цикле событий."""
        async def scenario():
            async with self.client() as client:
                return await action(client)
        return asyncio.run(scenario())


@pytest.fixture
def fake_api():
    return FakePoetryDb()
