"""Pytest configuration and shared fixtures."""

import json

import httpx
import pytest

from wordpress_mcp.client import WordPressClient
from wordpress_mcp.config import WordPressConfig


class FakeWordPress:
    """Records outbound requests and answers each with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = ""
        self.error: Exception | None = None

    def respond(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.body = text if text is not None else json.dumps(payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def config():
    """Fake site credentials."""
    return WordPressConfig(
        url="https://example.test/",
        username="editor",
        application_password="abcd efgh ijkl",
    )


@pytest.fixture
def wordpress():
    """A fake WordPress site backed by httpx.MockTransport."""
    return FakeWordPress()


@pytest.fixture
def client(config, wordpress):
    """WordPressClient wired to the fake site."""
    return WordPressClient(config, transport=httpx.MockTransport(wordpress.handler))
