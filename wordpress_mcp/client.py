"""Authenticated HTTP access to the WordPress REST API."""

from __future__ import annotations

from base64 import b64encode
from typing import Any

import httpx

from .config import WordPressConfig, logger


class WordPressRequestError(RuntimeError):
    """The request never produced an HTTP response (bad URL, connection, DNS, timeout)."""


class WordPressClient:
    """Issues single, unretried requests against one WordPress site."""

    def __init__(
        self,
        config: WordPressConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._transport = transport

    def auth_headers(self) -> dict[str, str]:
        """Build the HTTP Basic ``Authorization`` header."""
        credentials = f"{self.config.username}:{self.config.application_password}"
        token = b64encode(credentials.encode()).decode("ascii")
        return {"Authorization": f"Basic {token}"}

    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request to ``config.url + path`` and return the raw response.

        The response is returned whatever its status; interpreting it is up to
        the caller.

        Raises:
            WordPressRequestError: If no response was received.
        """
        url = f"{self.config.url}{path}"
        merged = {**self.auth_headers(), **(headers or {})}

        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                return await client.request(
                    method, url, headers=merged, json=json, params=params
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise WordPressRequestError(f"Request to {url} failed: {e}") from e
