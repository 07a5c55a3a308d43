"""Helpers shared by the tool handlers: sending, parsing and failure conversion."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .client import WordPressClient, WordPressRequestError
from .config import logger
from .models import FailureReason, ToolResult

T = TypeVar("T")


class ToolFailure(Exception):
    """Carries a failed ToolResult out of a helper to the tool handler."""

    def __init__(self, result: ToolResult):
        super().__init__(result.render())
        self.result = result


async def send(
    client: WordPressClient,
    label: str,
    path: str,
    method: str = "GET",
    json: Any = None,
    params: dict[str, str] | None = None,
) -> httpx.Response:
    """Issue one request and return the response if its status is 2xx.

    Raises:
        ToolFailure: On a transport error or a non-success status, with the
            response body text as the failure detail.
    """
    headers = {"Content-Type": "application/json"} if json is not None else None
    try:
        response = await client.request(
            path, method=method, headers=headers, json=json, params=params
        )
    except WordPressRequestError as e:
        raise ToolFailure(
            ToolResult.failure(label, str(e), FailureReason.TRANSPORT_ERROR)
        ) from e

    if not response.is_success:
        logger.warning("%s %s returned %s", method, path, response.status_code)
        raise ToolFailure(
            ToolResult.failure(
                label,
                response.text,
                FailureReason.REMOTE_REJECTION,
                status_code=response.status_code,
            )
        )
    return response


def parse(response: httpx.Response, schema: type[T] | Any, label: str) -> T:
    """Validate a JSON response body against ``schema``.

    Raises:
        ToolFailure: If the body is not JSON or does not match the schema.
    """
    try:
        return TypeAdapter(schema).validate_json(response.content)
    except ValidationError as e:
        logger.warning("Unexpected response shape from %s: %s", response.url, e)
        raise ToolFailure(
            ToolResult.failure(
                label,
                f"unexpected response shape: {response.text}",
                FailureReason.UNEXPECTED_RESPONSE,
                status_code=response.status_code,
            )
        ) from e


def invalid_input(label: str, error: ValidationError) -> ToolResult:
    """Convert an input model ValidationError into a failure result."""
    messages = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return ToolResult.failure(label, "; ".join(messages), FailureReason.INVALID_INPUT)
