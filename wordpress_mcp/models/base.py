"""Shared result and response types for MCP tools."""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict

_DIGITS = re.compile(r"[0-9]+")


def numeric_id(value: str) -> str:
    """Accept only ASCII-digit IDs."""
    if not _DIGITS.fullmatch(value):
        raise ValueError(f"{value!r} is not an integer ID.")
    return value


NumericId = Annotated[str, AfterValidator(numeric_id)]


class FailureReason(str, Enum):
    """Why a tool call did not succeed."""

    REMOTE_REJECTION = "remote_rejection"
    TRANSPORT_ERROR = "transport_error"
    UNEXPECTED_RESPONSE = "unexpected_response"
    INVALID_INPUT = "invalid_input"


class ToolResult(BaseModel):
    """Outcome of a single tool call.

    ``render()`` turns it into the text block sent back to the MCP client.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    label: str = ""
    detail: str
    reason: FailureReason | None = None
    status_code: int | None = None

    @classmethod
    def success(cls, detail: str, label: str = "") -> ToolResult:
        return cls(ok=True, label=label, detail=detail)

    @classmethod
    def failure(
        cls,
        label: str,
        detail: str,
        reason: FailureReason,
        status_code: int | None = None,
    ) -> ToolResult:
        return cls(
            ok=False,
            label=label,
            detail=detail,
            reason=reason,
            status_code=status_code,
        )

    def render(self) -> str:
        if self.label:
            return f"{self.label}: {self.detail}"
        return self.detail


class WordPressResponse(BaseModel):
    """Base for REST API response schemas; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class RenderedField(WordPressResponse):
    """A field such as ``title`` or ``content`` carrying its rendered HTML."""

    rendered: str
