"""Input models and response schemas for post tools."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import NumericId, RenderedField, WordPressResponse, numeric_id


class CreatePostInput(BaseModel):
    """Input for creating a draft post."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., description="Post title.")
    content: str = Field(..., description="Post content (HTML or block markup).")

    def to_body(self) -> dict[str, Any]:
        # New posts are always created as drafts.
        return {"title": self.title, "content": self.content, "status": "draft"}


class EditPostInput(BaseModel):
    """Input for updating an existing post."""

    model_config = ConfigDict(extra="forbid")

    id: NumericId = Field(..., description="Post ID.")
    title: str | None = Field(default=None, description="New title.")
    content: str | None = Field(default=None, description="New content.")
    status: str | None = Field(
        default=None,
        description="New status (e.g. 'draft', 'publish', 'private').",
    )
    categories: list[int] | None = Field(
        default=None,
        description="Category IDs; replaces the post's current categories.",
    )

    @field_validator("categories", mode="before")
    @classmethod
    def parse_category_ids(cls, v: Any) -> Any:
        if v is None:
            return v
        return [int(numeric_id(str(item).strip())) for item in v]

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.title:
            body["title"] = self.title
        if self.content:
            body["content"] = self.content
        if self.status:
            body["status"] = self.status
        if self.categories is not None:
            body["categories"] = self.categories
        return body


class GetPostInput(BaseModel):
    """Input for fetching a single post."""

    model_config = ConfigDict(extra="forbid")

    id: NumericId = Field(..., description="Post ID.")


class PostSummary(WordPressResponse):
    """A post as returned by the list and update endpoints."""

    id: int
    title: RenderedField


class PostDetail(WordPressResponse):
    """A post with its rendered content."""

    id: int | None = None
    title: RenderedField
    content: RenderedField
