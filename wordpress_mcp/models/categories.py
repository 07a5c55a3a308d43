"""Input models and response schema for category tools."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import NumericId, WordPressResponse, numeric_id


class CreateCategoryInput(BaseModel):
    """Input for creating a category."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Category name.")
    description: str | None = Field(default=None, description="Category description.")
    parent: str | None = Field(default=None, description="Parent category ID.")

    @field_validator("parent")
    @classmethod
    def parent_is_integer(cls, v: str | None) -> str | None:
        if v:
            numeric_id(v)
        return v

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name}
        if self.description:
            body["description"] = self.description
        if self.parent:
            body["parent"] = int(self.parent)
        return body


class EditCategoryInput(BaseModel):
    """Input for renaming a category."""

    model_config = ConfigDict(extra="forbid")

    id: NumericId = Field(..., description="Category ID.")
    name: str = Field(..., description="New category name.")


class DeleteCategoryInput(BaseModel):
    """Input for deleting a category."""

    model_config = ConfigDict(extra="forbid")

    id: NumericId = Field(..., description="Category ID.")
    force: bool | None = Field(
        default=None,
        description="Delete permanently. WordPress rejects category deletes without it.",
    )

    def to_params(self) -> dict[str, str] | None:
        if self.force:
            return {"force": "true"}
        return None


class CategoryResponse(WordPressResponse):
    """A category as returned by the categories endpoint."""

    id: int
    name: str
