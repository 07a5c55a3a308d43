"""Pydantic models for MCP tool inputs, results and REST responses."""

from .base import FailureReason, RenderedField, ToolResult, WordPressResponse
from .categories import (
    CategoryResponse,
    CreateCategoryInput,
    DeleteCategoryInput,
    EditCategoryInput,
)
from .posts import (
    CreatePostInput,
    EditPostInput,
    GetPostInput,
    PostDetail,
    PostSummary,
)

__all__ = [
    # Base
    "FailureReason",
    "ToolResult",
    "WordPressResponse",
    "RenderedField",
    # Posts
    "CreatePostInput",
    "EditPostInput",
    "GetPostInput",
    "PostSummary",
    "PostDetail",
    # Categories
    "CreateCategoryInput",
    "EditCategoryInput",
    "DeleteCategoryInput",
    "CategoryResponse",
]
