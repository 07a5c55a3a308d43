"""Category tools for the WordPress REST API."""

from __future__ import annotations

from pydantic import ValidationError

from ..client import WordPressClient
from ..config import CATEGORIES_PATH
from ..models import (
    CategoryResponse,
    CreateCategoryInput,
    DeleteCategoryInput,
    EditCategoryInput,
    ToolResult,
)
from ..utils import ToolFailure, invalid_input, parse, send

FETCH_FAILED = "Fetch failed"
EDIT_FAILED = "Edit failed"
CREATE_FAILED = "Create failed"
DELETE_FAILED = "Delete failed"


async def list_categories(client: WordPressClient) -> ToolResult:
    try:
        response = await send(client, FETCH_FAILED, CATEGORIES_PATH)
        categories = parse(response, list[CategoryResponse], FETCH_FAILED)
    except ToolFailure as e:
        return e.result
    return ToolResult.success(
        "\n".join(f"ID: {cat.id}, Name: {cat.name}" for cat in categories)
    )


async def edit_category(client: WordPressClient, params: EditCategoryInput) -> ToolResult:
    try:
        response = await send(
            client,
            EDIT_FAILED,
            f"{CATEGORIES_PATH}/{params.id}",
            method="POST",
            json={"name": params.name},
        )
        category = parse(response, CategoryResponse, EDIT_FAILED)
    except ToolFailure as e:
        return e.result
    return ToolResult.success(
        f"ID: {category.id}, New name: {category.name}", label="Category updated"
    )


async def create_category(
    client: WordPressClient, params: CreateCategoryInput
) -> ToolResult:
    try:
        response = await send(
            client, CREATE_FAILED, CATEGORIES_PATH, method="POST", json=params.to_body()
        )
        category = parse(response, CategoryResponse, CREATE_FAILED)
    except ToolFailure as e:
        return e.result
    return ToolResult.success(
        f"ID: {category.id}, Name: {category.name}", label="Category created"
    )


async def delete_category(
    client: WordPressClient, params: DeleteCategoryInput
) -> ToolResult:
    try:
        await send(
            client,
            DELETE_FAILED,
            f"{CATEGORIES_PATH}/{params.id}",
            method="DELETE",
            params=params.to_params(),
        )
    except ToolFailure as e:
        return e.result
    # The response body is not needed; the ID is echoed from the request.
    return ToolResult.success(f"ID: {params.id}", label="Category deleted")


def register_category_tools(mcp, client: WordPressClient):
    """Register category-related tools with the MCP server."""

    @mcp.tool(
        name="list_categories",
        annotations={
            "title": "List Categories",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def list_categories_tool() -> str:
        """List categories with their IDs and names.

        Returns:
            str: One "ID: <id>, Name: <name>" line per category.
        """
        return (await list_categories(client)).render()

    @mcp.tool(
        name="edit_category",
        annotations={
            "title": "Rename Category",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def edit_category_tool(id: str, name: str) -> str:
        """Rename a category.

        Args:
            id: Category ID.
            name: New category name.
        """
        try:
            params = EditCategoryInput(id=id, name=name)
        except ValidationError as e:
            return invalid_input(EDIT_FAILED, e).render()
        return (await edit_category(client, params)).render()

    @mcp.tool(
        name="create_category",
        annotations={
            "title": "Create Category",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def create_category_tool(
        name: str,
        description: str | None = None,
        parent: str | None = None,
    ) -> str:
        """Create a category, optionally nested under a parent category.

        Args:
            name: Category name.
            description: Category description.
            parent: Parent category ID.

        Returns:
            str: The new category's ID and name, or a failure message.
        """
        try:
            params = CreateCategoryInput(name=name, description=description, parent=parent)
        except ValidationError as e:
            return invalid_input(CREATE_FAILED, e).render()
        return (await create_category(client, params)).render()

    @mcp.tool(
        name="delete_category",
        annotations={
            "title": "Delete Category",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def delete_category_tool(id: str, force: bool | None = None) -> str:
        """Delete a category.

        Args:
            id: Category ID.
            force: Delete permanently (required by WordPress for terms).
        """
        try:
            params = DeleteCategoryInput(id=id, force=force)
        except ValidationError as e:
            return invalid_input(DELETE_FAILED, e).render()
        return (await delete_category(client, params)).render()
