"""Post tools for the WordPress REST API."""

from __future__ import annotations

from pydantic import ValidationError

from ..client import WordPressClient
from ..config import POSTS_PATH
from ..models import (
    CreatePostInput,
    EditPostInput,
    GetPostInput,
    PostDetail,
    PostSummary,
    ToolResult,
)
from ..utils import ToolFailure, invalid_input, parse, send

POST_FAILED = "Post failed"
EDIT_FAILED = "Edit failed"
FETCH_FAILED = "Fetch failed"


async def create_post(client: WordPressClient, params: CreatePostInput) -> ToolResult:
    try:
        response = await send(
            client, POST_FAILED, POSTS_PATH, method="POST", json=params.to_body()
        )
    except ToolFailure as e:
        return e.result
    return ToolResult.success(response.text, label="Post created")


async def edit_post(client: WordPressClient, params: EditPostInput) -> ToolResult:
    try:
        response = await send(
            client,
            EDIT_FAILED,
            f"{POSTS_PATH}/{params.id}",
            method="POST",
            json=params.to_body(),
        )
        post = parse(response, PostSummary, EDIT_FAILED)
    except ToolFailure as e:
        return e.result
    return ToolResult.success(
        f"ID: {post.id}, Title: {post.title.rendered}", label="Post updated"
    )


async def list_posts(client: WordPressClient) -> ToolResult:
    try:
        response = await send(client, FETCH_FAILED, POSTS_PATH)
        posts = parse(response, list[PostSummary], FETCH_FAILED)
    except ToolFailure as e:
        return e.result
    return ToolResult.success(
        "\n".join(f"ID: {post.id}, Title: {post.title.rendered}" for post in posts)
    )


async def get_post(client: WordPressClient, params: GetPostInput) -> ToolResult:
    try:
        response = await send(client, FETCH_FAILED, f"{POSTS_PATH}/{params.id}")
        post = parse(response, PostDetail, FETCH_FAILED)
    except ToolFailure as e:
        return e.result
    return ToolResult.success(
        f"Title: {post.title.rendered}\nContent: {post.content.rendered}"
    )


def register_post_tools(mcp, client: WordPressClient):
    """Register post-related tools with the MCP server."""

    @mcp.tool(
        name="create_post",
        annotations={
            "title": "Create Draft Post",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def create_post_tool(title: str, content: str) -> str:
        """Create a new WordPress post as a draft.

        Args:
            title: Post title.
            content: Post content (HTML or block markup).

        Returns:
            str: The created post as returned by WordPress, or a failure message.
        """
        try:
            params = CreatePostInput(title=title, content=content)
        except ValidationError as e:
            return invalid_input(POST_FAILED, e).render()
        return (await create_post(client, params)).render()

    @mcp.tool(
        name="edit_post",
        annotations={
            "title": "Edit Post",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def edit_post_tool(
        id: str,
        title: str | None = None,
        content: str | None = None,
        status: str | None = None,
        categories: list[str] | None = None,
    ) -> str:
        """Update the title, content, status or categories of a post.

        Only fields that are given (and non-empty) are changed.

        Args:
            id: Post ID.
            title: New title.
            content: New content.
            status: New status (draft, publish, pending, private).
            categories: Category IDs, replacing the current ones.

        Returns:
            str: The updated post's ID and title, or a failure message.
        """
        try:
            params = EditPostInput(
                id=id,
                title=title,
                content=content,
                status=status,
                categories=categories,
            )
        except ValidationError as e:
            return invalid_input(EDIT_FAILED, e).render()
        return (await edit_post(client, params)).render()

    @mcp.tool(
        name="list_posts",
        annotations={
            "title": "List Posts",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def list_posts_tool() -> str:
        """List recent posts with their IDs and titles.

        Returns:
            str: One "ID: <id>, Title: <title>" line per post.
        """
        return (await list_posts(client)).render()

    @mcp.tool(
        name="get_post",
        annotations={
            "title": "Get Post",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def get_post_tool(id: str) -> str:
        """Get the rendered title and content of a post.

        Args:
            id: Post ID.

        Returns:
            str: Title and content, or a failure message.
        """
        try:
            params = GetPostInput(id=id)
        except ValidationError as e:
            return invalid_input(FETCH_FAILED, e).render()
        return (await get_post(client, params)).render()
