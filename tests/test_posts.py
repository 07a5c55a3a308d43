"""Tests for post tools."""

import asyncio

import httpx

from wordpress_mcp.client import WordPressClient
from wordpress_mcp.config import WordPressConfig
from wordpress_mcp.models import (
    CreatePostInput,
    EditPostInput,
    FailureReason,
    GetPostInput,
)
from wordpress_mcp.tools.posts import create_post, edit_post, get_post, list_posts


class TestCreatePost:
    """Tests for create_post."""

    def test_always_draft(self, client, wordpress):
        """Request body should always carry status=draft."""
        wordpress.respond(status_code=201, payload={"id": 10, "title": {"rendered": "Hello"}})

        result = asyncio.run(
            create_post(client, CreatePostInput(title="Hello", content="World"))
        )

        assert result.ok
        assert len(wordpress.requests) == 1
        assert wordpress.last.method == "POST"
        assert wordpress.last.url.path == "/wp-json/wp/v2/posts"
        assert wordpress.last_json() == {
            "title": "Hello",
            "content": "World",
            "status": "draft",
        }

    def test_success_includes_raw_body(self, client, wordpress):
        """Success text should include the unparsed response body."""
        wordpress.respond(status_code=201, text='{"id": 10}')

        result = asyncio.run(create_post(client, CreatePostInput(title="a", content="b")))

        assert result.render() == 'Post created: {"id": 10}'

    def test_rejection(self, client, wordpress):
        """Non-2xx status should produce a 'Post failed' result."""
        wordpress.respond(status_code=401, text="not found")

        result = asyncio.run(create_post(client, CreatePostInput(title="a", content="b")))

        assert not result.ok
        assert result.reason == FailureReason.REMOTE_REJECTION
        assert result.status_code == 401
        assert result.render() == "Post failed: not found"


class TestEditPost:
    """Tests for edit_post."""

    def test_categories_coerced_to_int(self, client, wordpress):
        """String category IDs should be sent as integers."""
        wordpress.respond(payload={"id": 42, "title": {"rendered": "Edited"}})

        result = asyncio.run(
            edit_post(client, EditPostInput(id="42", categories=["3", "7"]))
        )

        assert wordpress.last.method == "POST"
        assert wordpress.last.url.path == "/wp-json/wp/v2/posts/42"
        assert wordpress.last_json() == {"categories": [3, 7]}
        assert result.render() == "Post updated: ID: 42, Title: Edited"

    def test_only_present_fields_sent(self, client, wordpress):
        """Absent and empty optional fields should be left out of the body."""
        wordpress.respond(payload={"id": 42, "title": {"rendered": "New"}})

        asyncio.run(
            edit_post(
                client,
                EditPostInput(id="42", title="New", content="", status="publish"),
            )
        )

        assert wordpress.last_json() == {"title": "New", "status": "publish"}

    def test_empty_categories_sent(self, client, wordpress):
        """An explicit empty category list should still be sent."""
        wordpress.respond(payload={"id": 42, "title": {"rendered": "t"}})

        asyncio.run(edit_post(client, EditPostInput(id="42", categories=[])))

        assert wordpress.last_json() == {"categories": []}

    def test_unexpected_shape(self, client, wordpress):
        """A success body missing fields should not raise."""
        wordpress.respond(payload={"message": "ok"})

        result = asyncio.run(edit_post(client, EditPostInput(id="42", title="t")))

        assert not result.ok
        assert result.reason == FailureReason.UNEXPECTED_RESPONSE
        assert result.render().startswith("Edit failed: unexpected response shape")

    def test_rejection(self, client, wordpress):
        """Non-2xx status should produce an 'Edit failed' result."""
        wordpress.respond(status_code=404, text="not found")

        result = asyncio.run(edit_post(client, EditPostInput(id="999", title="t")))

        assert result.render() == "Edit failed: not found"


class TestListPosts:
    """Tests for list_posts."""

    def test_lines_per_post(self, client, wordpress):
        """Each post should be rendered on its own line."""
        wordpress.respond(
            payload=[
                {"id": 1, "title": {"rendered": "Hello World"}, "status": "publish"},
                {"id": 2, "title": {"rendered": "Test Post"}, "status": "draft"},
            ]
        )

        result = asyncio.run(list_posts(client))

        assert wordpress.last.method == "GET"
        assert wordpress.last.url.path == "/wp-json/wp/v2/posts"
        assert result.render() == "ID: 1, Title: Hello World\nID: 2, Title: Test Post"

    def test_empty_list(self, client, wordpress):
        """No posts should render as empty text."""
        wordpress.respond(payload=[])

        result = asyncio.run(list_posts(client))

        assert result.ok
        assert result.render() == ""

    def test_malformed_json(self, client, wordpress):
        """A non-JSON success body should become a failure result."""
        wordpress.respond(text="<html>maintenance</html>")

        result = asyncio.run(list_posts(client))

        assert result.reason == FailureReason.UNEXPECTED_RESPONSE
        assert "maintenance" in result.render()


class TestGetPost:
    """Tests for get_post."""

    def test_title_and_content(self, client, wordpress):
        """Rendered title and content should be joined on two lines."""
        wordpress.respond(
            payload={"title": {"rendered": "Hi"}, "content": {"rendered": "Body"}}
        )

        result = asyncio.run(get_post(client, GetPostInput(id="42")))

        assert wordpress.last.method == "GET"
        assert str(wordpress.last.url) == "https://example.test/wp-json/wp/v2/posts/42"
        assert result.render() == "Title: Hi\nContent: Body"

    def test_transport_error(self, client, wordpress):
        """A connection failure should become a failure result."""
        wordpress.error = httpx.ConnectError("name resolution failed")

        result = asyncio.run(get_post(client, GetPostInput(id="42")))

        assert not result.ok
        assert result.reason == FailureReason.TRANSPORT_ERROR
        assert result.render().startswith("Fetch failed: ")
        assert "name resolution failed" in result.render()
        assert len(wordpress.requests) == 1

    def test_malformed_site_url(self, wordpress):
        """A URL httpx cannot build should become a failure result."""
        client = WordPressClient(
            WordPressConfig(url="https://exam\nple.test"),
            transport=httpx.MockTransport(wordpress.handler),
        )

        result = asyncio.run(get_post(client, GetPostInput(id="42")))

        assert not result.ok
        assert result.reason == FailureReason.TRANSPORT_ERROR
        assert result.render().startswith("Fetch failed: ")
        assert wordpress.requests == []
