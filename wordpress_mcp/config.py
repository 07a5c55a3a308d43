"""Configuration and constants for the WordPress MCP Server."""

from __future__ import annotations

import logging
import os
import sys

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Environment variable names
# ---------------------------------------------------------------------------

URL_ENV = "WORDPRESS_URL"
USERNAME_ENV = "WORDPRESS_USERNAME"
PASSWORD_ENV = "APPLICATION_PASSWORD"

LOG_LEVEL = os.getenv("WORDPRESS_MCP_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SERVER_NAME = "wordpress_mcp"

POSTS_PATH = "/wp-json/wp/v2/posts"
CATEGORIES_PATH = "/wp-json/wp/v2/categories"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

# stdout carries the MCP stdio protocol
logger = logging.getLogger("wordpress_mcp")
logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)


class WordPressConfig(BaseModel):
    """Site URL and application-password credentials for one WordPress site."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    url: str = ""
    username: str = ""
    application_password: str = ""

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_env(cls) -> WordPressConfig:
        """Read the credentials from the process environment.

        Missing values are not an error here; they surface later as a
        connection or authentication failure from the remote site.
        """
        config = cls(
            url=os.getenv(URL_ENV, ""),
            username=os.getenv(USERNAME_ENV, ""),
            application_password=os.getenv(PASSWORD_ENV, ""),
        )
        for name, value in (
            (URL_ENV, config.url),
            (USERNAME_ENV, config.username),
            (PASSWORD_ENV, config.application_password),
        ):
            if not value:
                logger.warning(
                    "%s is not set. Requests to WordPress will fail until it is configured.",
                    name,
                )
        return config
