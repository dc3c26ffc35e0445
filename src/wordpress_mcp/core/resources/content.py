"""Posts, pages and reusable blocks: the /wp/v2 content families."""

from __future__ import annotations

from wordpress_mcp.core.models import (
    BlockFilters,
    BlockPayload,
    PageFilters,
    PagePayload,
    PostFilters,
    PostPayload,
)
from wordpress_mcp.core.resources.base import ResourceClient, RevisionsMixin


class PostsClient(RevisionsMixin, ResourceClient):
    resource = "posts"
    path = "/wp/v2/posts"
    filters_model = PostFilters
    create_model = PostPayload


class PagesClient(RevisionsMixin, ResourceClient):
    resource = "pages"
    path = "/wp/v2/pages"
    filters_model = PageFilters
    create_model = PagePayload


class BlocksClient(RevisionsMixin, ResourceClient):
    resource = "blocks"
    path = "/wp/v2/blocks"
    filters_model = BlockFilters
    create_model = BlockPayload


__all__ = ["PostsClient", "PagesClient", "BlocksClient"]
