"""Posts, pages and reusable block tools."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from wordpress_mcp.core.config import DEFAULT_SITE_ALIAS, SiteResolver
from wordpress_mcp.core.factory import ResourceKind, open_client
from wordpress_mcp.core.models import (
    BlockFilters,
    BlockPayload,
    PageFilters,
    PagePayload,
    PostFilters,
    PostPayload,
)

TOOL_PREFIX = "wp_content"


# --- Posts ----------------------------------------------------------------- #


async def get_posts(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[PostFilters] = None,
) -> List[Dict[str, Any]]:
    """Get a list of posts with optional filters."""
    async with open_client(sites, site, ResourceKind.POSTS) as posts:
        return await posts.list(filters)


async def get_post(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Get a single post by ID."""
    async with open_client(sites, site, ResourceKind.POSTS) as posts:
        return await posts.get(id)


async def create_post(
    sites: SiteResolver, data: PostPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Create a new post."""
    async with open_client(sites, site, ResourceKind.POSTS) as posts:
        return await posts.create(data)


async def update_post(
    sites: SiteResolver, id: int, data: PostPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Update an existing post. Only the supplied fields are changed."""
    async with open_client(sites, site, ResourceKind.POSTS) as posts:
        return await posts.update(id, data)


async def delete_post(
    sites: SiteResolver,
    id: int,
    site: str = DEFAULT_SITE_ALIAS,
    force: Optional[bool] = None,
) -> Dict[str, Any]:
    """Delete a post. Without force the site moves it to the trash."""
    async with open_client(sites, site, ResourceKind.POSTS) as posts:
        return await posts.delete(id, force=force)


async def get_post_revisions(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> List[Dict[str, Any]]:
    """Get revisions of a post."""
    async with open_client(sites, site, ResourceKind.POSTS) as posts:
        return await posts.get_revisions(id)


# --- Pages ----------------------------------------------------------------- #


async def get_pages(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[PageFilters] = None,
) -> List[Dict[str, Any]]:
    """Get a list of pages with optional filters."""
    async with open_client(sites, site, ResourceKind.PAGES) as pages:
        return await pages.list(filters)


async def get_page(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Get a single page by ID."""
    async with open_client(sites, site, ResourceKind.PAGES) as pages:
        return await pages.get(id)


async def create_page(
    sites: SiteResolver, data: PagePayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Create a new page."""
    async with open_client(sites, site, ResourceKind.PAGES) as pages:
        return await pages.create(data)


async def update_page(
    sites: SiteResolver, id: int, data: PagePayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Update an existing page. Only the supplied fields are changed."""
    async with open_client(sites, site, ResourceKind.PAGES) as pages:
        return await pages.update(id, data)


async def delete_page(
    sites: SiteResolver,
    id: int,
    site: str = DEFAULT_SITE_ALIAS,
    force: Optional[bool] = None,
) -> Dict[str, Any]:
    """Delete a page."""
    async with open_client(sites, site, ResourceKind.PAGES) as pages:
        return await pages.delete(id, force=force)


# --- Blocks ---------------------------------------------------------------- #


async def get_blocks(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[BlockFilters] = None,
) -> List[Dict[str, Any]]:
    """Get a list of reusable blocks with optional filters."""
    async with open_client(sites, site, ResourceKind.BLOCKS) as blocks:
        return await blocks.list(filters)


async def get_block(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    async with open_client(sites, site, ResourceKind.BLOCKS) as blocks:
        return await blocks.get(id)


async def create_block(
    sites: SiteResolver, data: BlockPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Create a new reusable block."""
    async with open_client(sites, site, ResourceKind.BLOCKS) as blocks:
        return await blocks.create(data)


async def update_block(
    sites: SiteResolver, id: int, data: BlockPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    async with open_client(sites, site, ResourceKind.BLOCKS) as blocks:
        return await blocks.update(id, data)


async def delete_block(
    sites: SiteResolver,
    id: int,
    site: str = DEFAULT_SITE_ALIAS,
    force: Optional[bool] = None,
) -> Dict[str, Any]:
    async with open_client(sites, site, ResourceKind.BLOCKS) as blocks:
        return await blocks.delete(id, force=force)


async def get_block_revisions(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> List[Dict[str, Any]]:
    """Get revisions of a block."""
    async with open_client(sites, site, ResourceKind.BLOCKS) as blocks:
        return await blocks.get_revisions(id)
