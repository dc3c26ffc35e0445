from __future__ import annotations

from typing import Any, Dict, List, Optional

from wordpress_mcp.core.config import DEFAULT_SITE_ALIAS, SiteResolver
from wordpress_mcp.core.factory import ResourceKind, open_client
from wordpress_mcp.core.models import ThemeCustomization, ThemeFilters

TOOL_PREFIX = "wp_theme"


async def list_themes(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[ThemeFilters] = None,
) -> List[Dict[str, Any]]:
    """Get a list of installed themes."""
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.list(filters)


async def get_theme(
    sites: SiteResolver, stylesheet: str, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Get one installed theme by stylesheet name."""
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.get(stylesheet)


async def get_active(
    sites: SiteResolver, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Get the currently active theme."""
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.get_active()


async def activate(
    sites: SiteResolver, stylesheet: str, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Activate a theme by stylesheet name."""
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.activate(stylesheet)


async def get_customization(
    sites: SiteResolver, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Get theme customization settings."""
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.get_customization()


async def update_customization(
    sites: SiteResolver,
    updates: ThemeCustomization,
    site: str = DEFAULT_SITE_ALIAS,
) -> Dict[str, Any]:
    """Update theme customization settings."""
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.update_customization(updates)


async def get_custom_css(
    sites: SiteResolver, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.get_custom_css()


async def update_custom_css(
    sites: SiteResolver, css: str, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Replace the theme's custom CSS."""
    async with open_client(sites, site, ResourceKind.THEMES) as themes:
        return await themes.update_custom_css(css)
