import time

from wordpress_mcp.core.client import WordPressClient
from wordpress_mcp.core.config import DEFAULT_SITE_ALIAS, SiteResolver

TOOL_PREFIX = "wp_system"


async def ping(sites: SiteResolver, site: str = DEFAULT_SITE_ALIAS) -> dict:
    """
    Simple connectivity and latency check against a site's REST API index.
    Returns status plus the site's name and the REST namespaces it serves.
    """
    config = sites.resolve(site)
    start = time.perf_counter()

    async with WordPressClient(
        config, site=site, timeout_seconds=sites.timeout_seconds
    ) as client:
        index = await client.get("/", tool="ping")

    latency_ms = (time.perf_counter() - start) * 1000
    index = index if isinstance(index, dict) else {}
    namespaces = index.get("namespaces") or []

    return {
        "status": "ok",
        "latency_ms": round(latency_ms, 2),
        "site": site,
        "name": index.get("name", "Unknown"),
        "url": config.url,
        "namespaces": namespaces,
        "shop_enabled": "wc/v3" in namespaces,
    }
