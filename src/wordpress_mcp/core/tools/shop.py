from __future__ import annotations

from typing import Any, Dict, List, Optional

from wordpress_mcp.core.client import JSONResult
from wordpress_mcp.core.config import DEFAULT_SITE_ALIAS, SiteResolver
from wordpress_mcp.core.factory import ResourceKind, open_client
from wordpress_mcp.core.models import (
    OrderFilters,
    OrderPayload,
    ProductFilters,
    ProductPayload,
    SalesReportQuery,
)

TOOL_PREFIX = "wp_shop"


async def get_products(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[ProductFilters] = None,
) -> List[Dict[str, Any]]:
    """Get a list of products with optional filters."""
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.list_products(filters)


async def get_product(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.get_product(id)


async def create_product(
    sites: SiteResolver, data: ProductPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Create a new product."""
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.create_product(data)


async def update_product(
    sites: SiteResolver, id: int, data: ProductPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Update an existing product. Only the supplied fields are changed."""
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.update_product(id, data)


async def delete_product(
    sites: SiteResolver,
    id: int,
    site: str = DEFAULT_SITE_ALIAS,
    force: Optional[bool] = None,
) -> Dict[str, Any]:
    """Delete a product. Without force the product goes to the trash."""
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.delete_product(id, force=force)


async def get_orders(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[OrderFilters] = None,
) -> List[Dict[str, Any]]:
    """Get a list of orders with optional filters."""
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.list_orders(filters)


async def get_order(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.get_order(id)


async def update_order(
    sites: SiteResolver, id: int, data: OrderPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Update an order, e.g. its status or customer note."""
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.update_order(id, data)


async def get_sales(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[SalesReportQuery] = None,
) -> JSONResult:
    """Get sales statistics for a period, date range, product or category."""
    async with open_client(sites, site, ResourceKind.SHOP) as shop:
        return await shop.get_sales_stats(filters)
