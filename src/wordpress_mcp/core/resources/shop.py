"""WooCommerce products, orders and sales reports (/wc/v3)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from wordpress_mcp.core.client import JSONResult, WordPressClient
from wordpress_mcp.core.models import (
    OrderFilters,
    OrderPayload,
    ProductFilters,
    ProductPayload,
    SalesReportQuery,
)
from wordpress_mcp.core.resources.base import (
    FilterInput,
    PayloadInput,
    ResourceClient,
    serialize_filters,
)

SHOP_PATH = "/wc/v3"


class ProductsClient(ResourceClient):
    resource = "products"
    path = f"{SHOP_PATH}/products"
    filters_model = ProductFilters
    create_model = ProductPayload


class OrdersClient(ResourceClient):
    resource = "orders"
    path = f"{SHOP_PATH}/orders"
    filters_model = OrderFilters
    create_model = OrderPayload


class ShopClient:
    """
    Facade over the shop resources. All parts share one transport, which must
    be fully constructed by the caller.
    """

    def __init__(
        self,
        client: WordPressClient,
        *,
        products: Optional[ProductsClient] = None,
        orders: Optional[OrdersClient] = None,
    ):
        self.client = client
        self.products = products or ProductsClient(client)
        self.orders = orders or OrdersClient(client)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "ShopClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def list_products(self, filters: FilterInput = None) -> List[Dict[str, Any]]:
        return await self.products.list(filters)

    async def get_product(self, product_id: int) -> Dict[str, Any]:
        return await self.products.get(product_id)

    async def create_product(self, payload: PayloadInput) -> Dict[str, Any]:
        return await self.products.create(payload)

    async def update_product(
        self, product_id: int, payload: PayloadInput
    ) -> Dict[str, Any]:
        return await self.products.update(product_id, payload)

    async def delete_product(
        self, product_id: int, *, force: Optional[bool] = None
    ) -> Dict[str, Any]:
        return await self.products.delete(product_id, force=force)

    async def list_orders(self, filters: FilterInput = None) -> List[Dict[str, Any]]:
        return await self.orders.list(filters)

    async def get_order(self, order_id: int) -> Dict[str, Any]:
        return await self.orders.get(order_id)

    async def update_order(self, order_id: int, payload: PayloadInput) -> Dict[str, Any]:
        return await self.orders.update(order_id, payload)

    async def get_sales_stats(self, query: FilterInput = None) -> JSONResult:
        """Aggregate sales report; the backend's report rows are returned as-is."""
        params = serialize_filters(SalesReportQuery, query)
        return await self.client.get(
            f"{SHOP_PATH}/reports/sales", params=params, tool="sales"
        )


__all__ = ["ShopClient", "ProductsClient", "OrdersClient", "SHOP_PATH"]
