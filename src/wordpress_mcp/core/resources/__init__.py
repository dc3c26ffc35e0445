"""Resource clients, one per backend content family."""

from .base import ResourceClient, RevisionsMixin, serialize_filters, serialize_payload
from .content import BlocksClient, PagesClient, PostsClient
from .media import MediaClient
from .shop import OrdersClient, ProductsClient, ShopClient
from .themes import ThemesClient

__all__ = [
    "ResourceClient",
    "RevisionsMixin",
    "serialize_filters",
    "serialize_payload",
    "PostsClient",
    "PagesClient",
    "BlocksClient",
    "MediaClient",
    "ThemesClient",
    "ShopClient",
    "ProductsClient",
    "OrdersClient",
]
