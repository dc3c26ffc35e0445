"""Core domain surface for wordpress-mcp (transport-agnostic)."""

from .errors import (
    WordPressBackendRejectedError,
    WordPressClientError,
    WordPressConfigurationError,
    WordPressHTTPError,
    WordPressNotFoundError,
    WordPressParseError,
    WordPressTransportError,
    WordPressValidationError,
)
from .config import (
    DEFAULT_SITE_ALIAS,
    AuthType,
    SiteConfig,
    SiteResolver,
    load_sites_from_env,
)
from .client import WordPressClient
from .resources import (
    BlocksClient,
    MediaClient,
    OrdersClient,
    PagesClient,
    PostsClient,
    ProductsClient,
    ResourceClient,
    ShopClient,
    ThemesClient,
)
from .factory import ResourceKind, create_client, open_client
from .registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
)

__all__ = [
    # Config
    "AuthType",
    "SiteConfig",
    "SiteResolver",
    "DEFAULT_SITE_ALIAS",
    "load_sites_from_env",
    # Client
    "WordPressClient",
    # Exceptions
    "WordPressClientError",
    "WordPressConfigurationError",
    "WordPressValidationError",
    "WordPressHTTPError",
    "WordPressNotFoundError",
    "WordPressBackendRejectedError",
    "WordPressTransportError",
    "WordPressParseError",
    # Resource clients
    "ResourceClient",
    "PostsClient",
    "PagesClient",
    "MediaClient",
    "BlocksClient",
    "ThemesClient",
    "ShopClient",
    "ProductsClient",
    "OrdersClient",
    # Factory
    "ResourceKind",
    "create_client",
    "open_client",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
]
