"""wordpress_mcp package exports."""

from .core import (
    AuthType,
    BlocksClient,
    MediaClient,
    PagesClient,
    PostsClient,
    ResourceKind,
    ShopClient,
    SiteConfig,
    SiteResolver,
    ThemesClient,
    WordPressBackendRejectedError,
    WordPressClient,
    WordPressClientError,
    WordPressConfigurationError,
    WordPressHTTPError,
    WordPressNotFoundError,
    WordPressParseError,
    WordPressTransportError,
    WordPressValidationError,
    create_client,
    load_sites_from_env,
    open_client,
)

__all__ = [
    # Config
    "AuthType",
    "SiteConfig",
    "SiteResolver",
    "load_sites_from_env",
    # Clients
    "WordPressClient",
    "PostsClient",
    "PagesClient",
    "MediaClient",
    "BlocksClient",
    "ThemesClient",
    "ShopClient",
    "ResourceKind",
    "create_client",
    "open_client",
    # Exceptions
    "WordPressClientError",
    "WordPressConfigurationError",
    "WordPressValidationError",
    "WordPressHTTPError",
    "WordPressNotFoundError",
    "WordPressBackendRejectedError",
    "WordPressTransportError",
    "WordPressParseError",
]
