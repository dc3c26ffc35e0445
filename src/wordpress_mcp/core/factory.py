from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Type, Union

import httpx

from .client import WordPressClient
from .config import DEFAULT_TIMEOUT_SECONDS, SiteConfig, SiteResolver
from .resources import (
    BlocksClient,
    MediaClient,
    PagesClient,
    PostsClient,
    ShopClient,
    ThemesClient,
)
from .resources.base import ResourceClient

log = logging.getLogger("wordpress_mcp.factory")

AnyResourceClient = Union[ResourceClient, ShopClient]


class ResourceKind(str, Enum):
    POSTS = "posts"
    PAGES = "pages"
    MEDIA = "media"
    BLOCKS = "blocks"
    THEMES = "themes"
    SHOP = "shop"


CLIENT_TYPES: Dict[ResourceKind, Type[AnyResourceClient]] = {
    ResourceKind.POSTS: PostsClient,
    ResourceKind.PAGES: PagesClient,
    ResourceKind.MEDIA: MediaClient,
    ResourceKind.BLOCKS: BlocksClient,
    ResourceKind.THEMES: ThemesClient,
    ResourceKind.SHOP: ShopClient,
}


def _resource_kind(kind: Union[ResourceKind, str]) -> ResourceKind:
    try:
        return ResourceKind(kind)
    except ValueError:
        known = ", ".join(k.value for k in ResourceKind)
        raise ValueError(
            f"Unknown resource kind {kind!r} (expected one of: {known})"
        ) from None


def create_client(
    kind: Union[ResourceKind, str],
    config: SiteConfig,
    *,
    site: Optional[str] = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    http: Optional[httpx.AsyncClient] = None,
) -> AnyResourceClient:
    """
    Build the resource client for `kind`, pointed at `config`.
    No network I/O happens here. Unknown kinds raise ValueError.
    """
    client_cls = CLIENT_TYPES[_resource_kind(kind)]
    transport = WordPressClient(
        config, site=site, timeout_seconds=timeout_seconds, http=http
    )
    return client_cls(transport)


def open_client(
    sites: SiteResolver,
    site: Optional[str],
    kind: Union[ResourceKind, str],
    *,
    http: Optional[httpx.AsyncClient] = None,
) -> AnyResourceClient:
    """Resolve a site alias and build the resource client for it."""
    resource_kind = _resource_kind(kind)
    config = sites.resolve(site)
    log.debug("Opening %s client for site %s", resource_kind.value, site)
    return create_client(
        resource_kind,
        config,
        site=site,
        timeout_seconds=sites.timeout_seconds,
        http=http,
    )


__all__ = ["ResourceKind", "CLIENT_TYPES", "create_client", "open_client"]
