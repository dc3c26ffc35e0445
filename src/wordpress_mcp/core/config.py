from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generator, Iterable, Mapping, Optional, Tuple

import httpx
from dotenv import load_dotenv

from .errors import WordPressConfigurationError

DEFAULT_SITE_ALIAS = "default"
DEFAULT_TIMEOUT_SECONDS = 30.0
REST_PREFIX = "/wp-json"


class AuthType(str, Enum):
    BASIC = "basic"
    JWT = "jwt"
    QUERY = "query"


class BearerAuth(httpx.Auth):
    def __init__(self, token: str):
        self._token = token

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class QueryCredentialAuth(httpx.Auth):
    """WooCommerce consumer key/secret sent as query parameters."""

    def __init__(self, consumer_key: str, consumer_secret: str):
        self._key = consumer_key
        self._secret = consumer_secret

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.url = request.url.copy_merge_params(
            {"consumer_key": self._key, "consumer_secret": self._secret}
        )
        yield request


@dataclass(frozen=True)
class SiteConfig:
    """
    Connection settings for one WordPress site.
    - url: absolute base URL of the site (no /wp-json suffix)
    - username/auth: credential pair, interpreted according to auth_type
    Validated at construction; never mutated afterwards.
    """

    url: str
    username: str
    auth: str = field(repr=False)
    auth_type: AuthType = AuthType.BASIC

    def __post_init__(self) -> None:
        url = (self.url or "").strip().rstrip("/")
        if not url:
            raise WordPressConfigurationError("Site url must be provided.")
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise WordPressConfigurationError(f"Invalid site url: {url!r}") from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise WordPressConfigurationError(
                f"Site url must be an absolute http(s) URL, got {url!r}"
            )
        if "?" in url or "#" in url:
            raise WordPressConfigurationError(
                f"Site url must not carry a query string or fragment, got {url!r}"
            )

        try:
            auth_type = AuthType(self.auth_type)
        except ValueError as exc:
            supported = ", ".join(a.value for a in AuthType)
            raise WordPressConfigurationError(
                f"Unsupported auth type {self.auth_type!r} (expected one of: {supported})"
            ) from exc

        if not self.auth:
            raise WordPressConfigurationError("Site auth secret must be provided.")
        if auth_type is not AuthType.JWT and not self.username:
            raise WordPressConfigurationError(
                f"Site username must be provided for auth type {auth_type.value!r}."
            )

        # frozen dataclass: normalized values are written through object.__setattr__
        object.__setattr__(self, "url", url)
        object.__setattr__(self, "auth_type", auth_type)

    @property
    def rest_url(self) -> str:
        return self.url + REST_PREFIX

    def httpx_auth(self) -> httpx.Auth:
        if self.auth_type is AuthType.BASIC:
            return httpx.BasicAuth(self.username, self.auth)
        if self.auth_type is AuthType.JWT:
            return BearerAuth(self.auth)
        return QueryCredentialAuth(self.username, self.auth)


class SiteResolver:
    """Read-only alias -> SiteConfig lookup."""

    def __init__(
        self,
        sites: Mapping[str, SiteConfig],
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._sites: Dict[str, SiteConfig] = dict(sites)
        self.timeout_seconds = timeout_seconds

    def resolve(self, alias: Optional[str] = None) -> SiteConfig:
        alias = alias or DEFAULT_SITE_ALIAS
        try:
            return self._sites[alias]
        except KeyError:
            known = ", ".join(sorted(self._sites)) or "none"
            raise WordPressConfigurationError(
                f"Unknown site alias {alias!r} (configured: {known})"
            ) from None

    @property
    def aliases(self) -> Tuple[str, ...]:
        return tuple(sorted(self._sites))

    def __contains__(self, alias: object) -> bool:
        return alias in self._sites

    def __len__(self) -> int:
        return len(self._sites)


def _env_key(alias: str) -> str:
    return alias.strip().upper().replace("-", "_")


def _site_from_env(prefix: str) -> SiteConfig:
    return SiteConfig(
        url=os.getenv(f"{prefix}_URL", "").strip(),
        username=os.getenv(f"{prefix}_USERNAME", "").strip(),
        auth=os.getenv(f"{prefix}_PASSWORD", "").strip(),
        auth_type=os.getenv(f"{prefix}_AUTH_TYPE", AuthType.BASIC.value)
        .strip()
        .lower(),
    )


def _split_aliases(raw: str) -> Iterable[str]:
    return [a.strip() for a in raw.split(",") if a.strip()]


def load_sites_from_env(*, use_dotenv: bool = True) -> SiteResolver:
    """
    Build a SiteResolver from environment variables (optional .env).

    WORDPRESS_SITES=blog,shop selects WORDPRESS_BLOG_URL, WORDPRESS_BLOG_USERNAME,
    WORDPRESS_BLOG_PASSWORD, WORDPRESS_BLOG_AUTH_TYPE (and so on per alias);
    WORDPRESS_DEFAULT_SITE picks the alias served as "default" (first listed
    otherwise).
    Without WORDPRESS_SITES a single "default" site is read from WORDPRESS_URL,
    WORDPRESS_USERNAME, WORDPRESS_PASSWORD and WORDPRESS_AUTH_TYPE.
    """
    if use_dotenv:
        load_dotenv()

    raw_timeout = os.getenv("WORDPRESS_TIMEOUT_SECONDS", "").strip()
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
    except ValueError as exc:
        raise WordPressConfigurationError(
            f"WORDPRESS_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
        ) from exc

    aliases = list(_split_aliases(os.getenv("WORDPRESS_SITES", "")))
    if not aliases:
        return SiteResolver(
            {DEFAULT_SITE_ALIAS: _site_from_env("WORDPRESS")},
            timeout_seconds=timeout,
        )

    sites = {
        alias: _site_from_env(f"WORDPRESS_{_env_key(alias)}") for alias in aliases
    }

    default_alias = os.getenv("WORDPRESS_DEFAULT_SITE", "").strip() or aliases[0]
    if default_alias not in sites:
        raise WordPressConfigurationError(
            f"WORDPRESS_DEFAULT_SITE {default_alias!r} is not listed in WORDPRESS_SITES"
        )
    sites.setdefault(DEFAULT_SITE_ALIAS, sites[default_alias])
    return SiteResolver(sites, timeout_seconds=timeout)


__all__ = [
    "AuthType",
    "BearerAuth",
    "QueryCredentialAuth",
    "SiteConfig",
    "SiteResolver",
    "DEFAULT_SITE_ALIAS",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_sites_from_env",
]
