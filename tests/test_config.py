import base64

import httpx
import pytest
from wordpress_mcp.core.config import (
    DEFAULT_SITE_ALIAS,
    AuthType,
    BearerAuth,
    QueryCredentialAuth,
    SiteConfig,
    SiteResolver,
    load_sites_from_env,
)
from wordpress_mcp.core.errors import WordPressConfigurationError

ENV_VARS = (
    "WORDPRESS_SITES",
    "WORDPRESS_DEFAULT_SITE",
    "WORDPRESS_URL",
    "WORDPRESS_USERNAME",
    "WORDPRESS_PASSWORD",
    "WORDPRESS_AUTH_TYPE",
    "WORDPRESS_TIMEOUT_SECONDS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_site_config_normalizes_url_and_auth_type():
    config = SiteConfig(
        url="https://example.com/", username="user", auth="pass", auth_type="basic"
    )

    assert config.url == "https://example.com"
    assert config.rest_url == "https://example.com/wp-json"
    assert config.auth_type is AuthType.BASIC


def test_site_config_repr_hides_secret():
    config = SiteConfig(url="https://example.com", username="user", auth="s3cret")
    assert "s3cret" not in repr(config)


def test_site_config_is_immutable():
    config = SiteConfig(url="https://example.com", username="user", auth="pass")
    with pytest.raises(AttributeError):
        config.url = "https://other.example"  # type: ignore[misc]


@pytest.mark.parametrize(
    "url",
    [
        "",
        "example.com",
        "ftp://example.com",
        "https://",
        "   ",
        "https://example.com/?x=1",
        "https://example.com/blog#top",
        "https://example.com/?",
    ],
)
def test_site_config_rejects_malformed_url(url):
    with pytest.raises(WordPressConfigurationError):
        SiteConfig(url=url, username="user", auth="pass")


def test_site_config_rejects_unknown_auth_type():
    with pytest.raises(WordPressConfigurationError) as exc:
        SiteConfig(
            url="https://example.com", username="user", auth="pass", auth_type="oauth"
        )
    assert "basic" in str(exc.value)


def test_site_config_requires_secret_and_username():
    with pytest.raises(WordPressConfigurationError):
        SiteConfig(url="https://example.com", username="user", auth="")
    with pytest.raises(WordPressConfigurationError):
        SiteConfig(url="https://example.com", username="", auth="pass")
    # bearer tokens don't need a username
    SiteConfig(url="https://example.com", username="", auth="tok", auth_type="jwt")


def test_httpx_auth_per_scheme():
    basic = SiteConfig(url="https://example.com", username="u", auth="p")
    jwt = SiteConfig(url="https://example.com", username="", auth="t", auth_type="jwt")
    query = SiteConfig(
        url="https://example.com", username="ck", auth="cs", auth_type=AuthType.QUERY
    )

    assert isinstance(basic.httpx_auth(), httpx.BasicAuth)
    assert isinstance(jwt.httpx_auth(), BearerAuth)
    assert isinstance(query.httpx_auth(), QueryCredentialAuth)

    request = httpx.Request("GET", "https://example.com/wp-json/")
    flow = basic.httpx_auth().sync_auth_flow(request)
    sent = next(flow)
    assert sent.headers["Authorization"] == "Basic " + base64.b64encode(b"u:p").decode()


def test_resolver_unknown_alias_is_configuration_error():
    config = SiteConfig(url="https://example.com", username="u", auth="p")
    resolver = SiteResolver({"blog": config})

    assert resolver.resolve("blog") is config
    with pytest.raises(WordPressConfigurationError) as exc:
        resolver.resolve("shop")
    assert "blog" in str(exc.value)


def test_resolver_none_uses_default_alias():
    config = SiteConfig(url="https://example.com", username="u", auth="p")
    resolver = SiteResolver({DEFAULT_SITE_ALIAS: config})

    assert resolver.resolve(None) is config


def test_load_single_site_from_env(clean_env):
    clean_env.setenv("WORDPRESS_URL", "https://blog.example.com")
    clean_env.setenv("WORDPRESS_USERNAME", "editor")
    clean_env.setenv("WORDPRESS_PASSWORD", "app pass word")

    resolver = load_sites_from_env(use_dotenv=False)

    assert resolver.aliases == (DEFAULT_SITE_ALIAS,)
    config = resolver.resolve()
    assert config.url == "https://blog.example.com"
    assert config.auth_type is AuthType.BASIC
    assert resolver.timeout_seconds == 30.0


def test_load_multiple_sites_from_env(clean_env):
    clean_env.setenv("WORDPRESS_SITES", "blog, my-shop")
    clean_env.setenv("WORDPRESS_DEFAULT_SITE", "my-shop")
    clean_env.setenv("WORDPRESS_BLOG_URL", "https://blog.example.com")
    clean_env.setenv("WORDPRESS_BLOG_USERNAME", "editor")
    clean_env.setenv("WORDPRESS_BLOG_PASSWORD", "pw")
    clean_env.setenv("WORDPRESS_MY_SHOP_URL", "https://shop.example.com")
    clean_env.setenv("WORDPRESS_MY_SHOP_USERNAME", "ck_1")
    clean_env.setenv("WORDPRESS_MY_SHOP_PASSWORD", "cs_1")
    clean_env.setenv("WORDPRESS_MY_SHOP_AUTH_TYPE", "QUERY")
    clean_env.setenv("WORDPRESS_TIMEOUT_SECONDS", "5")

    resolver = load_sites_from_env(use_dotenv=False)

    assert set(resolver.aliases) == {"blog", "my-shop", DEFAULT_SITE_ALIAS}
    assert resolver.resolve("my-shop").auth_type is AuthType.QUERY
    assert resolver.resolve() is resolver.resolve("my-shop")
    assert resolver.timeout_seconds == 5.0


def test_load_sites_missing_values_fail_fast(clean_env):
    clean_env.setenv("WORDPRESS_SITES", "blog")

    with pytest.raises(WordPressConfigurationError):
        load_sites_from_env(use_dotenv=False)


def test_load_sites_bad_timeout(clean_env):
    clean_env.setenv("WORDPRESS_URL", "https://blog.example.com")
    clean_env.setenv("WORDPRESS_USERNAME", "editor")
    clean_env.setenv("WORDPRESS_PASSWORD", "pw")
    clean_env.setenv("WORDPRESS_TIMEOUT_SECONDS", "soon")

    with pytest.raises(WordPressConfigurationError):
        load_sites_from_env(use_dotenv=False)
