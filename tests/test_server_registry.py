import inspect
from types import ModuleType

import pytest
import respx
from mcp.server.fastmcp import FastMCP
from wordpress_mcp.core.config import SiteConfig, SiteResolver
from wordpress_mcp.core.errors import WordPressValidationError
from wordpress_mcp.core.registry import (
    discover_tool_modules,
    register_discovered_tools,
)


def _make_module(name: str, code: str) -> ModuleType:
    module = ModuleType(name)
    exec(code, module.__dict__)
    return module


def _sites() -> SiteResolver:
    config = SiteConfig(
        url="https://mock-wp.com", username="user", auth="pass", auth_type="basic"
    )
    return SiteResolver({"default": config})


def _recording_app():
    app = FastMCP("test")
    registered = []

    def record_tool(name):
        def decorator(fn):
            registered.append((name, fn))
            return fn

        return decorator

    app.tool = record_tool  # type: ignore[attr-defined]
    return app, registered


@pytest.mark.asyncio
async def test_register_discovered_tools_registers_valid_tools_only():
    code = """
TOOL_PREFIX = "wp_fake"

async def tool_fn(sites, *, foo:int=1):
    return (sites.resolve().url, foo)

async def _private(sites):
    return None

async def wrong_first(arg1, sites):
    return None

def sync_func(sites):
    return None
"""
    mod = _make_module("fake_mod", code)
    app, registered = _recording_app()

    names = register_discovered_tools(app, _sites(), modules=[mod])

    assert names == ["wp_fake__tool_fn"]
    assert [n for n, _ in registered] == ["wp_fake__tool_fn"]

    # wrapper signature should not expose the resolver
    sig = inspect.signature(registered[0][1])
    assert "sites" not in sig.parameters

    result = await registered[0][1](foo=5)
    assert result == ("https://mock-wp.com", 5)


@pytest.mark.asyncio
async def test_missing_required_argument_is_rejected_before_any_request():
    code = """
TOOL_PREFIX = "wp_fake"

async def get_thing(sites, id: int, site: str = "default"):
    raise AssertionError("should not be called")
"""
    mod = _make_module("fake_required", code)
    app, registered = _recording_app()
    register_discovered_tools(app, _sites(), modules=[mod])

    with respx.mock(assert_all_called=False) as mock:
        with pytest.raises(WordPressValidationError) as excinfo:
            await registered[0][1](site="default")

    assert "wp_fake__get_thing" in str(excinfo.value)
    assert not mock.calls


def test_register_discovered_tools_duplicate_names_raise():
    code1 = "TOOL_PREFIX = 'wp_x'\nasync def tool_fn(sites): return None"
    code2 = "TOOL_PREFIX = 'wp_x'\nasync def tool_fn(sites): return None"
    mod1 = _make_module("mod1", code1)
    mod2 = _make_module("mod2", code2)

    app = FastMCP("test")

    with pytest.raises(ValueError):
        register_discovered_tools(app, _sites(), modules=[mod1, mod2])


def test_same_function_name_under_different_prefixes_is_allowed():
    mod1 = _make_module("mod1", "TOOL_PREFIX = 'wp_a'\nasync def get(sites): return None")
    mod2 = _make_module("mod2", "TOOL_PREFIX = 'wp_b'\nasync def get(sites): return None")
    app, _ = _recording_app()

    names = register_discovered_tools(app, _sites(), modules=[mod1, mod2])

    assert names == ["wp_a__get", "wp_b__get"]


def test_register_requires_tool_decorator():
    with pytest.raises(TypeError):
        register_discovered_tools(object(), _sites(), modules=[])


def test_builtin_tool_modules_register_expected_names():
    app, _ = _recording_app()

    names = register_discovered_tools(app, _sites())

    assert "wp_content__get_posts" in names
    assert "wp_content__get_block_revisions" in names
    assert "wp_media__upload" in names
    assert "wp_theme__activate" in names
    assert "wp_shop__get_sales" in names
    assert "wp_system__ping" in names
    assert "wp_media__decode_file_content" not in names
    assert len(names) == len(set(names))


def test_discover_tool_modules_skips_import_failures(monkeypatch, caplog):
    import importlib
    import pkgutil

    class Info:
        def __init__(self, name):
            self.name = name

    def fake_iter_modules(path, prefix):
        return [
            Info(prefix + "good"),
            Info(prefix + "bad"),
            Info(prefix + "_helpers"),
        ]

    good_mod = _make_module(
        "wordpress_mcp.core.tools.good", "async def tool_fn(sites): return None"
    )

    real_import_module = importlib.import_module

    def fake_import_module(name, *args, **kwargs):
        if name == "wordpress_mcp.core.tools.bad":
            raise ImportError("boom")
        if name == "wordpress_mcp.core.tools.good":
            return good_mod
        if name == "wordpress_mcp.core.tools._helpers":
            raise AssertionError("private modules are not imported")
        return real_import_module(name, *args, **kwargs)

    monkeypatch.setattr(pkgutil, "iter_modules", fake_iter_modules)
    monkeypatch.setattr(importlib, "import_module", fake_import_module)

    with caplog.at_level("ERROR"):
        modules = discover_tool_modules()

    assert [m.__name__ for m in modules] == ["wordpress_mcp.core.tools.good"]
    assert any("Failed importing tool module" in rec.message for rec in caplog.records)
