from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
import time
from types import ModuleType
from typing import Callable, Iterable, List, Set, get_type_hints

from .config import SiteResolver
from .errors import WordPressClientError, WordPressValidationError
from .observability import log_event

log = logging.getLogger("wordpress_mcp.core.registry")

INJECTED_PARAM = "sites"


# --- Discovery helpers ----------------------------------------------------- #


def discover_tool_modules(
    package_name: str = "wordpress_mcp.core.tools",
) -> List[ModuleType]:
    """Import all modules under the given tools package, skipping failures."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        name = finder.name
        if name.rsplit(".", 1)[-1].startswith("_"):
            continue
        try:
            module = importlib.import_module(name)
            modules.append(module)
        except Exception as exc:  # pragma: no cover - logged, not fatal
            log.error("Failed importing tool module %s: %s", name, exc)
            continue

    return modules


def iter_tool_functions(module: ModuleType) -> Iterable[Callable]:
    """Yield public coroutine functions whose first parameter is `sites`."""
    for _, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            # Skip imported functions
            continue

        params = list(inspect.signature(func).parameters.values())
        if not params or params[0].name != INJECTED_PARAM:
            log.debug(
                "Skipping %s.%s: first parameter must be '%s'",
                module.__name__,
                func.__name__,
                INJECTED_PARAM,
            )
            continue

        yield func


def tool_name(module: ModuleType, func: Callable) -> str:
    prefix = getattr(module, "TOOL_PREFIX", None)
    return f"{prefix}__{func.__name__}" if prefix else func.__name__


# --- Wrapping / registration ---------------------------------------------- #


def _wrap_tool(
    func: Callable, sites_provider: Callable[[], SiteResolver], name: str
) -> Callable:
    """
    Return a wrapper that injects the site resolver and hides it from the
    signature. Arguments are bound against the exposed signature first, so a
    call missing a required argument is rejected without touching the network.
    """
    original_sig = inspect.signature(func)
    type_hints = get_type_hints(func)

    new_params = []
    for i, (pname, param) in enumerate(original_sig.parameters.items()):
        if i == 0 and pname == INJECTED_PARAM:
            continue  # drop injected resolver
        ann = type_hints.get(pname, param.annotation)
        new_params.append(param.replace(annotation=ann))

    return_ann = type_hints.get("return", original_sig.return_annotation)
    new_sig = inspect.Signature(parameters=new_params, return_annotation=return_ann)

    async def wrapped(*args, **kwargs):
        try:
            bound = new_sig.bind(*args, **kwargs)
        except TypeError as exc:
            raise WordPressValidationError(f"Invalid arguments for {name}: {exc}") from exc
        bound.apply_defaults()
        site = bound.arguments.get("site")

        start = time.perf_counter()
        try:
            result = await func(sites_provider(), *args, **kwargs)
        except WordPressClientError as exc:
            log_event(
                "tool.error",
                level=logging.WARNING,
                tool=name,
                site=site,
                status=exc.status_code,
                error_kind=exc.kind,
                duration_ms=int((time.perf_counter() - start) * 1000),
            )
            raise
        log_event(
            "tool.call",
            tool=name,
            site=site,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        return result

    wrapped.__name__ = func.__name__
    wrapped.__qualname__ = func.__qualname__
    wrapped.__doc__ = func.__doc__
    wrapped.__module__ = func.__module__
    wrapped.__signature__ = new_sig  # type: ignore[attr-defined]
    return wrapped


def register_discovered_tools(
    app,
    sites_provider: Callable[[], SiteResolver] | SiteResolver,
    modules: List[ModuleType] | None = None,
) -> List[str]:
    """Register discovered tools on an app that exposes a .tool decorator."""
    if isinstance(sites_provider, SiteResolver):
        _sites = sites_provider

        def sites_provider():
            return _sites

    if not hasattr(app, "tool"):
        raise TypeError("app must expose a 'tool' decorator")

    modules = modules or discover_tool_modules()
    seen_names: Set[str] = set()
    registered: List[str] = []

    for module in modules:
        for func in iter_tool_functions(module):
            name = tool_name(module, func)
            if name in seen_names:
                raise ValueError(f"Duplicate tool name detected: {name}")

            wrapped = _wrap_tool(func, sites_provider, name)
            app.tool(name=name)(wrapped)
            seen_names.add(name)
            registered.append(name)
            log.info("Registered tool: %s (%s)", name, module.__name__)

    return registered


__all__ = [
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
    "tool_name",
]
