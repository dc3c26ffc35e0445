"""
Tool namespace for WordPress MCP.

Each module declares TOOL_PREFIX; its public coroutine functions taking
`sites` first are registered as `<TOOL_PREFIX>__<function name>`.
"""

from . import content, media, shop, system, themes

__all__ = ["content", "media", "shop", "system", "themes"]
