from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from wordpress_mcp.core.errors import WordPressNotFoundError, WordPressValidationError
from wordpress_mcp.core.models import ThemeCustomization, ThemeFilters
from wordpress_mcp.core.resources.base import (
    PayloadInput,
    ResourceClient,
    expect_list,
    expect_object,
    serialize_filters,
    serialize_payload,
)

SETTINGS_PATH = "/wp/v2/settings"

_STYLESHEET_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")

# Customization names that core WordPress stores under a different setting key.
_SETTING_KEYS = {"site_title": "title", "blogdescription": "description"}


def check_stylesheet(stylesheet: Any) -> str:
    if not isinstance(stylesheet, str) or not _STYLESHEET_RE.fullmatch(stylesheet):
        raise WordPressValidationError(
            f"Invalid theme stylesheet: expected a theme directory slug, got {stylesheet!r}"
        )
    return stylesheet


class ThemesClient(ResourceClient):
    """
    Installed themes are addressed by stylesheet (directory slug), not numeric
    id. Activation is a state transition; customization patches a fixed set of
    site settings.
    """

    resource = "themes"
    path = "/wp/v2/themes"
    filters_model = ThemeFilters

    async def get(self, stylesheet: str) -> Dict[str, Any]:  # type: ignore[override]
        data = await self.client.get(
            f"{self.path}/{check_stylesheet(stylesheet)}", tool=self.resource
        )
        return expect_object(data, what="theme")

    async def delete(self, item_id: Any, *, force: Optional[bool] = None) -> Dict[str, Any]:
        raise WordPressValidationError("Themes cannot be deleted through this client.")

    async def get_active(self) -> Dict[str, Any]:
        params = serialize_filters(ThemeFilters, {"status": "active"})
        data = await self.client.get(self.path, params=params, tool=self.resource)
        themes: List[Any] = expect_list(data, what="themes")
        if not themes:
            raise WordPressNotFoundError(
                status_code=404,
                method="GET",
                url=self.client.base_url + self.path,
                message="The site reported no active theme.",
            )
        return expect_object(themes[0], what="active theme")

    async def activate(self, stylesheet: str) -> Dict[str, Any]:
        data = await self.client.post(
            f"{self.path}/{check_stylesheet(stylesheet)}",
            json={"status": "active"},
            tool=self.resource,
        )
        return expect_object(data, what="theme")

    async def get_customization(self) -> Dict[str, Any]:
        data = await self.client.get(SETTINGS_PATH, tool=self.resource)
        return expect_object(data, what="theme customization")

    async def update_customization(self, updates: PayloadInput) -> Dict[str, Any]:
        body = serialize_payload(ThemeCustomization, updates)
        body = {_SETTING_KEYS.get(k, k): v for k, v in body.items()}
        data = await self.client.patch(SETTINGS_PATH, json=body, tool=self.resource)
        return expect_object(data, what="theme customization")

    async def get_custom_css(self) -> Dict[str, Any]:
        settings = await self.get_customization()
        return {"custom_css": settings.get("custom_css") or ""}

    async def update_custom_css(self, css: str) -> Dict[str, Any]:
        if not isinstance(css, str):
            raise WordPressValidationError(
                f"Custom CSS must be a string, got {type(css).__name__}"
            )
        settings = await self.update_customization({"custom_css": css})
        return {"custom_css": settings.get("custom_css", css)}


__all__ = ["ThemesClient", "SETTINGS_PATH", "check_stylesheet"]
