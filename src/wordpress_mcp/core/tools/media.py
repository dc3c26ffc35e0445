from __future__ import annotations

import base64
import binascii
import re
from typing import Any, Dict, List, Optional, Tuple

from wordpress_mcp.core.config import DEFAULT_SITE_ALIAS, SiteResolver
from wordpress_mcp.core.errors import WordPressValidationError
from wordpress_mcp.core.factory import ResourceKind, open_client
from wordpress_mcp.core.models import MediaFilters, MediaPayload

TOOL_PREFIX = "wp_media"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[^;,]*)(?:;[^,]*)?,(?P<data>.*)$", re.DOTALL)


def decode_file_content(file: str) -> Tuple[bytes, Optional[str]]:
    """
    Decode base64 file content, optionally wrapped in a data URL.
    Returns (bytes, mime type from the data URL or None).
    """
    mime: Optional[str] = None
    payload = file.strip()
    match = _DATA_URL_RE.match(payload)
    if match:
        mime = match.group("mime") or None
        payload = match.group("data")

    try:
        content = base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise WordPressValidationError(f"Invalid base64 file content: {exc}") from exc

    if not content:
        raise WordPressValidationError("File content is empty; refusing to upload.")
    return content, mime


async def get_media(
    sites: SiteResolver,
    site: str = DEFAULT_SITE_ALIAS,
    filters: Optional[MediaFilters] = None,
) -> List[Dict[str, Any]]:
    """Get a list of media items with optional filters."""
    async with open_client(sites, site, ResourceKind.MEDIA) as media:
        return await media.list(filters)


async def get_media_item(
    sites: SiteResolver, id: int, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Get a single media item by ID."""
    async with open_client(sites, site, ResourceKind.MEDIA) as media:
        return await media.get(id)


async def upload(
    sites: SiteResolver,
    file: str,
    filename: str,
    site: str = DEFAULT_SITE_ALIAS,
    data: Optional[MediaPayload] = None,
    content_type: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Upload a new media file.
    `file` is base64 content (a data: URL is accepted too); `data` holds
    optional metadata such as title, caption and alt_text.
    """
    content, data_url_mime = decode_file_content(file)
    async with open_client(sites, site, ResourceKind.MEDIA) as media:
        return await media.upload(
            content,
            filename,
            data,
            content_type=content_type or data_url_mime,
        )


async def update(
    sites: SiteResolver, id: int, data: MediaPayload, site: str = DEFAULT_SITE_ALIAS
) -> Dict[str, Any]:
    """Update media item metadata."""
    async with open_client(sites, site, ResourceKind.MEDIA) as media:
        return await media.update(id, data)


async def delete(
    sites: SiteResolver,
    id: int,
    site: str = DEFAULT_SITE_ALIAS,
    force: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Delete a media item. `force` bypasses the trash; when omitted the site's
    own default applies (core WordPress refuses to trash attachments).
    """
    async with open_client(sites, site, ResourceKind.MEDIA) as media:
        return await media.delete(id, force=force)
