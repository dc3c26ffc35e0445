from __future__ import annotations

from typing import Any, Dict, Optional

from wordpress_mcp.core.errors import WordPressValidationError
from wordpress_mcp.core.models import MediaFilters, MediaPayload
from wordpress_mcp.core.resources.base import (
    PayloadInput,
    ResourceClient,
    expect_object,
    serialize_payload,
)


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def metadata_form_fields(metadata: PayloadInput) -> Dict[str, str]:
    """
    Flatten media metadata into multipart form fields.
    `meta` entries become `meta[key]` fields; null values are left out.
    """
    body = serialize_payload(MediaPayload, metadata)
    fields: Dict[str, str] = {}
    for key, value in body.items():
        if value is None:
            continue
        if isinstance(value, dict):
            for meta_key, meta_value in value.items():
                if meta_value is not None:
                    fields[f"{key}[{meta_key}]"] = _form_value(meta_value)
            continue
        fields[key] = _form_value(value)
    return fields


class MediaClient(ResourceClient):
    resource = "media"
    path = "/wp/v2/media"
    filters_model = MediaFilters
    update_model = MediaPayload

    async def create(self, payload: PayloadInput) -> Dict[str, Any]:
        raise WordPressValidationError(
            "Media items are created from file content; use upload() instead."
        )

    async def upload(
        self,
        content: bytes,
        filename: str,
        metadata: PayloadInput = None,
        *,
        content_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Upload decoded file bytes as a new media item.
        Metadata (title, caption, alt_text, ...) travels in the same multipart
        request, so the item is created with it in one call.
        """
        if not isinstance(content, (bytes, bytearray)):
            raise WordPressValidationError(
                f"Media content must be bytes, got {type(content).__name__}"
            )
        fields = metadata_form_fields(metadata)
        data = await self.client.upload(
            self.path,
            content=bytes(content),
            filename=filename,
            content_type=content_type,
            fields=fields,
            tool=self.resource,
        )
        return expect_object(data, what="uploaded media")


__all__ = ["MediaClient", "metadata_form_fields"]
