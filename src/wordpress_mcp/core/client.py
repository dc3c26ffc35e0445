import logging
import mimetypes
import time
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import httpx

from .config import DEFAULT_TIMEOUT_SECONDS, SiteConfig
from .errors import (
    WordPressBackendRejectedError,
    WordPressHTTPError,
    WordPressNotFoundError,
    WordPressParseError,
    WordPressTransportError,
    WordPressValidationError,
)

USER_AGENT = "wordpress-mcp/0.1"

QueryParams = Union[Dict[str, Any], Sequence[Tuple[str, str]]]
JSONResult = Union[Dict[str, Any], List[Any]]


class WordPressClient:
    """
    Shared HTTP client for the WordPress / WooCommerce REST API.
    - Handles auth, base URL (<site>/wp-json) and timeouts
    - One request per call, no retries; retry policy belongs to the caller
    - Normalizes every failure into the WordPressClientError hierarchy
    - No business logic; resource clients own paths and payload shapes
    """

    def __init__(
        self,
        config: SiteConfig,
        *,
        site: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.site = site
        self.base_url = config.rest_url
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("wordpress_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            auth=config.httpx_auth(),
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            timeout=timeout_seconds,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "WordPressClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        json: Optional[Any] = None,
        files: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        tool: Optional[str] = None,
    ) -> JSONResult:
        """
        Core request method.
        - Raises WordPressNotFoundError on 404, WordPressBackendRejectedError on
          any other non-2xx response
        - Raises WordPressTransportError when no response was received
        - Raises WordPressParseError if the body isn't JSON
        - Returns the parsed JSON object or array ({} for empty bodies)
        """
        method = method.upper()
        start = time.perf_counter()

        kwargs: Dict[str, Any] = {"params": params}
        if json is not None:
            kwargs["json"] = json
        if files is not None:
            kwargs["files"] = files
        if data is not None:
            kwargs["data"] = data

        try:
            resp = await self.http.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise WordPressTransportError(
                f"Timed out calling {method} {path}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise WordPressTransportError(
                f"Network error calling {method} {path}: {exc}"
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "wp.upload" if files is not None else "wp.request",
            extra={
                "site": self.site,
                "tool": tool,
                "method": method,
                "url": str(resp.request.url.copy_with(query=None)),
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp, method=method)

        return self._safe_json(resp)

    def _safe_json(self, resp: httpx.Response) -> JSONResult:
        # 204 No Content and friends
        if not resp.content:
            return {}

        try:
            data = resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise WordPressParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url.path}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

        if not isinstance(data, (dict, list)):
            raise WordPressParseError(
                f"Expected JSON object or array from "
                f"{resp.request.method} {resp.request.url.path}, "
                f"got {type(data).__name__}"
            )
        return data

    def _to_http_error(
        self, resp: httpx.Response, *, method: str
    ) -> WordPressHTTPError:
        # Drop the query so consumer_secret style credentials never leak.
        url = str(resp.request.url.copy_with(query=None))
        response_json: Optional[Dict[str, Any]] = None
        response_text: Optional[str] = None
        message = resp.reason_phrase or "request failed"
        code: Optional[str] = None

        try:
            parsed = resp.json()
            if isinstance(parsed, dict):
                response_json = parsed
                # WordPress errors look like {"code", "message", "data": {"status"}}
                message = parsed.get("message") or parsed.get("error") or message
                code = parsed.get("code")
        except ValueError:
            response_text = (resp.text or "")[:500]

        error_cls = (
            WordPressNotFoundError
            if resp.status_code == 404
            else WordPressBackendRejectedError
        )
        return error_cls(
            status_code=resp.status_code,
            method=method,
            url=url,
            message=str(message),
            code=code if isinstance(code, str) else None,
            response_json=response_json,
            response_text=response_text,
        )

    async def get(
        self,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        tool: Optional[str] = None,
    ) -> JSONResult:
        return await self.request("GET", path, params=params, tool=tool)

    async def post(
        self,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[QueryParams] = None,
        tool: Optional[str] = None,
    ) -> JSONResult:
        return await self.request("POST", path, json=json, params=params, tool=tool)

    async def patch(
        self, path: str, *, json: Any, tool: Optional[str] = None
    ) -> JSONResult:
        return await self.request("PATCH", path, json=json, tool=tool)

    async def delete(
        self,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        tool: Optional[str] = None,
    ) -> JSONResult:
        return await self.request("DELETE", path, params=params, tool=tool)

    async def upload(
        self,
        path: str,
        *,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
        fields: Optional[Dict[str, str]] = None,
        field_name: str = "file",
        tool: Optional[str] = None,
    ) -> JSONResult:
        """
        Upload raw bytes using multipart/form-data.
        - The binary goes into the `field_name` part; `fields` become form fields.
        - Returns parsed JSON if present; {} on empty body.
        """
        if not content:
            raise WordPressValidationError("Upload content is empty; refusing to upload.")
        if not filename:
            raise WordPressValidationError("Upload filename must be provided.")

        ctype = (
            content_type
            or mimetypes.guess_type(filename)[0]
            or "application/octet-stream"
        )
        return await self.request(
            "POST",
            path,
            files={field_name: (filename, content, ctype)},
            data=fields or None,
            tool=tool,
        )


__all__ = ["WordPressClient", "USER_AGENT"]
