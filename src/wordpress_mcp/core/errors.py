from __future__ import annotations

from typing import Any, Dict, Optional


class WordPressClientError(Exception):
    """Base error for client failures."""

    kind = "client"

    def __init__(self, message: str, *, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def status_code(self) -> Optional[int]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "status": self.status_code,
            "message": self.message,
            "code": self.code,
        }


class WordPressConfigurationError(WordPressClientError):
    """Malformed or missing site configuration."""

    kind = "configuration"


class WordPressValidationError(WordPressClientError):
    """Caller input rejected before any request was sent."""

    kind = "validation"

    def __init__(
        self,
        message: str,
        *,
        errors: Optional[list[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class WordPressTransportError(WordPressClientError):
    """No response was received (connection failure, timeout)."""

    kind = "transport"


class WordPressParseError(WordPressClientError):
    kind = "parse"


class WordPressHTTPError(WordPressClientError):
    kind = "http"

    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        code: Optional[str] = None,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message, code=code)
        self.args = (f"{status_code} {method} {url}: {message}",)
        self._status_code = status_code
        self.method = method
        self.url = url
        self.response_json = response_json
        self.response_text = response_text

    @property
    def status_code(self) -> int:
        return self._status_code


class WordPressNotFoundError(WordPressHTTPError):
    """The backend reports the identified resource does not exist."""

    kind = "not_found"


class WordPressBackendRejectedError(WordPressHTTPError):
    """Any non-success response other than not-found."""

    kind = "backend_rejected"


__all__ = [
    "WordPressClientError",
    "WordPressConfigurationError",
    "WordPressValidationError",
    "WordPressTransportError",
    "WordPressParseError",
    "WordPressHTTPError",
    "WordPressNotFoundError",
    "WordPressBackendRejectedError",
]
