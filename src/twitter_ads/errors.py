# Twitter Ads API Client
# File: errors.py
# Version: v3

"""Error hierarchy and HTTP response classification.

Every non-2xx response from the Ads API is turned into exactly one
``APIError`` subclass by :func:`classify`. The mapping is:

- 400 with an ``{"errors": [...]}`` body -> BadRequest
- 401 -> Unauthorized
- 403 -> Forbidden
- 404 -> NotFound
- 429 -> RateLimit
- 503 -> ServiceUnavailable
- other 5xx -> ServerError
- anything else >= 400 -> ClientError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .http.response import Response

UNKNOWN_ERROR = "unknown error"


class TwitterAdsError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(TwitterAdsError):
    """Raised when the client is missing credentials or settings."""


class NotLoadedError(TwitterAdsError):
    """Raised when an instance without an id is asked to talk to the API."""

    def __init__(self, resource: Any) -> None:
        name = type(resource).__name__
        super().__init__(
            f"{name} object not yet loaded, call {name}.load() or save() first"
        )
        self.resource = resource


class TransportError(TwitterAdsError):
    """Raised on network failures (DNS, connect, read timeout...)."""


class APIError(TwitterAdsError):
    """An HTTP-level failure reported by the Ads API."""

    def __init__(
        self,
        response: "Response",
        message: str = UNKNOWN_ERROR,
        code: Any = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.status_code = response.status_code
        self.message = message
        self.code = code
        self.errors = errors or []
        self.retry_after: Optional[int] = None

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} status_code={self.status_code} "
            f"code={self.code!r} message={self.message!r}>"
        )

    @classmethod
    def from_response(cls, response: "Response") -> "APIError":
        return classify(response)


class ClientError(APIError):
    """Generic 4xx failure."""


class BadRequest(ClientError):
    """400 with a structured error payload."""


class Unauthorized(ClientError):
    """401: bad or missing OAuth credentials."""


class Forbidden(ClientError):
    """403: credentials lack access to the resource."""


class NotFound(ClientError):
    """404: the resource does not exist."""


class RateLimit(ClientError):
    """429: request quota exhausted for the current window."""

    def __init__(self, response: "Response", *args: Any, **kwargs: Any) -> None:
        super().__init__(response, *args, **kwargs)
        self.retry_after = _int_header(response, "retry-after")
        self.reset_at = _int_header(
            response, "x-account-rate-limit-reset"
        ) or _int_header(response, "x-rate-limit-reset")


class ServerError(APIError):
    """5xx failure on the API side."""


class ServiceUnavailable(ServerError):
    """503: the API is temporarily unavailable."""

    def __init__(self, response: "Response", *args: Any, **kwargs: Any) -> None:
        super().__init__(response, *args, **kwargs)
        self.retry_after = _int_header(response, "retry-after")


_STATUS_MAP: Dict[int, type[APIError]] = {
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    429: RateLimit,
    503: ServiceUnavailable,
}


def _int_header(response: "Response", name: str) -> Optional[int]:
    raw = response.header(name)
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def _structured_errors(response: "Response") -> Optional[List[Dict[str, Any]]]:
    """Return the API's error entries, or None if the body has another shape."""
    try:
        body = response.body
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    entries = body.get("errors")
    if not isinstance(entries, list) or not entries:
        return None

    cleaned = [e for e in entries if isinstance(e, dict)]
    return cleaned or None


def _normalise_code(code: Any) -> Any:
    if isinstance(code, str) and code.strip().isdigit():
        return int(code.strip())
    return code


def classify(response: "Response") -> APIError:
    """Convert a failed Response into the matching APIError subclass.

    Never raises: bodies that are not valid JSON, or JSON of an unexpected
    shape, degrade to the raw body text (or a generic message).
    """
    status = response.status_code
    errors = _structured_errors(response)

    if errors:
        first = errors[0]
        code = _normalise_code(first.get("code"))
        message = str(first.get("message") or UNKNOWN_ERROR)
    else:
        code = None
        message = (response.raw_body or "").strip() or UNKNOWN_ERROR

    if status == 400 and errors:
        error_cls: type[APIError] = BadRequest
    elif status in _STATUS_MAP:
        error_cls = _STATUS_MAP[status]
    elif 500 <= status <= 599:
        error_cls = ServerError
    else:
        error_cls = ClientError

    return error_cls(response, message=message, code=code, errors=errors)
