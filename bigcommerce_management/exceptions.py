"""Exception hierarchy for the BigCommerce management API client."""

from __future__ import annotations

from typing import Any

from bigcommerce_management.responses import ResponseHeaders


class ManagementAPIError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(ManagementAPIError, ValueError):
    """Raised when the client is constructed with unusable configuration."""


class UsageError(ManagementAPIError, ValueError):
    """Raised when a call is made with input the API cannot accept.

    Always raised before any network I/O takes place.
    """


class ParseError(ManagementAPIError):
    """Raised when a response body cannot be decoded into records."""


class TransportError(ManagementAPIError):
    """Raised when the HTTP connection itself fails."""


class ResponseError(ManagementAPIError):
    """Raised on any non-2xx response.

    ``data`` is the parsed body (a dict for JSON bodies, otherwise the raw
    text), ``error`` the error object the message was derived from.
    """

    def __init__(
        self,
        status_code: int,
        data: Any,
        headers: ResponseHeaders,
    ) -> None:
        self.status_code = status_code
        self.data = data
        self.headers = headers
        self.error = _select_error(data)
        super().__init__(error_message(data, status_code))

    @property
    def request_id(self) -> str | None:
        return self.headers.request_id

    @property
    def requests_left(self) -> int | None:
        return self.headers.requests_left

    @property
    def time_reset_ms(self) -> int | None:
        return self.headers.time_reset_ms

    @property
    def requests_quota(self) -> int | None:
        return self.headers.requests_quota

    @property
    def time_window_ms(self) -> int | None:
        return self.headers.time_window_ms


class ValidationError(ResponseError):
    """Raised on 400 or 422 responses."""


class AuthenticationError(ResponseError):
    """Raised on 401 or 403 responses."""


class NotFoundError(ResponseError):
    """Raised on 404 responses."""


class ConflictError(ResponseError):
    """Raised on 409 responses."""


class RateLimitError(ResponseError):
    """Raised on 429 responses.

    ``time_reset_ms`` tells how long to wait before the quota refills.
    """


# Maps HTTP status codes to exception classes.
_STATUS_MAP: dict[int, type[ResponseError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def build_response_error(
    status_code: int,
    data: Any,
    headers: ResponseHeaders,
) -> ResponseError:
    """Construct the appropriate exception for *status_code*."""
    exc_cls = _STATUS_MAP.get(status_code, ResponseError)
    return exc_cls(status_code, data, headers)


def _select_error(data: Any) -> Any:
    # Batch endpoints wrap their error objects in an "errors" list
    if isinstance(data, dict) and isinstance(data.get("errors"), list):
        errors = data["errors"]
        return errors[0] if errors else {}
    return data


def error_message(data: Any, status_code: int | None = None) -> str:
    """Format the human readable message for an error envelope.

    A non-empty ``errors`` mapping yields ``"field: message"`` pairs, anything
    else ``"<title> (<status>)"``. Trailing periods are stripped from titles
    and messages.
    """
    error = _select_error(data)

    if not isinstance(error, dict):
        if error:
            return str(error)
        return f"HTTP {status_code}"

    details = error.get("errors")
    if isinstance(details, dict) and details:
        return ", ".join(
            f"{field}: {str(message).removesuffix('.')}"
            for field, message in details.items()
        )

    title = str(error.get("title") or "").removesuffix(".")
    status = error.get("status", status_code)
    if not title:
        return f"HTTP {status}"
    return f"{title} ({status})"
