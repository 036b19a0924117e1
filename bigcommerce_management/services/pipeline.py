"""Shared request/response pipeline used by every endpoint.

Builds ``/stores/<hash>/v<N>/<path>`` URLs, sends one request per call over
a short-lived ``httpx.Client`` and turns the ``{"data": ..., "meta": ...}``
envelope into a typed :class:`~bigcommerce_management.responses.Response`.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from typing import Any, Mapping

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_jsonable_python

from bigcommerce_management.exceptions import (
    ConfigurationError,
    ManagementAPIError,
    ParseError,
    TransportError,
    build_response_error,
)
from bigcommerce_management.responses import Meta, R, Response, ResponseHeaders
from bigcommerce_management.services.query import build_query_string
from bigcommerce_management.services.request_context import request_id_var
from bigcommerce_management.version import __version__

logger = logging.getLogger(__name__)

HOST = "api.bigcommerce.com"
PORT = 443
BASE_URL = f"https://{HOST}:{PORT}"

USER_AGENT = (
    f"BigCommerce Management API Client v{__version__} "
    f"(Python v{platform.python_version()})"
)

AUTH_HEADER = "X-Auth-Token"
CONTENT_TYPE_JSON = "application/json"
JSON_CONTENT_TYPES = frozenset({"application/json", "application/problem+json"})

RESULT_KEY = "data"
META_KEY = "meta"


@dataclass(frozen=True)
class ClientOptions:
    """Per-client options; ``timeout`` is handed to httpx unchanged."""

    debug: bool = False
    timeout: float | None = None

    @classmethod
    def coerce(cls, options: ClientOptions | Mapping[str, Any] | None) -> ClientOptions:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls(**dict(options))
        except TypeError as exc:
            raise ConfigurationError(f"invalid client options: {exc}") from exc


def _media_type(response: httpx.Response) -> str:
    return response.headers.get("content-type", "").split(";")[0].strip().lower()


def _serialize(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True)
    return to_jsonable_python(data, exclude_none=True)


class Pipeline:
    """Issues requests against one store and parses the responses."""

    def __init__(
        self,
        store_hash: str,
        auth_token: str,
        options: ClientOptions | Mapping[str, Any] | None = None,
        *,
        api_version: int = 3,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not isinstance(store_hash, str) or not store_hash:
            raise ConfigurationError("store hash required")
        if not isinstance(auth_token, str) or not auth_token:
            raise ConfigurationError("auth token required")

        self.store_hash = store_hash
        self.auth_token = auth_token
        self.options = ClientOptions.coerce(options)
        self.api_version = api_version
        self._transport = _transport

    # -- verbs ---------------------------------------------------------------

    def get(
        self,
        path: str,
        record_type: type[R],
        params: Mapping[str, Any] | None = None,
    ) -> Response[R]:
        return self._request("GET", path, record_type, params=params)

    def post(self, path: str, record_type: type[R], data: Any = None) -> Response[R]:
        return self._request("POST", path, record_type, data=data)

    def put(self, path: str, record_type: type[R], data: Any = None) -> Response[R]:
        return self._request("PUT", path, record_type, data=data)

    def delete(
        self,
        path: str,
        record_type: type[R],
        params: Mapping[str, Any] | None = None,
        *,
        send_body: bool = False,
    ) -> Response[R]:
        """DELETE with the filter *params* in the query string, or the body."""
        if send_body:
            return self._request("DELETE", path, record_type, data=params)
        return self._request("DELETE", path, record_type, params=params)

    # -- internal ------------------------------------------------------------

    def endpoint(self, path: str) -> str:
        return f"/stores/{self.store_hash}/v{self.api_version}/{path}"

    def _headers(self) -> dict[str, str]:
        return {
            AUTH_HEADER: self.auth_token,
            "User-Agent": USER_AGENT,
            "Accept": CONTENT_TYPE_JSON,
        }

    def _request(
        self,
        method: str,
        path: str,
        record_type: type[R],
        *,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
    ) -> Response[R]:
        url = self.endpoint(path) + build_query_string(params)
        headers = self._headers()
        kwargs: dict[str, Any] = {}
        if data:
            kwargs["json"] = _serialize(data)
            headers["Content-Type"] = CONTENT_TYPE_JSON

        if self.options.debug:
            logger.info("-> %s %s %s", method, url, kwargs.get("json", ""))

        client_kwargs: dict[str, Any] = {
            "base_url": BASE_URL,
            "timeout": self.options.timeout,
        }
        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        try:
            with httpx.Client(**client_kwargs) as client:
                response = client.request(method, url, headers=headers, **kwargs)
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        return self._handle_response(method, url, response, record_type)

    def _handle_response(
        self,
        method: str,
        url: str,
        response: httpx.Response,
        record_type: type[R],
    ) -> Response[R]:
        headers = ResponseHeaders.from_headers(response.headers)
        token = request_id_var.set(headers.request_id or "")
        try:
            logger.debug(
                "%s %s -> %s",
                method,
                url,
                response.status_code,
                extra={"requests_left": headers.requests_left},
            )
            if self.options.debug:
                logger.info("<- %s %s", response.status_code, response.text)

            body = self._parse_body(response)

            if str(response.status_code)[0] != "2":
                raise build_response_error(response.status_code, body, headers)
            if _media_type(response) not in JSON_CONTENT_TYPES and body is not None:
                raise ManagementAPIError(
                    f"expected a JSON response, got text: {body[:200]!r}"
                )

            return self._build_result(body, headers, record_type)
        finally:
            request_id_var.reset(token)

    def _parse_body(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        if _media_type(response) not in JSON_CONTENT_TYPES:
            return response.text
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"failed to parse response JSON: {exc}") from exc

    def _build_result(
        self,
        body: Any,
        headers: ResponseHeaders,
        record_type: type[R],
    ) -> Response[R]:
        if body is None:
            return Response(record_type, headers=headers)
        if not isinstance(body, dict):
            raise ParseError(
                f"expected a JSON object response, got {type(body).__name__}"
            )

        result = body.get(RESULT_KEY)
        if result is None:
            items = []
        elif isinstance(result, list):
            items = result
        else:
            items = [result]

        raw_meta = body.get(META_KEY)
        try:
            records = [record_type.model_validate(item) for item in items]
            meta = Meta.model_validate(raw_meta) if isinstance(raw_meta, dict) else None
        except PydanticValidationError as exc:
            raise ParseError(
                f"response does not match {record_type.__name__}: {exc}"
            ) from exc

        return Response(record_type, records, meta, headers)
