"""Shared stubs for the client tests."""

from __future__ import annotations

from typing import Callable

import httpx

STORE_HASH = "abc123"
AUTH_TOKEN = "secret-token"

RATE_HEADERS = {
    "x-request-id": "req-0001",
    "x-rate-limit-requests-left": "149",
    "x-rate-limit-time-reset-ms": "29000",
    "x-rate-limit-requests-quota": "150",
    "x-rate-limit-time-window-ms": "30000",
}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_response(
    body: dict | list,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    hdrs = dict(RATE_HEADERS)
    if headers:
        hdrs.update(headers)
    return httpx.Response(status_code, json=body, headers=hdrs)


def data_response(data, meta: dict | None = None, status_code: int = 200) -> httpx.Response:
    body: dict = {"data": data}
    if meta is not None:
        body["meta"] = meta
    return json_response(body, status_code)
