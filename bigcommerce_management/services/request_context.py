"""Upstream request correlation ID via contextvars."""

from __future__ import annotations

from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """Read the ``x-request-id`` of the response currently being handled."""
    return request_id_var.get()
