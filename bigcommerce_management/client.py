"""Root client for the BigCommerce management API."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from bigcommerce_management.config import Settings
from bigcommerce_management.exceptions import ConfigurationError
from bigcommerce_management.resources import (
    SEGMENTS,
    Customers,
    Endpoint,
    Inventories,
    Subscribers,
)
from bigcommerce_management.services.pipeline import ClientOptions, Pipeline

CUSTOMERS = "customers"
INVENTORIES = "inventories"
SEGMENTS_RESOURCE = "segments"
SUBSCRIBERS = "subscribers"

# Resources each API version serves.
CAPABILITIES: dict[int, frozenset[str]] = {
    3: frozenset({CUSTOMERS, INVENTORIES, SEGMENTS_RESOURCE, SUBSCRIBERS}),
}

DEFAULT_API_VERSION = 3


class ManagementAPI:
    """Entry point exposing one attribute per available resource family.

    >>> api = ManagementAPI("abc123", "token")
    >>> api.customers.get(id=[1, 5])  # doctest: +SKIP
    """

    customers: Customers
    inventories: Inventories
    segments: Endpoint
    subscribers: Subscribers

    def __init__(
        self,
        store_hash: str,
        auth_token: str,
        options: ClientOptions | Mapping[str, Any] | None = None,
        *,
        api_version: int = DEFAULT_API_VERSION,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        if api_version not in CAPABILITIES:
            raise ConfigurationError(f"unsupported API version: {api_version}")

        self.api_version = api_version
        self.pipeline = Pipeline(
            store_hash,
            auth_token,
            options,
            api_version=api_version,
            _transport=_transport,
        )

        available = CAPABILITIES[api_version]
        if CUSTOMERS in available:
            self.customers = Customers(self.pipeline)
        if INVENTORIES in available:
            self.inventories = Inventories(self.pipeline)
        if SEGMENTS_RESOURCE in available:
            self.segments = Endpoint(self.pipeline, SEGMENTS)
        if SUBSCRIBERS in available:
            self.subscribers = Subscribers(self.pipeline)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> ManagementAPI:
        return cls(
            settings.store_hash,
            settings.access_token,
            ClientOptions(debug=settings.debug, timeout=settings.timeout),
            api_version=settings.api_version,
            _transport=_transport,
        )

    def supports(self, resource: str) -> bool:
        return resource in CAPABILITIES[self.api_version]
