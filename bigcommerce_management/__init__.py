"""Typed client for the BigCommerce REST management API."""

from __future__ import annotations

from bigcommerce_management.client import CAPABILITIES, ManagementAPI
from bigcommerce_management.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    ManagementAPIError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ResponseError,
    TransportError,
    UsageError,
    ValidationError,
)
from bigcommerce_management.models import (
    Address,
    Attribute,
    AttributeValue,
    Customer,
    Inventory,
    Metafield,
    Record,
    Segment,
    Subscriber,
)
from bigcommerce_management.responses import (
    Meta,
    Pagination,
    Response,
    ResponseHeaders,
    Unwrapped,
    unwrap,
)
from bigcommerce_management.services.pipeline import ClientOptions
from bigcommerce_management.version import __version__

__all__ = [
    "CAPABILITIES",
    "ManagementAPI",
    "ClientOptions",
    "ManagementAPIError",
    "ConfigurationError",
    "UsageError",
    "ParseError",
    "TransportError",
    "ResponseError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "Record",
    "Address",
    "Attribute",
    "AttributeValue",
    "Customer",
    "Inventory",
    "Metafield",
    "Segment",
    "Subscriber",
    "Meta",
    "Pagination",
    "Response",
    "ResponseHeaders",
    "Unwrapped",
    "unwrap",
    "__version__",
]
