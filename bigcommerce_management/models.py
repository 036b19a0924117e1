"""Typed records for the resources exposed by the management API.

Every field is optional: the same classes describe create/update input (no
server-assigned ``id`` yet) and the records returned by the API. Unknown
fields sent by the server are kept so a record survives a round trip.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Immutable snapshot of one API resource instance."""

    model_config = ConfigDict(frozen=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready representation sent in request bodies."""
        return self.model_dump(mode="json", exclude_none=True)


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------


class FormField(Record):
    name: str | None = None
    value: Any = None


class Address(Record):
    id: int | None = None
    customer_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state_or_province: str | None = None
    postal_code: str | None = None
    country: str | None = None
    country_code: str | None = None
    phone: str | None = None
    address_type: str | None = None
    form_fields: list[FormField] | None = None


class StoreCreditAmount(Record):
    amount: float | None = None


class CustomerAuthentication(Record):
    force_password_reset: bool | None = None
    new_password: str | None = None


class Attribute(Record):
    """A customer attribute definition (name and value type)."""

    id: int | None = None
    name: str | None = None
    type: str | None = None
    date_created: datetime | None = None
    date_modified: datetime | None = None


class AttributeValue(Record):
    """The value of one attribute for one customer.

    Upserts send ``value``; the API answers with ``attribute_value``.
    """

    id: int | None = None
    attribute_id: int | None = None
    customer_id: int | None = None
    attribute_value: str | None = None
    value: str | None = None
    date_created: datetime | None = None
    date_modified: datetime | None = None


class Customer(Record):
    id: int | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    phone: str | None = None
    notes: str | None = None
    tax_exempt_category: str | None = None
    customer_group_id: int | None = None
    registration_ip_address: str | None = None
    accepts_product_review_abandoned_cart_emails: bool | None = None
    origin_channel_id: int | None = None
    channel_ids: list[int] | None = None
    date_created: datetime | None = None
    date_modified: datetime | None = None
    authentication: CustomerAuthentication | None = None
    addresses: list[Address] | None = None
    attributes: list[AttributeValue] | None = None
    form_fields: list[FormField] | None = None
    store_credit_amounts: list[StoreCreditAmount] | None = None


class Metafield(Record):
    """Free-form key/value data attached to another resource.

    ``resource_id`` is the id of the owning resource (the customer for
    customer metafields).
    """

    id: int | None = None
    key: str | None = None
    value: str | None = None
    namespace: str | None = None
    permission_set: str | None = None
    resource_type: str | None = None
    resource_id: int | None = None
    description: str | None = None
    owner_client_id: str | None = None
    date_created: datetime | None = None
    date_modified: datetime | None = None


# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------


class InventoryIdentity(Record):
    sku: str | None = None
    variant_id: int | None = None
    product_id: int | None = None


class InventoryLocationSettings(Record):
    safety_stock: int | None = None
    is_in_stock: bool | None = None
    warning_level: int | None = None
    bin_picking_number: str | None = None


class InventoryLocation(Record):
    location_id: int | None = None
    location_code: str | None = None
    location_name: str | None = None
    available_to_sell: int | None = None
    total_inventory_onhand: int | None = None
    settings: InventoryLocationSettings | None = None


class Inventory(Record):
    """Stock levels of one product/variant across inventory locations."""

    identity: InventoryIdentity | None = None
    locations: list[InventoryLocation] | None = None


# ---------------------------------------------------------------------------
# Segments & subscribers
# ---------------------------------------------------------------------------


class Segment(Record):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Subscriber(Record):
    id: int | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    source: str | None = None
    order_id: int | None = None
    channel_id: int | None = None
    consents: list[str] | None = None
    date_created: datetime | None = None
    date_modified: datetime | None = None
