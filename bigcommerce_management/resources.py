"""Endpoint resources.

Each API resource is a static :class:`ResourceDescriptor` (path, record type,
the filters eligible for the ``:in`` merge and the supported operations).
:class:`Endpoint` runs any descriptor through the shared pipeline; the few
resources whose paths embed an id (metafields, single subscribers) get their
own small classes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping

from pydantic import BaseModel

from bigcommerce_management.exceptions import UsageError
from bigcommerce_management.models import (
    Address,
    Attribute,
    AttributeValue,
    Customer,
    Inventory,
    Metafield,
    Segment,
    Subscriber,
)
from bigcommerce_management.responses import R, Response, Unwrapped, unwrap
from bigcommerce_management.services.pipeline import Pipeline
from bigcommerce_management.services.query import with_in_param

logger = logging.getLogger(__name__)

GET = "get"
CREATE = "create"
UPDATE = "update"
UPSERT = "upsert"
DELETE = "delete"

CRUD = frozenset({GET, CREATE, UPDATE, DELETE})


@dataclass(frozen=True)
class ResourceDescriptor(Generic[R]):
    path: str
    record_type: type[R]
    in_params: tuple[str, ...] = ()
    operations: frozenset[str] = CRUD
    # Some API versions want the delete filter as a JSON body
    delete_sends_body: bool = False


CUSTOMERS = ResourceDescriptor(
    "customers",
    Customer,
    in_params=(
        "company",
        "customer_group_id",
        "email",
        "id",
        "name",
        "registration_ip_address",
    ),
)

ADDRESSES = ResourceDescriptor(
    "customers/addresses",
    Address,
    in_params=("company", "customer_id", "id", "name"),
)

ATTRIBUTES = ResourceDescriptor("customers/attributes", Attribute)

ATTRIBUTE_VALUES = ResourceDescriptor(
    "customers/attribute-values",
    AttributeValue,
    in_params=("attribute_id", "customer_id"),
    operations=frozenset({GET, UPSERT, DELETE}),
)

CUSTOMER_METAFIELDS = ResourceDescriptor("customers/%d/metafields", Metafield)

INVENTORY_ITEMS = ResourceDescriptor(
    "inventory/items",
    Inventory,
    in_params=("location_code", "location_id", "product_id", "sku", "variant_id"),
    operations=frozenset({GET}),
)

SEGMENTS = ResourceDescriptor("segments", Segment, in_params=("id",))

SUBSCRIBERS = ResourceDescriptor(
    "customers/subscribers",
    Subscriber,
    in_params=(
        "date_created",
        "date_modified",
        "email",
        "first_name",
        "id",
        "last_name",
        "order_id",
        "source",
    ),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _payload(item: Any) -> dict[str, Any]:
    if isinstance(item, BaseModel):
        return item.model_dump(exclude_none=True)
    if isinstance(item, Mapping):
        return dict(item)
    raise UsageError(f"expected a record or a mapping, got {type(item).__name__}")


def _flatten(items: Iterable[Any]) -> list[Any]:
    flat: list[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        else:
            flat.append(item)
    return flat


def _int_id(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise UsageError(f"invalid id: {value!r}") from exc


def _payloads(items: Iterable[Any]) -> list[dict[str, Any]]:
    return [_payload(item) for item in _flatten(items)]


def _filters(options: Mapping[str, Any] | None, filters: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(options or {})
    merged.update(filters)
    return merged


# ---------------------------------------------------------------------------
# Generic endpoint
# ---------------------------------------------------------------------------


class Endpoint(Generic[R]):
    """Runs the operations of one :class:`ResourceDescriptor`."""

    def __init__(self, pipeline: Pipeline, descriptor: ResourceDescriptor[R]) -> None:
        self._pipeline = pipeline
        self.descriptor = descriptor

    def __repr__(self) -> str:
        return f"Endpoint({self.descriptor.path!r})"

    def _require(self, operation: str) -> None:
        if operation not in self.descriptor.operations:
            raise UsageError(
                f"{self.descriptor.path} does not support {operation}"
            )

    def _bulk(self, operation: str, records: tuple[Any, ...]) -> list[dict[str, Any]]:
        self._require(operation)
        payloads = _payloads(records)
        if not payloads:
            raise UsageError(f"Cannot {operation} {self.descriptor.path}: nothing given")
        return payloads

    def get(self, options: Mapping[str, Any] | None = None, **filters: Any) -> Response[R]:
        """List records, e.g. ``get(id=[1, 5])`` or ``get({"date_created:min": ts})``."""
        self._require(GET)
        params = with_in_param(_filters(options, filters), *self.descriptor.in_params)
        return self._pipeline.get(self.descriptor.path, self.descriptor.record_type, params)

    def create(self, *records: Any) -> Response[R]:
        payloads = self._bulk(CREATE, records)
        return self._pipeline.post(self.descriptor.path, self.descriptor.record_type, payloads)

    def update(self, *records: Any) -> Response[R]:
        payloads = self._bulk(UPDATE, records)
        for payload in payloads:
            if payload.get("id") is None:
                raise UsageError(
                    f"Cannot update {self.descriptor.path}: given record has no id"
                )
        return self._pipeline.put(self.descriptor.path, self.descriptor.record_type, payloads)

    def upsert(self, *records: Any) -> Response[R]:
        payloads = self._bulk(UPSERT, records)
        return self._pipeline.put(self.descriptor.path, self.descriptor.record_type, payloads)

    def delete(self, *ids: Any) -> Response[R]:
        """Delete by id with a single ``id:in`` request."""
        self._require(DELETE)
        ids_list = [id_ for id_ in _flatten(ids) if id_ is not None]
        if not ids_list:
            raise UsageError(f"Cannot delete {self.descriptor.path}: no ids given")

        logger.debug("Deleting %d from %s", len(ids_list), self.descriptor.path)
        return self._pipeline.delete(
            self.descriptor.path,
            self.descriptor.record_type,
            with_in_param({"id": ids_list}, "id"),
            send_body=self.descriptor.delete_sends_body,
        )


# ---------------------------------------------------------------------------
# Resources with id-bearing paths
# ---------------------------------------------------------------------------


class Metafields:
    """Metafields owned by a resource, e.g. ``customers/<id>/metafields``."""

    def __init__(
        self,
        pipeline: Pipeline,
        descriptor: ResourceDescriptor[Metafield] = CUSTOMER_METAFIELDS,
    ) -> None:
        self._pipeline = pipeline
        self.descriptor = descriptor

    def _path(self, resource_id: Any, metafield_id: Any = None) -> str:
        path = self.descriptor.path % _int_id(resource_id)
        if metafield_id is None:
            return path
        return f"{path}/{_int_id(metafield_id)}"

    def get(
        self,
        resource_id: int,
        options: Mapping[str, Any] | None = None,
        **filters: Any,
    ) -> Response[Metafield]:
        params = with_in_param(_filters(options, filters), *self.descriptor.in_params)
        return self._pipeline.get(self._path(resource_id), Metafield, params)

    def create(self, metafield: Any) -> Response[Metafield]:
        payload = _payload(metafield)
        resource_id = payload.pop("resource_id", None)
        if resource_id is None:
            raise UsageError(
                "Cannot create metafield: given metafield record has no resource_id"
            )
        return self._pipeline.post(self._path(resource_id), Metafield, payload)

    def update(self, metafield: Any) -> Unwrapped[Metafield] | None:
        payload = _payload(metafield)
        resource_id = payload.pop("resource_id", None)
        if resource_id is None:
            raise UsageError(
                "Cannot update metafield: given metafield has no resource_id"
            )
        metafield_id = payload.pop("id", None)
        if metafield_id is None:
            raise UsageError("Cannot update metafield: given metafield has no id")

        result = self._pipeline.put(
            self._path(resource_id, metafield_id), Metafield, payload
        )
        return unwrap(result)

    def delete(self, resource_id: int, metafield_id: int) -> Response[Metafield]:
        return self._pipeline.delete(
            self._path(resource_id, _int_id(metafield_id)), Metafield
        )


class Subscribers:
    """Newsletter subscribers (``customers/subscribers``)."""

    def __init__(
        self,
        pipeline: Pipeline,
        descriptor: ResourceDescriptor[Subscriber] = SUBSCRIBERS,
    ) -> None:
        self._pipeline = pipeline
        self.descriptor = descriptor

    def _params(self, options: Mapping[str, Any] | None, filters: Mapping[str, Any]) -> dict[str, Any]:
        return with_in_param(_filters(options, filters), *self.descriptor.in_params)

    def create(self, attributes: Any) -> Unwrapped[Subscriber] | None:
        result = self._pipeline.post(self.descriptor.path, Subscriber, _payload(attributes))
        return unwrap(result)

    def get(
        self,
        options_or_id: Mapping[str, Any] | int | str | None = None,
        **filters: Any,
    ) -> Response[Subscriber]:
        """Given an id fetch that subscriber, otherwise filter by the options."""
        if isinstance(options_or_id, (int, str)):
            path = f"{self.descriptor.path}/{options_or_id}"
            return self._pipeline.get(path, Subscriber, filters)
        return self._pipeline.get(
            self.descriptor.path, Subscriber, self._params(options_or_id, filters)
        )

    def update(self, attributes: Any) -> Unwrapped[Subscriber] | None:
        payload = _payload(attributes)
        subscriber_id = payload.pop("id", None)
        if subscriber_id is None:
            raise UsageError("Cannot update subscriber: given subscriber has no id")

        result = self._pipeline.put(
            f"{self.descriptor.path}/{subscriber_id}", Subscriber, payload
        )
        return unwrap(result)

    def delete(self, options: Mapping[str, Any] | None = None, **filters: Any) -> Response[Subscriber]:
        params = self._params(options, filters)
        if not params:
            raise UsageError("Cannot delete subscribers: no filter given")
        return self._pipeline.delete(
            self.descriptor.path,
            Subscriber,
            params,
            send_body=self.descriptor.delete_sends_body,
        )


# ---------------------------------------------------------------------------
# Resource groups
# ---------------------------------------------------------------------------


class Customers:
    """``customers`` plus its addresses, attributes, values and metafields."""

    def __init__(self, pipeline: Pipeline) -> None:
        self._endpoint = Endpoint(pipeline, CUSTOMERS)
        self.addresses = Endpoint(pipeline, ADDRESSES)
        self.attributes = Endpoint(pipeline, ATTRIBUTES)
        self.attribute_values = Endpoint(pipeline, ATTRIBUTE_VALUES)
        self.metafields = Metafields(pipeline, CUSTOMER_METAFIELDS)

    def get(self, options: Mapping[str, Any] | None = None, **filters: Any) -> Response[Customer]:
        return self._endpoint.get(options, **filters)

    def create(self, *customers: Any) -> Response[Customer]:
        return self._endpoint.create(*customers)

    def update(self, *customers: Any) -> Response[Customer]:
        return self._endpoint.update(*customers)

    def delete(self, *ids: Any) -> Response[Customer]:
        return self._endpoint.delete(*ids)


class Inventories:
    def __init__(self, pipeline: Pipeline) -> None:
        self.items = Endpoint(pipeline, INVENTORY_ITEMS)
