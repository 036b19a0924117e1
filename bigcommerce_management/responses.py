"""Response envelope types: headers, meta/pagination and record collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, Mapping, NamedTuple, TypeVar, overload

from pydantic import BaseModel, ConfigDict

R = TypeVar("R", bound=BaseModel)

REQUEST_ID_HEADER = "x-request-id"
REQUESTS_LEFT_HEADER = "x-rate-limit-requests-left"
TIME_RESET_MS_HEADER = "x-rate-limit-time-reset-ms"
REQUESTS_QUOTA_HEADER = "x-rate-limit-requests-quota"
TIME_WINDOW_MS_HEADER = "x-rate-limit-time-window-ms"


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class ResponseHeaders:
    """Request id and rate-limit counters parsed from response headers."""

    raw: Mapping[str, str] = field(default_factory=dict)
    request_id: str | None = None
    requests_left: int | None = None
    time_reset_ms: int | None = None
    requests_quota: int | None = None
    time_window_ms: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> ResponseHeaders:
        """Keep the ``x-`` headers; counters that are absent or garbled are *None*."""
        raw = {
            name.lower(): value
            for name, value in headers.items()
            if name.lower().startswith("x-")
        }
        return cls(
            raw=raw,
            request_id=raw.get(REQUEST_ID_HEADER),
            requests_left=_parse_int(raw.get(REQUESTS_LEFT_HEADER)),
            time_reset_ms=_parse_int(raw.get(TIME_RESET_MS_HEADER)),
            requests_quota=_parse_int(raw.get(REQUESTS_QUOTA_HEADER)),
            time_window_ms=_parse_int(raw.get(TIME_WINDOW_MS_HEADER)),
        )


class PaginationLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    previous: str | None = None
    current: str | None = None
    next: str | None = None


class Pagination(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    links: PaginationLinks | None = None


class Meta(BaseModel):
    """The ``meta`` block of a response.

    ``pagination`` is set on list endpoints, ``total``/``success``/``failed``
    summarise bulk operations.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    pagination: Pagination | None = None
    total: int | None = None
    success: int | None = None
    failed: int | None = None


class Unwrapped(NamedTuple, Generic[R]):
    record: R
    meta: Meta | None
    headers: ResponseHeaders


class Response(Generic[R]):
    """An ordered collection of records of one type plus response metadata."""

    __slots__ = ("record_type", "_records", "meta", "headers")

    def __init__(
        self,
        record_type: type[R],
        records: list[R] | tuple[R, ...] = (),
        meta: Meta | None = None,
        headers: ResponseHeaders | None = None,
    ) -> None:
        for record in records:
            if not isinstance(record, record_type):
                raise TypeError(
                    f"expected {record_type.__name__}, got {type(record).__name__}"
                )
        self.record_type = record_type
        self._records = tuple(records)
        self.meta = meta
        self.headers = headers if headers is not None else ResponseHeaders()

    @property
    def pagination(self) -> Pagination | None:
        return self.meta.pagination if self.meta is not None else None

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @overload
    def __getitem__(self, index: int) -> R: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[R, ...]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __repr__(self) -> str:
        return (
            f"Response[{self.record_type.__name__}]"
            f"(count={len(self._records)}, meta={self.meta!r})"
        )

    def first(self) -> R | None:
        return self._records[0] if self._records else None

    def unwrap(self) -> Unwrapped[R] | None:
        return unwrap(self)


def unwrap(response: Response[R]) -> Unwrapped[R] | None:
    """Reduce *response* to its first record, or *None* when it is empty.

    Single-resource endpoints still answer with a collection; this hands back
    the record together with the collection's ``meta`` and ``headers``.
    """
    record = response.first()
    if record is None:
        return None
    return Unwrapped(record, response.meta, response.headers)
