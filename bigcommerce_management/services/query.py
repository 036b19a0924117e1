"""Filter options → query string encoding, including the ``name:in`` convention."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Mapping
from urllib.parse import quote_plus

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
DATE_FORMAT = "%Y-%m-%d"

IN_SUFFIX = ":in"


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def with_in_param(options: Mapping[str, Any] | None, *param_names: str) -> dict[str, Any]:
    """Merge ``name`` and ``name:in`` filters into a single ``name:in`` list.

    Only the names listed in *param_names* are merged; everything else is
    copied through untouched. ``{"id": 1, "id:in": [5]}`` becomes
    ``{"id:in": [1, 5]}``. Applying it to its own output is a no-op.
    """
    result = dict(options or {})

    for name in param_names:
        in_name = name + IN_SUFFIX
        if name not in result and in_name not in result:
            continue

        values = _as_list(result.pop(name, None))
        values.extend(_as_list(result.pop(in_name, None)))
        if values:
            result[in_name] = values

    return result


def _format_scalar(value: Any) -> str:
    # Timestamps go out verbatim, the API rejects an encoded offset
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.strftime(TIME_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote_plus(str(value))


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_format_scalar(v) for v in value)
    return _format_scalar(value)


def build_query_string(params: Mapping[str, Any] | None) -> str:
    """Encode *params* as ``?key=value&...``; empty params give ``""``."""
    if not params:
        return ""

    pairs = [
        f"{quote_plus(str(name))}={_format_value(value)}"
        for name, value in params.items()
        if value is not None
    ]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)
