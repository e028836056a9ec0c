"""Canonical query-string encoding for optional endpoint parameters."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode

from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    ListStyle,
    QueryKind,
    QueryParameter,
)
from cumulocity_client.domain.entities.errors import EncodingError

from .values import to_wire_string

QueryPairs = List[Tuple[str, str]]


class QueryEncoder:
    """Turns a parameter set into ordered ``(key, value)`` pairs.

    Keys follow the order the endpoint declares them in. ``None`` means the
    caller did not provide the parameter and it is left out so the server
    default applies; ``False``, ``0`` and ``""`` are real values and are
    always sent.
    """

    def encode(
        self, endpoint: EndpointDescriptor, values: Optional[Mapping[str, Any]]
    ) -> QueryPairs:
        values = values or {}
        unknown = set(values) - set(endpoint.query_names)
        if unknown:
            raise EncodingError(
                f"{endpoint.name} does not accept query parameter(s) {sorted(unknown)}",
                {"endpoint": endpoint.name, "unknown": sorted(unknown)},
            )

        pairs: QueryPairs = []
        for param in endpoint.query:
            value = values.get(param.name)
            if value is None:
                continue
            pairs.extend(self._encode_parameter(endpoint, param, value))
        return pairs

    def to_query_string(self, pairs: QueryPairs) -> str:
        """Render pairs as ``key=value&key2=value2`` with RFC 3986 escaping."""
        return urlencode(pairs, quote_via=quote)

    def _encode_parameter(
        self, endpoint: EndpointDescriptor, param: QueryParameter, value: Any
    ) -> QueryPairs:
        if param.kind == QueryKind.STRING_LIST:
            if isinstance(value, str):
                items = [value]
            elif isinstance(value, Iterable) and not isinstance(
                value, (Mapping, bytes)
            ):
                items = list(value)
            else:
                raise self._invalid(endpoint, param, value)
            if not all(item is None or self._is_text(item) for item in items):
                raise self._invalid(endpoint, param, value)
            rendered = [to_wire_string(item) for item in items if item is not None]
            if not rendered:
                return []
            if param.list_style == ListStyle.COMMA:
                return [(param.name, ",".join(rendered))]
            return [(param.name, item) for item in rendered]

        return [(param.name, self._render_scalar(endpoint, param, value))]

    def _render_scalar(
        self, endpoint: EndpointDescriptor, param: QueryParameter, value: Any
    ) -> str:
        kind = param.kind
        if kind == QueryKind.BOOLEAN:
            if not isinstance(value, bool):
                raise self._invalid(endpoint, param, value)
        elif kind == QueryKind.INTEGER:
            if isinstance(value, bool) or not isinstance(value, int):
                raise self._invalid(endpoint, param, value)
        elif kind == QueryKind.DATETIME:
            if isinstance(value, datetime):
                if value.tzinfo is None or value.utcoffset() is None:
                    raise EncodingError(
                        f"Query parameter '{param.name}' of {endpoint.name} "
                        "needs a timezone-aware datetime",
                        {"endpoint": endpoint.name, "parameter": param.name},
                    )
            elif not isinstance(value, (date, str)):
                raise self._invalid(endpoint, param, value)
        elif kind == QueryKind.DATE:
            if isinstance(value, datetime):
                value = value.date()
            elif not isinstance(value, (date, str)):
                raise self._invalid(endpoint, param, value)
        elif not self._is_text(value):
            raise self._invalid(endpoint, param, value)
        return to_wire_string(value)

    @staticmethod
    def _is_text(value: Any) -> bool:
        return isinstance(value, (str, int, Enum))

    @staticmethod
    def _invalid(
        endpoint: EndpointDescriptor, param: QueryParameter, value: Any
    ) -> EncodingError:
        return EncodingError(
            f"Query parameter '{param.name}' of {endpoint.name} expects "
            f"{param.kind.value}, got {type(value).__name__}",
            {"endpoint": endpoint.name, "parameter": param.name},
        )
