"""Transport-level entities describing one API operation and its exchange."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from string import Formatter
from typing import Any, Dict, Mapping, Optional, Tuple

from cumulocity_client.shared.consts import EnumHttpMethod


class QueryKind(str, Enum):
    """Semantic type of a query parameter, drives stringification."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    STRING_LIST = "string_list"


class ListStyle(str, Enum):
    """How a list-valued query parameter is rendered."""

    REPEAT = "repeat"
    COMMA = "comma"


class ResultKind(str, Enum):
    """Shape of the value an operation returns."""

    TYPED = "typed"
    STREAM = "stream"
    STRING = "string"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class QueryParameter:
    """An optional query parameter declared by an endpoint."""

    name: str
    kind: QueryKind = QueryKind.STRING
    list_style: ListStyle = ListStyle.REPEAT


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """Declarative metadata describing one API operation.

    Defined once per operation at import time and shared by every call.
    """

    name: str
    method: EnumHttpMethod
    path: str
    accept: Tuple[str, ...] = ()
    content_type: Optional[str] = None
    query: Tuple[QueryParameter, ...] = ()
    result: ResultKind = ResultKind.TYPED
    result_type: Any = None
    stripped_fields: Tuple[str, ...] = ()

    @property
    def path_parameters(self) -> Tuple[str, ...]:
        """Placeholder names of the path template, in order."""
        return tuple(
            name for _, name, _, _ in Formatter().parse(self.path) if name is not None
        )

    @property
    def query_names(self) -> Tuple[str, ...]:
        return tuple(param.name for param in self.query)


@dataclass(slots=True)
class PreparedRequest:
    """A fully built request, ready to be handed to the executor."""

    method: str
    path: str
    query_string: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    json: Any = None
    files: Optional[Mapping[str, Any]] = None

    @property
    def url(self) -> str:
        """Target relative to the base URL, query string included."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @property
    def has_body(self) -> bool:
        return self.json is not None or self.files is not None


@dataclass(slots=True)
class RawResponse:
    """A successful response whose body has been read completely."""

    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    reason: str = ""
    encoding: str = "utf-8"

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding, errors="replace")
