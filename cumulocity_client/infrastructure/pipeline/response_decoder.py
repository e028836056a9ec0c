"""Response body decoding into declared result types."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    RawResponse,
    ResultKind,
)
from cumulocity_client.domain.entities.errors import DecodeError, excerpt


@lru_cache(maxsize=256)
def _adapter_for(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _type_name(result_type: Any) -> str:
    return getattr(result_type, "__name__", None) or repr(result_type)


class ResponseDecoder:
    """Maps a response body onto the result the endpoint declares.

    Typed results are validated with pydantic; unknown fields are kept and
    missing ones become ``None``. An empty body decodes to ``None``.
    """

    def decode(
        self,
        endpoint: EndpointDescriptor,
        response: RawResponse,
        result_type: Any = None,
    ) -> Any:
        kind = endpoint.result
        if kind == ResultKind.NONE:
            return None
        if kind == ResultKind.STREAM:
            return response.content
        if kind == ResultKind.STRING:
            return response.text if response.content else None

        target = result_type if result_type is not None else endpoint.result_type
        if target is None:
            raise DecodeError(
                f"{endpoint.name} declares a typed result without a result type"
            )

        body = response.text
        if not body.strip():
            return None

        try:
            return _adapter_for(target).validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Response of {endpoint.name} is not a valid "
                f"{_type_name(target)}: {e.error_count()} error(s); "
                f"body: {excerpt(body)}",
                result_type=target,
                body=body,
                details={"errors": e.errors(include_url=False)},
            ) from e
