"""Generic typed request/response pipeline shared by every API group."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    PreparedRequest,
)
from cumulocity_client.domain.ports.request_executor import IRequestExecutor

from .body_projector import BodyProjector
from .content_negotiation import ContentNegotiator
from .path_templater import PathTemplater
from .query_encoder import QueryEncoder
from .response_decoder import ResponseDecoder


class ApiPipeline:
    """Runs one operation: template, encode, negotiate, project, send, decode.

    Everything except ``executor.send`` is synchronous and local, so a call
    either returns a decoded result or raises without leaving state behind.
    """

    def __init__(
        self,
        executor: IRequestExecutor,
        *,
        templater: Optional[PathTemplater] = None,
        query_encoder: Optional[QueryEncoder] = None,
        negotiator: Optional[ContentNegotiator] = None,
        projector: Optional[BodyProjector] = None,
        decoder: Optional[ResponseDecoder] = None,
    ) -> None:
        self._executor = executor
        self._templater = templater or PathTemplater()
        self._query_encoder = query_encoder or QueryEncoder()
        self._negotiator = negotiator or ContentNegotiator()
        self._projector = projector or BodyProjector()
        self._decoder = decoder or ResponseDecoder()

    def prepare(
        self,
        endpoint: EndpointDescriptor,
        *,
        path: Sequence[Any] = (),
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        files: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> PreparedRequest:
        """Build the request of one call without sending it."""
        resource_path = self._templater.build(endpoint, path)
        pairs = self._query_encoder.encode(endpoint, query)

        request_headers: Dict[str, str] = {
            name: value for name, value in (headers or {}).items() if value is not None
        }
        request = PreparedRequest(
            method=endpoint.method.value,
            path=resource_path,
            query_string=self._query_encoder.to_query_string(pairs),
            headers=request_headers,
        )
        if files is not None:
            request.files = files
        elif body is not None or endpoint.content_type is not None:
            request.json = self._projector.project(endpoint, body)

        self._negotiator.apply(endpoint, request.headers, has_body=request.has_body)
        return request

    async def invoke(
        self,
        endpoint: EndpointDescriptor,
        *,
        path: Sequence[Any] = (),
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        files: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        result_type: Any = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Execute an operation and decode its result.

        Args:
            endpoint: Descriptor of the operation.
            path: Identifiers for the path placeholders, in template order.
            query: Optional query parameters; ``None`` values are omitted.
            body: Model, mapping or list sent as JSON after projection.
            files: Multipart parts, sent instead of a JSON body.
            headers: Extra per-call headers; ``None`` values are not sent.
            result_type: Per-call type token overriding the declared type.
            timeout: Per-call timeout in seconds.

        Raises:
            EncodingError, TransportError, HttpStatusError, DecodeError
        """
        request = self.prepare(
            endpoint,
            path=path,
            query=query,
            body=body,
            files=files,
            headers=headers,
        )
        response = await self._executor.send(request, timeout=timeout)
        return self._decoder.decode(endpoint, response, result_type)
