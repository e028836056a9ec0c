"""HTTP request executor - Infrastructure layer."""

from __future__ import annotations

import json
from time import perf_counter
from typing import Any, Dict, Optional, Tuple

import httpx

from cumulocity_client.domain.entities.endpoint import PreparedRequest, RawResponse
from cumulocity_client.domain.entities.errors import HttpStatusError, TransportError
from cumulocity_client.domain.ports.request_executor import IRequestExecutor
from cumulocity_client.shared import get_logger

logger = get_logger(__name__)


class HttpxRequestExecutor(IRequestExecutor):
    """Sends prepared requests through a shared ``httpx.AsyncClient``.

    The client, and with it the connection pool, belongs to the caller: the
    executor never opens or closes it. Every response is closed before
    ``send`` returns or raises, including when the awaiting task is
    cancelled, so connections always go back to the pool.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(
        self, request: PreparedRequest, *, timeout: Optional[float] = None
    ) -> RawResponse:
        """
        Exchange one request with the server.

        Args:
            request: Request built by the pipeline; ``path`` is relative to
                the client's base URL.
            timeout: Optional per-call timeout in seconds, overriding the
                client default.

        Returns:
            RawResponse: Status, headers and fully read body of a 2xx answer.

        Raises:
            HttpStatusError: The server answered outside 200-299.
            TransportError: Connection failure or timeout.
        """
        http_request = self._build_request(request, timeout)
        url = str(http_request.url)

        logger.debug(
            "c8y.request.sent",
            method=request.method,
            url=url,
            accept=request.headers.get("Accept"),
        )
        started = perf_counter()

        try:
            response = await self._client.send(http_request, stream=True)
            try:
                content = await response.aread()
            finally:
                await response.aclose()

        except httpx.TimeoutException as e:
            logger.error(
                "c8y.request.timeout",
                method=request.method,
                url=url,
                error=str(e),
            )
            raise TransportError(
                f"Request {request.method} {url} timed out",
                method=request.method,
                url=url,
                details={"error": str(e)},
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "c8y.request.transport_error",
                method=request.method,
                url=url,
                error=str(e),
            )
            raise TransportError(
                f"Failed to communicate with Cumulocity: {e}",
                method=request.method,
                url=url,
                details={"error": str(e)},
            ) from e

        elapsed_ms = (perf_counter() - started) * 1000

        if not httpx.codes.is_success(response.status_code):
            body = response.text
            error_code, error_message = self._parse_error_body(body)
            logger.error(
                "c8y.request.http_error",
                method=request.method,
                url=url,
                status_code=response.status_code,
                error_code=error_code,
                response_text=body[:512],
                elapsed_ms=round(elapsed_ms, 2),
            )
            raise HttpStatusError(
                response.status_code,
                reason=response.reason_phrase,
                body=body,
                method=request.method,
                url=url,
                error_code=error_code,
                error_message=error_message,
            )

        logger.info(
            "c8y.request.completed",
            method=request.method,
            url=url,
            status_code=response.status_code,
            bytes=len(content),
            elapsed_ms=round(elapsed_ms, 2),
        )

        return RawResponse(
            status_code=response.status_code,
            content=content,
            headers=dict(response.headers),
            reason=response.reason_phrase,
            encoding=response.encoding or "utf-8",
        )

    def _build_request(
        self, request: PreparedRequest, timeout: Optional[float]
    ) -> httpx.Request:
        kwargs: Dict[str, Any] = {"headers": request.headers}
        if request.files is not None:
            kwargs["files"] = request.files
        elif request.json is not None:
            kwargs["json"] = request.json
        if timeout is not None:
            kwargs["timeout"] = timeout
        return self._client.build_request(request.method, request.url, **kwargs)

    @staticmethod
    def _parse_error_body(body: str) -> Tuple[Optional[str], Optional[str]]:
        """Extract ``error`` and ``message`` from a platform error body."""
        try:
            payload = json.loads(body)
        except ValueError:
            return None, None
        if not isinstance(payload, dict):
            return None, None
        error_code = payload.get("error")
        error_message = payload.get("message") or error_code
        return (
            str(error_code) if error_code is not None else None,
            str(error_message) if error_message is not None else None,
        )
