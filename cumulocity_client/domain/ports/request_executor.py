"""Domain port for sending prepared requests."""

from __future__ import annotations

from typing import Optional, Protocol

from cumulocity_client.domain.entities.endpoint import PreparedRequest, RawResponse


class IRequestExecutor(Protocol):
    """Sends one request over a shared transport and classifies the result."""

    async def send(
        self, request: PreparedRequest, *, timeout: Optional[float] = None
    ) -> RawResponse:
        """Exchange the request with the server.

        Returns:
            The response once its body has been read, for 2xx statuses only.

        Raises:
            HttpStatusError: The server answered outside 200-299.
            TransportError: The exchange failed or timed out.
        """
        ...
