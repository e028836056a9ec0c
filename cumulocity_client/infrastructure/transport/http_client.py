"""
Cumulocity HTTP client - Infrastructure Layer

This module provides the pooled ``httpx.AsyncClient`` bound to one tenant.
It handles the base URL, basic authentication, TLS verification, pool
limits and the default timeout.
"""

from typing import Optional

import httpx

from cumulocity_client.shared import get_logger

logger = get_logger(__name__)


class CumulocityHttpClient:
    """Connection pool to a Cumulocity tenant."""

    def __init__(
        self,
        base_url: str,
        tenant: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        max_connections: int = 100,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Tenant URL, e.g. ``https://example.cumulocity.com``
            tenant: Tenant id, prefixed to the username for basic auth
            username: Platform user
            password: Password of the platform user
            timeout: Default timeout in seconds for every request
            verify_ssl: Verify the server certificate
            max_connections: Upper bound of pooled connections
            transport: Alternative transport, used in tests
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.client: httpx.AsyncClient = httpx.AsyncClient(
            base_url=self.base_url,
            auth=self.build_auth(tenant, username, password),
            timeout=timeout,
            verify=verify_ssl,
            limits=httpx.Limits(max_connections=max_connections),
            transport=transport,
        )
        logger.debug(
            "c8y.http_client.created",
            base_url=self.base_url,
            tenant=tenant,
            username=username,
            timeout=timeout,
        )

    @staticmethod
    def build_auth(
        tenant: Optional[str], username: Optional[str], password: Optional[str]
    ) -> Optional[httpx.BasicAuth]:
        """Basic auth as ``<tenant>/<username>``, or none without a username."""
        if not username:
            return None
        login = f"{tenant}/{username}" if tenant else username
        return httpx.BasicAuth(login, password or "")

    @property
    def is_closed(self) -> bool:
        return self.client.is_closed

    async def close(self) -> None:
        """Close the pool and every idle connection."""
        await self.client.aclose()
        logger.debug("c8y.http_client.closed", base_url=self.base_url)
