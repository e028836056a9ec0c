"""Realtime notification API implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Optional

from cumulocity_client.domain.entities.endpoint import EndpointDescriptor
from cumulocity_client.domain.entities.realtime import RealtimeNotification
from cumulocity_client.domain.gateways.realtime_notification_api import (
    IRealtimeNotificationApi,
)
from cumulocity_client.infrastructure.pipeline import ApiPipeline
from cumulocity_client.shared import get_logger
from cumulocity_client.shared.consts import EnumHttpMethod, EnumMediaType

logger = get_logger(__name__)

PROCESSING_MODE_HEADER = "X-Cumulocity-Processing-Mode"

CREATE_REALTIME_NOTIFICATION = EndpointDescriptor(
    name="realtime.notify",
    method=EnumHttpMethod.POST,
    path="notification/realtime",
    accept=(EnumMediaType.JSON.value,),
    content_type=EnumMediaType.JSON.value,
    result_type=RealtimeNotification,
    stripped_fields=("clientId", "data", "error", "successful"),
)


class RealtimeNotificationApi(IRealtimeNotificationApi):
    """HTTP client for the realtime notification channel."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    async def create_realtime_notification(
        self,
        body: RealtimeNotification,
        processing_mode: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[RealtimeNotification]:
        """
        Send a message over the realtime notification channel.

        Handshake, subscribe, connect and disconnect all go through this call;
        ``body.channel`` selects the meta channel.

        Args:
            body: Message to send; clientId, data, error and successful are not sent
            processing_mode: Value of the ``X-Cumulocity-Processing-Mode`` header
            timeout: Per-call timeout in seconds

        Returns:
            RealtimeNotification: The server's answer to the message

        Raises:
            HttpStatusError: If the platform answers with an error status
            TransportError: If the request could not be sent
        """
        logger.debug(
            "c8y.realtime.message",
            channel=body.channel,
            processing_mode=processing_mode,
        )
        return await self._pipeline.invoke(
            CREATE_REALTIME_NOTIFICATION,
            body=body,
            headers={PROCESSING_MODE_HEADER: processing_mode},
            timeout=timeout,
        )
