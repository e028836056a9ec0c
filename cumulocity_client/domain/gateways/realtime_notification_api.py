"""Realtime notification API interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from cumulocity_client.domain.entities.realtime import RealtimeNotification


class IRealtimeNotificationApi(ABC):
    """Send a single message to the realtime notification channel.

    The channel speaks the Bayeux protocol (handshake, subscribe, connect,
    unsubscribe, disconnect). Only the message exchange is exposed here;
    threading the server-assigned ``clientId`` through a session is left to
    the caller.
    """

    @abstractmethod
    async def create_realtime_notification(
        self,
        body: RealtimeNotification,
        processing_mode: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[RealtimeNotification]:
        """
        Post one Bayeux message.

        Args:
            body: Message to send; server-only fields are not sent.
            processing_mode: Value of the ``X-Cumulocity-Processing-Mode``
                header (for example ``PERSISTENT`` or ``TRANSIENT``).
            timeout: Per-call timeout in seconds.
        """
        raise NotImplementedError
