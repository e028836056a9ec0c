"""Messages of the realtime notification channel (Bayeux protocol)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .base import CumulocityModel


class RealtimeAdvice(CumulocityModel):
    interval: Optional[int] = None
    reconnect: Optional[str] = None
    timeout: Optional[int] = None


class RealtimeNotification(CumulocityModel):
    """A single Bayeux message sent to or received from the channel.

    ``clientId`` is assigned by the server during the handshake; ``data``,
    ``error`` and ``successful`` are only ever set by the server.
    """

    id: Optional[str] = None
    channel: Optional[str] = None
    client_id: Optional[str] = None
    subscription: Optional[str] = None
    connection_type: Optional[str] = None
    version: Optional[str] = None
    minimum_version: Optional[str] = None
    supported_connection_types: Optional[List[str]] = None
    advice: Optional[RealtimeAdvice] = None
    ext: Optional[Dict[str, Any]] = None
    data: Optional[Any] = None
    error: Optional[str] = None
    successful: Optional[bool] = None
