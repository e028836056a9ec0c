"""
Client Errors

This module defines the error taxonomy raised by the request pipeline.
Every error carries enough detail to diagnose a failure without replaying
the call.
"""

from typing import Any, Dict, Optional

# Longest body fragment quoted in error messages.
BODY_EXCERPT_LIMIT = 512


def excerpt(text: str, limit: int = BODY_EXCERPT_LIMIT) -> str:
    """Shorten a response body for inclusion in an error message."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class CumulocityError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class EncodingError(CumulocityError):
    """Raised when a path or query value is missing or cannot be encoded.

    Encoding errors are detected locally; nothing is sent over the wire.
    """


class TransportError(CumulocityError):
    """Raised when the request could not be exchanged with the server.

    Covers connection failures and timeouts. The originating httpx
    exception is available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.method = method
        self.url = url
        super().__init__(message, details)


class HttpStatusError(CumulocityError):
    """Raised when the server answers with a status outside 200-299."""

    def __init__(
        self,
        status_code: int,
        *,
        reason: str = "",
        body: str = "",
        method: Optional[str] = None,
        url: Optional[str] = None,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.method = method
        self.url = url
        self.error_code = error_code
        self.error_message = error_message

        status_line = f"HTTP {status_code} {reason}".rstrip()
        target = f" for {method} {url}" if method and url else ""
        detail = error_message or excerpt(body)
        message = f"{status_line}{target}: {detail}" if detail else status_line + target
        super().__init__(
            message,
            {
                "status_code": status_code,
                "error_code": error_code,
                "body": excerpt(body),
            },
        )


class DecodeError(CumulocityError):
    """Raised when a response body does not parse as the declared type."""

    def __init__(
        self,
        message: str,
        *,
        result_type: Any = None,
        body: str = "",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.result_type = result_type
        self.body = body
        super().__init__(message, details)
