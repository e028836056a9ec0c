"""Accept / Content-Type negotiation based on vendor media types."""

from __future__ import annotations

from typing import Dict, Optional

from cumulocity_client.domain.entities.endpoint import EndpointDescriptor
from cumulocity_client.shared.consts import EnumMediaType

VENDOR_PREFIX = "application/vnd.com.nsn.cumulocity."
ERROR_MEDIA_TYPE = f"{VENDOR_PREFIX}error+json"


def vendor_media_type(resource: str, version: Optional[str] = None) -> str:
    """Build the vendor media type of a resource kind.

    >>> vendor_media_type("user")
    'application/vnd.com.nsn.cumulocity.user+json'
    """
    media_type = f"{VENDOR_PREFIX}{resource}+json"
    if version:
        media_type += f";ver={version}"
    return media_type


class ContentNegotiator:
    """Sets the ``Accept`` and ``Content-Type`` headers of a request."""

    def accept_header(self, endpoint: EndpointDescriptor) -> str:
        """Preference list: error type, declared types, generic JSON."""
        preferences = [ERROR_MEDIA_TYPE, *endpoint.accept, EnumMediaType.JSON.value]
        return ", ".join(dict.fromkeys(preferences))

    def apply(
        self,
        endpoint: EndpointDescriptor,
        headers: Dict[str, str],
        *,
        has_body: bool,
    ) -> Dict[str, str]:
        headers["Accept"] = self.accept_header(endpoint)
        content_type = endpoint.content_type
        if has_body and content_type:
            # The transport writes the multipart header itself, with the boundary.
            if content_type != EnumMediaType.MULTIPART_FORM_DATA.value:
                headers["Content-Type"] = content_type
        return headers
