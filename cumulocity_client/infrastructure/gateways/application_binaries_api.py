"""Application binaries API implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Optional

from cumulocity_client.domain.entities.application import (
    Application,
    ApplicationBinaries,
)
from cumulocity_client.domain.entities.endpoint import EndpointDescriptor, ResultKind
from cumulocity_client.domain.gateways.application_binaries_api import (
    IApplicationBinariesApi,
)
from cumulocity_client.infrastructure.pipeline import ApiPipeline, vendor_media_type
from cumulocity_client.shared.consts import EnumHttpMethod, EnumMediaType

BINARIES_PATH = "application/applications/{id}/binaries"
BINARY_PATH = "application/applications/{id}/binaries/{binaryId}"

GET_APPLICATION_ATTACHMENTS = EndpointDescriptor(
    name="application_binaries.list",
    method=EnumHttpMethod.GET,
    path=BINARIES_PATH,
    accept=(vendor_media_type("applicationbinaries"),),
    result_type=ApplicationBinaries,
)

UPLOAD_APPLICATION_ATTACHMENT = EndpointDescriptor(
    name="application_binaries.upload",
    method=EnumHttpMethod.POST,
    path=BINARIES_PATH,
    accept=(vendor_media_type("application"),),
    content_type=EnumMediaType.MULTIPART_FORM_DATA.value,
    result_type=Application,
)

GET_APPLICATION_ATTACHMENT = EndpointDescriptor(
    name="application_binaries.download",
    method=EnumHttpMethod.GET,
    path=BINARY_PATH,
    accept=(EnumMediaType.ZIP.value,),
    result=ResultKind.STREAM,
)

DELETE_APPLICATION_ATTACHMENT = EndpointDescriptor(
    name="application_binaries.delete",
    method=EnumHttpMethod.DELETE,
    path=BINARY_PATH,
    result=ResultKind.STRING,
)


class ApplicationBinariesApi(IApplicationBinariesApi):
    """HTTP client for the application binaries endpoints."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    async def get_application_attachments(
        self, application_id: str, *, timeout: Optional[float] = None
    ) -> Optional[ApplicationBinaries]:
        """List the binaries attached to a hosted application."""
        return await self._pipeline.invoke(
            GET_APPLICATION_ATTACHMENTS, path=(application_id,), timeout=timeout
        )

    async def upload_application_attachment(
        self,
        file: bytes,
        application_id: str,
        *,
        file_name: str = "application.zip",
        timeout: Optional[float] = None,
    ) -> Optional[Application]:
        """
        Upload a zip archive as a new binary of a hosted application.

        The archive is sent as the ``file`` part of a multipart form.

        Args:
            file: Content of the zip archive
            application_id: Id of the hosted application
            file_name: File name reported in the form part
            timeout: Per-call timeout in seconds

        Returns:
            Application: The application with the new binary attached

        Raises:
            HttpStatusError: If the platform rejects the upload
            TransportError: If the request could not be sent
        """
        return await self._pipeline.invoke(
            UPLOAD_APPLICATION_ATTACHMENT,
            path=(application_id,),
            files={"file": (file_name, file, EnumMediaType.ZIP.value)},
            timeout=timeout,
        )

    async def get_application_attachment(
        self,
        application_id: str,
        binary_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Download a binary of a hosted application as raw zip bytes."""
        return await self._pipeline.invoke(
            GET_APPLICATION_ATTACHMENT,
            path=(application_id, binary_id),
            timeout=timeout,
        )

    async def delete_application_attachment(
        self,
        application_id: str,
        binary_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """Delete a binary; the active binary of an application cannot be removed."""
        return await self._pipeline.invoke(
            DELETE_APPLICATION_ATTACHMENT,
            path=(application_id, binary_id),
            timeout=timeout,
        )
