"""Application binaries API interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from cumulocity_client.domain.entities.application import (
    Application,
    ApplicationBinaries,
)


class IApplicationBinariesApi(ABC):
    """Upload, list, download and delete the binaries of an application.

    Binaries are the archives (for example microservice images or web app
    bundles) that back the versions of hosted applications.
    """

    @abstractmethod
    async def get_application_attachments(
        self, application_id: str, *, timeout: Optional[float] = None
    ) -> Optional[ApplicationBinaries]:
        """Retrieve the metadata of all binaries of an application."""
        raise NotImplementedError

    @abstractmethod
    async def upload_application_attachment(
        self,
        file: bytes,
        application_id: str,
        *,
        file_name: str = "application.zip",
        timeout: Optional[float] = None,
    ) -> Optional[Application]:
        """Upload a zip archive as a new binary of the application."""
        raise NotImplementedError

    @abstractmethod
    async def get_application_attachment(
        self,
        application_id: str,
        binary_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Download one binary of the application as raw bytes."""
        raise NotImplementedError

    @abstractmethod
    async def delete_application_attachment(
        self,
        application_id: str,
        binary_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """Delete one binary of the application."""
        raise NotImplementedError
