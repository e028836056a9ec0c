"""Applications and their binary attachments."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import CumulocityModel


class ApplicationType(str, Enum):
    EXTERNAL = "EXTERNAL"
    HOSTED = "HOSTED"
    MICROSERVICE = "MICROSERVICE"


class ApplicationAvailability(str, Enum):
    MARKET = "MARKET"
    PRIVATE = "PRIVATE"


class ApplicationOwner(CumulocityModel):
    self_link: Optional[str] = Field(default=None, alias="self")
    tenant: Optional[Dict[str, Any]] = None


class ApplicationVersionTag(CumulocityModel):
    """Tags assigned to an application version, unique across versions."""

    tags: List[str] = Field(default_factory=list)


class Application(CumulocityModel):
    """An application registered in the platform."""

    id: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")
    key: Optional[str] = None
    name: Optional[str] = None
    type: Optional[ApplicationType] = None
    availability: Optional[ApplicationAvailability] = None
    context_path: Optional[str] = None
    description: Optional[str] = None
    active_version_id: Optional[str] = None
    manifest: Optional[Dict[str, Any]] = None
    owner: Optional[ApplicationOwner] = None
    roles: Optional[List[str]] = None
    required_roles: Optional[List[str]] = None
    resources_url: Optional[str] = None
    breadcrumbs: Optional[bool] = None
    content_security_policy: Optional[str] = None
    dynamic_options_url: Optional[str] = None
    global_title: Optional[str] = None
    legacy: Optional[bool] = None
    right_drawer: Optional[bool] = None
    upgrade: Optional[bool] = None


class ApplicationBinaryAttachment(CumulocityModel):
    """Metadata of one binary uploaded to an application."""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    content_type: Optional[str] = None
    length: Optional[int] = None
    created: Optional[datetime] = None
    download_url: Optional[str] = None


class ApplicationBinaries(CumulocityModel):
    """Collection of binaries attached to an application."""

    self_link: Optional[str] = Field(default=None, alias="self")
    attachments: Optional[List[ApplicationBinaryAttachment]] = None
