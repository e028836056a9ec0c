"""Audit records."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import Field

from .base import CumulocityModel, PagedCollection


class AuditSeverity(str, Enum):
    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    WARNING = "warning"
    INFORMATION = "information"


class ChangeType(str, Enum):
    ADDED = "ADDED"
    REPLACED = "REPLACED"


class Change(CumulocityModel):
    """A single attribute change recorded by an audit record."""

    attribute: Optional[str] = None
    new_value: Optional[Any] = None
    previous_value: Optional[Any] = None
    type: Optional[ChangeType] = None


class ObjectSource(CumulocityModel):
    """Reference to the managed object an audit record belongs to."""

    id: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")


class AuditRecord(CumulocityModel):
    """A security relevant event stored for auditing.

    Custom fragments such as ``c8y_Metadata`` are kept as extra fields.
    """

    id: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")
    activity: Optional[str] = None
    application: Optional[str] = None
    changes: Optional[List[Change]] = None
    creation_time: Optional[datetime] = None
    severity: Optional[AuditSeverity] = None
    source: Optional[ObjectSource] = None
    text: Optional[str] = None
    time: Optional[datetime] = None
    type: Optional[str] = None
    user: Optional[str] = None


AuditRecordT = TypeVar("AuditRecordT", bound=AuditRecord)


class AuditRecordCollection(PagedCollection, Generic[AuditRecordT]):
    """A page of audit records."""

    audit_records: Optional[List[AuditRecordT]] = None
