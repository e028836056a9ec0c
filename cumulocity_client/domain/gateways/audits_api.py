"""Audits API interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Type

from cumulocity_client.domain.entities.audit import (
    AuditRecord,
    AuditRecordCollection,
    AuditRecordT,
)


class IAuditsApi(ABC):
    """Create and query audit records.

    An audit record extends an event with the user that carried out the
    activity, the application used, the activity itself and a severity.
    Operations are generic over the record type: pass a subclass of
    ``AuditRecord`` declaring custom fragments to get them typed.
    """

    @abstractmethod
    async def get_audit_records(
        self,
        *,
        application: Optional[str] = None,
        current_page: Optional[int] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        page_size: Optional[int] = None,
        source: Optional[str] = None,
        type: Optional[str] = None,
        user: Optional[str] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
        record_type: Type[AuditRecordT] = AuditRecord,
        timeout: Optional[float] = None,
    ) -> Optional[AuditRecordCollection[AuditRecordT]]:
        """
        Retrieve a page of audit records, filtered by the given criteria.

        Args:
            application: Name of the application the records belong to.
            current_page: Page to return.
            date_from: Start of the time range (inclusive).
            date_to: End of the time range (exclusive).
            page_size: Entries per page, at most 2000.
            source: Managed object id the records refer to.
            type: Audit record type.
            user: Username of the actor.
            with_total_elements: Include the total element count.
            with_total_pages: Include the total page count.
            record_type: Model the records are decoded into.
            timeout: Per-call timeout in seconds.
        """
        raise NotImplementedError

    @abstractmethod
    async def create_audit_record(
        self,
        body: AuditRecordT,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[AuditRecordT]:
        """Create an audit record; server-managed fields are not sent."""
        raise NotImplementedError

    @abstractmethod
    async def get_audit_record(
        self,
        record_id: str,
        *,
        record_type: Type[AuditRecordT] = AuditRecord,
        timeout: Optional[float] = None,
    ) -> Optional[AuditRecordT]:
        """Retrieve a single audit record."""
        raise NotImplementedError
