"""Audits API implementation - Infrastructure layer."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Type

from cumulocity_client.domain.entities.audit import (
    AuditRecord,
    AuditRecordCollection,
    AuditRecordT,
)
from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    QueryKind,
    QueryParameter,
)
from cumulocity_client.domain.gateways.audits_api import IAuditsApi
from cumulocity_client.infrastructure.pipeline import ApiPipeline, vendor_media_type
from cumulocity_client.shared.consts import EnumHttpMethod

AUDIT_RECORD_TYPE = vendor_media_type("auditrecord")

GET_AUDIT_RECORDS = EndpointDescriptor(
    name="audits.list",
    method=EnumHttpMethod.GET,
    path="audit/auditRecords",
    accept=(vendor_media_type("auditrecordcollection"),),
    query=(
        QueryParameter("application"),
        QueryParameter("currentPage", QueryKind.INTEGER),
        QueryParameter("dateFrom", QueryKind.DATETIME),
        QueryParameter("dateTo", QueryKind.DATETIME),
        QueryParameter("pageSize", QueryKind.INTEGER),
        QueryParameter("source"),
        QueryParameter("type"),
        QueryParameter("user"),
        QueryParameter("withTotalElements", QueryKind.BOOLEAN),
        QueryParameter("withTotalPages", QueryKind.BOOLEAN),
    ),
    result_type=AuditRecordCollection[AuditRecord],
)

CREATE_AUDIT_RECORD = EndpointDescriptor(
    name="audits.create",
    method=EnumHttpMethod.POST,
    path="audit/auditRecords",
    accept=(AUDIT_RECORD_TYPE,),
    content_type=AUDIT_RECORD_TYPE,
    result_type=AuditRecord,
    stripped_fields=(
        "severity",
        "application",
        "creationTime",
        "c8y_Metadata",
        "changes",
        "self",
        "id",
        "source.self",
    ),
)

GET_AUDIT_RECORD = EndpointDescriptor(
    name="audits.get",
    method=EnumHttpMethod.GET,
    path="audit/auditRecords/{id}",
    accept=(AUDIT_RECORD_TYPE,),
    result_type=AuditRecord,
)


class AuditsApi(IAuditsApi):
    """HTTP client for the audit record endpoints."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

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
        Retrieve a page of audit records matching the given filters.

        Args:
            date_from: Start of the time range, must carry a timezone
            date_to: End of the time range, must carry a timezone
            record_type: ``AuditRecord`` subclass the records are decoded into
            timeout: Per-call timeout in seconds

        Returns:
            AuditRecordCollection: Records of the requested page

        Raises:
            EncodingError: If a filter cannot be represented in the query
            HttpStatusError: If the platform answers with an error status
            DecodeError: If the page does not match ``record_type``
        """
        return await self._pipeline.invoke(
            GET_AUDIT_RECORDS,
            query={
                "application": application,
                "currentPage": current_page,
                "dateFrom": date_from,
                "dateTo": date_to,
                "pageSize": page_size,
                "source": source,
                "type": type,
                "user": user,
                "withTotalElements": with_total_elements,
                "withTotalPages": with_total_pages,
            },
            result_type=AuditRecordCollection[record_type],
            timeout=timeout,
        )

    async def create_audit_record(
        self,
        body: AuditRecordT,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[AuditRecordT]:
        """
        Create an audit record.

        Server-managed fields are not sent. The answer is decoded into the
        type of ``body``.
        """
        return await self._pipeline.invoke(
            CREATE_AUDIT_RECORD,
            body=body,
            result_type=type(body),
            timeout=timeout,
        )

    async def get_audit_record(
        self,
        record_id: str,
        *,
        record_type: Type[AuditRecordT] = AuditRecord,
        timeout: Optional[float] = None,
    ) -> Optional[AuditRecordT]:
        """Retrieve a single audit record by id."""
        return await self._pipeline.invoke(
            GET_AUDIT_RECORD,
            path=(record_id,),
            result_type=record_type,
            timeout=timeout,
        )
