"""Usage statistics API implementation - Infrastructure layer."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Type

from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    QueryKind,
    QueryParameter,
    ResultKind,
)
from cumulocity_client.domain.entities.usage_statistics import (
    CustomProperties,
    CustomPropertiesT,
    RangeStatisticsFile,
    StatisticsFile,
    SummaryAllTenantsUsageStatistics,
    SummaryTenantUsageStatistics,
    TenantUsageStatisticsCollection,
    TenantUsageStatisticsFileCollection,
)
from cumulocity_client.domain.gateways.usage_statistics_api import (
    IUsageStatisticsApi,
)
from cumulocity_client.infrastructure.pipeline import ApiPipeline, vendor_media_type
from cumulocity_client.shared import get_logger
from cumulocity_client.shared.consts import EnumHttpMethod, EnumMediaType

logger = get_logger(__name__)

_DATE_RANGE = (
    QueryParameter("dateFrom", QueryKind.DATETIME),
    QueryParameter("dateTo", QueryKind.DATETIME),
)

GET_TENANT_USAGE_STATISTICS_COLLECTION = EndpointDescriptor(
    name="usage_statistics.list",
    method=EnumHttpMethod.GET,
    path="tenant/statistics",
    accept=(vendor_media_type("tenantusagestatisticscollection"),),
    query=(
        QueryParameter("currentPage", QueryKind.INTEGER),
        *_DATE_RANGE,
        QueryParameter("pageSize", QueryKind.INTEGER),
        QueryParameter("withTotalElements", QueryKind.BOOLEAN),
        QueryParameter("withTotalPages", QueryKind.BOOLEAN),
    ),
    result_type=TenantUsageStatisticsCollection,
)

GET_TENANT_USAGE_STATISTICS = EndpointDescriptor(
    name="usage_statistics.summary",
    method=EnumHttpMethod.GET,
    path="tenant/statistics/summary",
    accept=(vendor_media_type("tenantusagestatisticssummary"),),
    query=(*_DATE_RANGE, QueryParameter("tenant")),
    result_type=SummaryTenantUsageStatistics,
)

GET_TENANTS_USAGE_STATISTICS = EndpointDescriptor(
    name="usage_statistics.all_tenants_summary",
    method=EnumHttpMethod.GET,
    path="tenant/statistics/allTenantsSummary",
    accept=(EnumMediaType.JSON.value,),
    query=_DATE_RANGE,
    result_type=List[SummaryAllTenantsUsageStatistics[CustomProperties]],
)

GET_METADATA = EndpointDescriptor(
    name="usage_statistics.files.list",
    method=EnumHttpMethod.GET,
    path="tenant/statistics/files",
    accept=(EnumMediaType.JSON.value,),
    query=(
        QueryParameter("currentPage", QueryKind.INTEGER),
        *_DATE_RANGE,
        QueryParameter("pageSize", QueryKind.INTEGER),
        QueryParameter("withTotalPages", QueryKind.BOOLEAN),
    ),
    result_type=TenantUsageStatisticsFileCollection,
)

GENERATE_STATISTICS_FILE = EndpointDescriptor(
    name="usage_statistics.files.generate",
    method=EnumHttpMethod.POST,
    path="tenant/statistics/files",
    accept=(EnumMediaType.JSON.value,),
    content_type=EnumMediaType.JSON.value,
    result_type=StatisticsFile,
)

GET_STATISTICS_FILE = EndpointDescriptor(
    name="usage_statistics.files.download",
    method=EnumHttpMethod.GET,
    path="tenant/statistics/files/{id}",
    accept=(EnumMediaType.OCTET_STREAM.value,),
    result=ResultKind.STREAM,
)

GET_LATEST_STATISTICS_FILE = EndpointDescriptor(
    name="usage_statistics.files.latest",
    method=EnumHttpMethod.GET,
    path="tenant/statistics/files/latest/{month}",
    accept=(EnumMediaType.OCTET_STREAM.value,),
    result=ResultKind.STREAM,
)


class UsageStatisticsApi(IUsageStatisticsApi):
    """HTTP client for the tenant usage statistics endpoints."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    async def get_tenant_usage_statistics_collection(
        self,
        *,
        current_page: Optional[int] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        page_size: Optional[int] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> Optional[TenantUsageStatisticsCollection]:
        """Retrieve a page of daily usage statistics of the current tenant."""
        return await self._pipeline.invoke(
            GET_TENANT_USAGE_STATISTICS_COLLECTION,
            query={
                "currentPage": current_page,
                "dateFrom": date_from,
                "dateTo": date_to,
                "pageSize": page_size,
                "withTotalElements": with_total_elements,
                "withTotalPages": with_total_pages,
            },
            timeout=timeout,
        )

    async def get_tenant_usage_statistics(
        self,
        *,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        tenant: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Optional[SummaryTenantUsageStatistics]:
        """Retrieve the usage summary of a tenant over a time range."""
        return await self._pipeline.invoke(
            GET_TENANT_USAGE_STATISTICS,
            query={"dateFrom": date_from, "dateTo": date_to, "tenant": tenant},
            timeout=timeout,
        )

    async def get_tenants_usage_statistics(
        self,
        *,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        properties_type: Type[CustomPropertiesT] = CustomProperties,
        timeout: Optional[float] = None,
    ) -> Optional[List[SummaryAllTenantsUsageStatistics[CustomPropertiesT]]]:
        """
        Retrieve the usage summaries of all subtenants.

        Args:
            date_from: Start of the time range, must carry a timezone
            date_to: End of the time range, must carry a timezone
            properties_type: Model the custom properties are decoded into
            timeout: Per-call timeout in seconds

        Returns:
            list: One summary per tenant
        """
        return await self._pipeline.invoke(
            GET_TENANTS_USAGE_STATISTICS,
            query={"dateFrom": date_from, "dateTo": date_to},
            result_type=List[SummaryAllTenantsUsageStatistics[properties_type]],
            timeout=timeout,
        )

    async def get_metadata(
        self,
        *,
        current_page: Optional[int] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> Optional[TenantUsageStatisticsFileCollection]:
        """List the metadata of the generated statistics files."""
        return await self._pipeline.invoke(
            GET_METADATA,
            query={
                "currentPage": current_page,
                "dateFrom": date_from,
                "dateTo": date_to,
                "pageSize": page_size,
                "withTotalPages": with_total_pages,
            },
            timeout=timeout,
        )

    async def generate_statistics_file(
        self, body: RangeStatisticsFile, *, timeout: Optional[float] = None
    ) -> Optional[StatisticsFile]:
        """
        Ask the platform to generate a statistics file for a date range.

        Returns:
            StatisticsFile: Reference to the file being generated
        """
        logger.info(
            "c8y.usage_statistics.file.generate",
            date_from=body.date_from,
            date_to=body.date_to,
        )
        return await self._pipeline.invoke(
            GENERATE_STATISTICS_FILE, body=body, timeout=timeout
        )

    async def get_statistics_file(
        self, file_id: str, *, timeout: Optional[float] = None
    ) -> bytes:
        """Download a generated statistics file."""
        return await self._pipeline.invoke(
            GET_STATISTICS_FILE, path=(file_id,), timeout=timeout
        )

    async def get_latest_statistics_file(
        self, month: date, *, timeout: Optional[float] = None
    ) -> bytes:
        """Download the latest statistics file of a month."""
        if isinstance(month, datetime):
            month = month.date()
        return await self._pipeline.invoke(
            GET_LATEST_STATISTICS_FILE, path=(month,), timeout=timeout
        )
