"""Device statistics API implementation - Infrastructure layer."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from cumulocity_client.domain.entities.device_statistics import (
    DeviceStatisticsCollection,
)
from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    QueryKind,
    QueryParameter,
)
from cumulocity_client.domain.gateways.device_statistics_api import (
    IDeviceStatisticsApi,
)
from cumulocity_client.infrastructure.pipeline import ApiPipeline
from cumulocity_client.shared.consts import EnumHttpMethod, EnumMediaType

_PAGING = (
    QueryParameter("currentPage", QueryKind.INTEGER),
    QueryParameter("deviceId"),
    QueryParameter("pageSize", QueryKind.INTEGER),
    QueryParameter("withTotalPages", QueryKind.BOOLEAN),
)

GET_MONTHLY_DEVICE_STATISTICS = EndpointDescriptor(
    name="device_statistics.monthly",
    method=EnumHttpMethod.GET,
    path="tenant/statistics/device/{tenantId}/monthly/{date}",
    accept=(EnumMediaType.JSON.value,),
    query=_PAGING,
    result_type=DeviceStatisticsCollection,
)

GET_DAILY_DEVICE_STATISTICS = EndpointDescriptor(
    name="device_statistics.daily",
    method=EnumHttpMethod.GET,
    path="tenant/statistics/device/{tenantId}/daily/{date}",
    accept=(EnumMediaType.JSON.value,),
    query=_PAGING,
    result_type=DeviceStatisticsCollection,
)


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


class DeviceStatisticsApi(IDeviceStatisticsApi):
    """HTTP client for the device statistics endpoints."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    async def get_monthly_device_statistics(
        self,
        tenant_id: str,
        month: date,
        *,
        current_page: Optional[int] = None,
        device_id: Optional[str] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> Optional[DeviceStatisticsCollection]:
        """
        Retrieve device statistics of one month.

        Args:
            tenant_id: Tenant the statistics belong to
            month: Any day of the month; a datetime is truncated to its date
            device_id: Restrict the result to one device
            timeout: Per-call timeout in seconds

        Returns:
            DeviceStatisticsCollection: Per-device request and storage counters
        """
        return await self._pipeline.invoke(
            GET_MONTHLY_DEVICE_STATISTICS,
            path=(tenant_id, _as_date(month)),
            query={
                "currentPage": current_page,
                "deviceId": device_id,
                "pageSize": page_size,
                "withTotalPages": with_total_pages,
            },
            timeout=timeout,
        )

    async def get_daily_device_statistics(
        self,
        tenant_id: str,
        day: date,
        *,
        current_page: Optional[int] = None,
        device_id: Optional[str] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> Optional[DeviceStatisticsCollection]:
        """Retrieve device statistics of one day."""
        return await self._pipeline.invoke(
            GET_DAILY_DEVICE_STATISTICS,
            path=(tenant_id, _as_date(day)),
            query={
                "currentPage": current_page,
                "deviceId": device_id,
                "pageSize": page_size,
                "withTotalPages": with_total_pages,
            },
            timeout=timeout,
        )
