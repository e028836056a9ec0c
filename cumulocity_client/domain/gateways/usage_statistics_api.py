"""Usage statistics API interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional, Type

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


class IUsageStatisticsApi(ABC):
    """Retrieve tenant usage statistics and statistics file reports.

    Statistics are collected daily. Files come in two kinds: REAL files are
    generated by the platform on the first day of each month for the
    previous month, TEST files are generated on demand for a time range.
    """

    @abstractmethod
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
        """Daily usage statistics of the current tenant."""
        raise NotImplementedError

    @abstractmethod
    async def get_tenant_usage_statistics(
        self,
        *,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        tenant: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Optional[SummaryTenantUsageStatistics]:
        """Usage summary of a tenant over a time range."""
        raise NotImplementedError

    @abstractmethod
    async def get_tenants_usage_statistics(
        self,
        *,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        properties_type: Type[CustomPropertiesT] = CustomProperties,
        timeout: Optional[float] = None,
    ) -> Optional[List[SummaryAllTenantsUsageStatistics[CustomPropertiesT]]]:
        """Usage summaries of all subtenants over a time range."""
        raise NotImplementedError

    @abstractmethod
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
        """Metadata of the generated statistics files."""
        raise NotImplementedError

    @abstractmethod
    async def generate_statistics_file(
        self, body: RangeStatisticsFile, *, timeout: Optional[float] = None
    ) -> Optional[StatisticsFile]:
        """Generate a TEST statistics file for the given range."""
        raise NotImplementedError

    @abstractmethod
    async def get_statistics_file(
        self, file_id: str, *, timeout: Optional[float] = None
    ) -> bytes:
        """Download a statistics file."""
        raise NotImplementedError

    @abstractmethod
    async def get_latest_statistics_file(
        self, month: date, *, timeout: Optional[float] = None
    ) -> bytes:
        """Download the latest REAL statistics file of a month."""
        raise NotImplementedError
