"""Tenant usage statistics and statistics files."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import Field

from .base import CumulocityModel, PagedCollection


class TenantUsageStatistics(CumulocityModel):
    """Usage counters of a tenant for a single day."""

    day: Optional[datetime] = None
    self_link: Optional[str] = Field(default=None, alias="self")
    alarms_created_count: Optional[int] = None
    alarms_updated_count: Optional[int] = None
    device_count: Optional[int] = None
    device_endpoint_count: Optional[int] = None
    device_request_count: Optional[int] = None
    device_with_children_count: Optional[int] = None
    events_created_count: Optional[int] = None
    events_updated_count: Optional[int] = None
    inventories_created_count: Optional[int] = None
    inventories_updated_count: Optional[int] = None
    measurements_created_count: Optional[int] = None
    request_count: Optional[int] = None
    storage_size: Optional[int] = None
    subscribed_applications: Optional[List[str]] = None
    total_resource_create_and_update_count: Optional[int] = None


class TenantUsageStatisticsCollection(PagedCollection):
    usage_statistics: Optional[List[TenantUsageStatistics]] = None


class SummaryTenantUsageStatistics(TenantUsageStatistics):
    """Usage counters summed over a date range."""

    device_count_series: Optional[List[int]] = None
    device_endpoint_count_series: Optional[List[int]] = None
    device_with_children_count_series: Optional[List[int]] = None
    storage_limit_per_device: Optional[int] = None
    resources: Optional[Dict[str, Any]] = None
    usage: Optional[Dict[str, Any]] = None


class CustomProperties(CumulocityModel):
    """Tenant custom properties; subclass to declare known keys."""


CustomPropertiesT = TypeVar("CustomPropertiesT", bound=CustomProperties)


class SummaryAllTenantsUsageStatistics(
    SummaryTenantUsageStatistics, Generic[CustomPropertiesT]
):
    """Usage summary of one tenant as listed in the all-tenants report."""

    tenant_id: Optional[str] = None
    tenant_domain: Optional[str] = None
    tenant_company: Optional[str] = None
    tenant_external_reference: Optional[str] = None
    parent_tenant_id: Optional[str] = None
    creation_time: Optional[datetime] = None
    tenant_custom_properties: Optional[CustomPropertiesT] = None


class StatisticsFileType(str, Enum):
    REAL = "REAL"
    TEST = "TEST"


class StatisticsFile(CumulocityModel):
    """Metadata of a generated statistics file report."""

    id: Optional[str] = None
    instance_name: Optional[str] = None
    generation_date: Optional[datetime] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    type: Optional[StatisticsFileType] = None


class RangeStatisticsFile(CumulocityModel):
    """Time range of a TEST statistics file report to generate."""

    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


class TenantUsageStatisticsFileCollection(PagedCollection):
    statistics_files: Optional[List[StatisticsFile]] = None
