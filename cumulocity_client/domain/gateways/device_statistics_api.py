"""Device statistics API interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from cumulocity_client.domain.entities.device_statistics import (
    DeviceStatisticsCollection,
)


class IDeviceStatisticsApi(ABC):
    """Retrieve per-device request statistics of a tenant."""

    @abstractmethod
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
        """Statistics of the month containing ``month`` (the day is ignored)."""
        raise NotImplementedError

    @abstractmethod
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
        """Statistics of a single day."""
        raise NotImplementedError
