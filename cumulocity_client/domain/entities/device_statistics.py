"""Device statistics, counted per device per day or month."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import CumulocityModel


class DeviceStatistics(CumulocityModel):
    count: Optional[int] = None
    device_id: Optional[str] = None
    device_parents: Optional[List[str]] = None
    device_type: Optional[str] = None


class DeviceStatisticsCollection(CumulocityModel):
    """A page of device statistics.

    Unlike other collections, ``statistics`` holds the entries themselves and
    not the paging information.
    """

    self_link: Optional[str] = Field(default=None, alias="self")
    next: Optional[str] = None
    prev: Optional[str] = None
    statistics: Optional[List[DeviceStatistics]] = None
