"""
Gateways Package - Infrastructure Layer

This package contains the HTTP implementations of the API group
interfaces defined in the domain layer. Each module declares the
endpoint descriptors of its group and runs them through the shared
request pipeline.
"""

from .application_binaries_api import ApplicationBinariesApi
from .audits_api import AuditsApi
from .device_statistics_api import DeviceStatisticsApi
from .feature_toggles_api import FeatureTogglesApi
from .realtime_notification_api import RealtimeNotificationApi
from .usage_statistics_api import UsageStatisticsApi
from .users_api import UsersApi

__all__ = [
    "ApplicationBinariesApi",
    "AuditsApi",
    "DeviceStatisticsApi",
    "FeatureTogglesApi",
    "RealtimeNotificationApi",
    "UsageStatisticsApi",
    "UsersApi",
]
