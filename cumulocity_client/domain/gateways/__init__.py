"""
Gateways Package - Domain Layer

This package contains the interfaces of the platform API groups.
Concrete implementations are provided by the infrastructure layer.
"""

from .application_binaries_api import IApplicationBinariesApi
from .audits_api import IAuditsApi
from .device_statistics_api import IDeviceStatisticsApi
from .feature_toggles_api import IFeatureTogglesApi
from .realtime_notification_api import IRealtimeNotificationApi
from .usage_statistics_api import IUsageStatisticsApi
from .users_api import IUsersApi

__all__ = [
    "IApplicationBinariesApi",
    "IAuditsApi",
    "IDeviceStatisticsApi",
    "IFeatureTogglesApi",
    "IRealtimeNotificationApi",
    "IUsageStatisticsApi",
    "IUsersApi",
]
