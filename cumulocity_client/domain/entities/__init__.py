"""
Domain Entities Package

This package contains the transport entities of the request pipeline, the
error taxonomy and the wire models of the platform resources.
"""

from .application import (
    Application,
    ApplicationAvailability,
    ApplicationBinaries,
    ApplicationBinaryAttachment,
    ApplicationType,
    ApplicationVersionTag,
)
from .audit import (
    AuditRecord,
    AuditRecordCollection,
    AuditSeverity,
    Change,
    ChangeType,
    ObjectSource,
)
from .base import CumulocityModel, PagedCollection, PageStatistics
from .device_statistics import DeviceStatistics, DeviceStatisticsCollection
from .endpoint import (
    EndpointDescriptor,
    ListStyle,
    PreparedRequest,
    QueryKind,
    QueryParameter,
    RawResponse,
    ResultKind,
)
from .errors import (
    CumulocityError,
    DecodeError,
    EncodingError,
    HttpStatusError,
    TransportError,
)
from .feature_toggle import (
    FeaturePhase,
    FeatureStrategy,
    FeatureToggle,
    FeatureToggleValue,
    TenantFeatureToggleValue,
)
from .realtime import RealtimeAdvice, RealtimeNotification
from .usage_statistics import (
    CustomProperties,
    RangeStatisticsFile,
    StatisticsFile,
    StatisticsFileType,
    SummaryAllTenantsUsageStatistics,
    SummaryTenantUsageStatistics,
    TenantUsageStatistics,
    TenantUsageStatisticsCollection,
    TenantUsageStatisticsFileCollection,
)
from .user import (
    DevicePermissions,
    Group,
    GroupReference,
    GroupReferenceCollection,
    PasswordStrength,
    Role,
    RoleReference,
    RoleReferenceCollection,
    SubscribedUser,
    SubscribedUserRef,
    User,
    UserCollection,
    UserReference,
    UserReferenceCollection,
)

__all__ = [
    "Application",
    "ApplicationAvailability",
    "ApplicationBinaries",
    "ApplicationBinaryAttachment",
    "ApplicationType",
    "ApplicationVersionTag",
    "AuditRecord",
    "AuditRecordCollection",
    "AuditSeverity",
    "Change",
    "ChangeType",
    "ObjectSource",
    "CumulocityModel",
    "PagedCollection",
    "PageStatistics",
    "DeviceStatistics",
    "DeviceStatisticsCollection",
    "EndpointDescriptor",
    "ListStyle",
    "PreparedRequest",
    "QueryKind",
    "QueryParameter",
    "RawResponse",
    "ResultKind",
    "CumulocityError",
    "DecodeError",
    "EncodingError",
    "HttpStatusError",
    "TransportError",
    "FeaturePhase",
    "FeatureStrategy",
    "FeatureToggle",
    "FeatureToggleValue",
    "TenantFeatureToggleValue",
    "RealtimeAdvice",
    "RealtimeNotification",
    "CustomProperties",
    "RangeStatisticsFile",
    "StatisticsFile",
    "StatisticsFileType",
    "SummaryAllTenantsUsageStatistics",
    "SummaryTenantUsageStatistics",
    "TenantUsageStatistics",
    "TenantUsageStatisticsCollection",
    "TenantUsageStatisticsFileCollection",
    "DevicePermissions",
    "Group",
    "GroupReference",
    "GroupReferenceCollection",
    "PasswordStrength",
    "Role",
    "RoleReference",
    "RoleReferenceCollection",
    "SubscribedUser",
    "SubscribedUserRef",
    "User",
    "UserCollection",
    "UserReference",
    "UserReferenceCollection",
]
