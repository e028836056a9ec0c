"""Feature toggles and their per-tenant values."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .base import CumulocityModel


class FeaturePhase(str, Enum):
    """Current phase of a feature toggle rollout."""

    IN_DEVELOPMENT = "IN_DEVELOPMENT"
    PRIVATE_PREVIEW = "PRIVATE_PREVIEW"
    PUBLIC_PREVIEW = "PUBLIC_PREVIEW"
    GENERALLY_AVAILABLE = "GENERALLY_AVAILABLE"


class FeatureStrategy(str, Enum):
    """Source of a toggle value: the definition default or a tenant override."""

    DEFAULT = "DEFAULT"
    TENANT = "TENANT"


class FeatureToggle(CumulocityModel):
    key: Optional[str] = None
    phase: Optional[FeaturePhase] = None
    active: Optional[bool] = None
    strategy: Optional[FeatureStrategy] = None


class FeatureToggleValue(CumulocityModel):
    active: Optional[bool] = None


class TenantFeatureToggleValue(CumulocityModel):
    tenant_id: Optional[str] = None
    active: Optional[bool] = None
