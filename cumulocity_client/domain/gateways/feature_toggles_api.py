"""Feature toggles API interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from cumulocity_client.domain.entities.feature_toggle import (
    FeatureToggle,
    FeatureToggleValue,
    TenantFeatureToggleValue,
)


class IFeatureTogglesApi(ABC):
    """Read feature toggles and override their values per tenant."""

    @abstractmethod
    async def list_current_tenant_features(
        self, *, timeout: Optional[float] = None
    ) -> Optional[List[FeatureToggle]]:
        """List all feature toggles with their value for the current tenant."""
        raise NotImplementedError

    @abstractmethod
    async def get_current_tenant_feature(
        self, feature_key: str, *, timeout: Optional[float] = None
    ) -> Optional[FeatureToggle]:
        """Retrieve one feature toggle for the current tenant."""
        raise NotImplementedError

    @abstractmethod
    async def list_tenant_feature_toggle_values(
        self, feature_key: str, *, timeout: Optional[float] = None
    ) -> Optional[List[TenantFeatureToggleValue]]:
        """List the tenant overrides of a feature toggle."""
        raise NotImplementedError

    @abstractmethod
    async def set_current_tenant_feature_toggle_value(
        self,
        body: FeatureToggleValue,
        feature_key: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """Override the toggle value for the current tenant."""
        raise NotImplementedError

    @abstractmethod
    async def unset_current_tenant_feature_toggle_value(
        self, feature_key: str, *, timeout: Optional[float] = None
    ) -> Optional[str]:
        """Remove the current tenant's override, restoring the default."""
        raise NotImplementedError

    @abstractmethod
    async def set_given_tenant_feature_toggle_value(
        self,
        body: FeatureToggleValue,
        feature_key: str,
        tenant_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """Override the toggle value for the given tenant."""
        raise NotImplementedError

    @abstractmethod
    async def unset_given_tenant_feature_toggle_value(
        self,
        feature_key: str,
        tenant_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """Remove the given tenant's override, restoring the default."""
        raise NotImplementedError
