"""Feature toggles API implementation - Infrastructure layer."""

from __future__ import annotations

from typing import List, Optional

from cumulocity_client.domain.entities.endpoint import EndpointDescriptor, ResultKind
from cumulocity_client.domain.entities.feature_toggle import (
    FeatureToggle,
    FeatureToggleValue,
    TenantFeatureToggleValue,
)
from cumulocity_client.domain.gateways.feature_toggles_api import IFeatureTogglesApi
from cumulocity_client.infrastructure.pipeline import ApiPipeline
from cumulocity_client.shared import get_logger
from cumulocity_client.shared.consts import EnumHttpMethod, EnumMediaType

logger = get_logger(__name__)

_JSON = (EnumMediaType.JSON.value,)

LIST_CURRENT_TENANT_FEATURES = EndpointDescriptor(
    name="features.list",
    method=EnumHttpMethod.GET,
    path="features",
    accept=_JSON,
    result_type=List[FeatureToggle],
)

GET_CURRENT_TENANT_FEATURE = EndpointDescriptor(
    name="features.get",
    method=EnumHttpMethod.GET,
    path="features/{featureKey}",
    accept=_JSON,
    result_type=FeatureToggle,
)

LIST_TENANT_FEATURE_TOGGLE_VALUES = EndpointDescriptor(
    name="features.by_tenant.list",
    method=EnumHttpMethod.GET,
    path="features/{featureKey}/by-tenant",
    accept=_JSON,
    result_type=List[TenantFeatureToggleValue],
)

SET_CURRENT_TENANT_FEATURE_TOGGLE_VALUE = EndpointDescriptor(
    name="features.by_tenant.set_current",
    method=EnumHttpMethod.PUT,
    path="features/{featureKey}/by-tenant",
    accept=_JSON,
    content_type=EnumMediaType.JSON.value,
    result=ResultKind.STRING,
)

UNSET_CURRENT_TENANT_FEATURE_TOGGLE_VALUE = EndpointDescriptor(
    name="features.by_tenant.unset_current",
    method=EnumHttpMethod.DELETE,
    path="features/{featureKey}/by-tenant",
    accept=_JSON,
    result=ResultKind.STRING,
)

SET_GIVEN_TENANT_FEATURE_TOGGLE_VALUE = EndpointDescriptor(
    name="features.by_tenant.set_given",
    method=EnumHttpMethod.PUT,
    path="features/{featureKey}/by-tenant/{tenantId}",
    accept=_JSON,
    content_type=EnumMediaType.JSON.value,
    result=ResultKind.STRING,
)

UNSET_GIVEN_TENANT_FEATURE_TOGGLE_VALUE = EndpointDescriptor(
    name="features.by_tenant.unset_given",
    method=EnumHttpMethod.DELETE,
    path="features/{featureKey}/by-tenant/{tenantId}",
    accept=_JSON,
    result=ResultKind.STRING,
)


class FeatureTogglesApi(IFeatureTogglesApi):
    """HTTP client for the feature toggle endpoints."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    async def list_current_tenant_features(
        self, *, timeout: Optional[float] = None
    ) -> Optional[List[FeatureToggle]]:
        """List the feature toggles visible to the current tenant."""
        return await self._pipeline.invoke(
            LIST_CURRENT_TENANT_FEATURES, timeout=timeout
        )

    async def get_current_tenant_feature(
        self, feature_key: str, *, timeout: Optional[float] = None
    ) -> Optional[FeatureToggle]:
        """Retrieve one feature toggle, resolved for the current tenant."""
        return await self._pipeline.invoke(
            GET_CURRENT_TENANT_FEATURE, path=(feature_key,), timeout=timeout
        )

    async def list_tenant_feature_toggle_values(
        self, feature_key: str, *, timeout: Optional[float] = None
    ) -> Optional[List[TenantFeatureToggleValue]]:
        """List the per-tenant overrides of a feature toggle."""
        return await self._pipeline.invoke(
            LIST_TENANT_FEATURE_TOGGLE_VALUES, path=(feature_key,), timeout=timeout
        )

    async def set_current_tenant_feature_toggle_value(
        self,
        body: FeatureToggleValue,
        feature_key: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """
        Override a feature toggle for the current tenant.

        Args:
            body: Value the toggle is set to
            feature_key: Key of the feature toggle
            timeout: Per-call timeout in seconds

        Returns:
            str: Response body as text, usually empty
        """
        logger.info(
            "c8y.features.override",
            feature_key=feature_key,
            tenant="current",
            active=body.active,
        )
        return await self._pipeline.invoke(
            SET_CURRENT_TENANT_FEATURE_TOGGLE_VALUE,
            path=(feature_key,),
            body=body,
            timeout=timeout,
        )

    async def unset_current_tenant_feature_toggle_value(
        self, feature_key: str, *, timeout: Optional[float] = None
    ) -> Optional[str]:
        """Remove the current tenant's override so the default applies again."""
        logger.info("c8y.features.reset", feature_key=feature_key, tenant="current")
        return await self._pipeline.invoke(
            UNSET_CURRENT_TENANT_FEATURE_TOGGLE_VALUE,
            path=(feature_key,),
            timeout=timeout,
        )

    async def set_given_tenant_feature_toggle_value(
        self,
        body: FeatureToggleValue,
        feature_key: str,
        tenant_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """Override a feature toggle for the given tenant."""
        logger.info(
            "c8y.features.override",
            feature_key=feature_key,
            tenant=tenant_id,
            active=body.active,
        )
        return await self._pipeline.invoke(
            SET_GIVEN_TENANT_FEATURE_TOGGLE_VALUE,
            path=(feature_key, tenant_id),
            body=body,
            timeout=timeout,
        )

    async def unset_given_tenant_feature_toggle_value(
        self,
        feature_key: str,
        tenant_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[str]:
        """Remove the given tenant's override of a feature toggle."""
        logger.info("c8y.features.reset", feature_key=feature_key, tenant=tenant_id)
        return await self._pipeline.invoke(
            UNSET_GIVEN_TENANT_FEATURE_TOGGLE_VALUE,
            path=(feature_key, tenant_id),
            timeout=timeout,
        )
