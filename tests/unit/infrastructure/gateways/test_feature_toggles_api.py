from __future__ import annotations

import pytest

from cumulocity_client.domain.entities import (
    FeaturePhase,
    FeatureToggle,
    FeatureToggleValue,
)
from cumulocity_client.infrastructure.gateways import FeatureTogglesApi


@pytest.mark.asyncio
async def test_list_current_tenant_features(api_pipeline, transport) -> None:
    transport.respond(
        200,
        json_body=[
            {"key": "dark-mode", "phase": "PUBLIC_PREVIEW", "active": True},
            {"key": "beta", "active": False},
        ],
    )

    features = await FeatureTogglesApi(api_pipeline).list_current_tenant_features()

    assert [feature.key for feature in features] == ["dark-mode", "beta"]
    assert features[0].phase is FeaturePhase.PUBLIC_PREVIEW
    assert transport.last.url.path == "/features"


@pytest.mark.asyncio
async def test_get_current_tenant_feature(api_pipeline, transport) -> None:
    transport.respond(200, json_body={"key": "dark-mode", "active": True})

    feature = await FeatureTogglesApi(api_pipeline).get_current_tenant_feature("dark-mode")

    assert isinstance(feature, FeatureToggle)
    assert transport.last.url.path == "/features/dark-mode"


@pytest.mark.asyncio
async def test_list_tenant_feature_toggle_values(api_pipeline, transport) -> None:
    transport.respond(200, json_body=[{"tenantId": "t100", "active": True}])

    values = await FeatureTogglesApi(api_pipeline).list_tenant_feature_toggle_values(
        "dark-mode"
    )

    assert values[0].tenant_id == "t100"
    assert transport.last.url.path == "/features/dark-mode/by-tenant"


@pytest.mark.asyncio
async def test_set_current_tenant_value_sends_false(api_pipeline, transport) -> None:
    transport.respond(200, content=b"OK")

    result = await FeatureTogglesApi(api_pipeline).set_current_tenant_feature_toggle_value(
        FeatureToggleValue(active=False), "dark-mode"
    )

    assert result == "OK"
    assert transport.last.method == "PUT"
    assert transport.last_json() == {"active": False}
    assert transport.last.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_given_tenant_value_paths(api_pipeline, transport) -> None:
    api = FeatureTogglesApi(api_pipeline)
    transport.respond(200)
    transport.respond(204)

    await api.set_given_tenant_feature_toggle_value(
        FeatureToggleValue(active=True), "dark-mode", "t200"
    )
    result = await api.unset_given_tenant_feature_toggle_value("dark-mode", "t200")

    assert result is None
    assert [request.method for request in transport.requests] == ["PUT", "DELETE"]
    assert all(
        request.url.path == "/features/dark-mode/by-tenant/t200"
        for request in transport.requests
    )


@pytest.mark.asyncio
async def test_unset_current_tenant_value(api_pipeline, transport) -> None:
    transport.respond(204)

    await FeatureTogglesApi(api_pipeline).unset_current_tenant_feature_toggle_value(
        "dark-mode"
    )

    assert transport.last.method == "DELETE"
    assert transport.last.url.path == "/features/dark-mode/by-tenant"
    assert transport.last.content == b""
