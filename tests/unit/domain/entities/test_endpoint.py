from __future__ import annotations

from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    ListStyle,
    PreparedRequest,
    QueryKind,
    QueryParameter,
    RawResponse,
    ResultKind,
)
from cumulocity_client.shared.consts import EnumHttpMethod


def test_endpoint_descriptor_exposes_path_and_query_names() -> None:
    endpoint = EndpointDescriptor(
        name="users.group.remove",
        method=EnumHttpMethod.DELETE,
        path="user/{tenantId}/groups/{groupId}/users/{userId}",
        query=(
            QueryParameter("currentPage", QueryKind.INTEGER),
            QueryParameter("groups", QueryKind.STRING_LIST, ListStyle.COMMA),
        ),
    )

    assert endpoint.path_parameters == ("tenantId", "groupId", "userId")
    assert endpoint.query_names == ("currentPage", "groups")
    assert endpoint.result is ResultKind.TYPED


def test_endpoint_without_placeholders() -> None:
    endpoint = EndpointDescriptor(
        name="features.list", method=EnumHttpMethod.GET, path="features"
    )
    assert endpoint.path_parameters == ()


def test_prepared_request_url_and_body_flags() -> None:
    request = PreparedRequest(method="GET", path="features")
    assert request.url == "features"
    assert request.has_body is False

    request.query_string = "pageSize=5"
    request.json = {}
    assert request.url == "features?pageSize=5"
    assert request.has_body is True


def test_raw_response_text_uses_encoding() -> None:
    response = RawResponse(200, content="café".encode("latin-1"), encoding="latin-1")
    assert response.text == "café"
