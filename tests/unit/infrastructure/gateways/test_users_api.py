from __future__ import annotations

import pytest

from cumulocity_client.domain.entities import (
    Role,
    RoleReference,
    RoleReferenceCollection,
    SubscribedUser,
    SubscribedUserRef,
    User,
    UserCollection,
    UserReference,
)
from cumulocity_client.domain.entities.errors import HttpStatusError
from cumulocity_client.infrastructure.gateways import UsersApi

USER_TYPE = "application/vnd.com.nsn.cumulocity.user+json"


def _user() -> User:
    return User(
        id="42",
        user_name="bob",
        email="bob@example.com",
        enabled=True,
        roles=RoleReferenceCollection(
            references=[RoleReference(role=Role(id="ROLE_ADMIN"))]
        ),
        should_reset_password=False,
    )


@pytest.mark.asyncio
async def test_get_users_joins_groups_with_commas(api_pipeline, transport) -> None:
    transport.respond(200, json_body={"users": [{"id": "bob", "userName": "bob"}]})

    users = await UsersApi(api_pipeline).get_users(
        "t100", groups=["1", "2"], only_devices=False, page_size=50
    )

    assert isinstance(users, UserCollection)
    assert users.users[0].user_name == "bob"
    assert transport.last.url.path == "/user/t100/users"
    params = transport.last.url.params
    assert params["groups"] == "1,2"
    assert params["onlyDevices"] == "false"
    assert params["pageSize"] == "50"
    assert "usercollection+json" in transport.last.headers["Accept"]


@pytest.mark.asyncio
async def test_create_user_sends_projected_payload(api_pipeline, transport) -> None:
    transport.respond(201, json_body={"id": "bob", "userName": "bob"})

    created = await UsersApi(api_pipeline).create_user(_user(), "t100")

    assert created.id == "bob"
    assert transport.last.method == "POST"
    assert transport.last_json() == {
        "userName": "bob",
        "email": "bob@example.com",
        "enabled": True,
    }
    assert transport.last.headers["Content-Type"] == USER_TYPE


@pytest.mark.asyncio
async def test_update_user_omits_username(api_pipeline, transport) -> None:
    transport.respond(200, json_body={"id": "bob", "userName": "bob"})

    await UsersApi(api_pipeline).update_user(_user(), "t100", "bob")

    assert transport.last.method == "PUT"
    assert transport.last.url.path == "/user/t100/users/bob"
    assert transport.last_json() == {"email": "bob@example.com", "enabled": True}


@pytest.mark.asyncio
async def test_get_user_by_username_encodes_segment(api_pipeline, transport) -> None:
    transport.respond(200, json_body={"userName": "a/b"})

    user = await UsersApi(api_pipeline).get_user_by_username("t100", "a/b")

    assert user.user_name == "a/b"
    assert transport.last.url.raw_path == b"/user/t100/userByName/a%2Fb"


@pytest.mark.asyncio
async def test_get_user_not_found(api_pipeline, transport) -> None:
    transport.respond(404, json_body={"error": "not found"})

    with pytest.raises(HttpStatusError) as exc_info:
        await UsersApi(api_pipeline).get_user("t100", "ghost")

    assert exc_info.value.status_code == 404
    assert exc_info.value.error_message == "not found"


@pytest.mark.asyncio
async def test_delete_user_returns_raw_body(api_pipeline, transport) -> None:
    transport.respond(204)

    result = await UsersApi(api_pipeline).delete_user("t100", "bob")

    assert result == b""
    assert transport.last.method == "DELETE"


@pytest.mark.asyncio
async def test_user_group_membership(api_pipeline, transport) -> None:
    api = UsersApi(api_pipeline)
    transport.respond(200, json_body={"references": [{"user": {"userName": "bob"}}]})
    transport.respond(201, json_body={"user": {"id": "bob"}})
    transport.respond(204)

    members = await api.get_users_from_user_group("t100", 3, with_total_elements=True)
    reference = await api.assign_user_to_user_group(
        SubscribedUser(
            user=SubscribedUserRef(
                self_link="https://t100.example.com/user/t100/users/bob"
            )
        ),
        "t100",
        3,
    )
    await api.remove_user_from_user_group("t100", 3, "bob")

    assert members.references[0].user.user_name == "bob"
    assert isinstance(reference, UserReference)
    paths = [request.url.path for request in transport.requests]
    assert paths == [
        "/user/t100/groups/3/users",
        "/user/t100/groups/3/users",
        "/user/t100/groups/3/users/bob",
    ]
    assert transport.requests[1].headers["Content-Type"] == (
        "application/vnd.com.nsn.cumulocity.userreference+json"
    )
    assert transport.requests[0].url.params["withTotalElements"] == "true"


@pytest.mark.asyncio
async def test_logout_sends_session_headers(api_pipeline, transport) -> None:
    transport.respond(200)

    await UsersApi(api_pipeline).logout(cookie="authorization=abc", xsrf_token="xyz")

    assert transport.last.method == "POST"
    assert transport.last.url.path == "/user/logout"
    assert transport.last.headers["Cookie"] == "authorization=abc"
    assert transport.last.headers["X-XSRF-TOKEN"] == "xyz"


@pytest.mark.asyncio
async def test_logout_without_session_headers(api_pipeline, transport) -> None:
    transport.respond(200)

    await UsersApi(api_pipeline).logout()

    assert "X-XSRF-TOKEN" not in transport.last.headers
    assert "Cookie" not in transport.last.headers
