"""Users API implementation - Infrastructure layer."""

from __future__ import annotations

from typing import List, Optional

from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    ListStyle,
    QueryKind,
    QueryParameter,
    ResultKind,
)
from cumulocity_client.domain.entities.user import (
    SubscribedUser,
    User,
    UserCollection,
    UserReference,
    UserReferenceCollection,
)
from cumulocity_client.domain.gateways.users_api import IUsersApi
from cumulocity_client.infrastructure.pipeline import ApiPipeline, vendor_media_type
from cumulocity_client.shared import get_logger
from cumulocity_client.shared.consts import EnumHttpMethod, EnumMediaType

logger = get_logger(__name__)

USER_TYPE = vendor_media_type("user")
USER_REFERENCE_TYPE = vendor_media_type("userreference")

USERS_PATH = "user/{tenantId}/users"
USER_PATH = "user/{tenantId}/users/{userId}"
GROUP_USERS_PATH = "user/{tenantId}/groups/{groupId}/users"

USER_READ_ONLY_FIELDS = (
    "passwordStrength",
    "roles",
    "groups",
    "self",
    "shouldResetPassword",
    "id",
    "lastPasswordChange",
    "devicePermissions",
    "applications",
)

GET_USERS = EndpointDescriptor(
    name="users.list",
    method=EnumHttpMethod.GET,
    path=USERS_PATH,
    accept=(vendor_media_type("usercollection"),),
    query=(
        QueryParameter("currentPage", QueryKind.INTEGER),
        QueryParameter("groups", QueryKind.STRING_LIST, ListStyle.COMMA),
        QueryParameter("onlyDevices", QueryKind.BOOLEAN),
        QueryParameter("owner"),
        QueryParameter("pageSize", QueryKind.INTEGER),
        QueryParameter("username"),
        QueryParameter("withSubusersCount", QueryKind.BOOLEAN),
        QueryParameter("withTotalElements", QueryKind.BOOLEAN),
        QueryParameter("withTotalPages", QueryKind.BOOLEAN),
    ),
    result_type=UserCollection,
)

CREATE_USER = EndpointDescriptor(
    name="users.create",
    method=EnumHttpMethod.POST,
    path=USERS_PATH,
    accept=(USER_TYPE,),
    content_type=USER_TYPE,
    result_type=User,
    stripped_fields=USER_READ_ONLY_FIELDS,
)

GET_USER = EndpointDescriptor(
    name="users.get",
    method=EnumHttpMethod.GET,
    path=USER_PATH,
    accept=(USER_TYPE,),
    result_type=User,
)

UPDATE_USER = EndpointDescriptor(
    name="users.update",
    method=EnumHttpMethod.PUT,
    path=USER_PATH,
    accept=(USER_TYPE,),
    content_type=USER_TYPE,
    result_type=User,
    stripped_fields=USER_READ_ONLY_FIELDS + ("userName",),
)

DELETE_USER = EndpointDescriptor(
    name="users.delete",
    method=EnumHttpMethod.DELETE,
    path=USER_PATH,
    accept=(EnumMediaType.JSON.value,),
    result=ResultKind.STREAM,
)

GET_USER_BY_USERNAME = EndpointDescriptor(
    name="users.get_by_username",
    method=EnumHttpMethod.GET,
    path="user/{tenantId}/userByName/{username}",
    accept=(USER_TYPE,),
    result_type=User,
)

GET_USERS_FROM_USER_GROUP = EndpointDescriptor(
    name="users.group.list",
    method=EnumHttpMethod.GET,
    path=GROUP_USERS_PATH,
    accept=(vendor_media_type("userreferencecollection"),),
    query=(
        QueryParameter("currentPage", QueryKind.INTEGER),
        QueryParameter("pageSize", QueryKind.INTEGER),
        QueryParameter("withTotalElements", QueryKind.BOOLEAN),
    ),
    result_type=UserReferenceCollection,
)

ASSIGN_USER_TO_USER_GROUP = EndpointDescriptor(
    name="users.group.assign",
    method=EnumHttpMethod.POST,
    path=GROUP_USERS_PATH,
    accept=(USER_REFERENCE_TYPE,),
    content_type=USER_REFERENCE_TYPE,
    result_type=UserReference,
)

REMOVE_USER_FROM_USER_GROUP = EndpointDescriptor(
    name="users.group.remove",
    method=EnumHttpMethod.DELETE,
    path=GROUP_USERS_PATH + "/{userId}",
    accept=(EnumMediaType.JSON.value,),
    result=ResultKind.STREAM,
)

LOGOUT = EndpointDescriptor(
    name="users.logout",
    method=EnumHttpMethod.POST,
    path="user/logout",
    accept=(EnumMediaType.JSON.value,),
    result=ResultKind.STREAM,
)


class UsersApi(IUsersApi):
    """HTTP client for the user management endpoints."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    async def get_users(
        self,
        tenant_id: str,
        *,
        current_page: Optional[int] = None,
        groups: Optional[List[str]] = None,
        only_devices: Optional[bool] = None,
        owner: Optional[str] = None,
        page_size: Optional[int] = None,
        username: Optional[str] = None,
        with_subusers_count: Optional[bool] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> Optional[UserCollection]:
        """
        Retrieve a page of users of a tenant.

        Args:
            tenant_id: Tenant the users belong to
            groups: Group ids, sent comma separated
            only_devices: Restrict the result to device users
            owner: Username of the owner
            username: Prefix of the username
            timeout: Per-call timeout in seconds

        Returns:
            UserCollection: Users of the requested page

        Raises:
            EncodingError: If a filter cannot be represented in the query
            HttpStatusError: If the platform answers with an error status
        """
        return await self._pipeline.invoke(
            GET_USERS,
            path=(tenant_id,),
            query={
                "currentPage": current_page,
                "groups": groups,
                "onlyDevices": only_devices,
                "owner": owner,
                "pageSize": page_size,
                "username": username,
                "withSubusersCount": with_subusers_count,
                "withTotalElements": with_total_elements,
                "withTotalPages": with_total_pages,
            },
            timeout=timeout,
        )

    async def create_user(
        self, body: User, tenant_id: str, *, timeout: Optional[float] = None
    ) -> Optional[User]:
        """Create a user; read-only attributes of ``body`` are not sent."""
        logger.info("c8y.users.create", tenant_id=tenant_id, user_name=body.user_name)
        return await self._pipeline.invoke(
            CREATE_USER, path=(tenant_id,), body=body, timeout=timeout
        )

    async def get_user(
        self, tenant_id: str, user_id: str, *, timeout: Optional[float] = None
    ) -> Optional[User]:
        """Retrieve a user by id."""
        return await self._pipeline.invoke(
            GET_USER, path=(tenant_id, user_id), timeout=timeout
        )

    async def update_user(
        self,
        body: User,
        tenant_id: str,
        user_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[User]:
        """Update a user. The username cannot be changed and is not sent."""
        return await self._pipeline.invoke(
            UPDATE_USER, path=(tenant_id, user_id), body=body, timeout=timeout
        )

    async def delete_user(
        self, tenant_id: str, user_id: str, *, timeout: Optional[float] = None
    ) -> bytes:
        """Delete a user and return the raw response body."""
        logger.info("c8y.users.delete", tenant_id=tenant_id, user_id=user_id)
        return await self._pipeline.invoke(
            DELETE_USER, path=(tenant_id, user_id), timeout=timeout
        )

    async def get_user_by_username(
        self, tenant_id: str, username: str, *, timeout: Optional[float] = None
    ) -> Optional[User]:
        """Retrieve a user by username."""
        return await self._pipeline.invoke(
            GET_USER_BY_USERNAME, path=(tenant_id, username), timeout=timeout
        )

    async def get_users_from_user_group(
        self,
        tenant_id: str,
        group_id: int,
        *,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_elements: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> Optional[UserReferenceCollection]:
        """List references to the users of a group."""
        return await self._pipeline.invoke(
            GET_USERS_FROM_USER_GROUP,
            path=(tenant_id, group_id),
            query={
                "currentPage": current_page,
                "pageSize": page_size,
                "withTotalElements": with_total_elements,
            },
            timeout=timeout,
        )

    async def assign_user_to_user_group(
        self,
        body: SubscribedUser,
        tenant_id: str,
        group_id: int,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[UserReference]:
        """Add a user to a group."""
        return await self._pipeline.invoke(
            ASSIGN_USER_TO_USER_GROUP,
            path=(tenant_id, group_id),
            body=body,
            timeout=timeout,
        )

    async def remove_user_from_user_group(
        self,
        tenant_id: str,
        group_id: int,
        user_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Remove a user from a group."""
        return await self._pipeline.invoke(
            REMOVE_USER_FROM_USER_GROUP,
            path=(tenant_id, group_id, user_id),
            timeout=timeout,
        )

    async def logout(
        self,
        cookie: Optional[str] = None,
        xsrf_token: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        Terminate the session identified by the cookie and XSRF token.

        Headers left as ``None`` are not sent.
        """
        return await self._pipeline.invoke(
            LOGOUT,
            headers={"Cookie": cookie, "X-XSRF-TOKEN": xsrf_token},
            timeout=timeout,
        )
