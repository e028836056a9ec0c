"""Users API interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from cumulocity_client.domain.entities.user import (
    SubscribedUser,
    User,
    UserCollection,
    UserReference,
    UserReferenceCollection,
)


class IUsersApi(ABC):
    """Create, retrieve, update and delete users and their group membership."""

    @abstractmethod
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
            tenant_id: Tenant the users belong to.
            current_page: Page to return.
            groups: Group ids; only members of these groups are returned.
            only_devices: Only return device users (``True``) or exclude
                them (``False``).
            owner: Only users owned by this user.
            page_size: Entries per page, at most 2000.
            username: Prefix or full username to match.
            with_subusers_count: Include the number of direct subusers.
            with_total_elements: Include the total element count.
            with_total_pages: Include the total page count.
            timeout: Per-call timeout in seconds.
        """
        raise NotImplementedError

    @abstractmethod
    async def create_user(
        self, body: User, tenant_id: str, *, timeout: Optional[float] = None
    ) -> Optional[User]:
        """Create a user; server-managed fields are not sent."""
        raise NotImplementedError

    @abstractmethod
    async def get_user(
        self, tenant_id: str, user_id: str, *, timeout: Optional[float] = None
    ) -> Optional[User]:
        """Retrieve a user by id."""
        raise NotImplementedError

    @abstractmethod
    async def update_user(
        self,
        body: User,
        tenant_id: str,
        user_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[User]:
        """Update a user; the username cannot be changed."""
        raise NotImplementedError

    @abstractmethod
    async def delete_user(
        self, tenant_id: str, user_id: str, *, timeout: Optional[float] = None
    ) -> bytes:
        """Delete a user."""
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_username(
        self, tenant_id: str, username: str, *, timeout: Optional[float] = None
    ) -> Optional[User]:
        """Retrieve a user by username."""
        raise NotImplementedError

    @abstractmethod
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
        """List the members of a user group."""
        raise NotImplementedError

    @abstractmethod
    async def assign_user_to_user_group(
        self,
        body: SubscribedUser,
        tenant_id: str,
        group_id: int,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[UserReference]:
        """Add an existing user to a user group."""
        raise NotImplementedError

    @abstractmethod
    async def remove_user_from_user_group(
        self,
        tenant_id: str,
        group_id: int,
        user_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Remove a user from a user group."""
        raise NotImplementedError

    @abstractmethod
    async def logout(
        self,
        cookie: Optional[str] = None,
        xsrf_token: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Terminate an OAI-Secure session identified by cookie and XSRF token."""
        raise NotImplementedError
