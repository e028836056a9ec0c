"""Users, their role and group references."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .application import Application
from .base import CumulocityModel, PagedCollection

# Managed object id -> permissions granted on it, e.g. "MEASUREMENT:*:READ".
DevicePermissions = Dict[str, List[str]]


class PasswordStrength(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


class Role(CumulocityModel):
    id: Optional[str] = None
    name: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")


class RoleReference(CumulocityModel):
    self_link: Optional[str] = Field(default=None, alias="self")
    role: Optional[Role] = None


class RoleReferenceCollection(PagedCollection):
    references: Optional[List[RoleReference]] = None


class Group(CumulocityModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")


class GroupReference(CumulocityModel):
    self_link: Optional[str] = Field(default=None, alias="self")
    group: Optional[Group] = None


class GroupReferenceCollection(PagedCollection):
    references: Optional[List[GroupReference]] = None


class User(CumulocityModel):
    """A user of a tenant.

    Several attributes are computed by the platform (``id``, ``self``,
    ``lastPasswordChange``, ``passwordStrength``) or managed through
    dedicated endpoints (``roles``, ``groups``, ``devicePermissions``,
    ``applications``); they are removed from create and update payloads.
    """

    id: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")
    user_name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    enabled: Optional[bool] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    newsletter: Optional[bool] = None
    owner: Optional[str] = None
    delegated_by: Optional[str] = None
    send_password_reset_email: Optional[bool] = None
    should_reset_password: Optional[bool] = None
    two_factor_authentication_enabled: Optional[bool] = None
    password_strength: Optional[PasswordStrength] = None
    last_password_change: Optional[datetime] = None
    custom_properties: Optional[Dict[str, Any]] = None
    roles: Optional[RoleReferenceCollection] = None
    groups: Optional[GroupReferenceCollection] = None
    device_permissions: Optional[DevicePermissions] = None
    applications: Optional[List[Application]] = None


class UserCollection(PagedCollection):
    users: Optional[List[User]] = None


class UserReference(CumulocityModel):
    self_link: Optional[str] = Field(default=None, alias="self")
    user: Optional[User] = None


class UserReferenceCollection(PagedCollection):
    references: Optional[List[UserReference]] = None


class SubscribedUserRef(CumulocityModel):
    id: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")


class SubscribedUser(CumulocityModel):
    """Payload assigning an existing user to a user group."""

    self_link: Optional[str] = Field(default=None, alias="self")
    user: Optional[SubscribedUserRef] = None
