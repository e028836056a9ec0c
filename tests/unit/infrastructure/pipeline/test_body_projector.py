from __future__ import annotations

from cumulocity_client.domain.entities import (
    AuditRecord,
    ObjectSource,
    Role,
    RoleReference,
    RoleReferenceCollection,
    User,
)
from cumulocity_client.infrastructure.gateways.audits_api import CREATE_AUDIT_RECORD
from cumulocity_client.infrastructure.gateways.users_api import (
    CREATE_USER,
    UPDATE_USER,
)
from cumulocity_client.infrastructure.pipeline import BodyProjector, FieldPolicy


def _user() -> User:
    return User(
        id="42",
        user_name="bob",
        email="bob@example.com",
        roles=RoleReferenceCollection(
            references=[RoleReference(role=Role(id="ROLE_ADMIN"))]
        ),
    )


def test_field_policy_splits_nested_entries() -> None:
    policy = FieldPolicy(["id", "source.self", "source.extra"])
    assert policy.top_level == frozenset({"id"})
    assert policy.nested == {"source": frozenset({"self", "extra"})}
    assert not FieldPolicy([])


def test_create_user_payload_omits_server_managed_fields() -> None:
    payload = BodyProjector().project(CREATE_USER, _user())
    assert payload == {"userName": "bob", "email": "bob@example.com"}


def test_update_user_payload_also_omits_username() -> None:
    payload = BodyProjector().project(UPDATE_USER, _user())
    assert payload == {"email": "bob@example.com"}


def test_projection_does_not_modify_the_model() -> None:
    user = _user()
    BodyProjector().project(CREATE_USER, user)
    assert user.id == "42"
    assert user.roles is not None


def test_nested_entry_strips_one_level_only() -> None:
    record = AuditRecord(
        id="1",
        type="c8y_Test",
        text="created",
        source=ObjectSource(id="100", self_link="https://x/inventory/100"),
        c8y_Metadata={"a": 1},
        c8y_Custom={"self": "kept"},
    )

    payload = BodyProjector().project(CREATE_AUDIT_RECORD, record)

    assert payload == {
        "type": "c8y_Test",
        "text": "created",
        "source": {"id": "100"},
        "c8y_Custom": {"self": "kept"},
    }


def test_all_fields_stripped_gives_empty_object() -> None:
    assert BodyProjector().project(CREATE_USER, User(id="42")) == {}
    assert BodyProjector().project(CREATE_USER, None) == {}


def test_projection_is_idempotent() -> None:
    projector = BodyProjector()
    once = projector.project(CREATE_USER, _user())
    assert projector.project(CREATE_USER, once) == once


def test_decoded_user_projects_the_same_after_a_round_trip() -> None:
    projector = BodyProjector()
    wire = {
        "id": "42",
        "self": "https://t100.example.com/user/t100/users/42",
        "userName": "bob",
        "enabled": False,
        "lastPasswordChange": "2024-05-01T10:00:00.000+02:00",
        "shouldResetPassword": True,
        "customProperties": {"language": "de"},
        "c8y_Unknown": {"flag": True},
    }

    once = projector.project(CREATE_USER, User.model_validate(wire))
    twice = projector.project(CREATE_USER, User.model_validate(once))

    assert twice == once
    assert once == {
        "userName": "bob",
        "enabled": False,
        "customProperties": {"language": "de"},
        "c8y_Unknown": {"flag": True},
    }


def test_lists_are_projected_per_item() -> None:
    payload = BodyProjector().project(CREATE_USER, [_user(), {"id": "1", "x": 2}])
    assert payload == [{"userName": "bob", "email": "bob@example.com"}, {"x": 2}]
