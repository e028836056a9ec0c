from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from urllib.parse import parse_qsl

import pytest

from cumulocity_client.domain.entities.endpoint import (
    EndpointDescriptor,
    ListStyle,
    QueryKind,
    QueryParameter,
)
from cumulocity_client.domain.entities.errors import EncodingError
from cumulocity_client.infrastructure.pipeline import QueryEncoder
from cumulocity_client.shared.consts import EnumHttpMethod

ENDPOINT = EndpointDescriptor(
    name="test.list",
    method=EnumHttpMethod.GET,
    path="things",
    query=(
        QueryParameter("currentPage", QueryKind.INTEGER),
        QueryParameter("dateFrom", QueryKind.DATETIME),
        QueryParameter("day", QueryKind.DATE),
        QueryParameter("groups", QueryKind.STRING_LIST, ListStyle.COMMA),
        QueryParameter("ids", QueryKind.STRING_LIST),
        QueryParameter("onlyDevices", QueryKind.BOOLEAN),
        QueryParameter("owner"),
        QueryParameter("pageSize", QueryKind.INTEGER),
    ),
)


@pytest.fixture()
def encoder() -> QueryEncoder:
    return QueryEncoder()


def test_absent_values_are_omitted(encoder: QueryEncoder) -> None:
    assert encoder.encode(ENDPOINT, {"owner": None, "pageSize": None}) == []
    assert encoder.encode(ENDPOINT, None) == []


def test_falsy_values_are_sent(encoder: QueryEncoder) -> None:
    pairs = encoder.encode(
        ENDPOINT, {"onlyDevices": False, "currentPage": 0, "owner": ""}
    )
    assert pairs == [("currentPage", "0"), ("onlyDevices", "false"), ("owner", "")]


def test_pairs_follow_declared_order(encoder: QueryEncoder) -> None:
    pairs = encoder.encode(ENDPOINT, {"pageSize": 5, "owner": "admin", "currentPage": 2})
    assert [key for key, _ in pairs] == ["currentPage", "owner", "pageSize"]


def test_datetime_keeps_its_offset(encoder: QueryEncoder) -> None:
    stamp = datetime(2020, 10, 26, 3, 0, tzinfo=timezone(timedelta(hours=1)))
    query = encoder.to_query_string(encoder.encode(ENDPOINT, {"dateFrom": stamp}))

    assert "+" not in query
    assert parse_qsl(query) == [("dateFrom", "2020-10-26T03:00:00+01:00")]


def test_date_parameter_drops_time(encoder: QueryEncoder) -> None:
    pairs = encoder.encode(ENDPOINT, {"day": datetime(2024, 5, 1, 12, 30)})
    assert pairs == [("day", "2024-05-01")]
    assert encoder.encode(ENDPOINT, {"day": date(2024, 5, 2)}) == [("day", "2024-05-02")]


def test_comma_list_is_joined(encoder: QueryEncoder) -> None:
    pairs = encoder.encode(ENDPOINT, {"groups": ["1", "2", "3"]})
    assert pairs == [("groups", "1,2,3")]


def test_repeat_list_repeats_the_key(encoder: QueryEncoder) -> None:
    pairs = encoder.encode(ENDPOINT, {"ids": ["a", "b"]})
    assert pairs == [("ids", "a"), ("ids", "b")]


def test_single_string_is_a_one_element_list(encoder: QueryEncoder) -> None:
    assert encoder.encode(ENDPOINT, {"groups": "7"}) == [("groups", "7")]


def test_empty_list_is_omitted(encoder: QueryEncoder) -> None:
    assert encoder.encode(ENDPOINT, {"groups": []}) == []


def test_unknown_parameter_is_rejected(encoder: QueryEncoder) -> None:
    with pytest.raises(EncodingError) as exc_info:
        encoder.encode(ENDPOINT, {"pagesize": 5})
    assert exc_info.value.details["unknown"] == ["pagesize"]


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("onlyDevices", "true"),
        ("pageSize", True),
        ("pageSize", "10"),
        ("dateFrom", 1603677600),
        ("groups", 5),
        ("groups", {"1": "a"}),
        ("groups", [{"id": "1"}]),
        ("owner", {"name": "admin"}),
        ("owner", ["admin"]),
        ("owner", 1.5),
    ],
)
def test_values_of_the_wrong_kind_are_rejected(encoder, name, value) -> None:
    with pytest.raises(EncodingError):
        encoder.encode(ENDPOINT, {name: value})


def test_query_string_escapes_reserved_characters(encoder: QueryEncoder) -> None:
    query = encoder.to_query_string([("owner", "a&b=c"), ("groups", "1,2")])
    assert query == "owner=a%26b%3Dc&groups=1%2C2"


def test_naive_datetime_is_rejected(encoder: QueryEncoder) -> None:
    with pytest.raises(EncodingError) as exc_info:
        encoder.encode(ENDPOINT, {"dateFrom": datetime(2020, 10, 26, 3)})
    assert exc_info.value.details["parameter"] == "dateFrom"


def test_string_parameter_accepts_numbers_and_enums(encoder: QueryEncoder) -> None:
    pairs = encoder.encode(ENDPOINT, {"owner": QueryKind.BOOLEAN, "ids": (1, "b")})
    assert pairs == [("ids", "1"), ("ids", "b"), ("owner", "boolean")]
