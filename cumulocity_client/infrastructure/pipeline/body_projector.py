"""Derives mutation payloads from read models."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, Mapping, Tuple

from pydantic_core import to_jsonable_python

from cumulocity_client.domain.entities.endpoint import EndpointDescriptor


class FieldPolicy:
    """Compiled Stripped-Field Policy.

    ``"id"`` removes a top-level field, ``"source.self"`` removes ``self``
    inside ``source`` and keeps its siblings.
    """

    __slots__ = ("top_level", "nested")

    def __init__(self, fields: Iterable[str]) -> None:
        top_level = set()
        nested: Dict[str, set] = {}
        for entry in fields:
            parent, _, child = entry.partition(".")
            if child:
                nested.setdefault(parent, set()).add(child)
            else:
                top_level.add(parent)
        self.top_level: FrozenSet[str] = frozenset(top_level)
        self.nested: Dict[str, FrozenSet[str]] = {
            key: frozenset(children) for key, children in nested.items()
        }

    def __bool__(self) -> bool:
        return bool(self.top_level or self.nested)


class BodyProjector:
    """Serializes a request body and skips server-managed fields.

    The projection works on field names only. Values are never inspected, so
    a stripped field is removed whatever it holds.
    """

    def __init__(self) -> None:
        self._policies: Dict[Tuple[str, ...], FieldPolicy] = {}

    def project(self, endpoint: EndpointDescriptor, body: Any) -> Any:
        data = to_jsonable_python(body, by_alias=True, exclude_none=True)
        policy = self._policy_for(endpoint.stripped_fields)
        if isinstance(data, list):
            return [self._strip(item, policy) for item in data]
        if data is None:
            return {}
        return self._strip(data, policy)

    def _policy_for(self, fields: Tuple[str, ...]) -> FieldPolicy:
        policy = self._policies.get(fields)
        if policy is None:
            policy = self._policies[fields] = FieldPolicy(fields)
        return policy

    @staticmethod
    def _strip(data: Any, policy: FieldPolicy) -> Any:
        if not isinstance(data, Mapping) or not policy:
            return data
        projected: Dict[str, Any] = {}
        for key, value in data.items():
            if key in policy.top_level:
                continue
            children = policy.nested.get(key)
            if children and isinstance(value, Mapping):
                value = {k: v for k, v in value.items() if k not in children}
            projected[key] = value
        return projected
