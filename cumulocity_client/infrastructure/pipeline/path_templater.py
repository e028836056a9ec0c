"""Resource path templating with per-segment percent-encoding."""

from __future__ import annotations

from typing import Any, Sequence
from urllib.parse import quote

from cumulocity_client.domain.entities.endpoint import EndpointDescriptor
from cumulocity_client.domain.entities.errors import EncodingError

from .values import to_wire_string


def encode_path_segment(value: Any) -> str:
    """Percent-encode one identifier so it stays a single path segment.

    Every reserved character, ``/`` included, is escaped; the unreserved
    set ``A-Z a-z 0-9 - . _ ~`` is left untouched.
    """
    return quote(to_wire_string(value), safe="")


class PathTemplater:
    """Builds request paths from an endpoint template and identifiers."""

    def build(self, endpoint: EndpointDescriptor, values: Sequence[Any]) -> str:
        """
        Substitute the template placeholders in order.

        Args:
            endpoint: Operation whose ``path`` template is expanded.
            values: One identifier per placeholder, in template order.

        Returns:
            The relative resource path.

        Raises:
            EncodingError: A value is missing or the count does not match.
        """
        names = endpoint.path_parameters
        if len(values) != len(names):
            raise EncodingError(
                f"{endpoint.name} expects {len(names)} path parameter(s) "
                f"{list(names)}, got {len(values)}",
                {"endpoint": endpoint.name, "expected": list(names)},
            )

        encoded = {}
        for name, value in zip(names, values):
            if value is None:
                raise EncodingError(
                    f"Path parameter '{name}' of {endpoint.name} is required",
                    {"endpoint": endpoint.name, "parameter": name},
                )
            encoded[name] = encode_path_segment(value)

        return endpoint.path.format(**encoded)
