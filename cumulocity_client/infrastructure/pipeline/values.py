"""Stringification of scalar values placed in URLs."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any


def to_wire_string(value: Any) -> str:
    """Render a scalar the way the platform expects it in paths and queries.

    Booleans are lowercase, timestamps and dates ISO-8601 (a timestamp keeps
    its offset exactly as given), enums their value.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return to_wire_string(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)
