"""Base classes shared by every wire model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CumulocityModel(BaseModel):
    """Base for resources exchanged with the platform.

    Attributes are snake_case in Python and camelCase on the wire. Fields the
    model does not declare (custom ``c8y_*`` fragments, attributes added by
    newer platform versions) are kept as extras so that a decoded object can
    be sent back without losing data.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class PageStatistics(CumulocityModel):
    """Information about paging statistics."""

    current_page: Optional[int] = None
    page_size: Optional[int] = None
    total_pages: Optional[int] = None
    total_elements: Optional[int] = None


class PagedCollection(CumulocityModel):
    """Envelope of a paginated collection.

    ``next`` and ``prev`` are URI references to neighbouring pages; they are
    exposed as returned and never followed automatically.
    """

    self_link: Optional[str] = Field(default=None, alias="self")
    next: Optional[str] = None
    prev: Optional[str] = None
    statistics: Optional[PageStatistics] = None
