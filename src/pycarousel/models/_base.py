"""Base model for typed carousel records.

Every carousel model inherits from :class:`CarouselBaseModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys used in the state
  bag map automatically to snake_case fields.
* ``populate_by_name`` so keyword construction accepts either spelling.
  State bags are read by alias only.
* Immutability; records are replaced, never edited in place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CarouselBaseModel(BaseModel):
    """Base for carousel records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )
