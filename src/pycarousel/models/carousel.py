"""Typed view of the carousel state bag."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import ConfigDict, Field, model_validator

from pycarousel.models._base import CarouselBaseModel


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(StrEnum):
    FORWARD = "forward"
    BACKWARD = "backward"


class CarouselState(CarouselBaseModel):
    """Known carousel fields, keyed in the state bag by their camelCase alias.

    Unknown keys are kept as extras so consumers can store their own
    values next to the carousel's.
    """

    model_config = ConfigDict(extra="allow")

    current_slide: int = Field(default=0, ge=0)
    total_slides: int = Field(default=0, ge=0)
    visible_slides: int = Field(default=1, ge=1)
    step: int = Field(default=1, ge=1)
    drag_step: int = Field(default=1, ge=1)
    natural_slide_width: float = Field(default=100.0, gt=0)
    natural_slide_height: float = Field(default=100.0, gt=0)
    orientation: Orientation = Orientation.HORIZONTAL
    infinite: bool = False
    is_playing: bool = False
    play_direction: Direction = Direction.FORWARD
    interval: int = Field(default=5000, ge=0, description="Autoplay interval in milliseconds")
    has_master_spinner: bool = False
    master_spinner_finished: bool = False
    lock_on_window_scroll: bool = False
    is_intrinsic_height: bool = False

    @model_validator(mode="after")
    def _clamp_visible_slides(self) -> CarouselState:
        # A carousel with fewer slides than the viewport shows them all.
        if self.total_slides and self.visible_slides > self.total_slides:
            object.__setattr__(self, "visible_slides", self.total_slides)
        return self

    @property
    def max_slide(self) -> int:
        """Index of the first slide on the last page."""
        return max(self.total_slides - self.visible_slides, 0)

    def to_state_bag(self) -> dict[str, Any]:
        """Dump into a camelCase state bag, extras included."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_state_bag(cls, bag: Mapping[str, Any]) -> CarouselState:
        """Validate a state bag into a typed record.

        Only camelCase keys populate fields; snake_case field names in the
        bag are kept as extras.
        """
        return cls.model_validate(dict(bag), by_name=False)


def state_bag_key(field_name: str) -> str | None:
    """Return the camelCase bag key for a snake_case field name.

    Returns ``None`` when *field_name* is not a field name that differs
    from its alias.
    """
    field = CarouselState.model_fields.get(field_name)
    if field is None or field.alias is None or field.alias == field_name:
        return None
    return field.alias
