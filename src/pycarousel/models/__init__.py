"""Typed records used by the carousel store."""

from pycarousel.models.carousel import CarouselState, Direction, Orientation
from pycarousel.models.spinner import SpinnerRecord

__all__ = [
    "CarouselState",
    "Direction",
    "Orientation",
    "SpinnerRecord",
]
