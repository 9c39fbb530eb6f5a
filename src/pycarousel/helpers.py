"""Layout arithmetic shared by carousel renderers."""

from __future__ import annotations

import re
from collections.abc import Iterable

LOADING = "loading"
SUCCESS = "success"
ERROR = "error"

_WHITESPACE = re.compile(r"\s+")


def class_names(parts: Iterable[object]) -> str:
    """Join *parts* into one space-separated class string.

    ``None`` and booleans (the result of ``cond and "name"``) are dropped;
    every other part, numbers included, is kept as its string form.
    """
    joined = " ".join(str(part) for part in parts if part is not None and not isinstance(part, bool))
    return _WHITESPACE.sub(" ", joined).strip()


def slide_unit(visible_slides: int = 1) -> float:
    """Width of one slide as a percentage of the viewport."""
    return 100 / visible_slides


def slide_size(total_slides: int, visible_slides: int) -> float:
    """Width of one slide as a percentage of the slide tray."""
    return ((100 / total_slides) * visible_slides) / visible_slides


def slide_tray_size(total_slides: int, visible_slides: int) -> float:
    """Width of the slide tray as a percentage of the viewport."""
    return (100 * total_slides) / visible_slides


def pct(num: float) -> str:
    if float(num).is_integer():
        num = int(num)
    return f"{num}%"


def bounded_range(min_value: int, max_value: int, x: int) -> int:
    """Cap *x* at *min_value* and *max_value*."""
    return min(max_value, max(min_value, x))


def is_slide_visible(index: int, current_slide: int, visible_slides: int) -> bool:
    return current_slide <= index < current_slide + visible_slides
