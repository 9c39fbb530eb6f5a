"""Notification policies for the carousel store."""

from __future__ import annotations

from enum import StrEnum

from pycarousel.exceptions import CarouselConfigError


class ReentrancyPolicy(StrEnum):
    """How a nested update issued from inside a subscriber is handled.

    ``QUEUE`` applies the nested merge immediately but defers its
    notification pass until the running pass has finished.  ``FORBID``
    rejects the nested call with :class:`ReentrantUpdateError`.
    """

    QUEUE = "queue"
    FORBID = "forbid"


def parse_reentrancy_policy(value: str | ReentrancyPolicy) -> ReentrancyPolicy:
    """Coerce a config value into a :class:`ReentrancyPolicy`."""
    if isinstance(value, ReentrancyPolicy):
        return value
    if not isinstance(value, str):
        raise CarouselConfigError(f"Reentrancy policy must be a string, got {type(value).__name__}")
    normalized = value.strip().lower()
    try:
        return ReentrancyPolicy(normalized)
    except ValueError:
        allowed = ", ".join(policy.value for policy in ReentrancyPolicy)
        raise CarouselConfigError(f"Unknown reentrancy policy {value!r} (expected one of: {allowed})") from None
