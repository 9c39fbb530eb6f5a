"""Custom exception hierarchy for pycarousel."""

from __future__ import annotations


class CarouselError(Exception):
    """Base exception for all pycarousel errors."""


class CarouselConfigError(CarouselError):
    """Invalid or missing configuration."""


class CarouselBindingError(CarouselError):
    """A store binding was created without a store to bind to.

    This is a usage error in the consuming application: every bound
    consumer must be handed the store instance owned by its widget.
    """


class ReentrantUpdateError(CarouselError):
    """A subscriber triggered a nested update while notification was running.

    Only raised when the store is configured with
    :attr:`pycarousel.state.policy.ReentrancyPolicy.FORBID`.
    """

    def __init__(self, message: str, *, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message)
