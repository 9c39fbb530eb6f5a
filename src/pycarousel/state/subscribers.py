"""Ordered registry of state-change observers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from pycarousel.exceptions import ReentrantUpdateError

_logger = logging.getLogger(__name__)

Subscriber = Callable[[], object]


class SubscriberRegistry:
    """Ordered list of zero-argument callbacks.

    The same callable may be registered more than once; every
    registration is an independent entry that is called on each
    notification and removed by its own ``unsubscribe`` call.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def __iter__(self) -> Iterator[Subscriber]:
        return iter(list(self._subscribers))

    def __contains__(self, callback: object) -> bool:
        return any(existing is callback for existing in self._subscribers)

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove the first registration of *callback*, matched by identity.

        Unknown callbacks are ignored.
        """
        for index, existing in enumerate(self._subscribers):
            if existing is callback:
                del self._subscribers[index]
                return
        _logger.debug("unsubscribe ignored for unregistered callback %r", callback)

    def call_all(self) -> None:
        """Call every registered subscriber once, in registration order.

        The pass iterates over a copy taken up front, so subscribers that
        subscribe or unsubscribe during the pass only affect later passes.
        A subscriber that raises is logged and skipped; a rejected nested
        update (:class:`ReentrantUpdateError`) propagates.
        """
        for callback in list(self._subscribers):
            try:
                callback()
            except ReentrantUpdateError:
                raise
            except Exception:
                _logger.debug("subscriber %r failed", callback, exc_info=True)
