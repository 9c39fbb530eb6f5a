"""Per-widget carousel store.

A synchronous publish/subscribe container for the carousel state bag,
with the master spinner tracker exposed through the same object.  One
store is owned by each carousel widget; it is never shared between
widgets and holds no global state.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Mapping
from typing import Any

from pycarousel.config import StoreConfig
from pycarousel.exceptions import ReentrantUpdateError
from pycarousel.models.carousel import CarouselState, state_bag_key
from pycarousel.models.spinner import SpinnerRecord
from pycarousel.state.policy import ReentrancyPolicy
from pycarousel.state.spinner import MasterSpinnerTracker
from pycarousel.state.subscribers import Subscriber, SubscriberRegistry

_logger = logging.getLogger(__name__)

StateBag = dict[str, Any]
OnDone = Callable[[StateBag], object]


class CarouselStore:
    """In-memory store for one carousel widget.

    All operations run synchronously on the caller's thread.  Subscribers
    are called in registration order after every update; a subscriber
    that reads :meth:`get_state` sees the post-update state.

    Nested updates issued from inside a subscriber follow
    ``config.reentrancy``: with ``QUEUE`` the nested merge is applied at
    once and its notification pass runs after the current pass (and its
    ``on_done``) has finished; with ``FORBID`` the nested call raises
    :class:`ReentrantUpdateError` without touching the state.  An update
    chained from ``on_done`` is not nested in a subscriber; it is allowed
    under both policies and runs as a deferred pass.
    """

    def __init__(
        self,
        initial_state: Mapping[str, Any] | None = None,
        *,
        config: StoreConfig | None = None,
    ) -> None:
        self._config = config or StoreConfig()
        self._state: StateBag = dict(initial_state) if initial_state else {}
        self._subscribers = SubscriberRegistry()
        self._master_spinner = MasterSpinnerTracker()
        self._notifying = False
        self._in_subscriber = False
        self._deferred: deque[OnDone | None] = deque()

    @classmethod
    def from_carousel_state(
        cls,
        state: CarouselState,
        *,
        config: StoreConfig | None = None,
    ) -> CarouselStore:
        """Create a store whose initial bag is the dumped typed state."""
        return cls(state.to_state_bag(), config=config)

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def subscribers(self) -> SubscriberRegistry:
        return self._subscribers

    @property
    def master_spinner(self) -> MasterSpinnerTracker:
        return self._master_spinner

    @property
    def is_notifying(self) -> bool:
        """``True`` while a notification pass is running."""
        return self._notifying

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.subscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers.unsubscribe(callback)

    def notify_all(self, on_done: OnDone | None = None) -> None:
        """Call every subscriber, then ``on_done(state)`` if given."""
        if self._notifying:
            self._reject_if_forbidden("notify_all")
            self._deferred.append(on_done)
            return

        self._notifying = True
        try:
            self._run_pass(on_done)
            while self._deferred:
                self._run_pass(self._deferred.popleft())
        finally:
            self._deferred.clear()
            self._notifying = False

    update_subscribers = notify_all

    def _run_pass(self, on_done: OnDone | None) -> None:
        self._in_subscriber = True
        try:
            self._subscribers.call_all()
        finally:
            self._in_subscriber = False
        if on_done is None:
            return
        try:
            on_done(self.get_state())
        except ReentrantUpdateError:
            raise
        except Exception:
            _logger.debug("on_done callback %r failed", on_done, exc_info=True)

    def _reject_if_forbidden(self, operation: str) -> None:
        # on_done continuations may chain updates under either policy.
        if self._in_subscriber and self._config.reentrancy == ReentrancyPolicy.FORBID:
            raise ReentrantUpdateError(
                f"{operation} called from a subscriber while notification is in progress",
                operation=operation,
            )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def get_state(self) -> StateBag:
        """Return the current state bag.

        Treat the result as a read-only snapshot; with the default
        config it is a shallow copy.
        """
        if self._config.copy_state:
            return dict(self._state)
        return self._state

    def set_state(self, partial: Mapping[str, Any], on_done: OnDone | None = None) -> StateBag:
        """Shallow-merge *partial* into the state bag and notify subscribers.

        Keys in *partial* overwrite; nested values are replaced wholesale.
        Keys are stored as given: a snake_case :class:`CarouselState` field
        name is kept as its own key (and logged), not mapped onto the
        camelCase key the typed view reads.
        A non-mapping *partial* is logged and merged as nothing, but
        subscribers are still notified.  Returns the post-merge state.
        """
        if self._notifying:
            self._reject_if_forbidden("set_state")

        if isinstance(partial, Mapping):
            for key in partial:
                bag_key = state_bag_key(key)
                if bag_key is not None:
                    _logger.debug("set_state key %r is stored as given; the carousel reads %r", key, bag_key)
            self._state.update(partial)
        else:
            _logger.debug("set_state ignored non-mapping partial of type %s", type(partial).__name__)

        self.notify_all(on_done)
        return self.get_state()

    def carousel_state(self) -> CarouselState:
        """Validate the current bag into a typed :class:`CarouselState`."""
        return CarouselState.from_state_bag(self._state)

    # ------------------------------------------------------------------
    # Master spinner
    # ------------------------------------------------------------------

    def subscribe_master_spinner(self, key: str) -> None:
        self._master_spinner.subscribe(key)

    def unsubscribe_master_spinner(self, key: str) -> bool:
        return self._master_spinner.unsubscribe(key)

    def unsubscribe_all_master_spinner(self) -> None:
        self._master_spinner.unsubscribe_all()

    def report_master_spinner_success(self, key: str) -> None:
        self._master_spinner.report_success(key)

    def report_master_spinner_error(self, key: str) -> None:
        self._master_spinner.report_error(key)

    master_spinner_success = report_master_spinner_success
    master_spinner_error = report_master_spinner_error

    def is_master_spinner_finished(self) -> bool:
        return self._master_spinner.is_finished()

    def master_spinner_record(self, key: str) -> SpinnerRecord | None:
        return self._master_spinner.get(key)
