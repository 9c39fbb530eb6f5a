"""Binding between a carousel store and a consumer of its state.

A :class:`StoreBinding` plays the part of a bound component: it derives
its props from the store state through ``map_state``, subscribes while
mounted, and reports prop changes through ``on_change``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import TracebackType
from typing import Any

from pycarousel.exceptions import CarouselBindingError
from pycarousel.state.store import CarouselStore, OnDone, StateBag

_logger = logging.getLogger(__name__)

MapState = Callable[[StateBag], Mapping[str, Any]]
OnChange = Callable[[dict[str, Any]], object]


def _map_nothing(_state: StateBag) -> Mapping[str, Any]:
    return {}


@dataclass(frozen=True, slots=True)
class StoreHandle:
    """The restricted store API handed to a bound consumer."""

    _store: CarouselStore

    def get_state(self) -> StateBag:
        return self._store.get_state()

    def set_state(self, partial: Mapping[str, Any], on_done: OnDone | None = None) -> StateBag:
        return self._store.set_state(partial, on_done)

    def subscribe_master_spinner(self, key: str) -> None:
        self._store.subscribe_master_spinner(key)

    def unsubscribe_master_spinner(self, key: str) -> bool:
        return self._store.unsubscribe_master_spinner(key)

    def unsubscribe_all_master_spinner(self) -> None:
        self._store.unsubscribe_all_master_spinner()

    def master_spinner_success(self, key: str) -> None:
        self._store.report_master_spinner_success(key)

    def master_spinner_error(self, key: str) -> None:
        self._store.report_master_spinner_error(key)


class StoreBinding:
    """Keep a consumer's props in sync with a :class:`CarouselStore`.

    Raises
    ------
    CarouselBindingError
        If *store* is ``None``.
    """

    def __init__(
        self,
        store: CarouselStore | None,
        map_state: MapState | None = None,
        on_change: OnChange | None = None,
    ) -> None:
        if store is None:
            raise CarouselBindingError("StoreBinding must be used with a CarouselStore")
        self._store = store
        self._map_state = map_state or _map_nothing
        self._on_change = on_change
        self._props = self._derive_props()
        self._mounted = False
        # Subscribers are matched by identity; keep one bound method.
        self._subscriber = self.refresh

    @property
    def store(self) -> CarouselStore:
        return self._store

    @property
    def handle(self) -> StoreHandle:
        return StoreHandle(self._store)

    @property
    def props(self) -> dict[str, Any]:
        return dict(self._props)

    @property
    def mounted(self) -> bool:
        return self._mounted

    def _derive_props(self) -> dict[str, Any]:
        return dict(self._map_state(dict(self._store.get_state())))

    def mount(self) -> None:
        if self._mounted:
            return
        self._store.subscribe(self._subscriber)
        self._mounted = True

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._store.unsubscribe(self._subscriber)
        self._mounted = False

    def refresh(self) -> None:
        """Re-derive props; call ``on_change`` only if they differ."""
        props = self._derive_props()
        if props == self._props:
            return
        self._props = props
        _logger.debug("bound props changed: %s", sorted(props))
        if self._on_change is not None:
            self._on_change(dict(props))

    def __enter__(self) -> StoreBinding:
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()
