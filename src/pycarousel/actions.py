"""Carousel navigation and loading actions.

These are the state transitions the carousel controls perform (back,
next, first, last, dot and play buttons, and the image loaders feeding
the master spinner).  Each action reads the typed view of the store's
state bag and writes a partial update back through ``set_state``.

An action on a bag that does not validate as a :class:`CarouselState`
is logged and skipped: it returns the current state without notifying
subscribers.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from pycarousel.helpers import bounded_range
from pycarousel.models.carousel import CarouselState
from pycarousel.state.store import CarouselStore, OnDone, StateBag

CURRENT_SLIDE = "currentSlide"
IS_PLAYING = "isPlaying"
MASTER_SPINNER_FINISHED = "masterSpinnerFinished"

_logger = logging.getLogger(__name__)


def _typed_state(store: CarouselStore, action: str) -> CarouselState | None:
    try:
        return store.carousel_state()
    except ValidationError:
        _logger.debug("%s skipped: state bag is not a valid carousel state", action, exc_info=True)
        return None


def go_back(store: CarouselStore, on_done: OnDone | None = None) -> StateBag:
    """Move back by ``step`` slides, wrapping to the last page when infinite."""
    state = _typed_state(store, "go_back")
    if state is None:
        return store.get_state()
    new_slide = max(state.current_slide - state.step, 0)
    if state.infinite and state.current_slide == 0:
        new_slide = state.max_slide
    return store.set_state({CURRENT_SLIDE: new_slide, IS_PLAYING: False}, on_done)


def go_next(store: CarouselStore, on_done: OnDone | None = None) -> StateBag:
    """Move forward by ``step`` slides, wrapping to the start when infinite."""
    state = _typed_state(store, "go_next")
    if state is None:
        return store.get_state()
    new_slide = min(state.current_slide + state.step, state.max_slide)
    if state.infinite and state.current_slide >= state.max_slide:
        new_slide = 0
    return store.set_state({CURRENT_SLIDE: new_slide, IS_PLAYING: False}, on_done)


def go_first(store: CarouselStore, on_done: OnDone | None = None) -> StateBag:
    return store.set_state({CURRENT_SLIDE: 0, IS_PLAYING: False}, on_done)


def go_last(store: CarouselStore, on_done: OnDone | None = None) -> StateBag:
    state = _typed_state(store, "go_last")
    if state is None:
        return store.get_state()
    return store.set_state({CURRENT_SLIDE: state.max_slide, IS_PLAYING: False}, on_done)


def go_to_slide(
    store: CarouselStore,
    slide: int,
    *,
    stop_playing: bool = True,
    on_done: OnDone | None = None,
) -> StateBag:
    """Jump to *slide*, clamped so the last page stays full."""
    state = _typed_state(store, "go_to_slide")
    if state is None:
        return store.get_state()
    partial: dict[str, object] = {CURRENT_SLIDE: bounded_range(0, state.max_slide, slide)}
    if stop_playing:
        partial[IS_PLAYING] = False
    return store.set_state(partial, on_done)


def toggle_play(store: CarouselStore, on_done: OnDone | None = None) -> StateBag:
    state = _typed_state(store, "toggle_play")
    if state is None:
        return store.get_state()
    return store.set_state({IS_PLAYING: not state.is_playing}, on_done)


def is_back_disabled(state: CarouselState, disabled: bool | None = None) -> bool:
    """An explicit *disabled* flag wins; otherwise disabled on the first slide."""
    if disabled is not None:
        return disabled
    return state.current_slide == 0 and not state.infinite


def is_next_disabled(state: CarouselState, disabled: bool | None = None) -> bool:
    """An explicit *disabled* flag wins; otherwise disabled on the last page."""
    if disabled is not None:
        return disabled
    return state.current_slide >= state.max_slide and not state.infinite


def sync_master_spinner(store: CarouselStore) -> bool:
    """Publish the spinner aggregate into the state bag.

    Only writes (and so only notifies) when the published value changes.
    Returns the aggregate.
    """
    finished = store.is_master_spinner_finished()
    if store.get_state().get(MASTER_SPINNER_FINISHED) != finished:
        store.set_state({MASTER_SPINNER_FINISHED: finished})
    return finished


def image_load_started(store: CarouselStore, src: str) -> None:
    store.subscribe_master_spinner(src)
    sync_master_spinner(store)


def image_loaded(store: CarouselStore, src: str) -> bool:
    store.report_master_spinner_success(src)
    return sync_master_spinner(store)


def image_failed(store: CarouselStore, src: str) -> bool:
    store.report_master_spinner_error(src)
    return sync_master_spinner(store)


def image_unmounted(store: CarouselStore, src: str) -> bool:
    """Stop tracking *src*; returns whether it was still tracked."""
    removed = store.unsubscribe_master_spinner(src)
    if removed:
        sync_master_spinner(store)
    return removed
