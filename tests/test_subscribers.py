from __future__ import annotations

from unittest.mock import Mock

from pycarousel.state.subscribers import SubscriberRegistry


def test_subscribe_appends_in_registration_order() -> None:
    registry = SubscriberRegistry()
    first = Mock()
    second = Mock()

    registry.subscribe(first)
    registry.subscribe(second)

    assert len(registry) == 2
    assert list(registry) == [first, second]


def test_unsubscribe_unknown_callback_is_noop() -> None:
    registry = SubscriberRegistry()
    func = Mock()
    not_func = Mock()
    registry.subscribe(func)

    registry.unsubscribe(not_func)

    assert len(registry) == 1
    assert list(registry) == [func]


def test_duplicate_registrations_are_independent() -> None:
    registry = SubscriberRegistry()
    func = Mock()
    registry.subscribe(func)
    registry.subscribe(func)

    registry.call_all()
    assert func.call_count == 2

    registry.unsubscribe(func)
    assert len(registry) == 1
    assert func in registry

    registry.unsubscribe(func)
    assert len(registry) == 0
    assert func not in registry


def test_unsubscribe_keeps_remaining_order() -> None:
    registry = SubscriberRegistry()
    a, b, c = Mock(), Mock(), Mock()
    for func in (a, b, a, c):
        registry.subscribe(func)

    registry.unsubscribe(a)

    assert list(registry) == [b, a, c]


def test_call_all_runs_every_subscriber_once_in_order() -> None:
    registry = SubscriberRegistry()
    calls: list[str] = []
    registry.subscribe(lambda: calls.append("a"))
    registry.subscribe(lambda: calls.append("b"))
    registry.subscribe(lambda: calls.append("c"))

    registry.call_all()

    assert calls == ["a", "b", "c"]


def test_call_all_with_no_subscribers() -> None:
    SubscriberRegistry().call_all()


def test_failing_subscriber_does_not_stop_the_pass() -> None:
    registry = SubscriberRegistry()
    after = Mock()
    registry.subscribe(Mock(side_effect=RuntimeError("boom")))
    registry.subscribe(after)

    registry.call_all()

    after.assert_called_once_with()


def test_unsubscribe_during_pass_affects_next_pass_only() -> None:
    registry = SubscriberRegistry()
    second = Mock()

    def first() -> None:
        registry.unsubscribe(second)

    registry.subscribe(first)
    registry.subscribe(second)

    registry.call_all()
    assert second.call_count == 1

    registry.call_all()
    assert second.call_count == 1


def test_registry_length_tracks_successful_unsubscribes() -> None:
    registry = SubscriberRegistry()
    funcs = [Mock() for _ in range(4)]
    for func in funcs:
        registry.subscribe(func)

    registry.unsubscribe(funcs[1])
    registry.unsubscribe(funcs[1])
    registry.unsubscribe(Mock())

    assert len(registry) == 3
