import pytest

from ingotkit.reactive import Reactive


def test_initial_value():
    r = Reactive("hello")
    assert r.value == "hello"
    assert r.watcher_id is None


def test_ids_are_unique():
    ids = {Reactive(0).id for _ in range(20)}
    assert len(ids) == 20


def test_watch_derives_initial_value():
    r = Reactive(5)
    derived = r.watch(lambda v: (v, v))
    assert derived.value == (5, 5)


def test_set_value_propagates():
    r = Reactive(1)
    derived = r.watch(lambda v: [v])
    r.set_value(7)
    assert r.value == 7
    assert derived.value == [7]


def test_value_setter_propagates():
    r = Reactive("a")
    derived = r.watch(str.upper)
    r.value = "b"
    assert derived.value == "B"


def test_chain_propagation():
    r = Reactive(3)
    first = r.watch(lambda v: (v,))
    second = first.watch(lambda t: t + t)
    r.set_value(9)
    assert first.value == (9,)
    assert second.value == (9, 9)


def test_equal_value_does_not_notify():
    calls = []
    r = Reactive(4)
    r.watch(lambda v: calls.append(v))
    assert calls == [4]
    r.set_value(4)
    assert calls == [4]
    r.set_value(8)
    assert calls == [4, 8]


def test_unchanged_derived_value_stops_propagation():
    calls = []
    r = Reactive(1)
    parity = r.watch(lambda v: v % 2 == 0)
    parity.watch(lambda p: calls.append(p))
    r.set_value(3)
    assert calls == [False]


def test_unwatch_stops_updates():
    r = Reactive(1)
    derived = r.watch(lambda v: [v])
    r.unwatch(derived)
    r.set_value(2)
    assert derived.value == [1]
    assert derived.watcher_id is None


def test_watcher_ids_are_reused():
    r = Reactive(0)
    first = r.watch(lambda v: v)
    second = r.watch(lambda v: v)
    assert (first.watcher_id, second.watcher_id) == (0, 1)
    r.unwatch(first)
    third = r.watch(lambda v: v)
    assert third.watcher_id == 0
    r.set_value(6)
    assert second.value == 6
    assert third.value == 6


def test_unwatch_foreign_reactive_raises():
    r = Reactive(0)
    other = Reactive(0)
    derived = other.watch(lambda v: v)
    with pytest.raises(ValueError):
        r.unwatch(derived)
    with pytest.raises(ValueError):
        r.unwatch(Reactive(0))


def test_unwatch_twice_raises():
    r = Reactive(0)
    derived = r.watch(lambda v: v)
    r.unwatch(derived)
    with pytest.raises(ValueError):
        r.unwatch(derived)