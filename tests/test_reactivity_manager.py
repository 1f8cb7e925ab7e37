from ingotkit.reactive import Reactive
from ingotkit.reactivity_manager import ReactivityManager


def test_watch_propagates():
    manager = ReactivityManager()
    r = Reactive(2)
    derived = manager.watch(r, lambda v: [v])
    assert derived.value == [2]
    r.set_value(5)
    assert derived.value == [5]


def test_close_detaches_watchers():
    manager = ReactivityManager()
    r = Reactive("x")
    derived = manager.watch(r, str.upper)
    manager.close()
    r.set_value("y")
    assert derived.value == "X"


def test_watch2_combines():
    manager = ReactivityManager()
    a = Reactive(1)
    b = Reactive("one")
    result = manager.watch2(a, b, lambda x, y: (x, y))
    assert result.value == (1, "one")
    a.set_value(3)
    assert result.value == (3, "one")
    b.set_value("two")
    assert result.value == (3, "two")


def test_watch3_combines():
    manager = ReactivityManager()
    a, b, c = Reactive(1), Reactive(2), Reactive(3)
    result = manager.watch3(a, b, c, lambda x, y, z: (x, y, z))
    assert result.value == (1, 2, 3)
    c.set_value(30)
    assert result.value == (1, 2, 30)
    b.set_value(20)
    a.set_value(10)
    assert result.value == (10, 20, 30)


def test_context_manager_detaches_everything():
    a, b = Reactive(1), Reactive(2)
    with ReactivityManager() as manager:
        combined = manager.watch2(a, b, lambda x, y: (x, y))
        single = manager.watch(a, lambda v: [v])
    a.set_value(9)
    b.set_value(8)
    assert combined.value == (1, 2)
    assert single.value == [1]


def test_close_frees_watcher_slots():
    r = Reactive(0)
    manager = ReactivityManager()
    manager.watch(r, lambda v: v)
    manager.close()
    derived = r.watch(lambda v: v)
    assert derived.watcher_id == 0


def test_close_is_idempotent():
    r = Reactive(0)
    manager = ReactivityManager()
    derived = manager.watch(r, lambda v: [v])
    manager.close()
    manager.close()
    r.set_value(1)
    assert derived.value == [0]


def test_watchers_outside_manager_survive_close():
    r = Reactive(0)
    own = r.watch(lambda v: [v])
    manager = ReactivityManager()
    manager.watch(r, lambda v: v)
    manager.close()
    r.set_value(4)
    assert own.value == [4]