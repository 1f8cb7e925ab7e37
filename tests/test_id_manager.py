from itertools import islice

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ingotkit.id_manager import IDManager, OutOfRangeError


def test_free_once():
    manager = IDManager()
    assert next(manager) == 0
    manager.free(0)
    assert next(manager) == 0
    with pytest.raises(OutOfRangeError):
        manager.free(1)


def test_free_consecutively_returns_reverse_order():
    manager = IDManager()
    assert list(islice(manager, 6)) == [0, 1, 2, 3, 4, 5]
    manager.free(0)
    manager.free(3)
    manager.free(5)
    assert next(manager) == 5
    assert next(manager) == 3
    assert next(manager) == 0
    assert next(manager) == 6
    assert next(manager) == 7
    assert next(manager) == 8
    with pytest.raises(OutOfRangeError):
        manager.free(9)


def test_next_ascending_then_reuse():
    manager = IDManager()
    assert [next(manager) for _ in range(3)] == [0, 1, 2]
    manager.free(0)
    manager.free(1)
    manager.free(2)
    assert [next(manager) for _ in range(6)] == [2, 1, 0, 3, 4, 5]


def test_double_free_raises():
    manager = IDManager()
    next(manager)
    manager.free(0)
    with pytest.raises(ValueError, match="already been freed"):
        manager.free(0)


def test_out_of_range_error_carries_id():
    manager = IDManager()
    with pytest.raises(OutOfRangeError) as info:
        manager.free(4)
    assert info.value.id == 4
    assert "4" in str(info.value)


def test_iter_returns_self():
    manager = IDManager()
    assert iter(manager) is manager


@given(st.lists(st.booleans(), max_size=60))
def test_live_ids_are_unique(ops):
    manager = IDManager()
    live: list[int] = []
    for allocate in ops:
        if allocate or not live:
            new_id = next(manager)
            assert new_id not in live
            live.append(new_id)
        else:
            manager.free(live.pop(0))
    assert len(set(live)) == len(live)