import threading

import pytest

from todo_api.errors import AmbiguousTodoIdError
from todo_api.store import InMemoryTaskStore

from .conftest import make_todo


def test_empty_store_lists_nothing():
    store = InMemoryTaskStore()
    assert store.list_all() == []
    assert len(store) == 0


def test_add_returns_todo_and_keeps_insertion_order(store):
    first, second, third = make_todo(1, "A"), make_todo(2, "B"), make_todo(3, "C")
    for todo in (first, second, third):
        assert store.add(todo) is todo
    assert store.list_all() == [first, second, third]


def test_list_all_is_a_snapshot(store):
    store.add(make_todo(1))
    listed = store.list_all()
    listed.clear()
    assert len(store) == 1


def test_get_by_id(store):
    todo = store.add(make_todo(7))
    assert store.get_by_id(7) == todo
    assert store.get_by_id(8) is None


def test_get_by_id_with_duplicates_is_ambiguous(store):
    store.add(make_todo(1, "A"))
    store.add(make_todo(1, "B"))
    with pytest.raises(AmbiguousTodoIdError) as excinfo:
        store.get_by_id(1)
    assert excinfo.value.count == 2


def test_delete_unknown_id_leaves_store_unchanged(store):
    todos = [store.add(make_todo(1)), store.add(make_todo(2))]
    assert store.delete_by_id(99) == 0
    assert store.list_all() == todos


def test_delete_removes_every_match(store):
    store.add(make_todo(1, "A"))
    keep = store.add(make_todo(2, "B"))
    store.add(make_todo(1, "C"))
    assert store.delete_by_id(1) == 2
    assert store.list_all() == [keep]
    assert store.get_by_id(1) is None


def test_readd_after_delete_goes_last(store):
    store.add(make_todo(1, "A"))
    second = store.add(make_todo(2, "B"))
    store.delete_by_id(1)
    readded = store.add(make_todo(1, "A again"))
    assert store.list_all() == [second, readded]


def test_concurrent_adds_and_deletes_are_not_lost(store):
    per_thread = 200
    workers = 8

    def churn(base):
        for n in range(per_thread):
            store.add(make_todo(base + n))
            if n % 2:
                store.delete_by_id(base + n)

    threads = [threading.Thread(target=churn, args=(w * 1000,)) for w in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    survivors = store.list_all()
    assert len(survivors) == workers * per_thread // 2
    assert all(t.id % 2 == 0 for t in survivors)
    assert len({t.id for t in survivors}) == len(survivors)
