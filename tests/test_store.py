"""
Tests for TaskStore: dense ids, renumbering on remove, completion.
"""

from ticklist.core.store import TaskStore
from ticklist.core.models import Task


def _ids(store):
    return [t.id for t in store.list()]


def _descriptions(store):
    return [t.description for t in store.list()]


def make_store(*descriptions):
    store = TaskStore()
    for description in descriptions:
        store.add(description)
    return store


# --- add / list ---

def test_add_assigns_next_id():
    """New tasks get size + 1 and start not done."""
    store = TaskStore()

    first = store.add("buy milk")
    second = store.add("walk dog")

    assert first == Task(id=1, description="buy milk", done=False)
    assert second.id == 2
    assert len(store) == 2


def test_add_accepts_empty_description():
    store = TaskStore()
    task = store.add("")
    assert task.id == 1
    assert task.description == ""


def test_list_empty_store():
    assert TaskStore().list() == []


def test_list_is_a_snapshot():
    """Changing the returned tasks does not touch the store."""
    store = make_store("a", "b")

    snapshot = store.list()
    snapshot[0].description = "changed"
    snapshot[0].done = True
    snapshot.pop()

    assert _descriptions(store) == ["a", "b"]
    assert store.get(1).done is False


def test_add_returns_copy():
    store = TaskStore()
    task = store.add("a")
    task.id = 99
    assert _ids(store) == [1]


def test_constructor_renumbers_given_tasks():
    store = TaskStore([Task(7, "x"), Task(3, "y", True)])
    assert store.list() == [Task(1, "x"), Task(2, "y", True)]


# --- complete / uncomplete ---

def test_complete_existing_task():
    store = make_store("a", "b")

    assert store.complete(2) is True
    assert store.get(2).done is True
    assert store.get(1).done is False


def test_complete_is_idempotent():
    store = make_store("a")

    assert store.complete(1) is True
    assert store.complete(1) is True
    assert store.get(1).done is True


def test_complete_unknown_id_fails_without_change():
    store = make_store("a", "b")
    before = store.list()

    for task_id in (0, 3, 0, 3, -1):
        assert store.complete(task_id) is False

    assert store.list() == before


def test_uncomplete():
    store = make_store("a")
    store.complete(1)

    assert store.uncomplete(1) is True
    assert store.get(1).done is False
    assert store.uncomplete(5) is False


# --- edit / get ---

def test_edit_replaces_description():
    store = make_store("a", "b")

    assert store.edit(2, "bee") is True
    assert _descriptions(store) == ["a", "bee"]
    assert store.edit(3, "nope") is False


def test_get_unknown_returns_none():
    assert make_store("a").get(2) is None


# --- remove ---

def test_remove_renumbers_later_tasks():
    """Removing 2 of 1,2,3 leaves ids 1,2 with old 3 as the new 2."""
    store = make_store("one", "two", "three")

    assert store.remove(2) is True

    assert _ids(store) == [1, 2]
    assert store.get(2).description == "three"


def test_remove_keeps_done_flags_with_their_tasks():
    store = make_store("one", "two", "three")
    store.complete(3)

    store.remove(1)

    assert store.list() == [Task(1, "two", False), Task(2, "three", True)]


def test_remove_last_and_only():
    store = make_store("a", "b")
    assert store.remove(2) is True
    assert store.remove(1) is True
    assert store.list() == []


def test_remove_out_of_range_fails_without_change():
    store = make_store("a", "b")
    before = store.list()

    assert store.remove(0) is False
    assert store.remove(3) is False
    assert store.remove(-1) is False

    assert store.list() == before


def test_remove_from_empty_store():
    assert TaskStore().remove(1) is False


def test_ids_stay_dense_after_mixed_operations():
    """After any add/remove sequence ids are exactly 1..N in order."""
    store = TaskStore()
    operations = [
        ("add", "a"), ("add", "b"), ("add", "c"), ("remove", 1),
        ("add", "d"), ("remove", 3), ("remove", 7), ("add", "e"),
        ("add", "f"), ("remove", 2), ("remove", 0), ("add", "g"),
    ]

    for op, arg in operations:
        if op == "add":
            store.add(arg)
        else:
            store.remove(arg)
        assert _ids(store) == list(range(1, len(store) + 1))

    assert _descriptions(store) == ["b", "e", "f", "g"]


def test_remove_many_uses_ids_before_removal():
    """rm 1,3 on a,b,c,d deletes a and c, not a and d."""
    store = make_store("a", "b", "c", "d")

    removed = store.remove_many([1, 3])

    assert removed == [1, 3]
    assert _descriptions(store) == ["b", "d"]
    assert _ids(store) == [1, 2]


def test_remove_many_skips_invalid_and_duplicates():
    store = make_store("a", "b", "c")

    removed = store.remove_many([3, 3, 9, 0, 1])

    assert removed == [1, 3]
    assert _descriptions(store) == ["b"]


# --- scenario ---

def test_basic_session_scenario():
    store = TaskStore()

    store.add("buy milk")
    assert store.list() == [Task(1, "buy milk", False)]

    store.add("walk dog")
    assert _ids(store) == [1, 2]

    assert store.complete(1)
    assert store.get(1).done is True

    assert store.remove(1)
    assert store.list() == [Task(1, "walk dog", False)]


def test_store_equality():
    assert make_store("a", "b") == make_store("a", "b")
    assert make_store("a") != make_store("b")
    done = make_store("a")
    done.complete(1)
    assert done != make_store("a")
