"""
Unit tests for the equality-keyed stores.
"""

import operator

import pytest

from porco import AssociationList, HashedStore


@pytest.mark.parametrize("factory", [AssociationList, HashedStore])
class TestKeyedStore:
    """Behaviour shared by both stores."""

    def test_insert_and_get(self, factory) -> None:
        store = factory()
        assert store.insert("a", 1) is None
        assert store.insert("b", 2) is None
        assert store.get("a") == 1
        assert store.get("missing") is None
        assert store.get("missing", 0) == 0
        assert len(store) == 2

    def test_insert_replaces_in_place(self, factory) -> None:
        store = factory()
        store.insert("a", 1)
        store.insert("b", 2)
        store.insert("c", 3)
        assert store.insert("a", 10) == 1
        assert store.items() == [("a", 10), ("b", 2), ("c", 3)]

    def test_merge_keeps_first_occurrence_order(self, factory) -> None:
        store = factory()
        for key, value in [("x", 1), ("y", 2), ("x", 3), ("z", 4), ("y", 5)]:
            store.merge(key, value, operator.add)
        assert store.items() == [("x", 4), ("y", 7), ("z", 4)]
        assert [k for k, _v in store] == ["x", "y", "z"]

    def test_find(self, factory) -> None:
        store = factory()
        store.insert("a", 1)
        store.insert("b", 2)
        assert store.find("b") == 1
        assert store.find("c") is None


def test_association_list_accepts_unhashable_keys() -> None:
    store = AssociationList()
    store.merge([1, 2], 0.25, operator.add)
    store.merge([3], 0.5, operator.add)
    store.merge([1, 2], 0.25, operator.add)
    assert store.items() == [([1, 2], 0.5), ([3], 0.5)]


def test_hashed_store_rejects_unhashable_keys() -> None:
    store = HashedStore()
    with pytest.raises(TypeError):
        store.insert([1, 2], 0.5)


def test_hashed_store_lookup_of_unhashable_key_is_absent() -> None:
    """Unhashable keys are reported absent instead of raising."""
    store = HashedStore()
    store.insert("a", 1)
    assert store.find([1]) is None
    assert store.get([1]) is None
    assert store.get([1], 0) == 0
