"""
Tests for the in-memory store.
"""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import date

import pytest

from catalog_api.app.models.person import Person
from catalog_api.app.repositories.memory import InMemoryStore


def _person(name: str = "Ana") -> Person:
    return Person(name=name, last_name="López", age=30, height=1.65, weight=58.0, birth_date=date(1994, 3, 1))


class TestInMemoryStore:
    """Test cases for InMemoryStore."""

    def setup_method(self):
        self.store = InMemoryStore()

    def test_ids_start_at_one_and_increase(self):
        ids = [self.store.save(_person()).id for _ in range(3)]

        assert ids == [1, 2, 3]

    def test_find_by_id_returns_saved_entity(self):
        saved = self.store.save(_person("Elena"))

        assert self.store.find_by_id(saved.id) == saved

    def test_find_by_id_missing_returns_none(self):
        assert self.store.find_by_id(42) is None

    def test_save_with_id_overwrites_slot(self):
        saved = self.store.save(_person("Luis"))
        self.store.save(replace(saved, age=31))

        assert self.store.find_by_id(saved.id).age == 31
        assert len(self.store.find_all()) == 1

    def test_ids_are_not_reused_after_delete(self):
        first = self.store.save(_person())
        assert self.store.delete_by_id(first.id) is True

        second = self.store.save(_person())

        assert second.id == first.id + 1

    def test_explicit_id_is_never_issued_again(self):
        self.store.save(replace(_person("Explicit"), id=2))

        first = self.store.save(_person("First"))
        second = self.store.save(_person("Second"))

        assert (first.id, second.id) == (3, 4)
        assert [p.name for p in self.store.find_all()] == ["Explicit", "First", "Second"]

    def test_explicit_id_below_sequence_keeps_sequence(self):
        for name in ("Juan", "María", "Pedro"):
            self.store.save(_person(name))
        self.store.save(replace(_person("Overwrite"), id=1))

        assert self.store.save(_person()).id == 4
        assert self.store.find_by_id(1).name == "Overwrite"

    def test_delete_missing_returns_false_without_side_effects(self):
        self.store.save(_person())

        assert self.store.delete_by_id(99) is False
        assert self.store.count() == 1

    def test_exists_by_id(self):
        saved = self.store.save(_person())

        assert self.store.exists_by_id(saved.id)
        assert not self.store.exists_by_id(saved.id + 1)

    def test_find_all_returns_copies(self):
        saved = self.store.save(_person("Sofía"))

        listed = self.store.find_all()
        listed[0].name = "Changed"
        listed.clear()

        assert self.store.find_by_id(saved.id).name == "Sofía"
        assert len(self.store.find_all()) == 1

    def test_caller_mutation_after_save_does_not_leak(self):
        person = _person("Miguel")
        saved = self.store.save(person)

        person.name = "Changed"
        saved.name = "Changed too"

        assert self.store.find_by_id(saved.id).name == "Miguel"
        assert person.id is None

    def test_find_all_is_ordered_by_id(self):
        for name in ("Juan", "María", "Pedro"):
            self.store.save(_person(name))

        assert [p.id for p in self.store.find_all()] == [1, 2, 3]

    def test_compute_replaces_existing(self):
        saved = self.store.save(_person())

        updated = self.store.compute(saved.id, lambda p: replace(p, age=p.age + 1))

        assert updated.age == 31
        assert self.store.find_by_id(saved.id).age == 31

    def test_compute_missing_returns_none(self):
        assert self.store.compute(7, lambda p: p) is None
        assert not self.store.exists_by_id(7)

    def test_compute_failure_leaves_entity_untouched(self):
        saved = self.store.save(_person())

        def fail(_):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            self.store.compute(saved.id, fail)

        assert self.store.find_by_id(saved.id) == saved


def test_concurrent_saves_receive_unique_ids():
    store = InMemoryStore()

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(lambda _: store.save(_person()).id, range(500)))

    assert len(set(ids)) == 500
    assert sorted(ids) == list(range(1, 501))
    assert store.count() == 500


def test_concurrent_compute_does_not_lose_updates():
    store = InMemoryStore()
    saved = store.save(_person())

    def bump(_):
        store.compute(saved.id, lambda p: replace(p, age=p.age + 1))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(bump, range(100)))

    assert store.find_by_id(saved.id).age == 130
