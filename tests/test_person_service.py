"""
Tests for PersonService.
"""
from datetime import date

import pytest

from catalog_api.app.core.exceptions import ErrorKind, NotFoundError
from catalog_api.app.models.person import Person
from catalog_api.app.repositories.memory import InMemoryStore
from catalog_api.app.services.person_service import PersonService


def _person(**overrides) -> Person:
    fields = dict(name="Laura", last_name="Torres", age=41, height=1.62, weight=61.5, birth_date=date(1983, 7, 9))
    fields.update(overrides)
    return Person(**fields)


def test_seed_loads_sample_persons_into_empty_store():
    service = PersonService(InMemoryStore(), seed=True)

    names = [p.name for p in service.find_all()]

    assert names == ["Ken", "Juan"]


def test_seed_skips_non_empty_store():
    store = InMemoryStore()
    store.save(_person())

    service = PersonService(store, seed=True)

    assert len(service.find_all()) == 1


def test_create_discards_client_id(person_service):
    created = person_service.create(_person(id=77))

    assert created.id == 1
    assert person_service.find_by_id(1).name == "Laura"


def test_find_by_id_missing_raises_not_found(person_service):
    with pytest.raises(NotFoundError) as exc_info:
        person_service.find_by_id(5)

    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert "5" in exc_info.value.message


def test_update_uses_path_id(person_service):
    created = person_service.create(_person())

    updated = person_service.update(created.id, _person(id=999, name="Carlos"))

    assert updated.id == created.id
    assert person_service.find_by_id(created.id).name == "Carlos"
    assert len(person_service.find_all()) == 1


def test_update_missing_raises_not_found(person_service):
    with pytest.raises(NotFoundError):
        person_service.update(3, _person())

    assert person_service.find_all() == []


def test_delete_then_find_raises(person_service):
    created = person_service.create(_person())

    person_service.delete(created.id)

    with pytest.raises(NotFoundError):
        person_service.find_by_id(created.id)


def test_delete_missing_raises_not_found(person_service):
    with pytest.raises(NotFoundError):
        person_service.delete(1)
