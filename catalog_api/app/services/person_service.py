"""
Business logic for persons.

Persons live only in memory.  The service guarantees server-assigned
identity (client ids are discarded on create) and converts every
"not in store" outcome into ``NotFoundError`` so handlers never have to
check for ``None``.
"""

from dataclasses import replace
from datetime import date
from typing import List, Optional

from catalog_api.app.core.exceptions import NotFoundError
from catalog_api.app.models.person import Person
from catalog_api.app.repositories.memory import InMemoryStore


def sample_persons() -> List[Person]:
    """The demo records loaded into an empty store."""
    today = date.today()
    return [
        Person(name="Ken", last_name="Iding", age=20, height=1.70, weight=60.0, birth_date=today),
        Person(name="Juan", last_name="Pérez", age=25, height=1.80, weight=70.0, birth_date=today),
    ]


class PersonService:
    """CRUD operations over an in-memory person store."""

    def __init__(self, store: Optional[InMemoryStore] = None, seed: bool = False) -> None:
        self._store: InMemoryStore = store if store is not None else InMemoryStore()
        if seed:
            self._init_sample_data()

    def _init_sample_data(self) -> None:
        # Only seed an empty store so restarts over a shared store do not
        # duplicate the demo records.
        if self._store.find_all():
            return
        for person in sample_persons():
            self._store.save(person)

    def find_all(self) -> List[Person]:
        return self._store.find_all()

    def find_by_id(self, person_id: int) -> Person:
        person = self._store.find_by_id(person_id)
        if person is None:
            raise NotFoundError(f"Person not found with id {person_id}")
        return person

    def create(self, person: Person) -> Person:
        """Store a new person under a freshly assigned id."""
        return self._store.save(replace(person, id=None))

    def update(self, person_id: int, person: Person) -> Person:
        """Replace the person stored under ``person_id``.

        The id always comes from the path, never from the payload.  The
        replacement happens under the key's lock, so a concurrent delete
        cannot be undone by a late update.
        """
        updated = self._store.compute(person_id, lambda _current: replace(person, id=person_id))
        if updated is None:
            raise NotFoundError(f"Person not found with id {person_id}")
        return updated

    def delete(self, person_id: int) -> None:
        if not self._store.delete_by_id(person_id):
            raise NotFoundError(f"Person not found with id {person_id}")
