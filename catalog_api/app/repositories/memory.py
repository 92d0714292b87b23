"""
In-memory store.

Entities live in a plain ``dict`` keyed by id.  Three kinds of
synchronisation keep it consistent under FastAPI's thread pool:

* a dedicated lock around the id sequence, so no two saves receive the
  same id;
* a fixed set of striped locks, one chosen per id, around every write
  and around ``compute``, so operations on one key are linearizable
  while unrelated keys rarely contend;
* copies on the way in and on the way out, so no caller ever holds a
  reference into the store.
"""

import copy
import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")

LOCK_STRIPES = 16


class InMemoryStore(Generic[T]):
    """Thread-safe ``id -> entity`` map with a monotonic id sequence.

    Entities must expose a mutable ``id`` attribute.  The sequence
    starts at 1.  Saving an entity that already has an id overwrites
    that slot (upsert) and moves the sequence past it; deleted ids are
    never issued again.
    """

    def __init__(self, stripes: int = LOCK_STRIPES) -> None:
        self._entities: Dict[int, T] = {}
        self._last_id = 0
        self._sequence_lock = threading.Lock()
        self._stripes = [threading.Lock() for _ in range(stripes)]

    def _claim_id(self, entity_id: Optional[int]) -> int:
        """Return the id to store under and advance the sequence past it.

        ``None`` draws the next value.  An explicit id is kept, and the
        sequence skips ahead so it is never issued later.
        """
        with self._sequence_lock:
            if entity_id is None:
                self._last_id += 1
                return self._last_id
            if entity_id > self._last_id:
                self._last_id = entity_id
            return entity_id

    def _lock_for(self, entity_id: int) -> threading.Lock:
        return self._stripes[hash(entity_id) % len(self._stripes)]

    def find_all(self) -> List[T]:
        snapshot = self._entities.copy()
        return [copy.deepcopy(snapshot[key]) for key in sorted(snapshot)]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        entity = self._entities.get(entity_id)
        return copy.deepcopy(entity) if entity is not None else None

    def save(self, entity: T) -> T:
        stored = copy.deepcopy(entity)
        stored.id = self._claim_id(stored.id)
        with self._lock_for(stored.id):
            self._entities[stored.id] = stored
        return copy.deepcopy(stored)

    def exists_by_id(self, entity_id: int) -> bool:
        return entity_id in self._entities

    def delete_by_id(self, entity_id: int) -> bool:
        with self._lock_for(entity_id):
            return self._entities.pop(entity_id, None) is not None

    def compute(self, entity_id: int, func: Callable[[T], T]) -> Optional[T]:
        """Atomically replace the entity with ``func(entity)``.

        ``func`` receives a copy and must return the new value; it runs
        under the key's lock, so no other write to ``entity_id`` can
        interleave.  An exception raised by ``func`` leaves the stored
        entity untouched.  Returns ``None`` when the id is absent.
        """
        with self._lock_for(entity_id):
            current = self._entities.get(entity_id)
            if current is None:
                return None
            updated = copy.deepcopy(func(copy.deepcopy(current)))
            updated.id = entity_id
            self._entities[entity_id] = updated
            return copy.deepcopy(updated)

    def count(self) -> int:
        return len(self._entities)
