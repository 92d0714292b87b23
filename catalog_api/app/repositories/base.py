"""
Store contract shared by the in-memory and relational repositories.

A store owns the authoritative ``id -> entity`` mapping for one
resource.  Ids are assigned by the store on the first ``save`` of an
entity whose ``id`` is ``None`` and are never reused, even after the
entity is deleted.  Lookups never raise for a missing id; turning an
absence into a failure is the service layer's job.

``PageRequest`` describes one page of a sorted listing.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, TypeVar

from catalog_api.app.core.exceptions import InvalidArgumentError

T = TypeVar("T")


class Store(Protocol[T]):
    """Identity-keyed storage for one entity type."""

    def find_all(self) -> List[T]:
        """Return every stored entity, ordered by id.

        The returned objects are copies; mutating them does not affect
        the store.
        """
        ...

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with ``entity_id`` or ``None``."""
        ...

    def save(self, entity: T) -> T:
        """Insert ``entity`` (assigning an id) or overwrite the existing slot."""
        ...

    def exists_by_id(self, entity_id: int) -> bool:
        """Return whether an entity is stored under ``entity_id``."""
        ...

    def delete_by_id(self, entity_id: int) -> bool:
        """Remove the entity; ``True`` if something was removed."""
        ...


@dataclass(frozen=True)
class PageRequest:
    """A page number, page size and sort order for a listing.

    ``page_number`` is zero based.  Invalid values raise
    ``InvalidArgumentError`` at construction.
    """

    page_number: int = 0
    page_size: int = 10
    sort_field: str = "id"
    ascending: bool = True

    def __post_init__(self) -> None:
        if self.page_number < 0:
            raise InvalidArgumentError("Page number must be zero or greater")
        if self.page_size <= 0:
            raise InvalidArgumentError("Page size must be greater than zero")
        if not self.sort_field or not self.sort_field.strip():
            raise InvalidArgumentError("Sort field must not be blank")

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size

    def slice(self, items: List[T]) -> List[T]:
        """Return the part of an already ordered list covered by this page."""
        return items[self.offset:self.offset + self.page_size]
