"""
Paged response envelope.

``PagedResponse.of`` is the only way the API builds one: it takes a
page of content plus the total number of matching elements and derives
``total_pages``, ``first`` and ``last``.  It is a pure function of its
arguments.
"""

import math
from typing import Generic, List, TypeVar

from catalog_api.app.schemas.base import CamelModel

T = TypeVar("T")


class PagedResponse(CamelModel, Generic[T]):
    content: List[T]
    total_elements: int
    page_number: int
    page_size: int
    total_pages: int
    last: bool
    first: bool

    @classmethod
    def of(cls, content: List[T], total_elements: int, page_number: int, page_size: int) -> "PagedResponse[T]":
        """Build an envelope for one page.

        ``total_pages`` is ``ceil(total_elements / page_size)``, or ``0``
        when ``page_size`` is not positive.  With no elements at all the
        first page is both ``first`` and ``last``.
        """
        total_pages = math.ceil(total_elements / page_size) if page_size > 0 else 0
        return cls(
            content=content,
            total_elements=total_elements,
            page_number=page_number,
            page_size=page_size,
            total_pages=total_pages,
            last=page_number >= total_pages - 1,
            first=page_number == 0,
        )
