"""
Business logic for products.

``ProductService`` mediates every mutation of the product store and
enforces the rules the table alone does not know about:

* SKUs are unique across active and inactive products;
* stock never goes negative, and stock deltas are applied atomically;
* ``delete`` is a soft delete (the row stays, ``active`` becomes
  ``False``) while ``delete_hard`` removes the row for good;
* updates only touch the whitelisted business fields in
  ``MUTABLE_FIELDS``, so ``id`` and ``created_at`` cannot be overwritten
  by client input.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from catalog_api.app.core.exceptions import DuplicateKeyError, InvalidArgumentError, NotFoundError
from catalog_api.app.models.product import Product, ProductCategory
from catalog_api.app.repositories.base import PageRequest
from catalog_api.app.repositories.product_repository import ProductRepository

MUTABLE_FIELDS = (
    "name",
    "description",
    "price",
    "stock",
    "sku",
    "category",
    "image_url",
    "active",
)


def select_changes(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the whitelisted fields present in ``changes``."""
    return {field: changes[field] for field in MUTABLE_FIELDS if field in changes}


def _check_stock(stock: Optional[int]) -> None:
    if stock is not None and stock < 0:
        raise InvalidArgumentError("Stock cannot be negative")


class ProductService:
    """Product operations on top of a ``ProductRepository``."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_all(
        self,
        page_index: int = 0,
        page_size: int = 10,
        sort_field: str = "name",
        ascending: bool = True,
    ) -> Tuple[List[Product], int]:
        """Return one page of active products and the total active count."""
        page = PageRequest(page_index, page_size, sort_field, ascending)
        return self._repository.find_active(page), self.count()

    def count(self) -> int:
        return self._repository.count_active()

    def find_by_id(self, product_id: int) -> Product:
        product = self._repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product not found with id: {product_id}")
        return product

    def find_by_sku(self, sku: str) -> Optional[Product]:
        return self._repository.find_by_sku(sku)

    def find_by_name_containing(self, search: str) -> List[Product]:
        return self._repository.find_by_name_containing(search)

    def find_by_category(self, category: ProductCategory) -> List[Product]:
        return self._repository.find_by_category(category)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, product: Product) -> Product:
        """Persist a new product.

        Any client supplied id is discarded so identity is always
        assigned by the store.  Fails with ``DuplicateKeyError`` when the
        SKU is already taken.
        """
        _check_stock(product.stock)
        if product.sku:
            if self._repository.find_by_sku(product.sku) is not None:
                raise DuplicateKeyError(f"Product with SKU {product.sku} already exists")
        product.id = None
        product.created_at = None
        if product.active is None:
            product.active = True
        return self._repository.save(product)

    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product:
        """Write the fields in ``changes`` onto the stored product.

        Only keys listed in ``MUTABLE_FIELDS`` are applied; anything else
        in ``changes`` is ignored.  Columns that are not changed, stock
        in particular, are never rewritten, so a concurrent
        ``update_stock`` is not lost.
        """
        existing = self.find_by_id(product_id)
        values = select_changes(changes)
        _check_stock(values.get("stock"))

        new_sku = values.get("sku")
        if new_sku and new_sku != existing.sku:
            holder = self._repository.find_by_sku(new_sku)
            if holder is not None and holder.id != product_id:
                raise DuplicateKeyError(f"A product with SKU {new_sku} already exists")

        updated = self._repository.update_fields(product_id, values)
        if updated is None:
            raise NotFoundError(f"Product not found with id: {product_id}")
        return updated

    def delete(self, product_id: int) -> None:
        """Soft delete: hide the product from active listings and counts."""
        if self._repository.update_fields(product_id, {"active": False}) is None:
            raise NotFoundError(f"Product not found with id: {product_id}")

    def delete_hard(self, product_id: int) -> None:
        if not self._repository.delete_by_id(product_id):
            raise NotFoundError(f"Product not found with id: {product_id}")

    def update_stock(self, product_id: int, quantity: int) -> Product:
        """Add ``quantity`` (which may be negative) to the product's stock.

        Fails with ``NotFoundError`` for an unknown id and with
        ``InvalidArgumentError`` when the result would be negative, in
        which case the stored stock is left unchanged.
        """
        updated = self._repository.apply_stock_delta(product_id, quantity)
        if updated is not None:
            return updated
        product = self.find_by_id(product_id)
        raise InvalidArgumentError(
            f"Stock change of {quantity} exceeds available stock of {product.stock}"
        )
