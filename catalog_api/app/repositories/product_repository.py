"""
Relational store and query layer for products.

``ProductRepository`` satisfies the ``Store`` contract on top of the
``products`` table and adds the filtered queries used by the product
listing: active-only pages, name search, category filter and SKU
lookup.  Every method opens its own session, so no transaction ever
spans more than one call.

Entities returned here are detached from their session.  They are
fresh objects on every call, so mutating one has no effect until it is
passed back to ``save``.  ``update_fields`` and ``apply_stock_delta``
write single columns in place without reading the row first.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from catalog_api.app.core.exceptions import DuplicateKeyError, InvalidArgumentError
from catalog_api.app.models.product import Product, ProductCategory
from catalog_api.app.repositories.base import PageRequest

SORTABLE_FIELDS = {
    "id",
    "name",
    "description",
    "price",
    "stock",
    "sku",
    "category",
    "created_at",
    "updated_at",
}


def _raise_duplicate_sku(error: IntegrityError, sku: Optional[str]) -> None:
    """Re-raise a UNIQUE violation on ``sku`` as ``DuplicateKeyError``."""
    if "sku" not in str(error.orig).lower():
        raise error
    raise DuplicateKeyError(f"Product with SKU {sku} already exists") from error


class ProductRepository:
    """SQLAlchemy-backed product store."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # Store contract
    # ------------------------------------------------------------------
    def find_all(self) -> List[Product]:
        with self._session_factory() as session:
            return list(session.scalars(select(Product).order_by(Product.id)))

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._session_factory() as session:
            return session.get(Product, product_id)

    def save(self, product: Product) -> Product:
        """Insert a new product or overwrite an existing row.

        ``created_at`` is stamped on first insert and ``updated_at`` on
        every save.  A UNIQUE violation on ``sku`` is reported as
        ``DuplicateKeyError``.
        """
        now = datetime.now()
        with self._session_factory() as session:
            try:
                if product.id is None:
                    product.created_at = now
                    product.updated_at = now
                    if product.active is None:
                        product.active = True
                    session.add(product)
                    stored = product
                else:
                    stored = session.merge(product)
                    if stored.created_at is None:
                        stored.created_at = now
                    stored.updated_at = now
                session.commit()
            except IntegrityError as e:
                session.rollback()
                _raise_duplicate_sku(e, product.sku)
            return stored

    def update_fields(self, product_id: int, values: Mapping[str, Any]) -> Optional[Product]:
        """Write only the given columns of one product.

        Columns not named in ``values`` are left as stored, so a
        concurrent ``apply_stock_delta`` is never overwritten by a stale
        read.  ``updated_at`` is always stamped.  Returns the refreshed
        product, or ``None`` when no row has ``product_id``.
        """
        statement = (
            update(Product)
            .where(Product.id == product_id)
            .values(**values, updated_at=datetime.now())
            .execution_options(synchronize_session=False)
        )
        with self._session_factory() as session:
            try:
                result = session.execute(statement)
                if result.rowcount == 0:
                    session.rollback()
                    return None
                session.commit()
            except IntegrityError as e:
                session.rollback()
                _raise_duplicate_sku(e, values.get("sku"))
            return session.get(Product, product_id)

    def exists_by_id(self, product_id: int) -> bool:
        with self._session_factory() as session:
            return session.scalar(select(Product.id).where(Product.id == product_id)) is not None

    def delete_by_id(self, product_id: int) -> bool:
        with self._session_factory() as session:
            result = session.execute(delete(Product).where(Product.id == product_id))
            session.commit()
            return result.rowcount > 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_active(self, page: PageRequest) -> List[Product]:
        """Return one page of active products.

        Sorted by ``page.sort_field`` in the requested direction with ties
        broken by ascending id.  Raises ``InvalidArgumentError`` for a
        field that is not a sortable product column.
        """
        if page.sort_field not in SORTABLE_FIELDS:
            raise InvalidArgumentError(f"Cannot sort products by '{page.sort_field}'")
        column = getattr(Product, page.sort_field)
        ordering = column.asc() if page.ascending else column.desc()
        query = (
            select(Product)
            .where(Product.active.is_(True))
            .order_by(ordering, Product.id.asc())
            .offset(page.offset)
            .limit(page.page_size)
        )
        with self._session_factory() as session:
            return list(session.scalars(query))

    def find_by_name_containing(self, term: Optional[str]) -> List[Product]:
        """Case-insensitive substring search over active product names.

        Matching uses ``str.casefold`` rather than SQL ``LOWER``, which
        SQLite only applies to ASCII letters, so ``"CAFÉ"`` finds
        ``"Café molido"``.  The term is a literal, not a pattern.
        """
        if term is None or not term.strip():
            raise InvalidArgumentError("Search name must not be empty")
        needle = term.strip().casefold()
        query = select(Product).where(Product.active.is_(True)).order_by(Product.id)
        with self._session_factory() as session:
            return [product for product in session.scalars(query) if needle in product.name.casefold()]

    def find_by_category(self, category: ProductCategory) -> List[Product]:
        query = (
            select(Product)
            .where(Product.category == category, Product.active.is_(True))
            .order_by(Product.id)
        )
        with self._session_factory() as session:
            return list(session.scalars(query))

    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Exact SKU lookup across active and inactive products."""
        with self._session_factory() as session:
            return session.scalars(select(Product).where(Product.sku == sku)).first()

    def count_active(self) -> int:
        query = select(func.count()).select_from(Product).where(Product.active.is_(True))
        with self._session_factory() as session:
            return session.scalar(query) or 0

    def apply_stock_delta(self, product_id: int, delta: int) -> Optional[Product]:
        """Add ``delta`` to a product's stock in one conditional UPDATE.

        The row is only touched when the resulting stock is not negative,
        so concurrent callers can neither lose an update nor observe a
        negative value.  Returns the refreshed product, or ``None`` when
        no row matched (missing id or insufficient stock).
        """
        statement = (
            update(Product)
            .where(Product.id == product_id, (Product.stock + delta) >= 0)
            .values(stock=Product.stock + delta, updated_at=datetime.now())
            .execution_options(synchronize_session=False)
        )
        with self._session_factory() as session:
            result = session.execute(statement)
            if result.rowcount == 0:
                session.rollback()
                return None
            session.commit()
            return session.get(Product, product_id)
