"""
ORM model for products.

Products are persisted in the ``products`` table.  ``sku`` carries a
UNIQUE constraint as a backstop for the check done in
``ProductService``; ``active`` implements soft deletion.  The table is
declared with ``sqlite_autoincrement`` so SQLite never hands out the id
of a deleted row again.
"""

import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, Numeric, String

from catalog_api.app.core.db import Base


class ProductCategory(str, enum.Enum):
    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    FOOD = "FOOD"
    BOOKS = "BOOKS"
    HOME = "HOME"
    SPORTS = "SPORTS"
    TOYS = "TOYS"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: str) -> "ProductCategory":
        """Look up a category by name, ignoring case and surrounding blanks.

        Raises ``ValueError`` for unknown names.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid category: {value}") from None


class Product(Base):
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    price = Column(Numeric(12, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    sku = Column(String(64), unique=True, nullable=True)
    category = Column(Enum(ProductCategory, native_enum=False, length=32), nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)
    image_url = Column(String(500), nullable=True)
    active = Column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Product id={self.id} sku={self.sku!r} active={self.active}>"
