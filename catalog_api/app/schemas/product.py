"""
Pydantic models for product data.

``ProductCreate`` carries every business field with its constraints;
``ProductUpdate`` makes all of them optional so a ``PUT`` only changes
what it names.  ``ProductRead`` is the response shape.  Category names
are accepted in any letter case.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from catalog_api.app.models.product import Product, ProductCategory
from catalog_api.app.schemas.base import CamelModel

# Columns that may be cleared by sending an explicit null.
NULLABLE_FIELDS = {"description", "sku", "image_url"}


def _parse_category(value: Any) -> Any:
    if isinstance(value, str):
        return ProductCategory.parse(value)
    return value


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        return None
    return value


class ProductCreate(CamelModel):
    """Schema for creating a product."""

    name: str = Field(..., min_length=3, max_length=100, examples=["Mechanical keyboard"])
    description: Optional[str] = Field(None, max_length=500)
    price: Decimal = Field(..., ge=Decimal("0.01"), max_digits=12, decimal_places=2, examples=["49.90"])
    stock: int = Field(0, ge=0, examples=[10])
    sku: Optional[str] = Field(None, max_length=64, examples=["KB-001"])
    category: ProductCategory = Field(..., examples=["ELECTRONICS"])
    image_url: Optional[str] = Field(None, max_length=500)
    active: bool = True

    parse_category = field_validator("category", mode="before")(_parse_category)
    normalize_sku = field_validator("sku")(_blank_to_none)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def to_product(self) -> Product:
        return Product(**self.model_dump())


class ProductUpdate(CamelModel):
    """Schema for updating a product.

    All fields are optional; only fields present in the request body
    are changed.
    """

    name: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: Optional[Decimal] = Field(None, ge=Decimal("0.01"), max_digits=12, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    sku: Optional[str] = Field(None, max_length=64)
    category: Optional[ProductCategory] = None
    image_url: Optional[str] = Field(None, max_length=500)
    active: Optional[bool] = None

    parse_category = field_validator("category", mode="before")(_parse_category)
    normalize_sku = field_validator("sku")(_blank_to_none)

    def changes(self) -> Dict[str, Any]:
        """Return the fields sent by the client.

        An explicit ``null`` is kept only for nullable columns; for the
        others it means "leave unchanged".
        """
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }


class ProductRead(CamelModel):
    """Schema for reading a product from the API."""

    id: int
    name: str
    description: Optional[str] = None
    price: float
    stock: int
    sku: Optional[str] = None
    category: ProductCategory
    created_at: datetime
    updated_at: Optional[datetime] = None
    image_url: Optional[str] = None
    active: bool
