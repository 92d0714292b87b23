"""
Product endpoints.

The listing supports pagination and sorting over active products and
two alternative filters.  When ``name`` is given it wins; otherwise a
``category`` filter applies; with neither, the paged active listing is
returned.  Filtered results are sliced with the same ``page``/``size``
and ``totalElements`` reports the filtered count.

``DELETE /{id}`` is a soft delete.  The row stays retrievable by id and
SKU but disappears from listings; ``DELETE /{id}/hard`` removes it.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from catalog_api.app.core.exceptions import InvalidArgumentError, NotFoundError
from catalog_api.app.dependencies import get_product_service
from catalog_api.app.models.product import ProductCategory
from catalog_api.app.repositories.base import PageRequest
from catalog_api.app.schemas.paged import PagedResponse
from catalog_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from catalog_api.app.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=PagedResponse[ProductRead])
def list_products(
    page: int = Query(0, ge=0, description="Page number, starting at 0"),
    size: int = Query(10, ge=1, le=1000, description="Page size"),
    sort: str = Query("name", description="Field to sort by"),
    asc: bool = Query(True, description="Ascending (true) or descending (false)"),
    name: Optional[str] = Query(None, description="Case-insensitive name filter"),
    category: Optional[str] = Query(None, description="Category filter"),
    service: ProductService = Depends(get_product_service),
) -> PagedResponse[ProductRead]:
    if name is not None and name.strip():
        products = service.find_by_name_containing(name)
        total_elements = len(products)
        products = PageRequest(page, size).slice(products)
    elif category is not None and category.strip():
        try:
            category_enum = ProductCategory.parse(category)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
        products = service.find_by_category(category_enum)
        total_elements = len(products)
        products = PageRequest(page, size).slice(products)
    else:
        products, total_elements = service.find_all(page, size, sort, asc)

    content = [ProductRead.model_validate(product) for product in products]
    return PagedResponse[ProductRead].of(content, total_elements, page, size)


@router.get("/sku/{sku}", response_model=ProductRead)
def get_product_by_sku(sku: str, service: ProductService = Depends(get_product_service)) -> ProductRead:
    """Look a product up by SKU, active or not."""
    product = service.find_by_sku(sku)
    if product is None:
        raise NotFoundError(f"Product not found with SKU: {sku}")
    return ProductRead.model_validate(product)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)) -> ProductRead:
    return ProductRead.model_validate(service.find_by_id(product_id))


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    product = service.create(product_in.to_product())
    logger.info("Created product %s (sku=%s)", product.id, product.sku)
    return ProductRead.model_validate(product)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    updates: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Update an existing product.

    Partial updates are supported; any unspecified fields remain unchanged.
    """
    product = service.update(product_id, updates.changes())
    logger.info("Updated product %s", product_id)
    return ProductRead.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)) -> Response:
    service.delete(product_id)
    logger.info("Deactivated product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}/hard", status_code=status.HTTP_204_NO_CONTENT)
def delete_product_hard(product_id: int, service: ProductService = Depends(get_product_service)) -> Response:
    service.delete_hard(product_id)
    logger.info("Deleted product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{product_id}/stock", response_model=ProductRead)
def update_stock(
    product_id: int,
    quantity: int = Query(..., description="Amount to add (positive) or remove (negative)"),
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    product = service.update_stock(product_id, quantity)
    logger.info("Stock of product %s changed by %s to %s", product_id, quantity, product.stock)
    return ProductRead.model_validate(product)
