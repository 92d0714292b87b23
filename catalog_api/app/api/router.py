"""
Top‑level router.

This router aggregates the resource routers under their public
prefixes.  When a resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import greeting, performance, persons, products

router = APIRouter()

router.include_router(persons.router, prefix="/api/persons", tags=["persons"])
router.include_router(products.router, prefix="/api/products", tags=["products"])
router.include_router(performance.router, prefix="/api/performance", tags=["performance"])
router.include_router(greeting.router, prefix="/hello", tags=["greeting"])
