"""
Service providers for FastAPI's dependency injection.

Each provider returns a process-wide singleton built from ``settings``.
Tests replace them through ``app.dependency_overrides`` to run against
fresh stores and a temporary database.
"""

from functools import lru_cache

from catalog_api.app.core.config import settings
from catalog_api.app.core.db import get_session_factory
from catalog_api.app.repositories.memory import InMemoryStore
from catalog_api.app.repositories.product_repository import ProductRepository
from catalog_api.app.services.performance_service import PerformanceService
from catalog_api.app.services.person_service import PersonService
from catalog_api.app.services.product_service import ProductService


@lru_cache(maxsize=None)
def get_person_service() -> PersonService:
    return PersonService(InMemoryStore(), seed=settings.seed_sample_data)


@lru_cache(maxsize=None)
def get_product_service() -> ProductService:
    return ProductService(ProductRepository(get_session_factory()))


@lru_cache(maxsize=None)
def get_performance_service() -> PerformanceService:
    return PerformanceService(
        default_count=settings.performance_default_persons,
        max_count=settings.performance_max_persons,
        large_object_size=settings.large_object_size,
    )
