"""
Shared fixtures for the Catalog API test suite.

Every test that touches products gets its own SQLite file under
``tmp_path`` so tests never share rows or id sequences.
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.db import build_engine, build_session_factory, init_db
from catalog_api.app.dependencies import get_performance_service, get_person_service, get_product_service
from catalog_api.app.main import create_app
from catalog_api.app.models.product import Product, ProductCategory
from catalog_api.app.repositories.memory import InMemoryStore
from catalog_api.app.repositories.product_repository import ProductRepository
from catalog_api.app.services.performance_service import PerformanceService
from catalog_api.app.services.person_service import PersonService
from catalog_api.app.services.product_service import ProductService


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'catalog-test.db'}")
    init_db(engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def product_repository(session_factory) -> ProductRepository:
    return ProductRepository(session_factory)


@pytest.fixture
def product_service(product_repository) -> ProductService:
    return ProductService(product_repository)


@pytest.fixture
def person_service() -> PersonService:
    return PersonService(InMemoryStore(), seed=False)


@pytest.fixture
def make_product():
    """Factory for unsaved products with sensible defaults."""

    def _make(
        name: str = "Wireless mouse",
        price: str = "19.99",
        stock: int = 5,
        sku=None,
        category: ProductCategory = ProductCategory.ELECTRONICS,
        active: bool = True,
        description=None,
    ) -> Product:
        return Product(
            name=name,
            description=description,
            price=Decimal(price),
            stock=stock,
            sku=sku,
            category=category,
            active=active,
        )

    return _make


@pytest.fixture
def client(product_service, person_service):
    """TestClient wired to fresh services and a temporary database."""
    app = create_app(initialise_db=False)
    app.dependency_overrides[get_product_service] = lambda: product_service
    app.dependency_overrides[get_person_service] = lambda: person_service
    app.dependency_overrides[get_performance_service] = lambda: PerformanceService(
        default_count=25, max_count=100, large_object_size=50
    )
    with TestClient(app) as test_client:
        yield test_client
