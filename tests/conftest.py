"""Pytest fixtures shared by the storefront tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.main import create_app
from storefront.models import CreateProductRequest, Product
from storefront.storage import InMemoryStore


@pytest.fixture
def products():
    return [
        Product(id=1, name="Apple", price=10, description="Red fruit"),
        Product(id=2, name="Banana", price=5, description="Yellow fruit"),
        Product(id=3, name="cherry", price=12.5, description="Small fruit"),
        Product(id=4, name="Date", price=5, description="Sweet fruit"),
        Product(id=5, name="Éclair", price=3, description="Pastry", category="bakery"),
        Product(id=6, name="Fig", price=7, description="Soft fruit"),
        Product(id=7, name="Grape", price=2, description="Bunch"),
        Product(id=8, name="Green apple", price=9, description="Sour fruit"),
    ]


@pytest.fixture
def memory_store(products):
    return InMemoryStore(products)


@pytest.fixture
def client(memory_store):
    return TestClient(create_app(store=memory_store))


class FakeCatalogClient:
    """Stands in for ``CatalogClient`` in view tests."""

    def __init__(self, products=None, fail_list=False, fail_create=False):
        self.store = InMemoryStore(products)
        self.fail_list = fail_list
        self.fail_create = fail_create
        self.sent = []

    def list_products(self):
        if self.fail_list:
            raise ConnectionError("catalog unreachable")
        return self.store.list_products()

    def create_product(self, payload):
        self.sent.append(payload)
        if self.fail_create:
            raise ConnectionError("catalog unreachable")
        return self.store.append_product(CreateProductRequest(**payload))


@pytest.fixture
def fake_client(products):
    return FakeCatalogClient(products)
