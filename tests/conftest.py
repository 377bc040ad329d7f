"""
Shared fixtures.

Each test gets empty dish and order stores and a predictable id supplier,
wired into the app through FastAPI dependency overrides.
"""

import itertools

import pytest
from fastapi.testclient import TestClient

from grubdash.main import app
from grubdash.models import Dish, Order
from grubdash.services.ids import get_id_supplier
from grubdash.services.store import InMemoryStore, get_dish_store, get_order_store


@pytest.fixture
def dish_store():
    return InMemoryStore("dishes")


@pytest.fixture
def order_store():
    return InMemoryStore("orders")


@pytest.fixture
def id_supplier():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def client(dish_store, order_store, id_supplier):
    app.dependency_overrides[get_dish_store] = lambda: dish_store
    app.dependency_overrides[get_order_store] = lambda: order_store
    app.dependency_overrides[get_id_supplier] = lambda: id_supplier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def taco():
    return {"name": "Taco", "description": "x", "price": 5, "image_url": "http://x"}


@pytest.fixture
def stored_dish(dish_store):
    dish = Dish(
        id="dish-1",
        name="Falafel and tahini bagel",
        description="A warm bagel filled with falafel and tahini",
        price=6,
        image_url="https://example.com/bagel.jpg",
    )
    dish_store.append(dish)
    return dish


@pytest.fixture
def make_order(order_store):
    def _make(order_id="order-1", status="pending"):
        order = Order.model_validate({
            "id": order_id,
            "deliverTo": "308 Negra Arroyo Lane",
            "mobileNumber": "(505) 143-3369",
            "status": status,
            "dishes": [{"dishId": "dish-1", "quantity": 2}],
        })
        order_store.append(order)
        return order

    return _make


@pytest.fixture
def order_body():
    return {
        "deliverTo": "1600 Pennsylvania Avenue NW",
        "mobileNumber": "(202) 456-1111",
        "dishes": [{"dishId": "dish-1", "quantity": 1}],
    }
