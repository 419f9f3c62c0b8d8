"""
Shared fixtures for the domain tests.
"""

from decimal import Decimal

import pytest

from ddd_orders.domain.entities import Customer, Order, OrderItem, Product
from ddd_orders.domain.value_objects import Amount, Email, FullName, Quantity

SETTINGS_ENV_VARS = (
    "DISCOUNT_SMALL_RATE",
    "DISCOUNT_MEDIUM_RATE",
    "DISCOUNT_LARGE_RATE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "ENVIRONMENT",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep developer environment variables out of the settings under test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def customer() -> Customer:
    return Customer(
        full_name=FullName(first_name="Luke", last_name="Skywalker"),
        email=Email(value="luke.skywalker@starwars.com"),
    )


@pytest.fixture
def product() -> Product:
    return Product(description="Millennium Falcon", price=Amount(value=Decimal("500000000")))


@pytest.fixture
def order_item(product) -> OrderItem:
    return OrderItem(product=product, quantity=Quantity(value=Decimal("1")))


@pytest.fixture
def order(customer) -> Order:
    return Order(customer=customer)
