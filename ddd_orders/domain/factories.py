"""Thin constructors that wrap raw Python values into value objects."""

from decimal import Decimal
from typing import Union

from .entities import Customer, Order, OrderItem, Product
from .value_objects import Amount, Email, FullName, Quantity

Number = Union[Decimal, int, str]


def create_customer(first_name: str, last_name: str, email: str) -> Customer:
    return Customer(
        full_name=FullName(first_name=first_name, last_name=last_name),
        email=Email(value=email),
    )


def create_product(description: str, price: Number) -> Product:
    return Product(description=description, price=Amount(value=price))


def create_order_item(product: Product, quantity: Number) -> OrderItem:
    return OrderItem(product=product, quantity=Quantity(value=quantity))


def create_order(customer: Customer) -> Order:
    return Order(customer=customer)
