"""
DDD Orders
==========

A small Domain-Driven Design model of an ordering domain built on Pydantic V2.

Key Features:
- Immutable value objects compared by value (Amount, Quantity, Email, FullName)
- Identity-bearing entities (Customer, Product, OrderItem, Order)
- Strategy-based discount calculation (DiscountService)
"""

from .domain.entities import Customer, Entity, Order, OrderItem, Product
from .domain.exceptions import DomainException, InvalidArgument
from .domain.services import DiscountService
from .domain.value_objects import Amount, DiscountType, Email, FullName, Quantity, ValueObject

__version__ = "1.0.0"

__all__ = [
    "Amount",
    "Customer",
    "DiscountService",
    "DiscountType",
    "DomainException",
    "Email",
    "Entity",
    "FullName",
    "InvalidArgument",
    "Order",
    "OrderItem",
    "Product",
    "Quantity",
    "ValueObject",
]
