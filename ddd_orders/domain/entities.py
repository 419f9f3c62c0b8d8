"""
Domain Entities
===============

Core business entities that represent the main concepts in our domain.
Entities have identity and can change over time while maintaining their identity.
"""

import logging
from typing import Tuple
from uuid import uuid4, UUID
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, computed_field, field_validator

from .exceptions import InvalidArgument
from .value_objects import Amount, Email, FullName, Quantity

logger = logging.getLogger(__name__)


def _require(value, field: str):
    if value is None:
        raise InvalidArgument(field, "cannot be None", value)
    return value


class Entity(BaseModel):
    """Base class for entities: compared and hashed by identity"""
    model_config = ConfigDict(validate_assignment=True)
    
    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    
    def __eq__(self, other):
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id
    
    def __hash__(self):
        return hash((type(self), self.id))


class Customer(Entity):
    """Customer placing orders"""
    
    full_name: FullName = Field(..., description="Customer name")
    email: Email = Field(..., description="Contact email")
    
    @field_validator('full_name', 'email', mode='before')
    @classmethod
    def validate_required(cls, v, info: ValidationInfo):
        return _require(v, info.field_name)
    
    def change_full_name(self, full_name: FullName) -> None:
        """Replace the customer's name"""
        self.full_name = full_name
        logger.debug("Customer %s renamed to %s", self.id, full_name)
    
    def change_email(self, email: Email) -> None:
        """Replace the customer's email"""
        self.email = email
        logger.debug("Customer %s email changed to %s", self.id, email)


class Product(Entity):
    """Catalog product.

    Description and price are re-validated on construction and on every
    change; a rejected change leaves the product untouched.
    """
    
    description: str = Field(..., description="Product description")
    price: Amount = Field(..., description="Unit price")
    
    @field_validator('description', mode='before')
    @classmethod
    def validate_description(cls, v):
        if v is None or not isinstance(v, str) or len(v.strip()) == 0:
            raise InvalidArgument("description", "cannot be empty", v)
        return v
    
    @field_validator('price', mode='before')
    @classmethod
    def validate_price_present(cls, v):
        return _require(v, "price")
    
    @field_validator('price')
    @classmethod
    def validate_price_positive(cls, v: Amount):
        if v.value <= 0:
            raise InvalidArgument("price", "must be greater than zero", v.value)
        return v
    
    def change_description(self, description: str) -> None:
        self.description = description
        logger.debug("Product %s description changed to %r", self.id, description)
    
    def change_price(self, price: Amount) -> None:
        self.price = price
        logger.debug("Product %s price changed to %s", self.id, price)


class OrderItem(Entity):
    """Single order line: a product and the quantity ordered"""
    
    product: Product = Field(..., description="Ordered product")
    quantity: Quantity = Field(..., description="Ordered quantity")
    
    @field_validator('product', 'quantity', mode='before')
    @classmethod
    def validate_required(cls, v, info: ValidationInfo):
        return _require(v, info.field_name)
    
    @computed_field
    @property
    def sub_total(self) -> Amount:
        """Product price times quantity, computed on every access"""
        return self.product.price * self.quantity


class Order(Entity):
    """Order aggregate root.

    ``items`` is an immutable tuple: ``add_item`` binds a new tuple, so a
    reference taken before the call keeps seeing the old items.
    """
    
    customer: Customer = Field(..., description="Customer placing the order")
    items: Tuple[OrderItem, ...] = Field(default_factory=tuple, description="Order lines")
    discount: Amount = Field(default_factory=Amount.zero, description="Applied discount")
    
    @field_validator('customer', 'discount', mode='before')
    @classmethod
    def validate_required(cls, v, info: ValidationInfo):
        return _require(v, info.field_name)
    
    @computed_field
    @property
    def total(self) -> Amount:
        """Sum of all line subtotals minus the discount.

        No lower bound: a discount larger than the subtotal gives a negative total.
        """
        subtotal = sum((item.sub_total for item in self.items), Amount.zero())
        return subtotal - self.discount
    
    def add_item(self, item: OrderItem) -> None:
        """Append an order line"""
        if not isinstance(item, OrderItem):
            raise InvalidArgument("item", "must be an OrderItem", item)
        self.items = self.items + (item,)
        logger.debug("Order %s: added item %s (%d items)", self.id, item.id, len(self.items))
    
    def apply_discount(self, discount: Amount) -> None:
        """Replace the current discount"""
        self.discount = discount
        logger.debug("Order %s: discount set to %s", self.id, discount)
