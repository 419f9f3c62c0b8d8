"""
Domain Services
===============

Domain services encapsulate business logic that doesn't naturally belong to a single entity.

Available Services:
- DiscountService: discount strategy selection and calculation
"""

from .discount import (
    Discount,
    DiscountService,
    LargeDiscount,
    MediumDiscount,
    RateDiscount,
    SmallDiscount,
)

__all__ = [
    "Discount",
    "DiscountService",
    "RateDiscount",
    "SmallDiscount",
    "MediumDiscount",
    "LargeDiscount",
]
