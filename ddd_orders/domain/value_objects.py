"""
Value Objects
=============

Immutable objects that represent concepts with no identity.
They are defined by their attributes rather than identity: two value objects
of the same class are equal when all their fields are equal, in order.
"""

from typing import Any, Tuple, Union
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
import re

from .exceptions import InvalidArgument

# Case-sensitive: uppercase addresses do not match.
EMAIL_PATTERN = re.compile(r"^([a-z0-9_\.\-]{3,})@([\da-z\.\-]{3,})\.([a-z\.]{2,6})$")


class DiscountType(str, Enum):
    """Discount categories"""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ValueObject(BaseModel):
    """Base class for value objects.

    Frozen pydantic models compare by concrete class and field values and hash
    the same way, so equal instances always hash equal. Comparing against
    ``None`` or another value object class is simply ``False``.
    """
    model_config = ConfigDict(frozen=True)

    def equality_components(self) -> Tuple[Any, ...]:
        """Return the equality-relevant values in declaration order"""
        return tuple(getattr(self, name) for name in type(self).model_fields)


class Quantity(ValueObject):
    """Value object for item quantities"""
    value: Decimal = Field(..., description="Quantity")

    def __str__(self):
        return str(self.value)


class Amount(ValueObject):
    """Value object for monetary amounts.

    No invariant is enforced here; callers such as ``Product`` decide which
    amounts they accept.
    """
    value: Decimal = Field(..., description="Amount")

    @classmethod
    def zero(cls) -> "Amount":
        return cls(value=Decimal("0"))

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(value=self.value + other.value)

    def __sub__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(value=self.value - other.value)

    def __mul__(self, factor: Union[Decimal, int, Quantity]) -> "Amount":
        if isinstance(factor, Quantity):
            factor = factor.value
        if isinstance(factor, bool) or not isinstance(factor, (Decimal, int)):
            return NotImplemented
        return Amount(value=self.value * Decimal(factor))

    __rmul__ = __mul__

    def __str__(self):
        return str(self.value)


class Email(ValueObject):
    """Value object for email addresses"""
    value: str = Field(..., description="Email address")

    @field_validator('value', mode='before')
    @classmethod
    def validate_email(cls, v):
        """Reject blank input and anything outside the local@domain.tld shape"""
        if v is None or not isinstance(v, str) or len(v.strip()) == 0:
            raise InvalidArgument("email", "cannot be empty", v)
        
        if not EMAIL_PATTERN.match(v):
            raise InvalidArgument("email", "invalid email format", v)
        
        # Stored verbatim, no normalization
        return v
    
    def __str__(self):
        return self.value


class FullName(ValueObject):
    """Value object for a person's name"""
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")

    @field_validator('first_name', 'last_name', mode='before')
    @classmethod
    def validate_name_part(cls, v, info: ValidationInfo):
        # Empty strings are allowed, only a missing value is rejected
        if v is None:
            raise InvalidArgument(info.field_name, "cannot be None", v)
        return v

    def __str__(self):
        return f"{self.first_name} {self.last_name}"
