"""
Domain Exceptions
================

Domain-specific exceptions that represent business rule violations
within the ordering domain.
"""

from typing import Optional, Dict, Any


class DomainException(Exception):
    """Base exception for all domain-related errors"""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgument(DomainException):
    """Raised when a value object or entity receives an invalid argument.

    Must not subclass ValueError: pydantic only converts ValueError and
    AssertionError raised in validators, anything else propagates as is.
    """
    
    def __init__(self, field: str, message: str, value: Any = None):
        self.field = field
        self.value = value
        details = {"field": field, "value": value}
        super().__init__(f"Invalid argument {field}: {message}", details)
