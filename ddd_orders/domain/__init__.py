"""
Domain Layer
============

Value objects, entities and domain services of the ordering model.
This layer is independent of external frameworks and infrastructure concerns.
"""
