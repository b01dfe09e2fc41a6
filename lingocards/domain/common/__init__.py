"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
"""

from .clock import Clock, now_millis
from .entity import Entity, EntityId
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "BusinessRuleViolationError",
    "Clock",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "StorageUnavailableError",
    "ValidationError",
    "ValueObject",
    "now_millis",
]
