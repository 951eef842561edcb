"""Domain entities for PromoCode Factory.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from promocode_factory.domain.entities.base import Entity
from promocode_factory.domain.entities.employee import Employee
from promocode_factory.domain.entities.role import Role

__all__ = [
    "Employee",
    "Entity",
    "Role",
]
