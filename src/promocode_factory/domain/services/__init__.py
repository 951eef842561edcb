"""Domain services for PromoCode Factory.

Services contain business logic that spans more than one entity or store.
"""

from promocode_factory.domain.services.employee_service import EmployeeService
from promocode_factory.domain.services.role_service import RoleService
from promocode_factory.domain.services.role_usage_guard import RoleUsageGuard

__all__ = [
    "EmployeeService",
    "RoleService",
    "RoleUsageGuard",
]
