"""Sample data loaded into the stores at startup.

The data is fixed and never persisted. ``build_seed_data`` returns fresh
objects on every call so separate application instances do not share state.
"""

from dataclasses import dataclass, field
from uuid import UUID

from promocode_factory.domain.entities import Employee, Role

ADMIN_ROLE_ID = UUID("53729686-a368-4eeb-8bfa-cc69b6050d02")
PARTNER_MANAGER_ROLE_ID = UUID("b0ae7aac-5493-45cd-ad16-87426a5e7665")

OWNER_EMPLOYEE_ID = UUID("451533d5-d8d5-4a11-9c7b-eb9f14e1a32f")
PARTNER_MANAGER_EMPLOYEE_ID = UUID("f766e2bf-340a-46ea-bff3-f1700b435895")


@dataclass
class SeedData:
    """Initial contents of the role and employee stores."""

    roles: list[Role] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)


def build_seed_data() -> SeedData:
    """Build the sample roles and employees.

    Each employee holds a copy of one catalog role.

    Returns:
        SeedData with two roles and two employees.
    """
    admin = Role(id=ADMIN_ROLE_ID, name="Admin", description="Administrator")
    partner_manager = Role(
        id=PARTNER_MANAGER_ROLE_ID,
        name="PartnerManager",
        description="Partner manager",
    )

    employees = [
        Employee(
            id=OWNER_EMPLOYEE_ID,
            email="owner@somemail.ru",
            first_name="Ivan",
            last_name="Sergeev",
            roles=[Role(id=admin.id, name=admin.name, description=admin.description)],
            applied_promocodes_count=5,
        ),
        Employee(
            id=PARTNER_MANAGER_EMPLOYEE_ID,
            email="andreev@somemail.ru",
            first_name="Petr",
            last_name="Andreev",
            roles=[
                Role(
                    id=partner_manager.id,
                    name=partner_manager.name,
                    description=partner_manager.description,
                )
            ],
            applied_promocodes_count=10,
        ),
    ]

    return SeedData(roles=[admin, partner_manager], employees=employees)
