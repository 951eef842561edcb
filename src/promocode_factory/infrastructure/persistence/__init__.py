"""In-memory persistence for PromoCode Factory."""

from promocode_factory.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
)
from promocode_factory.infrastructure.persistence.seed_data import SeedData, build_seed_data
from promocode_factory.infrastructure.persistence.stores import AdministrationStores

__all__ = [
    "AdministrationStores",
    "InMemoryRepository",
    "SeedData",
    "build_seed_data",
]
