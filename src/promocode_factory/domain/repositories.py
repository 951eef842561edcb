"""Repository contract used by the domain services.

The services depend on this protocol rather than on a concrete store so
that the in-memory implementation can be swapped for a persistent one.
"""

from typing import Protocol, TypeVar
from uuid import UUID

from promocode_factory.domain.entities import Entity

EntityT = TypeVar("EntityT", bound=Entity)


class Repository(Protocol[EntityT]):
    """CRUD-by-identifier store for a single entity type."""

    entity_name: str

    async def list_all(self) -> list[EntityT]:
        """Return every entity in insertion order."""
        ...

    async def get_by_id(self, entity_id: UUID) -> EntityT | None:
        """Return the entity with ``entity_id`` or None."""
        ...

    async def create(self, entity: EntityT) -> EntityT:
        """Store a new entity. Raises EntityConflictError on a used identifier."""
        ...

    async def update(self, entity: EntityT) -> EntityT:
        """Replace a stored entity. Raises EntityNotFoundError when absent."""
        ...

    async def delete(self, entity_id: UUID) -> EntityT:
        """Remove and return an entity. Raises EntityNotFoundError when absent."""
        ...
