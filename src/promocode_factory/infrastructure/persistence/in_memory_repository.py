"""Generic in-memory repository.

Keeps an ordered list of entities of a single type, keyed by their UUID.
Stored entities are value copies of what callers pass in, and updates
replace the whole record.
"""

import copy
from collections.abc import Iterable
from typing import Generic
from uuid import UUID

from promocode_factory.core.logging import get_logger
from promocode_factory.domain.exceptions import EntityConflictError, EntityNotFoundError
from promocode_factory.domain.repositories import EntityT

logger = get_logger(__name__)


class InMemoryRepository(Generic[EntityT]):
    """In-memory store for a single entity type.

    Operations are declared ``async`` so the same contract can be served by
    a persistent backend. None of them awaits internally, which makes each
    call atomic with respect to other coroutines on the event loop.
    """

    def __init__(self, entity_name: str, data: Iterable[EntityT] = ()) -> None:
        """Initialize the repository.

        Args:
            entity_name: Label used in errors and log entries (e.g., 'Role').
            data: Initial entities, in order. Duplicated identifiers are rejected.

        Raises:
            EntityConflictError: If ``data`` contains the same identifier twice.
        """
        self.entity_name = entity_name
        self._items: list[EntityT] = []
        for entity in data:
            if self._index_of(entity.id) is not None:
                raise EntityConflictError(entity_name, entity.id)
            self._items.append(copy.deepcopy(entity))

    def _index_of(self, entity_id: UUID) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                return index
        return None

    async def list_all(self) -> list[EntityT]:
        """Get all entities in insertion order.

        Returns:
            A new list holding the stored entities.
        """
        return list(self._items)

    async def get_by_id(self, entity_id: UUID) -> EntityT | None:
        """Get an entity by ID.

        Args:
            entity_id: Entity ID.

        Returns:
            The stored entity if found, None otherwise.
        """
        index = self._index_of(entity_id)
        if index is None:
            return None
        return self._items[index]

    async def exists(self, entity_id: UUID) -> bool:
        """Check whether an entity with ``entity_id`` is stored."""
        return self._index_of(entity_id) is not None

    async def count(self) -> int:
        """Number of stored entities."""
        return len(self._items)

    async def create(self, entity: EntityT) -> EntityT:
        """Append a new entity.

        Args:
            entity: Entity to store. Its identifier must not be in use.

        Returns:
            The stored entity.

        Raises:
            EntityConflictError: If an entity with the same ID already exists.
        """
        if self._index_of(entity.id) is not None:
            logger.debug(
                "Create rejected: identifier in use",
                entity=self.entity_name,
                entity_id=str(entity.id),
            )
            raise EntityConflictError(self.entity_name, entity.id)

        stored = copy.deepcopy(entity)
        self._items.append(stored)
        logger.debug("Entity created", entity=self.entity_name, entity_id=str(entity.id))
        return stored

    async def update(self, entity: EntityT) -> EntityT:
        """Replace the stored entity that has the same ID.

        Every field of the stored record is replaced; there is no merging
        with the previous values. The entity keeps its position.

        Args:
            entity: New state of the entity.

        Returns:
            The stored entity.

        Raises:
            EntityNotFoundError: If no entity with that ID exists.
        """
        index = self._index_of(entity.id)
        if index is None:
            raise EntityNotFoundError(self.entity_name, entity.id)

        stored = copy.deepcopy(entity)
        self._items[index] = stored
        logger.debug("Entity updated", entity=self.entity_name, entity_id=str(entity.id))
        return stored

    async def delete(self, entity_id: UUID) -> EntityT:
        """Remove an entity.

        Args:
            entity_id: Entity ID.

        Returns:
            The removed entity.

        Raises:
            EntityNotFoundError: If no entity with that ID exists.
        """
        index = self._index_of(entity_id)
        if index is None:
            raise EntityNotFoundError(self.entity_name, entity_id)

        removed = self._items.pop(index)
        logger.debug("Entity deleted", entity=self.entity_name, entity_id=str(entity_id))
        return removed
