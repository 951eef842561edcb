"""Base entity shared by every record kept in a store."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Entity:
    """A record identified by a UUID that is unique within its collection.

    Attributes:
        id: Unique identifier, assigned by the service layer on create.
    """

    id: UUID
