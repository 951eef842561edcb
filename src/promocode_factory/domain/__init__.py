"""Domain layer: entities, exceptions, repository contract and services."""
