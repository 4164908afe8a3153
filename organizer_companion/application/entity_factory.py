"""
EntityFactory - Builds entities stamped by one shared clock.

Entities built directly use the process-wide default clock; going through
the factory pins them to the injected one instead.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from organizer_companion.application.dto.base import EntityDTO
from organizer_companion.application.mappers import to_domain
from organizer_companion.application.type_registry import TypeRegistry, type_registry
from organizer_companion.domain.entities import Entity
from organizer_companion.domain.ports.clock import Clock

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class EntityFactory:
    def __init__(self, clock: Clock, registry: Optional[TypeRegistry] = None):
        self.clock = clock
        self.registry = registry or type_registry

    def create(self, entity_type: type[E], *args: Any, **kwargs: Any) -> E:
        kwargs.setdefault("clock", self.clock)
        return entity_type(*args, **kwargs)

    def create_by_name(self, type_name: str, *args: Any, **kwargs: Any) -> Entity:
        """Build an entity from its registered type name, e.g. "Contact"."""
        entity_type = self.registry.get(type_name)
        if entity_type is None or not issubclass(entity_type, Entity):
            raise LookupError(f"Unknown entity type: {type_name}.")
        return self.create(entity_type, *args, **kwargs)

    def from_dto(self, dto: EntityDTO, linked_entity: Any = None) -> Entity:
        """Rebuild the domain entity paired with a DTO."""
        logger.debug(
            "Building entity from %s",
            type(dto).__name__,
            extra={"entity_type": type(dto).__name__},
        )
        return to_domain(dto, linked_entity, clock=self.clock)
