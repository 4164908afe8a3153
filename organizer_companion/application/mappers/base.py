"""Mapper protocol and registry between domain entities and DTOs.

Each mapper owns both directions for one entity type. Registering a mapper
makes its DTO (and the DTO's interfaces) cast targets of the entity; the
reverse direction is looked up by the DTO's paired domain type.
"""

import logging
from typing import Any, ClassVar, Optional, Protocol, runtime_checkable

from organizer_companion.domain.casting import register_projection
from organizer_companion.domain.exceptions import UnsupportedCastError
from organizer_companion.domain.ports.clock import Clock

logger = logging.getLogger(__name__)

_MAPPERS: dict[type, "EntityMapper"] = {}


@runtime_checkable
class EntityMapper(Protocol):
    """Protocol for mapping between one domain entity type and its DTO."""

    entity_type: ClassVar[type]
    dto_type: ClassVar[type]

    @property
    def targets(self) -> tuple[type, ...]:
        """Cast targets served by to_dto."""
        ...

    def to_dto(self, entity: Any) -> Any: ...

    def to_domain(
        self, dto: Any, linked_entity: Any = None, *, clock: Optional[Clock] = None
    ) -> Any: ...


class DTOMapper:
    """Default targets: the DTO class and its interfaces."""

    entity_type: ClassVar[type]
    dto_type: ClassVar[type]

    @property
    def targets(self) -> tuple[type, ...]:
        return (self.dto_type, *self.dto_type.interfaces)


def register_mapper(mapper: EntityMapper) -> None:
    for target in mapper.targets:
        register_projection(mapper.entity_type, target, mapper.to_dto)
    _MAPPERS[mapper.entity_type] = mapper
    logger.debug(
        "Registered %s mapper",
        mapper.entity_type.__name__,
        extra={"entity_type": mapper.entity_type.__name__},
    )


def get_mapper(entity_type: type) -> Optional[EntityMapper]:
    return _MAPPERS.get(entity_type)


def to_domain(dto: Any, linked_entity: Any = None, *, clock: Optional[Clock] = None) -> Any:
    """Rebuild the domain entity paired with ``dto``.

    ``linked_entity`` is the owner the rebuilt entity belongs to, for types
    that have one.
    """
    mapper = get_mapper(dto.domain_type())
    if mapper is None:
        raise UnsupportedCastError(type(dto).__name__, "domain entity")
    return mapper.to_domain(dto, linked_entity, clock=clock)


def timestamps(source: Any) -> dict[str, Any]:
    return {
        "id": source.id,
        "created_date": source.created_date,
        "modified_date": source.modified_date,
    }
