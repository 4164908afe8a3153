"""
Cast engine - type-directed projection of an entity into another type.

Each source type owns a closed map of target class -> projection. Projections
into other entities are declared by the entity itself (``_projections``);
projections into outer-layer types such as DTOs are registered here by the
layer that owns those types. Lookup is by exact source and target class. A
target outside the map fails with UnsupportedCastError; nothing is retried
and the source is never mutated. Every successful call builds a new instance.
"""

import logging
from functools import partial
from typing import Any, Callable, Iterable, Optional, TypeVar

from organizer_companion.domain.exceptions import UnsupportedCastError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# source class -> target class -> projection(source)
_registered: dict[type, dict[type, Callable[[Any], Any]]] = {}


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", type(target).__name__)


def register_projection(
    source_type: type, target: type, project: Callable[[Any], Any]
) -> None:
    """Make ``target`` a cast target of ``source_type`` instances."""
    _registered.setdefault(source_type, {})[target] = project


def projections_for(source: Any) -> dict[type, Callable[[], Any]]:
    projections = dict(source._projections())
    for target, project in _registered.get(type(source), {}).items():
        projections.setdefault(target, partial(project, source))
    return projections


def cast_entity(source: Any, target: type[T]) -> T:
    source_name = type(source).__name__
    project = projections_for(source).get(target)
    if project is None:
        raise UnsupportedCastError(source_name, _type_name(target))

    logger.debug(
        "Casting %s to %s",
        source_name,
        target.__name__,
        extra={"entity_type": source_name},
    )
    return project()


def cast_all(items: Iterable[Any], target: type[T]) -> list[T]:
    """Cast every element, keeping order.

    A None collection is not normalised: iterating it raises TypeError.
    """
    return [item.cast(target) for item in items]


def cast_optional(owner: Optional[Any], target: type[T]) -> Optional[T]:
    """Cast an owner link, keeping None as None."""
    if owner is None:
        return None
    return owner.cast(target)
