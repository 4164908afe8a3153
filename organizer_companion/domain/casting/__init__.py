"""
CASTING - Closed, per-type projection maps between entities and other types
"""

from organizer_companion.domain.casting.engine import (
    cast_all,
    cast_entity,
    cast_optional,
    projections_for,
    register_projection,
)

__all__ = [
    "cast_entity",
    "cast_all",
    "cast_optional",
    "projections_for",
    "register_projection",
]
