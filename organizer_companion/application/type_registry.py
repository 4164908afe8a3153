"""
TypeRegistry - Resolves entity and DTO classes by their type name.

Linked entities record their owner's type as a plain name (for example
linked_entity_type); the registry turns such a name back into a class. The
known domain and DTO types are registered on first use.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


class TypeRegistry:
    def __init__(self) -> None:
        self._types: dict[str, type] = {}
        self._lock = threading.Lock()
        self._initialized = False

    def initialize(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            from organizer_companion.application import dto
            from organizer_companion.domain import entities

            for cls in _known_types(entities, dto):
                self.register(cls.__name__, cls)
            self._initialized = True
        logger.debug("Type registry initialized with %d types", len(self._types))

    def register(self, type_name: str, cls: type) -> None:
        """Register ``cls`` under ``type_name``; the first registration wins."""
        self._types.setdefault(type_name, cls)

    def get(self, type_name: Optional[str]) -> Optional[type]:
        self.initialize()
        if not type_name:
            return None
        return self._types.get(type_name)

    def is_registered(self, type_name: Optional[str]) -> bool:
        self.initialize()
        if not type_name:
            return False
        return type_name in self._types

    def registered_names(self) -> list[str]:
        self.initialize()
        return list(self._types)

    def clear(self) -> None:
        with self._lock:
            self._types.clear()
            self._initialized = False


def _known_types(*modules) -> Iterable[type]:
    from organizer_companion.application.dto.base import EntityDTO
    from organizer_companion.domain.entities.base import Entity

    for module in modules:
        for name in module.__all__:
            value = getattr(module, name)
            if (
                isinstance(value, type)
                and issubclass(value, (Entity, EntityDTO))
                and value not in (Entity, EntityDTO)
            ):
                yield value


type_registry = TypeRegistry()
