"""
Contact Entity - A person in someone's address book.

Unlike emails and phone numbers, a contact keeps its owner's id as a plain
stored value and records the owner's type name when the owner is assigned.
"""

from __future__ import annotations

from typing import Any, Optional

from organizer_companion.domain.entities.base import TrackedField
from organizer_companion.domain.entities.person import Person


class Contact(Person):
    _JSON_COMPUTED = ("full_name", "linked_entity", "linked_entity_type")

    linked_entity_id = TrackedField(0)

    def __init__(
        self,
        *args: Any,
        linked_entity_id: int = 0,
        linked_entity: Any = None,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self._linked_entity_id = linked_entity_id
        self._linked_entity = linked_entity
        self._linked_entity_type = (
            type(linked_entity).__name__ if linked_entity is not None else None
        )

    @property
    def linked_entity(self) -> Any:
        return self._linked_entity

    @linked_entity.setter
    def linked_entity(self, value: Any) -> None:
        self._linked_entity = value
        self._linked_entity_type = type(value).__name__ if value is not None else None
        self.touch()

    @property
    def linked_entity_type(self) -> Optional[str]:
        return self._linked_entity_type
