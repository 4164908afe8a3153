"""
Assignment Entity - A standalone piece of work handed to contacts.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from organizer_companion.domain.entities.base import Entity, TrackedField, text_length
from organizer_companion.domain.entities.completion import Completable
from organizer_companion.domain.entities.contact import Contact
from organizer_companion.domain.ports.clock import Clock


class Assignment(Completable, Entity):
    _JSON_COMPUTED = ("completed_date",)

    name = TrackedField(
        validator=text_length(
            100, "Name must be between 1 and 100 characters long.", min_length=1
        )
    )
    description = TrackedField(
        validator=text_length(1000, "Description cannot exceed 1000 characters.")
    )
    assignees = TrackedField()
    contacts = TrackedField()

    def __init__(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        assignees: Optional[list[Contact]] = None,
        contacts: Optional[list[Contact]] = None,
        is_completed: bool = False,
        due_date: Optional[datetime] = None,
        completed_date: Optional[datetime] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._check("name", name)
        self._check("description", description)
        self._name = name
        self._description = description
        self._assignees = assignees if assignees is not None else []
        self._contacts = contacts if contacts is not None else []
        self._is_completed = is_completed
        self._due_date = due_date
        self._completed_date = completed_date

    def __str__(self) -> str:
        return f"Assignment.Id:{self.id}.Name:{self.name}.IsCompleted:{self.is_completed}"
