"""
PhoneNumber Entity - A phone number owned by a single linked entity.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.linking import OwnedValue
from organizer_companion.domain.ports.clock import Clock
from organizer_companion.domain.value_objects import ContactType, Country


class PhoneNumber(OwnedValue, Entity):
    phone = TrackedField()
    type = TrackedField()
    country = TrackedField()

    def __init__(
        self,
        phone: Optional[str] = None,
        type: Optional[ContactType] = None,
        country: Optional[Country] = None,
        linked_entity: Any = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._phone = phone
        self._type = type
        self._country = country
        self._init_link(linked_entity)

    def __str__(self) -> str:
        return f"PhoneNumber.Id:{self.id}.Phone:{self.phone}"
