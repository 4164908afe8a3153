"""
Email Entity - An email address owned by a user, contact, organization or
sub-account.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.linking import OwnedValue
from organizer_companion.domain.ports.clock import Clock
from organizer_companion.domain.value_objects import ContactType


class Email(OwnedValue, Entity):
    email_address = TrackedField()
    type = TrackedField()
    is_primary = TrackedField(False)
    is_confirmed = TrackedField(False)

    def __init__(
        self,
        email_address: Optional[str] = None,
        type: Optional[ContactType] = None,
        is_primary: bool = False,
        linked_entity: Any = None,
        is_confirmed: bool = False,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._email_address = email_address
        self._type = type
        self._is_primary = is_primary
        self._is_confirmed = is_confirmed
        self._init_link(linked_entity)

    def __str__(self) -> str:
        return f"Email.Id:{self.id}.EmailAddress:{self.email_address}.IsPrimary:{self.is_primary}"
