"""
Organization Entity - A company or group of people with its own contact data,
members and accounts.

Collections are never None: assigning None stores an empty list.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.account import Account
from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.entities.contact import Contact
from organizer_companion.domain.entities.email import Email
from organizer_companion.domain.entities.phone_number import PhoneNumber
from organizer_companion.domain.ports.clock import Clock


class ListField(TrackedField):
    """TrackedField that stores an empty list in place of None."""

    def __set__(self, obj, value):
        super().__set__(obj, value if value is not None else [])


class Organization(Entity):
    id = TrackedField(0)
    organization_name = TrackedField()
    emails = ListField()
    phone_numbers = ListField()
    addresses = ListField()
    members = ListField()
    contacts = ListField()
    accounts = ListField()

    def __init__(
        self,
        organization_name: Optional[str] = None,
        emails: Optional[list[Email]] = None,
        phone_numbers: Optional[list[PhoneNumber]] = None,
        addresses: Optional[list[Any]] = None,
        members: Optional[list[Contact]] = None,
        contacts: Optional[list[Contact]] = None,
        accounts: Optional[list[Account]] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._organization_name = organization_name
        self._emails = emails if emails is not None else []
        self._phone_numbers = phone_numbers if phone_numbers is not None else []
        self._addresses = addresses if addresses is not None else []
        self._members = members if members is not None else []
        self._contacts = contacts if contacts is not None else []
        self._accounts = accounts if accounts is not None else []

    def __str__(self) -> str:
        return f"Organization.Id:{self.id}.OrganizationName:{self.organization_name}"
