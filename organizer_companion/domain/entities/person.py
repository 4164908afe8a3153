"""
Person - fields shared by Contact and User.

full_name is strict: with no name parts at all it is None, with some parts
present it needs both the first and last name.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.addresses import Address
from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.entities.email import Email
from organizer_companion.domain.entities.phone_number import PhoneNumber
from organizer_companion.domain.exceptions import MissingNamePartError
from organizer_companion.domain.ports.clock import Clock
from organizer_companion.domain.value_objects import Pronoun

# Scalar person fields, copied as-is between persons and their DTOs
PERSON_FIELDS = (
    "first_name",
    "middle_name",
    "last_name",
    "user_name",
    "pronouns",
    "birth_date",
    "deceased_date",
    "joined_date",
    "is_active",
    "is_deceased",
    "is_admin",
    "is_super_user",
)


class Person(Entity):
    _JSON_COMPUTED = ("full_name",)
    _JSON_OMIT_IF_NONE = frozenset({"user_name", "deceased_date", "is_super_user"})

    first_name = TrackedField()
    middle_name = TrackedField()
    last_name = TrackedField()
    user_name = TrackedField()
    pronouns = TrackedField()
    birth_date = TrackedField()
    deceased_date = TrackedField()
    joined_date = TrackedField()
    emails = TrackedField()
    phone_numbers = TrackedField()
    addresses = TrackedField()
    is_active = TrackedField()
    is_deceased = TrackedField()
    is_admin = TrackedField()
    is_super_user = TrackedField()

    def __init__(
        self,
        first_name: Optional[str] = None,
        middle_name: Optional[str] = None,
        last_name: Optional[str] = None,
        *,
        user_name: Optional[str] = None,
        pronouns: Optional[Pronoun] = None,
        birth_date: Optional[datetime] = None,
        deceased_date: Optional[datetime] = None,
        joined_date: Optional[datetime] = None,
        emails: Optional[list[Email]] = None,
        phone_numbers: Optional[list[PhoneNumber]] = None,
        addresses: Optional[list[Address]] = None,
        is_active: Optional[bool] = None,
        is_deceased: Optional[bool] = None,
        is_admin: Optional[bool] = None,
        is_super_user: Optional[bool] = None,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._first_name = first_name
        self._middle_name = middle_name
        self._last_name = last_name
        self._user_name = user_name
        self._pronouns = pronouns
        self._birth_date = birth_date
        self._deceased_date = deceased_date
        self._joined_date = joined_date
        self._emails = emails if emails is not None else []
        self._phone_numbers = phone_numbers if phone_numbers is not None else []
        self._addresses = addresses if addresses is not None else []
        self._is_active = is_active
        self._is_deceased = is_deceased
        self._is_admin = is_admin
        self._is_super_user = is_super_user

    @property
    def full_name(self) -> Optional[str]:
        first, middle, last = self.first_name, self.middle_name, self.last_name
        if first is None and middle is None and last is None:
            return None
        if first is None or last is None:
            raise MissingNamePartError()
        if middle is None:
            return f"{first} {last}"
        return f"{first} {middle} {last}"

    def person_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in PERSON_FIELDS}

    def __str__(self) -> str:
        return f"{type(self).__name__}.Id:{self.id}.FullName:{self.full_name}"
