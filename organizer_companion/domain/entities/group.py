"""
Group Entity - A named set of contacts, optionally attached to an account.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from organizer_companion.domain.entities.account import Account
from organizer_companion.domain.entities.base import Entity, TrackedField, non_negative
from organizer_companion.domain.entities.contact import Contact
from organizer_companion.domain.ports.clock import Clock


class Group(Entity):
    group_name = TrackedField()
    description = TrackedField()
    members = TrackedField()
    account_id = TrackedField(
        0, validator=non_negative("Account Id must be a non-negative number.")
    )
    account = TrackedField()

    def __init__(
        self,
        group_name: Optional[str] = None,
        description: Optional[str] = None,
        members: Optional[list[Contact]] = None,
        account_id: int = 0,
        account: Optional[Account] = None,
        *,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        type(self).account_id.validator("account_id", account_id)
        self._group_name = group_name
        self._description = description
        self._members = members if members is not None else []
        self._account_id = account_id
        self._account = account

    def __str__(self) -> str:
        return f"Group.Id:{self.id}.Name:{self.group_name}"
