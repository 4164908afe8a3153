"""
AnonymousUser Entity - A visitor who has not signed up yet.

An anonymous user can be converted into a User or an Organization. cast()
only builds the new entity; convert_to() also records on the anonymous user
what it became (is_cast, cast_id, cast_type).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, TypeVar

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.entities.organization import Organization
from organizer_companion.domain.entities.user import User
from organizer_companion.domain.ports.clock import Clock

T = TypeVar("T")


class AnonymousUser(Entity):
    id = TrackedField(0)
    is_cast = TrackedField(False)
    cast_id = TrackedField(0)
    cast_type = TrackedField()

    def __init__(
        self,
        *,
        is_cast: bool = False,
        cast_id: int = 0,
        cast_type: Optional[str] = None,
        id: int = 0,
        created_date: Optional[datetime] = None,
        modified_date: Optional[datetime] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            id=id, created_date=created_date, modified_date=modified_date, clock=clock
        )
        self._is_cast = is_cast
        self._cast_id = cast_id
        self._cast_type = cast_type

    def _projections(self):
        return {User: self._to_user, Organization: self._to_organization}

    def convert_to(self, target: type[T]) -> T:
        """Cast into a User or Organization and record the conversion."""
        result = self.cast(target)
        self.is_cast = True
        self.cast_id = result.id
        self.cast_type = type(result).__name__
        return result

    def _to_user(self) -> User:
        return User(
            created_date=self.created_date,
            modified_date=self.modified_date,
            clock=self.clock,
        )

    def _to_organization(self) -> Organization:
        return Organization(
            created_date=self.created_date,
            modified_date=self.modified_date,
            clock=self.clock,
        )

    def __str__(self) -> str:
        return f"AnonymousUser.Id:{self.id}.IsCast:{self.is_cast}"
