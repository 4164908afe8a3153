"""
Password Entity - A stored password and its hint for an account.

The password value never appears in JSON, and a password has no cast
targets: it is neither exposed as a DTO nor converted into another entity.
Whether a value is strong enough is checked by the validation rules, not here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.ports.clock import Clock


class Password(Entity):
    _JSON_EXCLUDE = frozenset({"password_value"})
    _JSON_OMIT_IF_NONE = frozenset({"cast_type"})

    id = TrackedField(0)
    password_value = TrackedField()
    password_hint = TrackedField()
    account_id = TrackedField(0)
    account = TrackedField()
    is_cast = TrackedField(False)
    cast_id = TrackedField(0)
    cast_type = TrackedField()

    def __init__(
        self,
        password_value: Optional[str] = None,
        password_hint: Optional[str] = None,
        account: Any = None,
        account_id: Optional[int] = None,
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
        if account_id is None:
            account_id = account.id if account is not None else 0
        self._password_value = password_value
        self._password_hint = password_hint
        self._account_id = account_id
        self._account = account
        self._is_cast = is_cast
        self._cast_id = cast_id
        self._cast_type = cast_type

    def __str__(self) -> str:
        return f"Password.Id:{self.id}.AccountId:{self.account_id}"
