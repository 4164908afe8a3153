"""
DatabaseConnection Entity - Connection details of a database an account uses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from organizer_companion.domain.entities.account import Account
from organizer_companion.domain.entities.base import Entity, TrackedField
from organizer_companion.domain.ports.clock import Clock
from organizer_companion.domain.value_objects import SupportedDatabase


class DatabaseConnection(Entity):
    _JSON_COMPUTED = ("account_id",)

    connection_string = TrackedField()
    database_type = TrackedField()
    account = TrackedField()

    def __init__(
        self,
        connection_string: Optional[str] = None,
        database_type: Optional[SupportedDatabase] = None,
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
        self._connection_string = connection_string
        self._database_type = database_type
        self._account = account

    @property
    def account_id(self) -> Optional[int]:
        return self.account.id if self.account is not None else None

    def __str__(self) -> str:
        database_type = self.database_type.value if self.database_type else None
        return f"DatabaseConnection.Id:{self.id}.DatabaseType:{database_type}"
